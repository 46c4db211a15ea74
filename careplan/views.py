from django.shortcuts import render
from django.views.static import serve
from django.contrib.auth.decorators import login_required
import logging

from .ai import generate_care_plan
from .config import get_config
from .forms import SurveyForm
from .models import CarePlan
from .notifications import send_in_background, send_plan_email
from .pdf import render_care_plan_pdf

logger = logging.getLogger(__name__)


@login_required
def survey(request):
    user = request.user

    if request.method != "POST":
        return render(request, "careplan/survey.html", {
            "form": SurveyForm(),
            "username": user.username,
        })

    form = SurveyForm(request.POST)
    if not form.is_valid():
        return render(request, "careplan/survey.html", {"form": form, "username": user.username})

    config = get_config()
    survey_data = form.cleaned_data
    care_plan = generate_care_plan(survey_data, config)

    CarePlan.objects.save_plan(user, survey_data, care_plan)

    pdf_path = None
    if "error" not in care_plan:
        try:
            file_path, pdf_path = render_care_plan_pdf(care_plan, user.username, user.pk, config)
        except OSError:
            logger.exception("Could not write care plan PDF for %s", user.username)
        else:
            send_in_background(send_plan_email, user.email, user.username, file_path)

    return render(request, "careplan/result.html", {
        "username": user.username,
        "email": user.email,
        "ingredients": care_plan.get("ingredients") or [],
        "wash_frequency": care_plan.get("wash_frequency") or "Not specified",
        "instructions": care_plan.get("instructions") or {},
        "tips": care_plan.get("tips") or [],
        "resources": care_plan.get("resources") or [],
        "raw_response": care_plan.get("raw_response"),
        "error": care_plan.get("error"),
        "pdf_path": pdf_path,
    })


def care_plan_pdf(request, file_name):
    # public, like the rest of the static files
    return serve(request, file_name, document_root=str(get_config().pdf_root))
