from django.urls import path, re_path
from . import views

app_name = "careplan"

urlpatterns = [
    path("survey", views.survey, name="survey"),
    re_path(r"^pdfs/(?P<file_name>careplan_[\w-]+\.pdf)$", views.care_plan_pdf, name="care_plan_pdf"),
]
