from django.shortcuts import render, redirect
from django.contrib.auth import login, logout
from django.contrib.auth.decorators import login_required
from django.utils import timezone
from .forms import LoginForm, RegisterForm
from careplan.models import CarePlan, Progress
from careplan.reminders import dashboard_alert
import logging

logger = logging.getLogger(__name__)


def landing(request):
    return redirect('users:login')


def login_view(request):
    form = LoginForm(request=request)

    if request.method == 'POST':
        form = LoginForm(request.POST, request=request)
        if form.is_valid():
            login(request, form.cleaned_data['user'])
            return redirect('careplan:survey')

    return render(request, 'users/login.html', {'form': form})


def register_view(request):
    form = RegisterForm()

    if request.method == 'POST':
        form = RegisterForm(request.POST)
        if form.is_valid():
            user = form.save()
            logger.info("Registered user %s", user.username)
            return redirect('users:login')

    return render(request, 'users/register.html', {'form': form})


@login_required
def dashboard(request):
    user = request.user

    latest_plan = CarePlan.objects.find_latest(user)
    alert_message = None
    if latest_plan:
        alert_message = dashboard_alert(latest_plan, user.username, timezone.localdate())

    progress = Progress.objects.filter(user=user).order_by('step')

    return render(request, 'users/dashboard.html', {
        'username': user.username,
        'email': user.email,
        'latest_plan': latest_plan,
        'progress': progress,
        'alert_message': alert_message,
    })


def logout_view(request):
    logout(request)
    return redirect('users:login')
