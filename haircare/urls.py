"""
URL configuration for the haircare project.

Routes are mounted at the root without trailing slashes: /login, /register,
/survey, /dashboard, /logout. Care plan PDFs are served from /pdfs/.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('users.urls', namespace='users')),
    path('', include('careplan.urls', namespace='careplan')),
]
