"""
WSGI config for the haircare project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'haircare.settings')

application = get_wsgi_application()
