"""
WSGI config for KeyGuardService.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "KeyGuardService.settings.dev")

application = get_wsgi_application()
