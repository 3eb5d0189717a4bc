"""
ASGI config for KeyGuardService.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "KeyGuardService.settings.dev")

application = get_asgi_application()
