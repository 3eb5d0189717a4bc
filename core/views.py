"""
Health and readiness endpoints.

Liveness answers without touching any backend; the other endpoints probe
the database and the cache the KeyGuard API depends on.
"""

import logging
from typing import Optional

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views import View

from licenses.infrastructure.models import LicenseKey as LicenseKeyModel

logger = logging.getLogger(__name__)

SERVICE_NAME = "keyguard-service"


def check_database() -> Optional[str]:
    """
    Probe the database.

    Returns:
        None when reachable, otherwise the error text
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return None
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Database check failed: %s", e)
        return str(e)


def check_schema() -> Optional[str]:
    """Probe the license key table, which only exists once migrations ran."""
    try:
        # pylint: disable=no-member
        LicenseKeyModel.objects.exists()
        return None
    except DatabaseError as e:
        logger.warning("Schema check failed: %s", e)
        return str(e)


def check_cache() -> Optional[str]:
    """
    Round-trip a value through the cache.

    Returns:
        None when the value comes back, otherwise the error text
    """
    try:
        cache.set("keyguard:health", "ok", 10)
        if cache.get("keyguard:health") != "ok":
            return "value not returned"
        return None
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Cache check failed: %s", e)
        return str(e)


def _probe_response(component: str, error: Optional[str]) -> JsonResponse:
    if error is None:
        return JsonResponse({"status": "healthy", component: "connected"})
    return JsonResponse(
        {"status": "unhealthy", component: "disconnected", "error": error},
        status=503,
    )


class HealthView(View):
    """Liveness endpoint."""

    def get(self, _request):
        return JsonResponse({"status": "healthy", "service": SERVICE_NAME})


class HealthDBView(View):
    """Database health check endpoint."""

    def get(self, _request):
        return _probe_response("database", check_database())


class HealthCacheView(View):
    """Cache health check endpoint."""

    def get(self, _request):
        return _probe_response("cache", check_cache())


class ReadyView(View):
    """Readiness endpoint: the database, the schema and the cache must all answer."""

    def get(self, _request):
        """Report each check; 503 unless every one passes."""
        errors = {
            "database": check_database(),
            "schema": check_schema(),
            "cache": check_cache(),
        }
        checks = {name: error is None for name, error in errors.items()}
        ready = all(checks.values())
        return JsonResponse(
            {"status": "ready" if ready else "not_ready", "checks": checks},
            status=200 if ready else 503,
        )
