"""
Acting admin middleware.

This middleware resolves the admin performing an API request from the
``X-Admin-User`` header (the user id returned by sign-in).
"""

import logging
import uuid
from typing import Optional

from asgiref.sync import async_to_sync
from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository

logger = logging.getLogger(__name__)


class AdminActorMiddleware(MiddlewareMixin):
    """
    Middleware resolving the acting admin.

    This middleware:
    1. Reads the actor header on API requests
    2. Stores the matching AdminUser entity as ``request.admin_user``
       (None when the header is absent)
    3. Returns 401 Unauthorized for an unknown or malformed user id

    Permission checks happen later, in the application handlers.
    """

    def __init__(self, get_response=None):
        super().__init__(get_response)
        self.user_repository = DjangoUserRepository()

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and resolve the actor.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if the actor is unknown, None otherwise
        """
        request.admin_user = None  # type: ignore
        if not request.path.startswith("/api/"):
            return None

        header = settings.KEYGUARD["ACTOR_HEADER"]
        raw_id = request.headers.get(header, "").strip()
        if not raw_id:
            return None

        try:
            user_id = uuid.UUID(raw_id)
        except ValueError:
            logger.warning("Malformed actor id: %s", raw_id[:36])
            return self._unauthorized("Invalid admin user id")

        user = async_to_sync(self.user_repository.find_by_id)(user_id)
        if user is None:
            logger.warning("Unknown actor id: %s", user_id)
            return self._unauthorized("Unknown admin user")

        request.admin_user = user  # type: ignore
        return None

    def _unauthorized(self, message: str) -> JsonResponse:
        return JsonResponse(
            {"error": {"code": "INVALID_ACTOR", "message": message}},
            status=401,
        )
