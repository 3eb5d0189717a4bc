"""
Resource dispatch view.

A single endpoint, ``data?resource=<name>``, that routes
``<METHOD>_<resource>`` pairs to the REST views. Clients written against
one function URL keep working: record ids travel in the JSON body instead
of the path.
"""

import json
import logging
import uuid
from typing import Callable, Dict, Optional, Tuple

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from api.v1.client import views as client_views
from api.v1.panel import views as panel_views

logger = logging.getLogger(__name__)

# handler key -> (view, name of the URL kwarg filled from the body "id")
ROUTES: Dict[str, Tuple[Callable, Optional[str]]] = {
    "GET_keys": (panel_views.LicenseKeyListView.as_view(), None),
    "POST_keys": (panel_views.LicenseKeyListView.as_view(), None),
    "PUT_keys": (panel_views.LicenseKeyDetailView.as_view(), "key_id"),
    "DELETE_keys": (panel_views.LicenseKeyDetailView.as_view(), "key_id"),
    "POST_toggleKeyStatus": (panel_views.ToggleKeyStatusView.as_view(), "key_id"),
    "GET_applications": (panel_views.ApplicationListView.as_view(), None),
    "POST_applications": (panel_views.ApplicationListView.as_view(), None),
    "PUT_applications": (panel_views.ApplicationDetailView.as_view(), "application_id"),
    "DELETE_applications": (panel_views.ApplicationDetailView.as_view(), "application_id"),
    "GET_users": (panel_views.UserListView.as_view(), None),
    "POST_users": (panel_views.UserListView.as_view(), None),
    "PUT_users": (panel_views.UserDetailView.as_view(), "user_id"),
    "DELETE_users": (panel_views.UserDetailView.as_view(), "user_id"),
    "POST_resetPassword": (panel_views.ResetPasswordView.as_view(), "user_id"),
    "POST_login": (panel_views.LoginView.as_view(), None),
    "POST_validate": (client_views.ValidateKeyView.as_view(), None),
}


def _error(code: str, message: str, status: int) -> JsonResponse:
    return JsonResponse({"error": {"code": code, "message": message}}, status=status)


@method_decorator(csrf_exempt, name="dispatch")
class ResourceDispatchView(View):
    """Routes ``<METHOD>_<resource>`` to the matching REST view."""

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        """
        Dispatch the request on method and ``resource`` query parameter.

        Returns:
            The REST view's response; 404 for unknown pairs and 400 when a
            record id is required but missing or malformed
        """
        if request.method == "OPTIONS":
            return HttpResponse(status=204)

        handler_key = f"{request.method}_{request.GET.get('resource')}"
        route = ROUTES.get(handler_key)
        if route is None:
            logger.info("No resource handler for %s", handler_key)
            return _error(
                "NOT_FOUND", f"Resource or method not found for key: {handler_key}", 404
            )

        view, id_kwarg = route
        view_kwargs = {}
        if id_kwarg:
            record_id = self._record_id(request)
            if record_id is None:
                return _error("VALIDATION_ERROR", "A valid id is required", 400)
            view_kwargs[id_kwarg] = record_id

        logger.debug("Dispatching %s", handler_key)
        return view(request, **view_kwargs)

    @staticmethod
    def _record_id(request: HttpRequest) -> Optional[uuid.UUID]:
        """Read the record id from the JSON body."""
        try:
            body = json.loads(request.body or b"{}")
            return uuid.UUID(str(body["id"]))
        except (ValueError, TypeError, KeyError):
            return None
