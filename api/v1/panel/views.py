"""
Admin panel API views.

These endpoints back the KeyGuard admin panel:
- Sign in
- Manage license keys
- Manage applications
- Manage admin users (superadmin only)

The acting admin is resolved by ``AdminActorMiddleware``; permission
checks happen in the application handlers.
"""

import uuid

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.authenticate_user import AuthenticateUserCommand
from accounts.application.commands.create_user import CreateUserCommand
from accounts.application.commands.delete_user import DeleteUserCommand
from accounts.application.commands.reset_password import ResetPasswordCommand
from accounts.application.commands.update_user import UpdateUserCommand
from accounts.application.handlers.authenticate_user_handler import AuthenticateUserHandler
from accounts.application.handlers.user_management_handlers import (
    CreateUserHandler,
    DeleteUserHandler,
    ListUsersHandler,
    ResetPasswordHandler,
    UpdateUserHandler,
)
from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from api.v1.panel.serializers import (
    ApplicationRequestSerializer,
    ApplicationSerializer,
    CreateLicenseKeyRequestSerializer,
    CreateUserRequestSerializer,
    LicenseKeySerializer,
    ListLicenseKeysQuerySerializer,
    LoginRequestSerializer,
    UpdateLicenseKeyRequestSerializer,
    UpdateUserRequestSerializer,
    UserSerializer,
)
from applications.application.commands.create_application import CreateApplicationCommand
from applications.application.commands.delete_application import DeleteApplicationCommand
from applications.application.commands.update_application import UpdateApplicationCommand
from applications.application.handlers.application_handlers import (
    CreateApplicationHandler,
    DeleteApplicationHandler,
    ListApplicationsHandler,
    UpdateApplicationHandler,
)
from applications.infrastructure.repositories.django_application_repository import (
    DjangoApplicationRepository,
)
from core.domain.value_objects import KeyStatus
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.application.commands.create_license_key import CreateLicenseKeyCommand
from licenses.application.commands.delete_license_key import DeleteLicenseKeyCommand
from licenses.application.commands.toggle_key_status import ToggleKeyStatusCommand
from licenses.application.commands.update_license_key import UpdateLicenseKeyCommand
from licenses.application.handlers.license_key_handlers import (
    CreateLicenseKeyHandler,
    DeleteLicenseKeyHandler,
    ToggleKeyStatusHandler,
    UpdateLicenseKeyHandler,
)
from licenses.application.handlers.list_license_keys_handler import ListLicenseKeysHandler
from licenses.application.queries.list_license_keys import ListLicenseKeysQuery
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)

# Initialize repositories (in production, use DI container)
_user_repo = DjangoUserRepository()
_application_repo = DjangoApplicationRepository()
_license_key_repo = DjangoLicenseKeyRepository()

tracer = get_tracer(__name__)

ACTOR_HEADER_PARAMETER = OpenApiParameter(
    name="X-Admin-User",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="ID of the signed-in admin performing the request",
)

_ERROR_RESPONSES = {
    400: {"description": "Bad Request"},
    401: {"description": "Unauthorized - Missing or unknown admin user"},
    403: {"description": "Forbidden - Missing permission"},
}


def _actor(request: Request):
    """Acting admin resolved by the middleware, or None."""
    return getattr(request, "admin_user", None)


def _validated(serializer, span):
    """Validate a request serializer, recording failures on the span."""
    if not serializer.is_valid():
        span.set_attribute("error", "validation_failed")
        span.set_attribute("error.details", str(serializer.errors))
        span.set_status(Status(StatusCode.ERROR, "Validation failed"))
        raise ValidationError(serializer.errors)
    return serializer.validated_data


class LoginView(APIView):
    """View for signing an admin in."""

    @extend_schema(
        operation_id="login",
        summary="Sign In",
        description=(
            "Check an email/password pair. The returned user id is sent back as the "
            "X-Admin-User header on later requests."
        ),
        tags=["Auth"],
        request=LoginRequestSerializer,
        responses={
            200: UserSerializer,
            401: {"description": "Invalid email or password"},
        },
    )
    def post(self, request: Request) -> Response:
        """Sign in."""
        return async_to_sync(self._handle_login)(request)

    async def _handle_login(self, request: Request) -> Response:
        """Async handler for sign in."""
        with tracer.start_as_current_span("login") as span:
            span.set_attribute("operation", "login")

            data = _validated(LoginRequestSerializer(data=request.data), span)
            handler = AuthenticateUserHandler(user_repository=_user_repo)
            user = await handler.handle(
                AuthenticateUserCommand(email=data["email"], password=data["password"])
            )

            span.set_attribute("user.id", str(user.id))
            span.set_status(Status(StatusCode.OK))
            return Response(UserSerializer(user).data, status=status.HTTP_200_OK)


class LicenseKeyListView(APIView):
    """View for listing and creating license keys."""

    @extend_schema(
        operation_id="list_license_keys",
        summary="List License Keys",
        description="List license keys, newest first, with their derived status.",
        tags=["License Keys"],
        parameters=[
            ACTOR_HEADER_PARAMETER,
            OpenApiParameter(
                name="status",
                type=str,
                enum=[key_status.value for key_status in KeyStatus],
                required=False,
            ),
            OpenApiParameter(name="applicationId", type=OpenApiTypes.UUID, required=False),
            OpenApiParameter(
                name="search",
                type=str,
                required=False,
                description="Matches key value, user name or user contact",
            ),
        ],
        responses={200: LicenseKeySerializer(many=True), **_ERROR_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List license keys."""
        return async_to_sync(self._handle_list_keys)(request)

    async def _handle_list_keys(self, request: Request) -> Response:
        """Async handler for list license keys."""
        with tracer.start_as_current_span("list_license_keys") as span:
            span.set_attribute("operation", "list_license_keys")

            params = _validated(ListLicenseKeysQuerySerializer(data=request.query_params), span)
            query = ListLicenseKeysQuery(
                actor=_actor(request),
                status=KeyStatus(params["status"]) if params.get("status") else None,
                application_id=params.get("application_id"),
                search=params.get("search"),
            )
            keys = await ListLicenseKeysHandler(license_key_repository=_license_key_repo).handle(
                query
            )

            span.set_attribute("license_keys.count", len(keys))
            span.set_status(Status(StatusCode.OK))
            return Response(LicenseKeySerializer(keys, many=True).data)

    @extend_schema(
        operation_id="create_license_key",
        summary="Create License Key",
        description=(
            "Issue a license key. A key value is generated when omitted and the "
            "start date defaults to today. Requires the Create Keys permission."
        ),
        tags=["License Keys"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=CreateLicenseKeyRequestSerializer,
        responses={
            201: LicenseKeySerializer,
            **_ERROR_RESPONSES,
            404: {"description": "Application not found"},
            409: {"description": "Key value already exists"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a license key."""
        return async_to_sync(self._handle_create_key)(request)

    async def _handle_create_key(self, request: Request) -> Response:
        """Async handler for create license key."""
        with tracer.start_as_current_span("create_license_key") as span:
            span.set_attribute("operation", "create_license_key")

            data = _validated(CreateLicenseKeyRequestSerializer(data=request.data), span)
            span.set_attribute("application.id", str(data["application_id"]))

            handler = CreateLicenseKeyHandler(
                license_key_repository=_license_key_repo,
                application_repository=_application_repo,
                key_prefix=settings.KEYGUARD["LICENSE_KEY_PREFIX"],
            )
            key = await handler.handle(CreateLicenseKeyCommand(actor=_actor(request), **data))

            span.set_attribute("license_key.id", str(key.id))
            span.set_status(Status(StatusCode.OK))
            return Response(LicenseKeySerializer(key).data, status=status.HTTP_201_CREATED)


class LicenseKeyDetailView(APIView):
    """View for updating and deleting a license key."""

    @extend_schema(
        operation_id="update_license_key",
        summary="Update License Key",
        description="Replace every editable field of a key. Requires the Edit Keys permission.",
        tags=["License Keys"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=UpdateLicenseKeyRequestSerializer,
        responses={
            200: LicenseKeySerializer,
            **_ERROR_RESPONSES,
            404: {"description": "License key or application not found"},
            409: {"description": "Key value already exists"},
        },
    )
    def put(self, request: Request, key_id: uuid.UUID) -> Response:
        """Update a license key."""
        return async_to_sync(self._handle_update_key)(request, key_id)

    async def _handle_update_key(self, request: Request, key_id: uuid.UUID) -> Response:
        """Async handler for update license key."""
        with tracer.start_as_current_span("update_license_key") as span:
            span.set_attribute("operation", "update_license_key")
            span.set_attribute("license_key.id", str(key_id))

            data = _validated(UpdateLicenseKeyRequestSerializer(data=request.data), span)
            handler = UpdateLicenseKeyHandler(
                license_key_repository=_license_key_repo,
                application_repository=_application_repo,
            )
            key = await handler.handle(
                UpdateLicenseKeyCommand(actor=_actor(request), license_key_id=key_id, **data)
            )

            span.set_status(Status(StatusCode.OK))
            return Response(LicenseKeySerializer(key).data)

    @extend_schema(
        operation_id="delete_license_key",
        summary="Delete License Key",
        description="Delete a key. Requires the Delete Keys permission.",
        tags=["License Keys"],
        parameters=[ACTOR_HEADER_PARAMETER],
        responses={
            204: None,
            **_ERROR_RESPONSES,
            404: {"description": "License key not found"},
        },
    )
    def delete(self, request: Request, key_id: uuid.UUID) -> Response:
        """Delete a license key."""
        return async_to_sync(self._handle_delete_key)(request, key_id)

    async def _handle_delete_key(self, request: Request, key_id: uuid.UUID) -> Response:
        """Async handler for delete license key."""
        with tracer.start_as_current_span("delete_license_key") as span:
            span.set_attribute("operation", "delete_license_key")
            span.set_attribute("license_key.id", str(key_id))

            handler = DeleteLicenseKeyHandler(license_key_repository=_license_key_repo)
            await handler.handle(
                DeleteLicenseKeyCommand(actor=_actor(request), license_key_id=key_id)
            )

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)


class ToggleKeyStatusView(APIView):
    """View for activating or deactivating a license key."""

    @extend_schema(
        operation_id="toggle_key_status",
        summary="Toggle Key Status",
        description=(
            "Flip the active flag of a key and return it. "
            "Requires the Toggle Key Status permission."
        ),
        tags=["License Keys"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=None,
        responses={
            200: LicenseKeySerializer,
            **_ERROR_RESPONSES,
            404: {"description": "License key not found"},
        },
    )
    def post(self, request: Request, key_id: uuid.UUID) -> Response:
        """Toggle a license key."""
        return async_to_sync(self._handle_toggle)(request, key_id)

    async def _handle_toggle(self, request: Request, key_id: uuid.UUID) -> Response:
        """Async handler for toggle key status."""
        with tracer.start_as_current_span("toggle_key_status") as span:
            span.set_attribute("operation", "toggle_key_status")
            span.set_attribute("license_key.id", str(key_id))

            handler = ToggleKeyStatusHandler(license_key_repository=_license_key_repo)
            key = await handler.handle(
                ToggleKeyStatusCommand(actor=_actor(request), license_key_id=key_id)
            )

            span.set_attribute("license_key.is_active", key.is_active)
            span.set_status(Status(StatusCode.OK))
            return Response(LicenseKeySerializer(key).data)


class ApplicationListView(APIView):
    """View for listing and creating applications."""

    @extend_schema(
        operation_id="list_applications",
        summary="List Applications",
        description="List applications ordered by name.",
        tags=["Applications"],
        parameters=[ACTOR_HEADER_PARAMETER],
        responses={200: ApplicationSerializer(many=True), **_ERROR_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List applications."""
        return async_to_sync(self._handle_list_applications)(request)

    async def _handle_list_applications(self, request: Request) -> Response:
        """Async handler for list applications."""
        with tracer.start_as_current_span("list_applications") as span:
            span.set_attribute("operation", "list_applications")

            handler = ListApplicationsHandler(application_repository=_application_repo)
            applications = await handler.handle(_actor(request))

            span.set_attribute("applications.count", len(applications))
            span.set_status(Status(StatusCode.OK))
            return Response(ApplicationSerializer(applications, many=True).data)

    @extend_schema(
        operation_id="create_application",
        summary="Create Application",
        description="Register an application. Requires the Manage Applications permission.",
        tags=["Applications"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=ApplicationRequestSerializer,
        responses={201: ApplicationSerializer, **_ERROR_RESPONSES},
    )
    def post(self, request: Request) -> Response:
        """Create an application."""
        return async_to_sync(self._handle_create_application)(request)

    async def _handle_create_application(self, request: Request) -> Response:
        """Async handler for create application."""
        with tracer.start_as_current_span("create_application") as span:
            span.set_attribute("operation", "create_application")

            data = _validated(ApplicationRequestSerializer(data=request.data), span)
            handler = CreateApplicationHandler(application_repository=_application_repo)
            application = await handler.handle(
                CreateApplicationCommand(actor=_actor(request), name=data["name"])
            )

            span.set_attribute("application.id", str(application.id))
            span.set_status(Status(StatusCode.OK))
            return Response(
                ApplicationSerializer(application).data, status=status.HTTP_201_CREATED
            )


class ApplicationDetailView(APIView):
    """View for renaming and deleting an application."""

    @extend_schema(
        operation_id="update_application",
        summary="Rename Application",
        description="Rename an application. Requires the Manage Applications permission.",
        tags=["Applications"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=ApplicationRequestSerializer,
        responses={
            200: ApplicationSerializer,
            **_ERROR_RESPONSES,
            404: {"description": "Application not found"},
        },
    )
    def put(self, request: Request, application_id: uuid.UUID) -> Response:
        """Rename an application."""
        return async_to_sync(self._handle_update_application)(request, application_id)

    async def _handle_update_application(
        self, request: Request, application_id: uuid.UUID
    ) -> Response:
        """Async handler for rename application."""
        with tracer.start_as_current_span("update_application") as span:
            span.set_attribute("operation", "update_application")
            span.set_attribute("application.id", str(application_id))

            data = _validated(ApplicationRequestSerializer(data=request.data), span)
            handler = UpdateApplicationHandler(application_repository=_application_repo)
            application = await handler.handle(
                UpdateApplicationCommand(
                    actor=_actor(request), application_id=application_id, name=data["name"]
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(ApplicationSerializer(application).data)

    @extend_schema(
        operation_id="delete_application",
        summary="Delete Application",
        description=(
            "Delete an application no key refers to. "
            "Requires the Manage Applications permission."
        ),
        tags=["Applications"],
        parameters=[ACTOR_HEADER_PARAMETER],
        responses={
            204: None,
            **_ERROR_RESPONSES,
            404: {"description": "Application not found"},
        },
    )
    def delete(self, request: Request, application_id: uuid.UUID) -> Response:
        """Delete an application."""
        return async_to_sync(self._handle_delete_application)(request, application_id)

    async def _handle_delete_application(
        self, request: Request, application_id: uuid.UUID
    ) -> Response:
        """Async handler for delete application."""
        with tracer.start_as_current_span("delete_application") as span:
            span.set_attribute("operation", "delete_application")
            span.set_attribute("application.id", str(application_id))

            handler = DeleteApplicationHandler(
                application_repository=_application_repo,
                license_key_repository=_license_key_repo,
            )
            await handler.handle(
                DeleteApplicationCommand(actor=_actor(request), application_id=application_id)
            )

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)


class UserListView(APIView):
    """View for listing and creating admin users."""

    @extend_schema(
        operation_id="list_users",
        summary="List Users",
        description="List admin users ordered by name. Superadmin only.",
        tags=["Users"],
        parameters=[ACTOR_HEADER_PARAMETER],
        responses={200: UserSerializer(many=True), **_ERROR_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List admin users."""
        return async_to_sync(self._handle_list_users)(request)

    async def _handle_list_users(self, request: Request) -> Response:
        """Async handler for list users."""
        with tracer.start_as_current_span("list_users") as span:
            span.set_attribute("operation", "list_users")

            users = await ListUsersHandler(user_repository=_user_repo).handle(_actor(request))

            span.set_attribute("users.count", len(users))
            span.set_status(Status(StatusCode.OK))
            return Response(UserSerializer(users, many=True).data)

    @extend_schema(
        operation_id="create_user",
        summary="Create User",
        description=(
            "Create an admin user. The configured superadmin email always yields "
            "the superadmin role. Superadmin only."
        ),
        tags=["Users"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=CreateUserRequestSerializer,
        responses={
            201: UserSerializer,
            **_ERROR_RESPONSES,
            409: {"description": "A user with this email already exists"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create an admin user."""
        return async_to_sync(self._handle_create_user)(request)

    async def _handle_create_user(self, request: Request) -> Response:
        """Async handler for create user."""
        with tracer.start_as_current_span("create_user") as span:
            span.set_attribute("operation", "create_user")

            data = _validated(CreateUserRequestSerializer(data=request.data), span)
            handler = CreateUserHandler(
                user_repository=_user_repo,
                super_admin_email=settings.KEYGUARD["SUPER_ADMIN_EMAIL"],
            )
            user = await handler.handle(CreateUserCommand(actor=_actor(request), **data))

            span.set_attribute("user.id", str(user.id))
            span.set_attribute("user.role", user.role)
            span.set_status(Status(StatusCode.OK))
            return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    """View for updating and deleting an admin user."""

    @extend_schema(
        operation_id="update_user",
        summary="Update User",
        description=(
            "Change a user's name and permissions. Email and role are immutable and "
            "the superadmin cannot be modified. Superadmin only."
        ),
        tags=["Users"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=UpdateUserRequestSerializer,
        responses={
            200: UserSerializer,
            **_ERROR_RESPONSES,
            404: {"description": "User not found"},
        },
    )
    def put(self, request: Request, user_id: uuid.UUID) -> Response:
        """Update an admin user."""
        return async_to_sync(self._handle_update_user)(request, user_id)

    async def _handle_update_user(self, request: Request, user_id: uuid.UUID) -> Response:
        """Async handler for update user."""
        with tracer.start_as_current_span("update_user") as span:
            span.set_attribute("operation", "update_user")
            span.set_attribute("user.id", str(user_id))

            data = _validated(UpdateUserRequestSerializer(data=request.data), span)
            handler = UpdateUserHandler(user_repository=_user_repo)
            user = await handler.handle(
                UpdateUserCommand(actor=_actor(request), user_id=user_id, **data)
            )

            span.set_status(Status(StatusCode.OK))
            return Response(UserSerializer(user).data)

    @extend_schema(
        operation_id="delete_user",
        summary="Delete User",
        description="Delete an admin user. The superadmin cannot be deleted. Superadmin only.",
        tags=["Users"],
        parameters=[ACTOR_HEADER_PARAMETER],
        responses={
            204: None,
            **_ERROR_RESPONSES,
            404: {"description": "User not found"},
        },
    )
    def delete(self, request: Request, user_id: uuid.UUID) -> Response:
        """Delete an admin user."""
        return async_to_sync(self._handle_delete_user)(request, user_id)

    async def _handle_delete_user(self, request: Request, user_id: uuid.UUID) -> Response:
        """Async handler for delete user."""
        with tracer.start_as_current_span("delete_user") as span:
            span.set_attribute("operation", "delete_user")
            span.set_attribute("user.id", str(user_id))

            handler = DeleteUserHandler(user_repository=_user_repo)
            await handler.handle(DeleteUserCommand(actor=_actor(request), user_id=user_id))

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)


class ResetPasswordView(APIView):
    """View for resetting an admin user's password."""

    @extend_schema(
        operation_id="reset_password",
        summary="Reset Password",
        description=(
            "Set a user's password to the configured default. "
            "Not applicable to the superadmin. Superadmin only."
        ),
        tags=["Users"],
        parameters=[ACTOR_HEADER_PARAMETER],
        request=None,
        responses={
            204: None,
            **_ERROR_RESPONSES,
            404: {"description": "User not found"},
        },
    )
    def post(self, request: Request, user_id: uuid.UUID) -> Response:
        """Reset a user's password."""
        return async_to_sync(self._handle_reset_password)(request, user_id)

    async def _handle_reset_password(self, request: Request, user_id: uuid.UUID) -> Response:
        """Async handler for reset password."""
        with tracer.start_as_current_span("reset_password") as span:
            span.set_attribute("operation", "reset_password")
            span.set_attribute("user.id", str(user_id))

            handler = ResetPasswordHandler(
                user_repository=_user_repo,
                default_password=settings.KEYGUARD["DEFAULT_RESET_PASSWORD"],
            )
            await handler.handle(ResetPasswordCommand(actor=_actor(request), user_id=user_id))

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)
