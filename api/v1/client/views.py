"""
Client application API views.

Software protected by KeyGuard calls these endpoints to check whether
a key grants access. They are public: no admin user is required.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.client.serializers import ValidateKeyRequestSerializer, ValidateKeyResponseSerializer
from applications.infrastructure.repositories.django_application_repository import (
    DjangoApplicationRepository,
)
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.application.handlers.validate_license_key_handler import ValidateLicenseKeyHandler
from licenses.application.queries.validate_license_key import ValidateLicenseKeyQuery
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)

# Initialize repositories (in production, use DI container)
_license_key_repo = DjangoLicenseKeyRepository()
_application_repo = DjangoApplicationRepository()

tracer = get_tracer(__name__)


class ValidateKeyView(APIView):
    """View for validating a license key."""

    @extend_schema(
        operation_id="validate_key",
        summary="Validate Key",
        description=(
            "Check whether a key grants access today. Always answers 200: "
            "`status` tells whether the key is valid."
        ),
        tags=["Validation"],
        request=ValidateKeyRequestSerializer,
        responses={
            200: ValidateKeyResponseSerializer,
            400: {"description": "Bad Request - keyValue missing or blank"},
        },
        examples=[
            OpenApiExample(
                "Valid key",
                response_only=True,
                value={
                    "status": True,
                    "info": {
                        "keyValue": "KG-DEMO-ACTIVE-123",
                        "applicationName": "PhotoEditor Pro",
                        "userName": "Alice Johnson",
                        "userContact": "alice@example.com",
                        "startDate": "2024-01-01",
                        "endDate": "2030-12-31",
                    },
                },
            ),
            OpenApiExample(
                "Expired key",
                response_only=True,
                value={"status": False, "info": {"message": "Key expired on 2023-12-31."}},
            ),
            OpenApiExample("Unknown key", response_only=True, value={"status": False, "info": None}),
        ],
    )
    def post(self, request: Request) -> Response:
        """Validate a license key."""
        return async_to_sync(self._handle_validate)(request)

    async def _handle_validate(self, request: Request) -> Response:
        """Async handler for validate key."""
        with tracer.start_as_current_span("validate_key") as span:
            span.set_attribute("operation", "validate_key")

            serializer = ValidateKeyRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                raise ValidationError(serializer.errors)

            handler = ValidateLicenseKeyHandler(
                license_key_repository=_license_key_repo,
                application_repository=_application_repo,
            )
            result = await handler.handle(
                ValidateLicenseKeyQuery(key_value=serializer.validated_data["key_value"])
            )

            span.set_attribute("validation.result", result.result)
            span.set_status(Status(StatusCode.OK))
            return Response(ValidateKeyResponseSerializer(result).data)
