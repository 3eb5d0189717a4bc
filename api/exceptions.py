"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every failure is rendered as ``{"error": {"code": ..., "message": ...}}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    ApplicationNotFoundError,
    AuthenticationRequiredError,
    DomainException,
    DuplicateKeyValueError,
    InvalidCredentialsError,
    LicenseKeyNotFoundError,
    PermissionDeniedError,
    SuperAdminProtectedError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS_CODES = (
    (
        (LicenseKeyNotFoundError, ApplicationNotFoundError, UserNotFoundError),
        status.HTTP_404_NOT_FOUND,
    ),
    ((DuplicateKeyValueError, UserAlreadyExistsError), status.HTTP_409_CONFLICT),
    ((InvalidCredentialsError, AuthenticationRequiredError), status.HTTP_401_UNAUTHORIZED),
    ((PermissionDeniedError, SuperAdminProtectedError), status.HTTP_403_FORBIDDEN),
)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
    elif isinstance(exc, ValidationError):
        response = _handle_validation_error(exc.detail, trace_id)
    elif isinstance(exc, ValueError):
        response = _handle_validation_error(str(exc), trace_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = exc.default_code.upper().replace("-", "_")
        detail = response.data.get("detail", exc.default_detail)
        response.data = {"error": {"code": code, "message": str(detail)}}
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        return _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    for exception_types, mapped_status in DOMAIN_STATUS_CODES:
        if isinstance(exc, exception_types):
            status_code = mapped_status
            break

    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response({"error": {"code": exc.code, "message": exc.message}}, status=status_code)


def _first_message(detail: Any) -> str:
    """Pick the first human-readable message out of a validation error detail."""
    if isinstance(detail, dict):
        field, errors = next(iter(detail.items()))
        message = _first_message(errors)
        return message if field == "non_field_errors" else f"{field}: {message}"
    if isinstance(detail, list) and detail:
        return _first_message(detail[0])
    return str(detail)


def _handle_validation_error(detail: Any, trace_id: Optional[str]) -> Response:
    """Handle request validation failures."""
    message = _first_message(detail)
    logger.info("Validation error: %s", message, extra={"trace_id": trace_id})
    error: Dict[str, Any] = {"code": "VALIDATION_ERROR", "message": message}
    if isinstance(detail, dict):
        error["fields"] = detail
    return Response({"error": error}, status=status.HTTP_400_BAD_REQUEST)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    response = Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response
