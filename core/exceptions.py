# core/exceptions.py
import logging
import uuid

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from django.core.exceptions import ValidationError
from django.http import Http404
from django.utils import timezone

logger = logging.getLogger(__name__)

# DRF and Django exception class name -> stable error code in API responses
ERROR_CODES = {
    "ValidationError": "VALIDATION_ERROR",
    "PermissionDenied": "PERMISSION_DENIED",
    "NotAuthenticated": "AUTHENTICATION_REQUIRED",
    "AuthenticationFailed": "AUTHENTICATION_FAILED",
    "NotFound": "RESOURCE_NOT_FOUND",
    "Http404": "RESOURCE_NOT_FOUND",
    "MethodNotAllowed": "METHOD_NOT_ALLOWED",
    "ParseError": "PARSE_ERROR",
    "UnsupportedMediaType": "UNSUPPORTED_MEDIA_TYPE",
    "Throttled": "RATE_LIMIT_EXCEEDED",
}


class APIError(Exception):
    """
    Base class for errors the shift accounting API reports to its callers.

    Carries a stable ``code`` and the HTTP status the exception handler
    should answer with.
    """

    def __init__(
        self, message, code=None, status_code=status.HTTP_400_BAD_REQUEST, details=None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "API_ERROR"
        self.status_code = status_code
        self.details = details


class ShiftValidationError(APIError):
    """
    Malformed or inconsistent shift fields. Raised before anything is written.
    """

    def __init__(self, message, details=None):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class NotFoundError(APIError):
    """
    Referenced shift, holiday or user does not exist (or is not visible to the caller)
    """

    def __init__(self, resource="Resource", details=None):
        super().__init__(
            f"{resource} not found",
            code="RESOURCE_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )
        self.resource = resource


class StoreError(APIError):
    """
    The record store failed while persisting the primary record.
    """

    def __init__(self, message="The record store is unavailable", details=None):
        super().__init__(
            message,
            code="STORE_ERROR",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
        )


class LedgerUpdateFailure(Exception):
    """
    Best-effort ledger update failed after the primary record was saved.

    Never raised to API callers: it is logged and attached to the mutation
    result so the failure stays observable.
    """

    def __init__(self, operation, user_id, shift_id=None, cause=None):
        super().__init__(
            f"Ledger update failed after {operation} of shift {shift_id}: {cause}"
        )
        self.operation = operation
        self.user_id = user_id
        self.shift_id = shift_id
        self.cause = cause


def error_payload(code, message, details=None, error_id=None):
    """Body shared by every error response of the API."""
    return {
        "error": True,
        "code": code,
        "message": message,
        "details": details,
        "error_id": error_id or uuid.uuid4().hex[:8],
        "timestamp": timezone.now().isoformat(),
    }


def get_error_code(exc):
    return ERROR_CODES.get(type(exc).__name__, "UNKNOWN_ERROR")


def get_error_message(data):
    """
    Pick one human-readable line out of DRF error data.

    Field errors are reported as ``"<field>: <first error>"``.
    """
    if isinstance(data, list):
        return str(data[0]) if data else ""
    if not isinstance(data, dict):
        return str(data)

    if "detail" in data:
        return str(data["detail"])
    if data.get("non_field_errors"):
        return str(data["non_field_errors"][0])
    for field, errors in data.items():
        if isinstance(errors, str):
            return errors
        if isinstance(errors, list) and errors:
            return f"{field}: {errors[0]}"
    return "Validation error"


def format_error_details(data):
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        # 'detail' already went into the message
        return {k: v for k, v in data.items() if k != "detail"} or None
    return None


def _fallback_response(exc):
    # Exceptions DRF's own handler leaves unconverted
    if isinstance(exc, Http404):
        return (
            "RESOURCE_NOT_FOUND",
            "The requested resource was not found.",
            None,
            status.HTTP_404_NOT_FOUND,
        )
    if isinstance(exc, ValidationError):
        details = exc.message_dict if hasattr(exc, "message_dict") else exc.messages
        return "VALIDATION_ERROR", "Validation failed.", details, status.HTTP_400_BAD_REQUEST
    return (
        "INTERNAL_SERVER_ERROR",
        "An internal server error occurred.",
        None,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def custom_exception_handler(exc, context):
    """
    REST framework exception handler answering every failure with
    :func:`error_payload`.

    Shift accounting errors carry their own code and status. Store failures
    are logged at ERROR and caller mistakes at WARNING. Anything unexpected
    becomes a 500 with the traceback kept in the log only.
    """
    error_id = uuid.uuid4().hex[:8]
    request = context.get("request")
    where = f"{getattr(request, 'method', '?')} {getattr(request, 'path', '?')}"

    if isinstance(exc, APIError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "API error [%s] %s (%s) on %s -> %s",
            error_id, type(exc).__name__, exc.code, where, exc.status_code,
        )
        return Response(
            error_payload(exc.code, exc.message, exc.details, error_id),
            status=exc.status_code,
        )

    response = exception_handler(exc, context)
    if response is not None:
        response.data = error_payload(
            get_error_code(exc),
            get_error_message(response.data),
            format_error_details(response.data),
            error_id,
        )
        logger.warning(
            "API error [%s] %s on %s -> %s",
            error_id, type(exc).__name__, where, response.status_code,
        )
        return response

    code, message, details, status_code = _fallback_response(exc)
    logger.error(
        "Unhandled exception [%s] %s on %s", error_id, type(exc).__name__, where,
        exc_info=True,
    )
    return Response(error_payload(code, message, details, error_id), status=status_code)
