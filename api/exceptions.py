"""
API exception handlers.

This module maps domain error codes to HTTP statuses and renders
any exception that escapes a view as a structured error body.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "INVALID_ARGUMENT": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHORIZED": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ALREADY_CLAIMED": status.HTTP_409_CONFLICT,
    "USERNAME_TAKEN": status.HTTP_409_CONFLICT,
    "INVALID_CONFIGURATION": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_code(code: Optional[str]) -> int:
    """HTTP status for a domain error code; unknown codes are client errors."""
    if code is None:
        return status.HTTP_200_OK
    return STATUS_BY_CODE.get(code, status.HTTP_400_BAD_REQUEST)


def error_body(code: str, message: Any) -> Dict[str, Any]:
    """Error body in the same shape as a failed OperationResult."""
    return {"success": False, "code": code, "message": message}


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = (
            exc.default_code.upper().replace("-", "_")
            if hasattr(exc, "default_code")
            else "API_ERROR"
        )
        detail = response.data.get("detail", exc.default_detail) if isinstance(
            response.data, dict
        ) else response.data
        response.data = error_body(code, detail)
    elif isinstance(exc, Http404):
        response = Response(
            error_body("NOT_FOUND", "Resource not found"),
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, trace_id)

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
    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response(error_body(exc.code, exc.message), status=status_for_code(exc.code))


def _handle_unexpected_exception(exc: Exception, trace_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    return Response(
        error_body("INTERNAL_ERROR", "Internal Server Error"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
