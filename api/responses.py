"""
Response helpers shared by the API views.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from api.exceptions import error_body, status_for_code
from core.application.operation_result import OperationResult


def result_response(result: OperationResult, success_status: int = status.HTTP_200_OK) -> Response:
    """
    Render an OperationResult.

    Args:
        result: Engine or service result
        success_status: Status used when the operation succeeded

    Returns:
        Response carrying the flattened result
    """
    if result.success:
        return Response(result.to_dict(), status=success_status)
    return Response(result.to_dict(), status=status_for_code(result.code))


def validation_error_response(errors) -> Response:
    """400 response for serializer errors."""
    return Response(
        error_body("VALIDATION_ERROR", errors),
        status=status.HTTP_400_BAD_REQUEST,
    )


def client_address(request: Request) -> str:
    """
    Address the request came from.

    Uses the first X-Forwarded-For hop when a proxy set one,
    otherwise REMOTE_ADDR.
    """
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.META.get("REMOTE_ADDR", "")
