"""
License API views.

These endpoints are used by license administrators and by client
software to:
- Create, suspend and delete licenses (admin token required)
- Claim a license and authenticate against it
- Inspect a license and count stored licenses
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from opentelemetry.trace import Status, StatusCode
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from api.responses import client_address, result_response, validation_error_response
from api.v1.licenses.serializers import (
    AuthenticateLicenseRequestSerializer,
    AuthenticationResponseSerializer,
    ClaimLicenseRequestSerializer,
    CreateLicenseRequestSerializer,
    LicenseActiveResponseSerializer,
    LicenseCountResponseSerializer,
    LicenseCreatedResponseSerializer,
    LicenseInfoResponseSerializer,
    LicenseQuerySerializer,
    OperationResponseSerializer,
    PrivilegedLicenseRequestSerializer,
)
from core.application.operation_result import OperationResult
from core.instrumentation import get_tracer
from licenses.application.services.license_engine import LicenseLifecycleEngine
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

# Initialize engine (in production, use DI container)
_engine = LicenseLifecycleEngine(
    license_repository=DjangoLicenseRepository(),
    account_repository=DjangoAccountRepository(),
)

tracer = get_tracer(__name__)

LICENSE_QUERY_PARAMETER = OpenApiParameter(
    name="license",
    type=str,
    location=OpenApiParameter.QUERY,
    required=True,
    description="License key",
)


def _record_result(span, result: OperationResult):
    """Copy the outcome of an operation onto the current span."""
    span.set_attribute("success", result.success)
    if result.success:
        span.set_status(Status(StatusCode.OK))
    else:
        span.set_attribute("error", result.code)
        span.set_status(Status(StatusCode.ERROR, result.message))


def _validation_failed(span, serializer) -> Response:
    span.set_attribute("error", "validation_failed")
    span.set_attribute("error.details", str(serializer.errors))
    span.set_status(Status(StatusCode.ERROR, "Validation failed"))
    return validation_error_response(serializer.errors)


class LicenseServiceStatusView(APIView):
    """View reporting that the license service is up."""

    @extend_schema(
        operation_id="license_service_status",
        summary="License Service Status",
        tags=["Licenses"],
        responses={200: {"description": "Service online"}},
    )
    def get(self, _request: Request) -> Response:
        """Report service status."""
        return Response({"status": "online"})


class LicenseCountView(APIView):
    """View for counting stored licenses."""

    @extend_schema(
        operation_id="count_licenses",
        summary="Count Licenses",
        tags=["Licenses"],
        responses={200: LicenseCountResponseSerializer, 500: OperationResponseSerializer},
    )
    def get(self, request: Request) -> Response:
        """Count stored licenses."""
        return async_to_sync(self._handle_count)(request)

    async def _handle_count(self, _request: Request) -> Response:
        with tracer.start_as_current_span("count_licenses") as span:
            span.set_attribute("operation", "count_licenses")
            result = await _engine.count()
            _record_result(span, result)
            return result_response(result)


class CreateLicenseView(APIView):
    """View for creating licenses."""

    @extend_schema(
        operation_id="create_license",
        summary="Create License",
        description=(
            "Issue a new unclaimed license valid for `duration` days after its "
            "first authentication. Requires an admin token."
        ),
        tags=["Licenses"],
        request=CreateLicenseRequestSerializer,
        responses={
            201: LicenseCreatedResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid token"},
            403: {"description": "Caller rank too low"},
            500: OperationResponseSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        """Create a license."""
        return async_to_sync(self._handle_create_license)(request)

    async def _handle_create_license(self, request: Request) -> Response:
        """Async handler for create license."""
        with tracer.start_as_current_span("create_license") as span:
            span.set_attribute("operation", "create_license")

            serializer = CreateLicenseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _validation_failed(span, serializer)

            span.set_attribute("duration", serializer.validated_data["duration"])

            result = await _engine.create(
                duration=serializer.validated_data["duration"],
                caller_token=serializer.validated_data["authToken"],
            )
            _record_result(span, result)
            return result_response(result, success_status=status.HTTP_201_CREATED)


class ClaimLicenseView(APIView):
    """View for claiming licenses."""

    @extend_schema(
        operation_id="claim_license",
        summary="Claim License",
        description="Assign an owner to an unclaimed license. The key is the only credential.",
        tags=["Licenses"],
        request=ClaimLicenseRequestSerializer,
        responses={
            200: OperationResponseSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Invalid license"},
            409: {"description": "License already claimed"},
        },
    )
    def post(self, request: Request) -> Response:
        """Claim a license."""
        return async_to_sync(self._handle_claim_license)(request)

    async def _handle_claim_license(self, request: Request) -> Response:
        """Async handler for claim license."""
        with tracer.start_as_current_span("claim_license") as span:
            span.set_attribute("operation", "claim_license")

            serializer = ClaimLicenseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _validation_failed(span, serializer)

            result = await _engine.claim(
                license_key=serializer.validated_data["license"],
                owner=serializer.validated_data["owner"],
            )
            _record_result(span, result)
            return result_response(result)


class AuthenticateLicenseView(APIView):
    """View for authenticating against a license."""

    @extend_schema(
        operation_id="authenticate_license",
        summary="Authenticate License",
        description=(
            "Check that a license is active and bound to `ip`. The first "
            "authentication after a claim binds the license to `ip` and starts "
            "its validity period. `ip` defaults to the client address."
        ),
        tags=["Licenses"],
        request=AuthenticateLicenseRequestSerializer,
        responses={
            200: AuthenticationResponseSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Invalid license"},
            500: OperationResponseSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        """Authenticate against a license."""
        return async_to_sync(self._handle_authenticate_license)(request)

    async def _handle_authenticate_license(self, request: Request) -> Response:
        """Async handler for authenticate license."""
        with tracer.start_as_current_span("authenticate_license") as span:
            span.set_attribute("operation", "authenticate_license")

            serializer = AuthenticateLicenseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _validation_failed(span, serializer)

            address = serializer.validated_data.get("ip") or client_address(request)
            result = await _engine.authenticate(
                license_key=serializer.validated_data["license"],
                address=address,
            )
            _record_result(span, result)
            span.set_attribute("valid", bool(result.data.get("valid")))
            return result_response(result)


class SuspendLicenseView(APIView):
    """View for suspending licenses."""

    @extend_schema(
        operation_id="suspend_license",
        summary="Suspend License",
        description="Suspend a license. Requires an admin token.",
        tags=["Licenses"],
        request=PrivilegedLicenseRequestSerializer,
        responses={
            200: OperationResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid token"},
            403: {"description": "Caller rank too low"},
            404: {"description": "Invalid license"},
        },
    )
    def post(self, request: Request) -> Response:
        """Suspend a license."""
        return async_to_sync(self._handle_suspend_license)(request)

    async def _handle_suspend_license(self, request: Request) -> Response:
        """Async handler for suspend license."""
        with tracer.start_as_current_span("suspend_license") as span:
            span.set_attribute("operation", "suspend_license")

            serializer = PrivilegedLicenseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _validation_failed(span, serializer)

            result = await _engine.suspend(
                license_key=serializer.validated_data["license"],
                caller_token=serializer.validated_data["authToken"],
            )
            _record_result(span, result)
            return result_response(result)


class DeleteLicenseView(APIView):
    """View for deleting licenses."""

    @extend_schema(
        operation_id="delete_license",
        summary="Delete License",
        description=(
            "Permanently remove a license. Requires an admin token. "
            "Fields may be sent as a JSON body or as query parameters."
        ),
        tags=["Licenses"],
        request=PrivilegedLicenseRequestSerializer,
        responses={
            200: OperationResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid token"},
            403: {"description": "Caller rank too low"},
            404: {"description": "Invalid license"},
        },
    )
    def delete(self, request: Request) -> Response:
        """Delete a license."""
        return async_to_sync(self._handle_delete_license)(request)

    async def _handle_delete_license(self, request: Request) -> Response:
        """Async handler for delete license."""
        with tracer.start_as_current_span("delete_license") as span:
            span.set_attribute("operation", "delete_license")

            data = request.data or request.query_params
            serializer = PrivilegedLicenseRequestSerializer(data=data)
            if not serializer.is_valid():
                return _validation_failed(span, serializer)

            result = await _engine.delete(
                license_key=serializer.validated_data["license"],
                caller_token=serializer.validated_data["authToken"],
            )
            _record_result(span, result)
            return result_response(result)


class LicenseInfoView(APIView):
    """View for reading every field of a license."""

    @extend_schema(
        operation_id="get_license_info",
        summary="License Info",
        tags=["Licenses"],
        parameters=[LICENSE_QUERY_PARAMETER],
        responses={
            200: LicenseInfoResponseSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Invalid license"},
        },
    )
    def get(self, request: Request) -> Response:
        """Read a license."""
        return async_to_sync(self._handle_license_info)(request)

    async def _handle_license_info(self, request: Request) -> Response:
        with tracer.start_as_current_span("get_license_info") as span:
            span.set_attribute("operation", "get_license_info")

            serializer = LicenseQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                return _validation_failed(span, serializer)

            result = await _engine.info(license_key=serializer.validated_data["license"])
            _record_result(span, result)
            return result_response(result)


class LicenseActiveView(APIView):
    """View for checking whether a license is active."""

    @extend_schema(
        operation_id="is_license_active",
        summary="Is License Active",
        description="Report whether a license is active without binding an address.",
        tags=["Licenses"],
        parameters=[LICENSE_QUERY_PARAMETER],
        responses={
            200: LicenseActiveResponseSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Invalid license"},
        },
    )
    def get(self, request: Request) -> Response:
        """Check a license."""
        return async_to_sync(self._handle_license_active)(request)

    async def _handle_license_active(self, request: Request) -> Response:
        with tracer.start_as_current_span("is_license_active") as span:
            span.set_attribute("operation", "is_license_active")

            serializer = LicenseQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                return _validation_failed(span, serializer)

            result = await _engine.is_active(license_key=serializer.validated_data["license"])
            _record_result(span, result)
            return result_response(result)
