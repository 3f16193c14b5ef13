"""
Users API views.

Account creation and rank lookup for the tokens that the license
endpoints accept as ``authToken``.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from opentelemetry.trace import Status, StatusCode
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.services.account_service import AccountService
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from api.responses import result_response, validation_error_response
from api.v1.accounts.serializers import (
    CreateUserRequestSerializer,
    RankQuerySerializer,
    UserCreatedResponseSerializer,
    UserRankResponseSerializer,
)
from core.instrumentation import get_tracer

# Initialize service (in production, use DI container)
_account_service = AccountService(DjangoAccountRepository())

tracer = get_tracer(__name__)


class UsersServiceStatusView(APIView):
    """View reporting that the users service is up."""

    @extend_schema(
        operation_id="users_service_status",
        summary="Users Service Status",
        tags=["Users"],
        responses={200: {"description": "Service online"}},
    )
    def get(self, _request: Request) -> Response:
        """Report service status."""
        return Response({"status": "online"})


class CreateUserView(APIView):
    """View for creating accounts."""

    @extend_schema(
        operation_id="create_user",
        summary="Create User",
        description="Create a member account and return its token.",
        tags=["Users"],
        request=CreateUserRequestSerializer,
        responses={
            201: UserCreatedResponseSerializer,
            400: {"description": "Bad Request"},
            409: {"description": "Username taken"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create an account."""
        return async_to_sync(self._handle_create_user)(request)

    async def _handle_create_user(self, request: Request) -> Response:
        """Async handler for create user."""
        with tracer.start_as_current_span("create_user") as span:
            span.set_attribute("operation", "create_user")

            serializer = CreateUserRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            result = await _account_service.create_account(
                username=serializer.validated_data["username"],
                email=serializer.validated_data["email"],
                password=serializer.validated_data["password"],
            )
            if result.success:
                span.set_status(Status(StatusCode.OK))
            else:
                span.set_attribute("error", result.code)
                span.set_status(Status(StatusCode.ERROR, result.message))
            return result_response(result, success_status=status.HTTP_201_CREATED)


class GetUserRankView(APIView):
    """View for resolving a token to its rank."""

    @extend_schema(
        operation_id="get_user_rank",
        summary="Get User Rank",
        tags=["Users"],
        parameters=[
            OpenApiParameter(
                name="token",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Account token",
            ),
        ],
        responses={
            200: UserRankResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid token"},
        },
    )
    def get(self, request: Request) -> Response:
        """Resolve a token's rank."""
        return async_to_sync(self._handle_get_user_rank)(request)

    async def _handle_get_user_rank(self, request: Request) -> Response:
        with tracer.start_as_current_span("get_user_rank") as span:
            span.set_attribute("operation", "get_user_rank")

            serializer = RankQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            result = await _account_service.get_rank(serializer.validated_data["token"])
            if not result.success:
                span.set_status(Status(StatusCode.ERROR, result.message))
            return result_response(result)
