"""
License lifecycle engine.

Single entry point for the eight license operations. Handlers raise
domain exceptions; the engine turns every outcome into an
``OperationResult`` so nothing is raised across this boundary.
"""
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional

from django.utils import timezone

from accounts.domain.services import AuthorizationGate
from accounts.ports.account_repository import AccountRepository
from core.application.operation_result import OperationResult
from core.domain.exceptions import DomainException, InternalError, PersistenceError
from core.metrics import operation_errors_total
from licenses.application.commands.authenticate_license import (
    AuthenticateLicenseCommand,
)
from licenses.application.commands.claim_license import ClaimLicenseCommand
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.commands.suspend_license import SuspendLicenseCommand
from licenses.application.handlers.authenticate_license_handler import (
    AuthenticateLicenseHandler,
)
from licenses.application.handlers.license_lifecycle_handlers import (
    ClaimLicenseHandler,
    CreateLicenseHandler,
    DeleteLicenseHandler,
    SuspendLicenseHandler,
)
from licenses.application.handlers.license_query_handlers import (
    CountLicensesHandler,
    GetLicenseInfoHandler,
    IsLicenseActiveHandler,
)
from licenses.application.queries.count_licenses import CountLicensesQuery
from licenses.application.queries.get_license_info import GetLicenseInfoQuery
from licenses.application.queries.is_license_active import IsLicenseActiveQuery
from licenses.domain.policy import LicenseOperation
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class LicenseLifecycleEngine:
    """
    Facade over the license handlers.

    Holds no mutable state of its own; every call reads and writes
    through the repositories, so one engine may serve concurrent requests.
    """

    def __init__(
        self,
        license_repository: LicenseRepository,
        account_repository: AccountRepository,
        clock: Callable[[], datetime] = timezone.now,
        key_length: Optional[int] = None,
        max_key_attempts: Optional[int] = None,
    ):
        """
        Initialize engine with its stores.

        Args:
            license_repository: License store
            account_repository: Identity store used by the authorization gate
            clock: Returns the current, timezone-aware time
            key_length: License key length (defaults to settings.LICENSE_KEY_LENGTH)
            max_key_attempts: Key generation attempts (defaults to
                settings.LICENSE_KEY_MAX_ATTEMPTS)
        """
        gate = AuthorizationGate(account_repository)
        self._create = CreateLicenseHandler(
            license_repository,
            gate,
            clock=clock,
            key_length=key_length,
            max_key_attempts=max_key_attempts,
        )
        self._claim = ClaimLicenseHandler(license_repository)
        self._authenticate = AuthenticateLicenseHandler(license_repository, clock=clock)
        self._suspend = SuspendLicenseHandler(license_repository, gate)
        self._delete = DeleteLicenseHandler(license_repository, gate)
        self._info = GetLicenseInfoHandler(license_repository, clock=clock)
        self._is_active = IsLicenseActiveHandler(license_repository, clock=clock)
        self._count = CountLicensesHandler(license_repository)

    async def create(self, duration: int, caller_token: str) -> OperationResult:
        """Create an unclaimed license; requires an admin caller."""
        return await self._run(
            LicenseOperation.CREATE,
            lambda: self._create.handle(
                CreateLicenseCommand(duration=duration, caller_token=caller_token)
            ),
            "License created",
        )

    async def claim(self, license_key: str, owner: str) -> OperationResult:
        """Assign an owner to an unclaimed license."""

        async def _claim():
            await self._claim.handle(ClaimLicenseCommand(license_key=license_key, owner=owner))
            return None

        return await self._run(LicenseOperation.CLAIM, _claim, "License claimed")

    async def authenticate(self, license_key: str, address: str) -> OperationResult:
        """
        Authenticate ``address`` against a license.

        A failed authentication is still a successful operation: the
        result carries ``valid`` False and a reason. Only lookup and
        store failures produce ``success`` False.
        """
        return await self._run(
            LicenseOperation.AUTHENTICATE,
            lambda: self._authenticate.handle(
                AuthenticateLicenseCommand(license_key=license_key, address=address)
            ),
            valid=False,
        )

    async def suspend(self, license_key: str, caller_token: str) -> OperationResult:
        """Suspend a license; requires an admin caller."""

        async def _suspend():
            await self._suspend.handle(
                SuspendLicenseCommand(license_key=license_key, caller_token=caller_token)
            )
            return None

        return await self._run(LicenseOperation.SUSPEND, _suspend, "License suspended")

    async def delete(self, license_key: str, caller_token: str) -> OperationResult:
        """Delete a license; requires an admin caller."""
        return await self._run(
            LicenseOperation.DELETE,
            lambda: self._delete.handle(
                DeleteLicenseCommand(license_key=license_key, caller_token=caller_token)
            ),
            "License deleted",
        )

    async def info(self, license_key: str) -> OperationResult:
        """Return every stored field of a license."""
        return await self._run(
            LicenseOperation.INFO,
            lambda: self._info.handle(GetLicenseInfoQuery(license_key=license_key)),
        )

    async def count(self) -> OperationResult:
        """Return the number of stored licenses."""
        return await self._run(
            LicenseOperation.COUNT,
            lambda: self._count.handle(CountLicensesQuery()),
        )

    async def is_active(self, license_key: str) -> OperationResult:
        """Return whether a license is active, without binding an address."""
        return await self._run(
            LicenseOperation.IS_ACTIVE,
            lambda: self._is_active.handle(IsLicenseActiveQuery(license_key=license_key)),
        )

    async def _run(
        self,
        operation: LicenseOperation,
        call: Callable[[], Awaitable[Any]],
        message: Optional[str] = None,
        **failure_data,
    ) -> OperationResult:
        try:
            payload = await call()
        except DomainException as exc:
            operation_errors_total.labels(operation=operation.value, code=exc.code).inc()
            return OperationResult.failure(exc, **failure_data)
        except PersistenceError:
            logger.exception("License operation %s failed in the store", operation.value)
            error = InternalError()
            operation_errors_total.labels(operation=operation.value, code=error.code).inc()
            return OperationResult.failure(error, **failure_data)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("License operation %s failed unexpectedly", operation.value)
            error = InternalError()
            operation_errors_total.labels(operation=operation.value, code=error.code).inc()
            return OperationResult.failure(error, **failure_data)
        return OperationResult.ok(payload, message=message)
