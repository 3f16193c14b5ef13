"""
License lifecycle handlers.

Handlers for create, claim, suspend, and delete license commands.
Privileged handlers run the authorization gate before they read the
license store.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from django.conf import settings
from django.utils import timezone

from accounts.domain.services import AuthorizationGate
from core.domain.exceptions import InvalidArgumentError, LicenseNotFoundError
from core.infrastructure.events import event_bus
from licenses.application.commands.claim_license import ClaimLicenseCommand
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.commands.suspend_license import SuspendLicenseCommand
from licenses.application.dto.license_dto import LicenseCreatedDTO
from licenses.domain.events import (
    LicenseClaimed,
    LicenseCreated,
    LicenseDeleted,
    LicenseSuspended,
)
from licenses.domain.license import MAX_LICENSE_DURATION_DAYS, License
from licenses.domain.policy import LicenseOperation, required_rank
from licenses.domain.services import LicenseKeyGenerator, LicenseLifecycleManager
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class CreateLicenseHandler:
    """Handler for CreateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        gate: AuthorizationGate,
        clock: Clock = timezone.now,
        key_length: Optional[int] = None,
        max_key_attempts: Optional[int] = None,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.gate = gate
        self.clock = clock
        self.key_length = key_length
        self.max_key_attempts = max_key_attempts

    async def handle(self, command: CreateLicenseCommand) -> LicenseCreatedDTO:
        """
        Handle create license command.

        Args:
            command: CreateLicenseCommand

        Returns:
            LicenseCreatedDTO with the new key

        Raises:
            InvalidTokenError: If the caller token is unknown
            UnauthorizedError: If the caller's rank is too low
            InvalidArgumentError: If duration is not an integer in
                [0, MAX_LICENSE_DURATION_DAYS]
            InvalidConfigurationError: If no unique key can be generated
        """
        await self.gate.require_rank(
            command.caller_token, required_rank(LicenseOperation.CREATE)
        )

        duration = command.duration
        if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
            raise InvalidArgumentError("Duration must be a non-negative whole number of days")
        if duration > MAX_LICENSE_DURATION_DAYS:
            raise InvalidArgumentError(
                f"Duration cannot exceed {MAX_LICENSE_DURATION_DAYS} days"
            )

        key = await LicenseKeyGenerator.generate_unique(
            self.license_repository,
            length=self.key_length or settings.LICENSE_KEY_LENGTH,
            max_attempts=self.max_key_attempts or settings.LICENSE_KEY_MAX_ATTEMPTS,
        )

        license = License.create(key=key, duration=duration, created=self.clock())
        saved = await self.license_repository.insert(license)
        logger.info("License created with duration %d days", saved.duration)

        await event_bus.publish(LicenseCreated(license_key=saved.key, duration=saved.duration))

        return LicenseCreatedDTO(license=saved.key, duration=saved.duration)


class ClaimLicenseHandler:
    """Handler for ClaimLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    async def handle(self, command: ClaimLicenseCommand) -> License:
        """
        Handle claim license command.

        Args:
            command: ClaimLicenseCommand

        Returns:
            Claimed License entity

        Raises:
            InvalidArgumentError: If owner is empty
            LicenseNotFoundError: If license not found
            LicenseAlreadyClaimedError: If the license already has an owner
        """
        if not command.owner or not str(command.owner).strip():
            raise InvalidArgumentError("Owner cannot be empty")

        license = await self.license_repository.find_by_key(command.license_key)
        if not license:
            raise LicenseNotFoundError()

        claimed = await LicenseLifecycleManager.claim_license(
            license, command.owner, self.license_repository
        )
        logger.info("License claimed")

        await event_bus.publish(LicenseClaimed(aggregate_id=claimed.key))

        return claimed


class SuspendLicenseHandler:
    """Handler for SuspendLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository, gate: AuthorizationGate):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.gate = gate

    async def handle(self, command: SuspendLicenseCommand) -> License:
        """
        Handle suspend license command.

        Suspending an already suspended license succeeds again.

        Args:
            command: SuspendLicenseCommand

        Returns:
            Suspended License entity

        Raises:
            InvalidTokenError: If the caller token is unknown
            UnauthorizedError: If the caller's rank is too low
            LicenseNotFoundError: If license not found
        """
        await self.gate.require_rank(
            command.caller_token, required_rank(LicenseOperation.SUSPEND)
        )

        license = await self.license_repository.find_by_key(command.license_key)
        if not license:
            raise LicenseNotFoundError()

        suspended = await LicenseLifecycleManager.suspend_license(
            license, self.license_repository
        )
        logger.info("License suspended")

        await event_bus.publish(LicenseSuspended(aggregate_id=suspended.key))

        return suspended


class DeleteLicenseHandler:
    """Handler for DeleteLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository, gate: AuthorizationGate):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.gate = gate

    async def handle(self, command: DeleteLicenseCommand) -> None:
        """
        Handle delete license command.

        Raises:
            InvalidTokenError: If the caller token is unknown
            UnauthorizedError: If the caller's rank is too low
            LicenseNotFoundError: If license not found
        """
        await self.gate.require_rank(
            command.caller_token, required_rank(LicenseOperation.DELETE)
        )

        if not command.license_key:
            raise LicenseNotFoundError()

        deleted = await self.license_repository.delete(command.license_key)
        if deleted == 0:
            raise LicenseNotFoundError()
        logger.info("License deleted")

        await event_bus.publish(LicenseDeleted(aggregate_id=command.license_key))
