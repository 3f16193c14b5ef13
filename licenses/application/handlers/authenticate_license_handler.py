"""
AuthenticateLicenseHandler.

Handles the authenticate license command, including lazy activation
on the first authentication after a claim.
"""
import logging
from datetime import datetime
from typing import Callable

from django.utils import timezone

from core.domain.exceptions import InvalidArgumentError, LicenseNotFoundError
from core.domain.value_objects import NetworkAddress
from core.infrastructure.events import event_bus
from licenses.application.commands.authenticate_license import (
    AuthenticateLicenseCommand,
)
from licenses.application.dto.license_dto import AuthenticationResultDTO
from licenses.domain.events import LicenseActivated, LicenseAuthenticated
from licenses.domain.services import (
    UNCLAIMED_REASON,
    LicenseLifecycleManager,
    LicenseValidator,
)
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class AuthenticateLicenseHandler:
    """Handler for AuthenticateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        clock: Callable[[], datetime] = timezone.now,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.clock = clock

    async def handle(self, command: AuthenticateLicenseCommand) -> AuthenticationResultDTO:
        """
        Handle authenticate license command.

        Args:
            command: AuthenticateLicenseCommand

        Returns:
            AuthenticationResultDTO; ``valid`` is False with a reason for
            unclaimed, suspended, expired, or mismatched licenses

        Raises:
            InvalidArgumentError: If the address is unusable
            LicenseNotFoundError: If license not found
        """
        try:
            address = str(NetworkAddress(command.address))
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc

        license = await self.license_repository.find_by_key(command.license_key)
        if not license:
            raise LicenseNotFoundError()

        now = self.clock()

        if not license.is_claimed:
            await self._publish_outcome(license.key, False, UNCLAIMED_REASON)
            return AuthenticationResultDTO(valid=False, reason=UNCLAIMED_REASON)

        activated = False
        if not license.is_activated:
            license, activated = await LicenseLifecycleManager.activate_if_first_use(
                license, address, now, self.license_repository
            )
            if activated:
                logger.info("License activated")
                await event_bus.publish(
                    LicenseActivated(license_key=license.key, expiry=license.expiry)
                )

        valid, reason = LicenseValidator.validate_authentication(license, address, now)
        await self._publish_outcome(license.key, valid, reason)

        return AuthenticationResultDTO(
            valid=valid,
            activated=activated,
            reason=reason,
            expiry=license.expiry,
        )

    async def _publish_outcome(self, license_key: str, valid: bool, reason):
        logger.debug("Authentication evaluated: valid=%s reason=%s", valid, reason)
        await event_bus.publish(
            LicenseAuthenticated(license_key=license_key, valid=valid, reason=reason)
        )
