"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity: anything that has to consult or
conditionally write the license store.
"""
import logging
from datetime import datetime
from typing import Optional, Tuple

from core.domain.exceptions import (
    InvalidConfigurationError,
    LicenseAlreadyClaimedError,
    LicenseNotFoundError,
)
from core.domain.keys import generate_key, keyspace_size
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

UNCLAIMED_REASON = "Unclaimed License"
SUSPENDED_REASON = "License is suspended"
EXPIRED_REASON = "License has expired"
ADDRESS_MISMATCH_REASON = "Address does not match the bound address"


class LicenseKeyGenerator:
    """Domain service for license key generation."""

    @staticmethod
    async def generate_unique(
        repository: LicenseRepository,
        length: int,
        max_attempts: int = 10,
    ) -> str:
        """
        Generate a license key that is not currently stored.

        Args:
            repository: License repository used for existence checks
            length: Key length
            max_attempts: Upper bound on generated candidates

        Returns:
            Generated license key string

        Raises:
            InvalidConfigurationError: On bad length or attempts, a saturated
                keyspace, or when every attempt collided
        """
        keyspace = keyspace_size(length)
        if max_attempts < 1:
            raise InvalidConfigurationError("License key attempts must be at least 1")

        stored = await repository.count()
        # Refuse once the store holds half of all possible keys
        if stored * 2 >= keyspace:
            raise InvalidConfigurationError(
                f"License keyspace exhausted: {stored} keys stored for a keyspace of {keyspace}"
            )

        for attempt in range(1, max_attempts + 1):
            candidate = generate_key(length)
            if not await repository.key_exists(candidate):
                return candidate
            logger.debug("License key collision on attempt %d of %d", attempt, max_attempts)

        raise InvalidConfigurationError(
            f"Could not generate a unique license key in {max_attempts} attempts"
        )


class LicenseValidator:
    """Domain service for license validation."""

    @staticmethod
    def validate_authentication(
        license: License, address: str, current_time: datetime
    ) -> Tuple[bool, Optional[str]]:
        """
        Evaluate an authentication attempt.

        Args:
            license: License entity as currently stored
            address: Presented network address
            current_time: Time of the attempt

        Returns:
            Tuple of (is_valid, reason) where reason is None when valid
        """
        if license.authenticates(address, current_time):
            return True, None
        if not license.is_claimed:
            return False, UNCLAIMED_REASON
        if license.suspended:
            return False, SUSPENDED_REASON
        if not license.is_active(current_time):
            return False, EXPIRED_REASON
        return False, ADDRESS_MISMATCH_REASON


class LicenseLifecycleManager:
    """Domain service for managing license lifecycle."""

    @staticmethod
    async def claim_license(
        license: License,
        owner: str,
        repository: LicenseRepository,
    ) -> License:
        """
        Claim a license for ``owner``.

        The write is conditional on the license still being unclaimed, so
        of two racing claims only one can win.

        Args:
            license: License entity as read by the caller
            owner: Owner reference
            repository: License repository

        Returns:
            Claimed license entity

        Raises:
            LicenseAlreadyClaimedError: If an owner is or became set
            LicenseNotFoundError: If the license was deleted meanwhile
        """
        claimed = license.claim(owner)
        affected = await repository.set_owner_if_unclaimed(license.key, claimed.owner)
        if affected == 1:
            return claimed
        if not await repository.key_exists(license.key):
            raise LicenseNotFoundError()
        raise LicenseAlreadyClaimedError()

    @staticmethod
    async def activate_if_first_use(
        license: License,
        address: str,
        activation_time: datetime,
        repository: LicenseRepository,
    ) -> Tuple[License, bool]:
        """
        Bind a claimed license to ``address`` on its first authentication.

        The write only applies while expiry is unset. Whether it wins or
        loses, the record is re-read so that validity is evaluated against
        whichever binding was stored.

        Args:
            license: Claimed license entity as read by the caller
            address: Address presented by the first authentication
            activation_time: Time of the attempt
            repository: License repository

        Returns:
            Tuple of (stored license after the attempt, whether this call activated it)

        Raises:
            LicenseNotFoundError: If the license was deleted meanwhile
        """
        if license.is_activated:
            return license, False

        activated = license.activate(address, activation_time)
        affected = await repository.set_expiry_and_address_if_unset(
            license.key, activated.expiry, activated.bound_address
        )

        current = await repository.find_by_key(license.key)
        if current is None:
            raise LicenseNotFoundError()
        return current, affected == 1

    @staticmethod
    async def suspend_license(
        license: License,
        repository: LicenseRepository,
    ) -> License:
        """
        Suspend a license.

        Args:
            license: License entity to suspend
            repository: License repository

        Returns:
            Suspended license entity

        Raises:
            LicenseNotFoundError: If the license was deleted meanwhile
        """
        suspended = license.suspend()
        affected = await repository.set_suspended(license.key, True)
        if affected == 0:
            raise LicenseNotFoundError()
        return suspended
