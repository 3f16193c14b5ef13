"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from core.domain.exceptions import LicenseAlreadyClaimedError
from core.domain.value_objects import LicenseState, NetworkAddress

# Keeps activation time plus duration representable as a datetime
MAX_LICENSE_DURATION_DAYS = 1_000_000


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    A license moves UNCLAIMED -> CLAIMED -> ACTIVATED. ``owner`` is set once
    by a claim; ``expiry`` and ``bound_address`` are set together, once, by
    the first authentication after the claim. ``suspended`` is orthogonal.
    """

    key: str
    owner: Optional[str]
    created: datetime
    duration: int
    expiry: Optional[datetime]
    bound_address: Optional[str]
    suspended: bool

    def __post_init__(self):
        """Validate license entity."""
        if not self.key or len(self.key.strip()) == 0:
            raise ValueError("License key cannot be empty")
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise ValueError("Duration must be a whole number of days")
        if self.duration < 0:
            raise ValueError("Duration cannot be negative")
        if self.duration > MAX_LICENSE_DURATION_DAYS:
            raise ValueError(f"Duration cannot exceed {MAX_LICENSE_DURATION_DAYS} days")
        if (self.expiry is None) != (self.bound_address is None):
            raise ValueError("Expiry and bound address must be set together")
        if self.expiry is not None and self.owner is None:
            raise ValueError("An unclaimed license cannot be activated")

    @classmethod
    def create(
        cls,
        key: str,
        duration: int,
        created: Optional[datetime] = None,
    ) -> "License":
        """
        Create a new, unclaimed License entity.

        Args:
            key: Unique license key
            duration: Days of validity counted from first activation
            created: Creation time (defaults to now, UTC)

        Returns:
            License entity instance
        """
        return cls(
            key=key,
            owner=None,
            created=created or datetime.now(timezone.utc),
            duration=duration,
            expiry=None,
            bound_address=None,
            suspended=False,
        )

    @property
    def state(self) -> LicenseState:
        """Lifecycle position derived from owner and expiry."""
        if self.owner is None:
            return LicenseState.UNCLAIMED
        if self.expiry is None:
            return LicenseState.CLAIMED
        return LicenseState.ACTIVATED

    @property
    def is_claimed(self) -> bool:
        return self.owner is not None

    @property
    def is_activated(self) -> bool:
        return self.expiry is not None

    def is_active(self, current_time: Optional[datetime] = None) -> bool:
        """
        Check if the license is claimed, activated, unexpired and not suspended.

        Args:
            current_time: Current time (defaults to now, UTC)

        Returns:
            True if license is active
        """
        if self.owner is None or self.expiry is None or self.suspended:
            return False
        check_time = current_time or datetime.now(timezone.utc)
        return self.expiry >= check_time

    def authenticates(self, address: str, current_time: Optional[datetime] = None) -> bool:
        """
        Check whether a request from ``address`` is allowed.

        Args:
            address: Presented network address
            current_time: Current time (defaults to now, UTC)

        Returns:
            True if address matches the bound address and license is active
        """
        return self.bound_address == address and self.is_active(current_time)

    def expiry_from(self, activation_time: datetime) -> datetime:
        """Expiry computed for an activation happening at ``activation_time``."""
        return activation_time + timedelta(days=self.duration)

    def claim(self, owner: str) -> "License":
        """
        Create a new License instance owned by ``owner``.

        Raises:
            LicenseAlreadyClaimedError: If an owner is already set
            ValueError: If owner is empty
        """
        if self.owner is not None:
            raise LicenseAlreadyClaimedError()
        if not owner or len(str(owner).strip()) == 0:
            raise ValueError("Owner cannot be empty")
        return replace(self, owner=str(owner))

    def activate(self, address: str, activation_time: datetime) -> "License":
        """
        Create a new License instance bound to ``address``.

        Args:
            address: Network address to bind
            activation_time: Time of the first authentication

        Returns:
            New License instance with expiry and bound address set

        Raises:
            ValueError: If the license is unclaimed or already activated
        """
        if self.owner is None:
            raise ValueError("Cannot activate an unclaimed license")
        if self.expiry is not None:
            raise ValueError("License is already activated")
        bound = NetworkAddress(address)
        return replace(
            self,
            expiry=self.expiry_from(activation_time),
            bound_address=str(bound),
        )

    def suspend(self) -> "License":
        """Create a new License instance with the suspended flag set."""
        return replace(self, suspended=True)
