"""
License domain events.

Events carry the license key as aggregate id. Owners and addresses are
left out so audit output does not collect them.
"""

from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class LicenseCreated(DomainEvent):
    """Event raised when a license is created."""

    def __init__(
        self,
        license_key: str,
        duration: int,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseCreated event.

        Args:
            license_key: License key
            duration: Duration in days
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.duration = duration


class LicenseClaimed(DomainEvent):
    """Event raised when a license gets its owner."""


class LicenseActivated(DomainEvent):
    """Event raised when the first authentication binds a license."""

    def __init__(
        self,
        license_key: str,
        expiry: datetime,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.expiry = expiry


class LicenseAuthenticated(DomainEvent):
    """Event raised for every evaluated authentication attempt."""

    def __init__(
        self,
        license_key: str,
        valid: bool,
        reason: Optional[str] = None,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.valid = valid
        self.reason = reason


class LicenseSuspended(DomainEvent):
    """Event raised when a license is suspended."""


class LicenseDeleted(DomainEvent):
    """Event raised when a license is deleted."""
