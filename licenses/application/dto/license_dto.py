"""
License DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from licenses.domain.license import License


@dataclass
class LicenseInfoDTO:
    """DTO for license information."""

    license: str
    owner: Optional[str]
    created: datetime
    duration: int
    expiry: Optional[datetime]
    ip: Optional[str]
    suspended: bool
    state: str
    active: bool

    @classmethod
    def from_entity(cls, license: License, current_time: datetime) -> "LicenseInfoDTO":
        """Project a license entity."""
        return cls(
            license=license.key,
            owner=license.owner,
            created=license.created,
            duration=license.duration,
            expiry=license.expiry,
            ip=license.bound_address,
            suspended=license.suspended,
            state=license.state.value,
            active=license.is_active(current_time),
        )


@dataclass
class LicenseCreatedDTO:
    """DTO for create license response."""

    license: str
    duration: int


@dataclass
class AuthenticationResultDTO:
    """DTO for authenticate response."""

    valid: bool
    activated: bool = False
    reason: Optional[str] = None
    expiry: Optional[datetime] = None


@dataclass
class LicenseActiveDTO:
    """DTO for is-active response."""

    active: bool


@dataclass
class LicenseCountDTO:
    """DTO for license count response."""

    licenses: int
