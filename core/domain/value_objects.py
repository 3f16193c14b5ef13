"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def __post_init__(self):
        """Validate email format."""
        if not self.value or "@" not in self.value:
            raise ValueError(f"Invalid email address: {self.value}")

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


@dataclass(frozen=True)
class NetworkAddress(ValueObject):
    """Address a license is bound to on first activation."""

    value: str

    def __post_init__(self):
        """Validate address."""
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Network address cannot be empty")
        if len(self.value) > 64:
            raise ValueError("Network address too long")

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """
    Permission tiers held by caller accounts.

    Ordering matters: a caller passes a rank check when its rank
    is greater than or equal to the required one.
    """

    MEMBER = 1
    MODERATOR = 2
    ADMIN = 3

    def __str__(self) -> str:
        return self.name.lower()


class LicenseState(Enum):
    """Position of a license in its claim/activation lifecycle."""

    UNCLAIMED = "unclaimed"
    CLAIMED = "claimed"
    ACTIVATED = "activated"

    def __str__(self) -> str:
        """Return state as string."""
        return self.value
