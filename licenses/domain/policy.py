"""
Authorization policy for license lifecycle operations.

Privileged operations map to the minimum caller rank they require.
Operations absent from REQUIRED_RANKS are not rank-checked: claim and
authenticate are keyed by license key and address only.
"""
from enum import Enum
from typing import Optional

from core.domain.value_objects import Rank


class LicenseOperation(Enum):
    """Operations exposed by the license lifecycle engine."""

    CREATE = "create"
    CLAIM = "claim"
    AUTHENTICATE = "authenticate"
    SUSPEND = "suspend"
    DELETE = "delete"
    INFO = "info"
    COUNT = "count"
    IS_ACTIVE = "is_active"


REQUIRED_RANKS = {
    LicenseOperation.CREATE: Rank.ADMIN,
    LicenseOperation.SUSPEND: Rank.ADMIN,
    LicenseOperation.DELETE: Rank.ADMIN,
}


def required_rank(operation: LicenseOperation) -> Optional[Rank]:
    """Minimum rank for ``operation``, or None when it is not gated."""
    return REQUIRED_RANKS.get(operation)
