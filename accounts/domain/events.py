"""
Account domain events.
"""

import uuid
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class AccountCreated(DomainEvent):
    """Event raised when an account is created. Tokens are never carried."""

    def __init__(
        self,
        account_id: uuid.UUID,
        rank: int,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=str(account_id), occurred_at=occurred_at)
        self.rank = rank
