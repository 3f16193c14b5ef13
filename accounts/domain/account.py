"""
Account domain entity.

An account is a caller identity: a bearer token and a rank.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.domain.keys import generate_key
from core.domain.value_objects import Email, Rank


@dataclass(frozen=True)
class Account:
    """
    Account domain entity.

    ``password_hash`` is produced by the caller (Django hashers); the
    entity never sees a raw password.
    """

    id: uuid.UUID
    username: str
    email: Email
    token: str
    password_hash: str
    rank: int
    created_at: datetime

    def __post_init__(self):
        """Validate account entity."""
        if not self.username or len(self.username.strip()) == 0:
            raise ValueError("Username cannot be empty")
        if len(self.username) > 150:
            raise ValueError("Username too long")
        if not self.token:
            raise ValueError("Token is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        password_hash: str,
        token_length: int,
        rank: Rank = Rank.MEMBER,
        account_id: Optional[uuid.UUID] = None,
    ) -> "Account":
        """
        Create a new Account entity with a fresh token.

        Args:
            username: Unique username
            email: Email address
            password_hash: Hashed password
            token_length: Length of the generated token
            rank: Initial rank
            account_id: Optional UUID (generated if not provided)

        Returns:
            Account entity instance
        """
        return cls(
            id=account_id or uuid.uuid4(),
            username=username.strip(),
            email=Email(email),
            token=generate_key(token_length),
            password_hash=password_hash,
            rank=int(rank),
            created_at=datetime.now(timezone.utc),
        )

    def has_rank(self, minimum: Rank) -> bool:
        """True if this account's rank is at least ``minimum``."""
        return self.rank >= int(minimum)
