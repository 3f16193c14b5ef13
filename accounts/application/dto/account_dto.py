"""
Account DTOs for API responses.
"""
import uuid
from dataclasses import dataclass


@dataclass
class AccountCreatedDTO:
    """DTO for create account response."""

    account_id: uuid.UUID
    username: str
    token: str
    rank: int
    message: str = "Account created"


@dataclass
class RankDTO:
    """DTO for rank lookup response."""

    rank: int
    rank_name: str
    message: str = "Rank retrieved"
