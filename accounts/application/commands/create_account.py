"""
CreateAccountCommand.

Command to register a caller account.
"""
from dataclasses import dataclass

from core.domain.value_objects import Rank


@dataclass
class CreateAccountCommand:
    """Command to create an account and issue its token."""

    username: str
    email: str
    password: str
    rank: Rank = Rank.MEMBER
