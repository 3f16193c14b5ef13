"""
Account repository port (interface).

This defines the contract for identity lookups and account persistence.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.account import Account


class AccountRepository(ABC):
    """
    Abstract repository for Account entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """
        Save an account entity.

        Args:
            account: Account entity to save

        Returns:
            Saved account entity

        Raises:
            UsernameTakenError: If another account holds the username
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[Account]:
        """
        Find an account by token.

        Args:
            token: Account token

        Returns:
            Account entity or None if not found
        """
        pass

    @abstractmethod
    async def resolve_rank(self, token: str) -> Optional[int]:
        """
        Resolve a caller token to its rank.

        Args:
            token: Account token

        Returns:
            Rank value or None if the token is unknown
        """
        pass

    @abstractmethod
    async def username_exists(self, username: str) -> bool:
        """
        Check if a username is taken.

        Args:
            username: Username

        Returns:
            True if an account with this username exists
        """
        pass
