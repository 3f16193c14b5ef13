"""
License repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.

The store is the single source of truth: implementations must not cache.
Mutating methods return the number of affected rows so that callers can
tell which of two racing writers won a conditional update.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Implementations raise ``PersistenceError`` on storage faults.
    """

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[License]:
        """
        Find a license by key.

        Args:
            key: License key

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    async def insert(self, license: License) -> License:
        """
        Insert a new license record.

        Args:
            license: License entity to insert

        Returns:
            Stored license entity
        """
        pass

    @abstractmethod
    async def set_owner_if_unclaimed(self, key: str, owner: str) -> int:
        """
        Set the owner only when the license has none.

        Args:
            key: License key
            owner: Owner reference

        Returns:
            Number of updated rows (0 or 1)
        """
        pass

    @abstractmethod
    async def set_expiry_and_address_if_unset(
        self, key: str, expiry: datetime, address: str
    ) -> int:
        """
        Bind expiry and address only when the license is claimed and not yet activated.

        Args:
            key: License key
            expiry: Expiry timestamp
            address: Network address

        Returns:
            Number of updated rows (0 or 1)
        """
        pass

    @abstractmethod
    async def set_suspended(self, key: str, value: bool) -> int:
        """
        Set the suspended flag.

        Args:
            key: License key
            value: New flag value

        Returns:
            Number of matched rows (0 or 1)
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> int:
        """
        Delete a license.

        Args:
            key: License key

        Returns:
            Number of deleted rows (0 or 1)
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Count stored licenses.

        Returns:
            Number of license records
        """
        pass

    @abstractmethod
    async def key_exists(self, key: str) -> bool:
        """
        Check if a license key is currently stored.

        Args:
            key: License key

        Returns:
            True if a record with this key exists
        """
        pass
