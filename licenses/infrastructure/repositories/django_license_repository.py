"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
Conditional transitions are single ``UPDATE ... WHERE`` statements, so the
database decides which of two concurrent writers wins.
"""
from datetime import datetime
from typing import Optional

from core.infrastructure.database import run_in_store
from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Runs every query through run_in_store (timeout + error mapping)
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            key=model.key,
            owner=model.owner,
            created=model.created,
            duration=model.duration,
            expiry=model.expiry,
            bound_address=model.bound_address,
            suspended=model.suspended,
        )

    def _find_by_key(self, key: str) -> Optional[License]:
        # pylint: disable=no-member
        model = LicenseModel.objects.filter(key=key).first()
        return self._to_domain(model) if model else None

    def _insert(self, license: License) -> License:
        # pylint: disable=no-member
        model = LicenseModel.objects.create(
            key=license.key,
            owner=license.owner,
            created=license.created,
            duration=license.duration,
            expiry=license.expiry,
            bound_address=license.bound_address,
            suspended=license.suspended,
        )
        return self._to_domain(model)

    async def find_by_key(self, key: str) -> Optional[License]:
        """
        Find a license by key.

        Args:
            key: License key

        Returns:
            License entity or None if not found
        """
        return await run_in_store("find_by_key", self._find_by_key, key)

    async def insert(self, license: License) -> License:
        """
        Insert a new license record.

        Args:
            license: License entity to insert

        Returns:
            Stored license entity
        """
        return await run_in_store("insert", self._insert, license)

    async def set_owner_if_unclaimed(self, key: str, owner: str) -> int:
        """
        Set the owner only when the license has none.

        Args:
            key: License key
            owner: Owner reference

        Returns:
            Number of updated rows (0 or 1)
        """
        # pylint: disable=no-member
        query = LicenseModel.objects.filter(key=key, owner__isnull=True)
        return await run_in_store("set_owner_if_unclaimed", query.update, owner=owner)

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
        # pylint: disable=no-member
        query = LicenseModel.objects.filter(key=key, owner__isnull=False, expiry__isnull=True)
        return await run_in_store(
            "set_expiry_and_address_if_unset",
            query.update,
            expiry=expiry,
            bound_address=address,
        )

    async def set_suspended(self, key: str, value: bool) -> int:
        """
        Set the suspended flag.

        Args:
            key: License key
            value: New flag value

        Returns:
            Number of matched rows (0 or 1)
        """
        # pylint: disable=no-member
        query = LicenseModel.objects.filter(key=key)
        return await run_in_store("set_suspended", query.update, suspended=value)

    async def delete(self, key: str) -> int:
        """
        Delete a license.

        Args:
            key: License key

        Returns:
            Number of deleted rows (0 or 1)
        """
        # pylint: disable=no-member
        query = LicenseModel.objects.filter(key=key)
        deleted, _ = await run_in_store("delete", query.delete)
        return deleted

    async def count(self) -> int:
        """
        Count stored licenses.

        Returns:
            Number of license records
        """
        # pylint: disable=no-member
        return await run_in_store("count", LicenseModel.objects.count)

    async def key_exists(self, key: str) -> bool:
        """
        Check if a license key is currently stored.

        Args:
            key: License key

        Returns:
            True if a record with this key exists
        """
        # pylint: disable=no-member
        query = LicenseModel.objects.filter(key=key)
        return await run_in_store("key_exists", query.exists)
