"""
License query handlers.

Read-only handlers; none of them writes to the license store.
"""
from datetime import datetime
from typing import Callable

from django.utils import timezone

from core.domain.exceptions import LicenseNotFoundError
from licenses.application.dto.license_dto import (
    LicenseActiveDTO,
    LicenseCountDTO,
    LicenseInfoDTO,
)
from licenses.application.queries.count_licenses import CountLicensesQuery
from licenses.application.queries.get_license_info import GetLicenseInfoQuery
from licenses.application.queries.is_license_active import IsLicenseActiveQuery
from licenses.ports.license_repository import LicenseRepository


class GetLicenseInfoHandler:
    """Handler for GetLicenseInfoQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        clock: Callable[[], datetime] = timezone.now,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.clock = clock

    async def handle(self, query: GetLicenseInfoQuery) -> LicenseInfoDTO:
        """
        Handle get license info query.

        Raises:
            LicenseNotFoundError: If license not found
        """
        license = await self.license_repository.find_by_key(query.license_key)
        if not license:
            raise LicenseNotFoundError()
        return LicenseInfoDTO.from_entity(license, self.clock())


class IsLicenseActiveHandler:
    """Handler for IsLicenseActiveQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        clock: Callable[[], datetime] = timezone.now,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.clock = clock

    async def handle(self, query: IsLicenseActiveQuery) -> LicenseActiveDTO:
        """
        Handle is license active query.

        Raises:
            LicenseNotFoundError: If license not found
        """
        license = await self.license_repository.find_by_key(query.license_key)
        if not license:
            raise LicenseNotFoundError()
        return LicenseActiveDTO(active=license.is_active(self.clock()))


class CountLicensesHandler:
    """Handler for CountLicensesQuery."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    async def handle(self, query: CountLicensesQuery) -> LicenseCountDTO:
        """Handle count licenses query."""
        return LicenseCountDTO(licenses=await self.license_repository.count())
