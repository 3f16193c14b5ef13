"""
GetLicenseInfoQuery.
"""
from dataclasses import dataclass


@dataclass
class GetLicenseInfoQuery:
    """Query for every stored field of a license."""

    license_key: str
