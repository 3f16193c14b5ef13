"""
IsLicenseActiveQuery.
"""
from dataclasses import dataclass


@dataclass
class IsLicenseActiveQuery:
    """Query whether a license is active, without binding an address."""

    license_key: str
