"""
ClaimLicenseCommand.

Command to assign an owner to an unclaimed license.
Possession of the key is the only credential.
"""
from dataclasses import dataclass


@dataclass
class ClaimLicenseCommand:
    """Command to claim a license."""

    license_key: str
    owner: str
