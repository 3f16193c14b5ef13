"""
DeleteLicenseCommand.

Command to permanently remove a license.
"""
from dataclasses import dataclass


@dataclass
class DeleteLicenseCommand:
    """Command to delete a license."""

    license_key: str
    caller_token: str
