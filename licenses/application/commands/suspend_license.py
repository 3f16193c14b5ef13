"""
SuspendLicenseCommand.

Command to suspend a license.
"""
from dataclasses import dataclass


@dataclass
class SuspendLicenseCommand:
    """Command to suspend a license."""

    license_key: str
    caller_token: str
