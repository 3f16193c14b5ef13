"""
CreateLicenseCommand.

Command to issue a new, unclaimed license.
"""
from dataclasses import dataclass


@dataclass
class CreateLicenseCommand:
    """Command to create a license valid for ``duration`` days after activation."""

    duration: int
    caller_token: str
