"""
AuthenticateLicenseCommand.

Command to authenticate a request from ``address`` against a license.
The first authentication after a claim activates the license.
"""
from dataclasses import dataclass


@dataclass
class AuthenticateLicenseCommand:
    """Command to authenticate a license."""

    license_key: str
    address: str
