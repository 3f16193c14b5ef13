"""
CountLicensesQuery.
"""
from dataclasses import dataclass


@dataclass
class CountLicensesQuery:
    """Query for the number of stored licenses."""
