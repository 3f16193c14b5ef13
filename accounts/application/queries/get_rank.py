"""
GetRankQuery.

Query to resolve a caller token to its rank.
"""
from dataclasses import dataclass


@dataclass
class GetRankQuery:
    """Query for the rank behind a token."""

    token: str
