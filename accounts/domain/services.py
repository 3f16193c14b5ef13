"""
Account domain services.
"""
import logging

from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import InvalidTokenError, UnauthorizedError
from core.domain.value_objects import Rank

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """
    Checks a caller token against a required rank.

    Performs exactly one identity lookup per check. Callers run the gate
    before touching the license store, so a denied caller learns nothing
    about whether the target license exists.
    """

    def __init__(self, account_repository: AccountRepository):
        """Initialize gate with the identity store."""
        self.account_repository = account_repository

    async def require_rank(self, token: str, min_rank: Rank) -> int:
        """
        Permit the caller or raise.

        Args:
            token: Caller token
            min_rank: Minimum rank required

        Returns:
            The caller's rank

        Raises:
            InvalidTokenError: If the token is empty or unknown
            UnauthorizedError: If the caller's rank is below min_rank
        """
        if not token:
            raise InvalidTokenError()

        rank = await self.account_repository.resolve_rank(token)
        if rank is None:
            raise InvalidTokenError()
        if rank < int(min_rank):
            logger.info("Caller rank %s below required %s", rank, min_rank.name)
            raise UnauthorizedError()
        return rank
