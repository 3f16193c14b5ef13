"""
Account service.

Wraps the account handlers so callers receive an ``OperationResult``
instead of domain exceptions.
"""
import logging
from typing import Optional

from accounts.application.commands.create_account import CreateAccountCommand
from accounts.application.handlers.account_handlers import (
    CreateAccountHandler,
    GetRankHandler,
)
from accounts.application.queries.get_rank import GetRankQuery
from accounts.ports.account_repository import AccountRepository
from core.application.operation_result import OperationResult
from core.domain.exceptions import DomainException, InternalError, PersistenceError
from core.domain.value_objects import Rank
from core.metrics import operation_errors_total

logger = logging.getLogger(__name__)


class AccountService:
    """Facade over account creation and rank lookup."""

    def __init__(self, account_repository: AccountRepository, token_length: Optional[int] = None):
        """Initialize service with the identity store."""
        self._create = CreateAccountHandler(account_repository, token_length=token_length)
        self._get_rank = GetRankHandler(account_repository)

    async def create_account(
        self,
        username: str,
        email: str,
        password: str,
        rank: Rank = Rank.MEMBER,
    ) -> OperationResult:
        """Create an account; the result carries its token."""
        command = CreateAccountCommand(username=username, email=email, password=password, rank=rank)
        try:
            created = await self._create.handle(command)
        except DomainException as exc:
            operation_errors_total.labels(operation="create_account", code=exc.code).inc()
            return OperationResult.failure(exc)
        except PersistenceError:
            logger.exception("Account creation failed in the store")
            return OperationResult.failure(InternalError())
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Account creation failed unexpectedly")
            return OperationResult.failure(InternalError())
        return OperationResult.ok(
            {"token": created.token, "rank": created.rank}, message=created.message
        )

    async def get_rank(self, token: str) -> OperationResult:
        """Resolve a token to its rank."""
        try:
            rank = await self._get_rank.handle(GetRankQuery(token=token))
        except DomainException as exc:
            operation_errors_total.labels(operation="get_rank", code=exc.code).inc()
            return OperationResult.failure(exc)
        except PersistenceError:
            logger.exception("Rank lookup failed in the store")
            return OperationResult.failure(InternalError())
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Rank lookup failed unexpectedly")
            return OperationResult.failure(InternalError())
        return OperationResult.ok(rank)
