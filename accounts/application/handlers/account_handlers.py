"""
Account handlers.

Handlers for creating accounts and resolving ranks.
"""
import logging
from typing import Optional

from asgiref.sync import sync_to_async
from django.conf import settings
from django.contrib.auth.hashers import make_password

from accounts.application.commands.create_account import CreateAccountCommand
from accounts.application.dto.account_dto import AccountCreatedDTO, RankDTO
from accounts.application.queries.get_rank import GetRankQuery
from accounts.domain.account import Account
from accounts.domain.events import AccountCreated
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import (
    InvalidArgumentError,
    InvalidTokenError,
    UsernameTakenError,
)
from core.domain.value_objects import Rank
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class CreateAccountHandler:
    """Handler for CreateAccountCommand."""

    def __init__(
        self,
        account_repository: AccountRepository,
        token_length: Optional[int] = None,
    ):
        """Initialize handler with repositories."""
        self.account_repository = account_repository
        self.token_length = token_length

    async def handle(self, command: CreateAccountCommand) -> AccountCreatedDTO:
        """
        Handle create account command.

        Args:
            command: CreateAccountCommand

        Returns:
            AccountCreatedDTO carrying the new token

        Raises:
            UsernameTakenError: If the username is taken
            InvalidArgumentError: If username, email or password is unusable
        """
        if not command.password:
            raise InvalidArgumentError("Password cannot be empty")

        username = (command.username or "").strip()
        if await self.account_repository.username_exists(username):
            raise UsernameTakenError()

        password_hash = await sync_to_async(make_password)(command.password)
        token_length = self.token_length or settings.ACCOUNT_TOKEN_LENGTH

        try:
            account = Account.create(
                username=username,
                email=command.email,
                password_hash=password_hash,
                token_length=token_length,
                rank=command.rank,
            )
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc

        saved = await self.account_repository.save(account)
        logger.info("Account %s created with rank %s", saved.id, saved.rank)

        await event_bus.publish(AccountCreated(account_id=saved.id, rank=saved.rank))

        return AccountCreatedDTO(
            account_id=saved.id,
            username=saved.username,
            token=saved.token,
            rank=saved.rank,
        )


class GetRankHandler:
    """Handler for GetRankQuery."""

    def __init__(self, account_repository: AccountRepository):
        """Initialize handler with repositories."""
        self.account_repository = account_repository

    async def handle(self, query: GetRankQuery) -> RankDTO:
        """
        Handle get rank query.

        Raises:
            InvalidTokenError: If the token is unknown
        """
        if not query.token:
            raise InvalidTokenError()
        rank = await self.account_repository.resolve_rank(query.token)
        if rank is None:
            raise InvalidTokenError()
        try:
            rank_name = Rank(rank).name.lower()
        except ValueError:
            rank_name = "custom"
        return RankDTO(rank=rank, rank_name=rank_name)
