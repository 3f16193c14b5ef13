"""
Django implementation of AccountRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from django.db import IntegrityError

from accounts.domain.account import Account
from accounts.infrastructure.models import Account as AccountModel
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import UsernameTakenError
from core.domain.value_objects import Email
from core.infrastructure.database import run_in_store


class DjangoAccountRepository(AccountRepository):
    """Django ORM implementation of AccountRepository."""

    def _to_domain(self, model: AccountModel) -> Account:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Account model

        Returns:
            Account domain entity
        """
        return Account(
            id=model.id,
            username=model.username,
            email=Email(model.email),
            token=model.token,
            password_hash=model.password_hash,
            rank=model.rank,
            created_at=model.created_at,
        )

    def _save(self, account: Account) -> Account:
        # pylint: disable=no-member
        try:
            model, _ = AccountModel.objects.update_or_create(
                id=account.id,
                defaults={
                    "username": account.username,
                    "email": str(account.email),
                    "token": account.token,
                    "password_hash": account.password_hash,
                    "rank": account.rank,
                },
            )
        except IntegrityError as exc:
            # A concurrent sign-up took the username after the handler checked it
            taken = (
                AccountModel.objects.filter(username=account.username)
                .exclude(id=account.id)
                .exists()
            )
            if taken:
                raise UsernameTakenError() from exc
            raise
        return self._to_domain(model)

    def _find_by_token(self, token: str) -> Optional[Account]:
        # pylint: disable=no-member
        model = AccountModel.objects.filter(token=token).first()
        return self._to_domain(model) if model else None

    def _resolve_rank(self, token: str) -> Optional[int]:
        # pylint: disable=no-member
        return AccountModel.objects.filter(token=token).values_list("rank", flat=True).first()

    async def save(self, account: Account) -> Account:
        """
        Save an account entity.

        Args:
            account: Account entity to save

        Returns:
            Saved account entity

        Raises:
            UsernameTakenError: If another account holds the username
        """
        return await run_in_store("save_account", self._save, account)

    async def find_by_token(self, token: str) -> Optional[Account]:
        """
        Find an account by token.

        Args:
            token: Account token

        Returns:
            Account entity or None if not found
        """
        return await run_in_store("find_account_by_token", self._find_by_token, token)

    async def resolve_rank(self, token: str) -> Optional[int]:
        """
        Resolve a caller token to its rank.

        Args:
            token: Account token

        Returns:
            Rank value or None if the token is unknown
        """
        return await run_in_store("resolve_rank", self._resolve_rank, token)

    async def username_exists(self, username: str) -> bool:
        """
        Check if a username is taken.

        Args:
            username: Username

        Returns:
            True if an account with this username exists
        """
        # pylint: disable=no-member
        query = AccountModel.objects.filter(username=username)
        return await run_in_store("username_exists", query.exists)
