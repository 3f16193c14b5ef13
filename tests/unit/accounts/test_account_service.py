"""
Unit tests for account handlers and AccountService.
"""

import pytest
from django.contrib.auth.hashers import check_password

from accounts.application.commands.create_account import CreateAccountCommand
from accounts.application.handlers.account_handlers import CreateAccountHandler
from accounts.application.services.account_service import AccountService
from core.domain.exceptions import InvalidArgumentError, UsernameTakenError
from core.domain.keys import KEY_ALPHABET
from core.domain.value_objects import Rank


@pytest.mark.asyncio
class TestCreateAccountHandler:
    """Tests for CreateAccountHandler."""

    async def test_create_member(self, memory_account_repository):
        """Test new accounts get a token and the member rank."""
        handler = CreateAccountHandler(memory_account_repository, token_length=32)

        result = await handler.handle(
            CreateAccountCommand(username="alice", email="alice@example.com", password="s3cret")
        )

        assert result.rank == Rank.MEMBER
        assert len(result.token) == 32
        assert set(result.token) <= set(KEY_ALPHABET)
        stored = memory_account_repository.accounts[result.token]
        assert stored.password_hash != "s3cret"
        assert check_password("s3cret", stored.password_hash)

    async def test_duplicate_username(self, memory_account_repository):
        """Test duplicate usernames are rejected."""
        handler = CreateAccountHandler(memory_account_repository, token_length=32)
        command = CreateAccountCommand(username="alice", email="a@example.com", password="pw")
        await handler.handle(command)

        with pytest.raises(UsernameTakenError):
            await handler.handle(command)

    @pytest.mark.parametrize(
        "username,email,password",
        [
            ("", "a@example.com", "pw"),
            ("alice", "not-an-email", "pw"),
            ("alice", "a@example.com", ""),
        ],
    )
    async def test_invalid_input(self, memory_account_repository, username, email, password):
        """Test unusable input raises InvalidArgumentError."""
        handler = CreateAccountHandler(memory_account_repository, token_length=32)
        with pytest.raises(InvalidArgumentError):
            await handler.handle(
                CreateAccountCommand(username=username, email=email, password=password)
            )


@pytest.mark.asyncio
class TestAccountService:
    """Tests for AccountService."""

    async def test_create_account_result(self, memory_account_repository):
        """Test the create result carries the token and message."""
        service = AccountService(memory_account_repository, token_length=32)

        result = await service.create_account("alice", "alice@example.com", "pw")

        assert result.success is True
        assert result.message == "Account created"
        assert result.data["rank"] == 1
        assert result.data["token"] in memory_account_repository.accounts

    async def test_create_admin(self, memory_account_repository):
        """Test accounts can be created with a higher rank."""
        service = AccountService(memory_account_repository, token_length=32)

        result = await service.create_account("root", "root@example.com", "pw", rank=Rank.ADMIN)

        assert result.data["rank"] == 3

    async def test_username_taken_result(self, memory_account_repository):
        """Test a duplicate username yields USERNAME_TAKEN."""
        service = AccountService(memory_account_repository, token_length=32)
        await service.create_account("alice", "alice@example.com", "pw")

        result = await service.create_account("alice", "other@example.com", "pw")

        assert result.success is False
        assert result.code == "USERNAME_TAKEN"

    async def test_get_rank(self, memory_account_repository, moderator_account):
        """Test resolving a token's rank."""
        service = AccountService(memory_account_repository)

        result = await service.get_rank(moderator_account.token)

        assert result.success is True
        assert result.message == "Rank retrieved"
        assert result.data == {"rank": 2, "rank_name": "moderator"}

    async def test_get_rank_invalid_token(self, memory_account_repository):
        """Test unknown tokens yield INVALID_TOKEN."""
        result = await AccountService(memory_account_repository).get_rank("nope")

        assert result.code == "INVALID_TOKEN"
        assert result.message == "Invalid token"

    async def test_username_taken_at_save(self, memory_account_repository, monkeypatch):
        """Test a username taken between the check and the write yields USERNAME_TAKEN."""

        async def taken_on_save(account):
            raise UsernameTakenError()

        monkeypatch.setattr(memory_account_repository, "save", taken_on_save)
        service = AccountService(memory_account_repository, token_length=32)

        result = await service.create_account("alice", "alice@example.com", "pw")

        assert result.success is False
        assert result.code == "USERNAME_TAKEN"

    async def test_unexpected_errors_become_internal_errors(
        self, memory_account_repository, monkeypatch
    ):
        """Test faults other than PersistenceError are not raised to the caller."""

        async def broken(*args):
            raise RuntimeError("exploded")

        monkeypatch.setattr(memory_account_repository, "username_exists", broken)
        monkeypatch.setattr(memory_account_repository, "resolve_rank", broken)
        service = AccountService(memory_account_repository, token_length=32)

        created = await service.create_account("alice", "alice@example.com", "pw")
        rank = await service.get_rank("token")

        for result in (created, rank):
            assert result.success is False
            assert result.code == "INTERNAL_ERROR"
            assert result.message == "Internal Server Error"
