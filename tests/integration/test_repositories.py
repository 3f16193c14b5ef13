"""
Integration tests for repository implementations.
"""

import asyncio
from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.domain.account import Account
from core.domain.exceptions import PersistenceError, UsernameTakenError
from core.domain.value_objects import Rank
from licenses.domain.license import License


def _license(key="IntegrationKey.01", duration=30):
    return License.create(key=key, duration=duration, created=timezone.now())


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestDjangoLicenseRepository:
    """Integration tests for DjangoLicenseRepository."""

    @pytest.mark.asyncio
    async def test_insert_and_find(self, license_repository):
        """Test inserting and finding a license."""
        license = _license()

        saved = await license_repository.insert(license)
        found = await license_repository.find_by_key(license.key)

        assert saved == license
        assert found.key == license.key
        assert found.owner is None
        assert found.expiry is None
        assert found.suspended is False
        assert found.duration == 30

    @pytest.mark.asyncio
    async def test_find_not_found(self, license_repository):
        """Test finding a non-existent license."""
        assert await license_repository.find_by_key("missing") is None

    @pytest.mark.asyncio
    async def test_duplicate_key(self, license_repository):
        """Test a duplicate key surfaces as PersistenceError."""
        await license_repository.insert(_license())
        with pytest.raises(PersistenceError):
            await license_repository.insert(_license())

    @pytest.mark.asyncio
    async def test_set_owner_if_unclaimed(self, license_repository):
        """Test the owner is written once."""
        await license_repository.insert(_license())

        assert await license_repository.set_owner_if_unclaimed("IntegrationKey.01", "alice") == 1
        assert await license_repository.set_owner_if_unclaimed("IntegrationKey.01", "bob") == 0
        assert await license_repository.set_owner_if_unclaimed("missing", "bob") == 0

        found = await license_repository.find_by_key("IntegrationKey.01")
        assert found.owner == "alice"

    @pytest.mark.asyncio
    async def test_set_expiry_and_address_if_unset(self, license_repository):
        """Test activation needs a claim and happens once."""
        await license_repository.insert(_license())
        expiry = timezone.now() + timedelta(days=30)

        assert (
            await license_repository.set_expiry_and_address_if_unset(
                "IntegrationKey.01", expiry, "1.2.3.4"
            )
            == 0
        )

        await license_repository.set_owner_if_unclaimed("IntegrationKey.01", "alice")
        assert (
            await license_repository.set_expiry_and_address_if_unset(
                "IntegrationKey.01", expiry, "1.2.3.4"
            )
            == 1
        )
        assert (
            await license_repository.set_expiry_and_address_if_unset(
                "IntegrationKey.01", expiry + timedelta(days=1), "5.6.7.8"
            )
            == 0
        )

        found = await license_repository.find_by_key("IntegrationKey.01")
        assert found.bound_address == "1.2.3.4"
        assert found.expiry == expiry

    @pytest.mark.asyncio
    async def test_concurrent_owner_updates(self, license_repository):
        """Test racing conditional updates have one winner."""
        await license_repository.insert(_license())

        results = await asyncio.gather(
            *(
                license_repository.set_owner_if_unclaimed("IntegrationKey.01", f"owner-{i}")
                for i in range(4)
            )
        )

        assert sorted(results) == [0, 0, 0, 1]

    @pytest.mark.asyncio
    async def test_suspend_delete_count(self, license_repository):
        """Test suspend, delete, count and key_exists."""
        await license_repository.insert(_license("KeyA"))
        await license_repository.insert(_license("KeyB"))

        assert await license_repository.count() == 2
        assert await license_repository.set_suspended("KeyA", True) == 1
        assert await license_repository.set_suspended("KeyA", True) == 1
        assert (await license_repository.find_by_key("KeyA")).suspended is True
        assert await license_repository.set_suspended("missing", True) == 0

        assert await license_repository.delete("KeyA") == 1
        assert await license_repository.delete("KeyA") == 0
        assert await license_repository.key_exists("KeyA") is False
        assert await license_repository.key_exists("KeyB") is True
        assert await license_repository.count() == 1


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestDjangoAccountRepository:
    """Integration tests for DjangoAccountRepository."""

    @pytest.mark.asyncio
    async def test_save_and_resolve(self, account_repository):
        """Test saving an account and resolving its rank."""
        account = Account.create(
            username="alice",
            email="alice@example.com",
            password_hash="md5$salt$hash",
            token_length=32,
            rank=Rank.ADMIN,
        )

        await account_repository.save(account)

        assert await account_repository.resolve_rank(account.token) == 3
        assert await account_repository.resolve_rank("unknown") is None
        assert await account_repository.username_exists("alice") is True
        assert await account_repository.username_exists("bob") is False
        found = await account_repository.find_by_token(account.token)
        assert found.username == "alice"
        assert str(found.email) == "alice@example.com"

    @pytest.mark.asyncio
    async def test_save_duplicate_username(self, account_repository):
        """Test a second account with a taken username raises UsernameTakenError."""
        first = Account.create(
            username="alice",
            email="alice@example.com",
            password_hash="md5$salt$hash",
            token_length=32,
        )
        second = Account.create(
            username="alice",
            email="other@example.com",
            password_hash="md5$salt$hash",
            token_length=32,
        )
        await account_repository.save(first)

        with pytest.raises(UsernameTakenError):
            await account_repository.save(second)

        assert await account_repository.resolve_rank(second.token) is None
