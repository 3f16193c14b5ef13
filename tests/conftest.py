"""
Pytest configuration and shared fixtures.
"""

import asyncio
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from accounts.domain.account import Account
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import PersistenceError
from core.domain.value_objects import Rank
from licenses.application.services.license_engine import LicenseLifecycleEngine
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from licenses.ports.license_repository import LicenseRepository


class InMemoryLicenseRepository(LicenseRepository):
    """
    License store held in a dict.

    Every method yields to the event loop once before touching the dict,
    so concurrent operations interleave the way they would against a
    database. Each check-and-set runs without yielding in between.
    """

    def __init__(self):
        self.licenses = {}
        self.calls = []

    async def _enter(self, name):
        self.calls.append(name)
        await asyncio.sleep(0)

    async def find_by_key(self, key):
        await self._enter("find_by_key")
        return self.licenses.get(key)

    async def insert(self, license):
        await self._enter("insert")
        if license.key in self.licenses:
            raise PersistenceError("insert", ValueError("duplicate key"))
        self.licenses[license.key] = license
        return license

    async def set_owner_if_unclaimed(self, key, owner):
        await self._enter("set_owner_if_unclaimed")
        current = self.licenses.get(key)
        if current is None or current.owner is not None:
            return 0
        self.licenses[key] = replace(current, owner=owner)
        return 1

    async def set_expiry_and_address_if_unset(self, key, expiry, address):
        await self._enter("set_expiry_and_address_if_unset")
        current = self.licenses.get(key)
        if current is None or current.owner is None or current.expiry is not None:
            return 0
        self.licenses[key] = replace(current, expiry=expiry, bound_address=address)
        return 1

    async def set_suspended(self, key, value):
        await self._enter("set_suspended")
        current = self.licenses.get(key)
        if current is None:
            return 0
        self.licenses[key] = replace(current, suspended=value)
        return 1

    async def delete(self, key):
        await self._enter("delete")
        return 1 if self.licenses.pop(key, None) is not None else 0

    async def count(self):
        await self._enter("count")
        return len(self.licenses)

    async def key_exists(self, key):
        await self._enter("key_exists")
        return key in self.licenses

    def snapshot(self):
        """Copy of the stored records."""
        return dict(self.licenses)


class InMemoryAccountRepository(AccountRepository):
    """Identity store held in a dict keyed by token."""

    def __init__(self):
        self.accounts = {}
        self.rank_lookups = 0

    async def save(self, account):
        self.accounts[account.token] = account
        return account

    async def find_by_token(self, token):
        return self.accounts.get(token)

    async def resolve_rank(self, token):
        self.rank_lookups += 1
        account = self.accounts.get(token)
        return account.rank if account else None

    async def username_exists(self, username):
        return any(a.username == username for a in self.accounts.values())


class FailingLicenseRepository(InMemoryLicenseRepository):
    """License store whose every call fails like a dropped connection."""

    async def _enter(self, name):
        raise PersistenceError(name, ConnectionError("connection lost"))


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now=None):
        self.now = now or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


def make_account(rank=Rank.MEMBER, username=None):
    """Build an account entity with a fresh token."""
    return Account.create(
        username=username or f"user-{rank.name.lower()}",
        email=f"{(username or rank.name).lower()}@example.com",
        password_hash="md5$salt$hash",
        token_length=32,
        rank=rank,
    )


@pytest.fixture
def clock():
    """Fixture for a controllable clock."""
    return FakeClock()


@pytest.fixture
def memory_license_repository():
    """Fixture for an in-memory LicenseRepository."""
    return InMemoryLicenseRepository()


@pytest.fixture
def failing_license_repository():
    """Fixture for a LicenseRepository that always fails."""
    return FailingLicenseRepository()


@pytest.fixture
def memory_account_repository():
    """Fixture for an in-memory AccountRepository."""
    return InMemoryAccountRepository()


@pytest.fixture
def admin_account(memory_account_repository):
    """Fixture for an admin account stored in the in-memory identity store."""
    account = make_account(Rank.ADMIN, username="admin")
    memory_account_repository.accounts[account.token] = account
    return account


@pytest.fixture
def member_account(memory_account_repository):
    """Fixture for a member account stored in the in-memory identity store."""
    account = make_account(Rank.MEMBER, username="member")
    memory_account_repository.accounts[account.token] = account
    return account


@pytest.fixture
def moderator_account(memory_account_repository):
    """Fixture for a moderator account stored in the in-memory identity store."""
    account = make_account(Rank.MODERATOR, username="moderator")
    memory_account_repository.accounts[account.token] = account
    return account


@pytest.fixture
def engine(memory_license_repository, memory_account_repository, clock):
    """Fixture for a LicenseLifecycleEngine over in-memory stores."""
    return LicenseLifecycleEngine(
        license_repository=memory_license_repository,
        account_repository=memory_account_repository,
        clock=clock,
        key_length=16,
        max_key_attempts=10,
    )


@pytest.fixture
def sample_license(clock):
    """Fixture for an unclaimed License entity."""
    return License.create(key="SampleKey.0001", duration=30, created=clock())


@pytest.fixture
def license_repository():
    """Fixture for the Django LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def account_repository():
    """Fixture for the Django AccountRepository."""
    return DjangoAccountRepository()


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    return APIClient()
