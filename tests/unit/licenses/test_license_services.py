"""
Unit tests for License domain services.
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from core.domain.exceptions import (
    InvalidConfigurationError,
    LicenseAlreadyClaimedError,
    LicenseNotFoundError,
)
from core.domain.keys import MAX_KEY_LENGTH
from licenses.domain import services
from licenses.domain.license import License
from licenses.domain.services import (
    ADDRESS_MISMATCH_REASON,
    EXPIRED_REASON,
    SUSPENDED_REASON,
    UNCLAIMED_REASON,
    LicenseKeyGenerator,
    LicenseLifecycleManager,
    LicenseValidator,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
class TestLicenseKeyGenerator:
    """Tests for LicenseKeyGenerator service."""

    async def test_generates_key_of_length(self, memory_license_repository):
        """Test a fresh key is returned."""
        key = await LicenseKeyGenerator.generate_unique(memory_license_repository, length=20)
        assert len(key) == 20

    async def test_retries_on_collision(self, memory_license_repository, monkeypatch):
        """Test colliding candidates are regenerated."""
        await memory_license_repository.insert(License.create(key="taken", duration=1))
        candidates = iter(["taken", "taken", "fresh"])
        monkeypatch.setattr(services, "generate_key", lambda length: next(candidates))

        key = await LicenseKeyGenerator.generate_unique(memory_license_repository, length=5)

        assert key == "fresh"
        assert memory_license_repository.calls.count("key_exists") == 3

    async def test_gives_up_after_max_attempts(self, memory_license_repository, monkeypatch):
        """Test exhausting attempts raises InvalidConfigurationError."""
        await memory_license_repository.insert(License.create(key="taken", duration=1))
        monkeypatch.setattr(services, "generate_key", lambda length: "taken")

        with pytest.raises(InvalidConfigurationError):
            await LicenseKeyGenerator.generate_unique(
                memory_license_repository, length=5, max_attempts=3
            )
        assert memory_license_repository.calls.count("key_exists") == 3

    async def test_saturated_keyspace(self, memory_license_repository):
        """Test a store holding half the keyspace refuses to generate."""
        # Length 1 gives 63 keys; 32 stored is past the limit.
        for i in range(32):
            await memory_license_repository.insert(License.create(key=f"k{i}", duration=1))

        with pytest.raises(InvalidConfigurationError):
            await LicenseKeyGenerator.generate_unique(memory_license_repository, length=1)

    async def test_long_keys(self, memory_license_repository):
        """Test lengths whose keyspace exceeds float range still generate."""
        key = await LicenseKeyGenerator.generate_unique(memory_license_repository, length=200)
        assert len(key) == 200

    @pytest.mark.parametrize("length", [0, -5, MAX_KEY_LENGTH + 1])
    async def test_bad_length(self, memory_license_repository, length):
        """Test bad key lengths raise InvalidConfigurationError."""
        with pytest.raises(InvalidConfigurationError):
            await LicenseKeyGenerator.generate_unique(memory_license_repository, length=length)

    async def test_bad_attempts(self, memory_license_repository):
        """Test zero attempts raises InvalidConfigurationError."""
        with pytest.raises(InvalidConfigurationError):
            await LicenseKeyGenerator.generate_unique(
                memory_license_repository, length=8, max_attempts=0
            )


class TestLicenseValidator:
    """Tests for LicenseValidator service."""

    def _activated(self, duration=30):
        return License.create(key="K", duration=duration).claim("alice").activate("1.2.3.4", NOW)

    def test_valid(self):
        """Test a matching address on an active license is valid."""
        assert LicenseValidator.validate_authentication(
            self._activated(), "1.2.3.4", NOW
        ) == (True, None)

    def test_unclaimed(self):
        """Test unclaimed licenses are invalid."""
        license = License.create(key="K", duration=30)
        assert LicenseValidator.validate_authentication(license, "1.2.3.4", NOW) == (
            False,
            UNCLAIMED_REASON,
        )

    def test_suspended(self):
        """Test suspended licenses are invalid."""
        license = self._activated().suspend()
        assert LicenseValidator.validate_authentication(license, "1.2.3.4", NOW) == (
            False,
            SUSPENDED_REASON,
        )

    def test_expired(self):
        """Test expired licenses are invalid."""
        later = NOW + timedelta(days=31)
        assert LicenseValidator.validate_authentication(self._activated(), "1.2.3.4", later) == (
            False,
            EXPIRED_REASON,
        )

    def test_address_mismatch(self):
        """Test other addresses are invalid."""
        assert LicenseValidator.validate_authentication(self._activated(), "5.6.7.8", NOW) == (
            False,
            ADDRESS_MISMATCH_REASON,
        )


@pytest.mark.asyncio
class TestLicenseLifecycleManager:
    """Tests for LicenseLifecycleManager service."""

    async def test_claim(self, memory_license_repository, sample_license):
        """Test claiming stores the owner."""
        await memory_license_repository.insert(sample_license)

        claimed = await LicenseLifecycleManager.claim_license(
            sample_license, "alice", memory_license_repository
        )

        assert claimed.owner == "alice"
        assert memory_license_repository.licenses[sample_license.key].owner == "alice"

    async def test_claim_race_has_one_winner(self, memory_license_repository, sample_license):
        """Test two claims from the same stale read produce one winner."""
        await memory_license_repository.insert(sample_license)

        results = await asyncio.gather(
            LicenseLifecycleManager.claim_license(sample_license, "alice", memory_license_repository),
            LicenseLifecycleManager.claim_license(sample_license, "bob", memory_license_repository),
            return_exceptions=True,
        )

        winners = [r for r in results if isinstance(r, License)]
        losers = [r for r in results if isinstance(r, LicenseAlreadyClaimedError)]
        assert len(winners) == 1
        assert len(losers) == 1
        assert memory_license_repository.licenses[sample_license.key].owner == winners[0].owner

    async def test_claim_deleted_meanwhile(self, memory_license_repository, sample_license):
        """Test a claim against a vanished record raises LicenseNotFoundError."""
        with pytest.raises(LicenseNotFoundError):
            await LicenseLifecycleManager.claim_license(
                sample_license, "alice", memory_license_repository
            )

    async def test_activate_if_first_use(self, memory_license_repository, sample_license):
        """Test the first activation wins and binds the address."""
        await memory_license_repository.insert(sample_license.claim("alice"))
        claimed = await memory_license_repository.find_by_key(sample_license.key)

        current, won = await LicenseLifecycleManager.activate_if_first_use(
            claimed, "1.2.3.4", NOW, memory_license_repository
        )

        assert won is True
        assert current.bound_address == "1.2.3.4"
        assert current.expiry == NOW + timedelta(days=30)

    async def test_activation_loser_sees_winner_binding(
        self, memory_license_repository, sample_license
    ):
        """Test a losing activation returns the winner's binding."""
        await memory_license_repository.insert(sample_license.claim("alice"))
        claimed = await memory_license_repository.find_by_key(sample_license.key)

        first, second = await asyncio.gather(
            LicenseLifecycleManager.activate_if_first_use(
                claimed, "1.2.3.4", NOW, memory_license_repository
            ),
            LicenseLifecycleManager.activate_if_first_use(
                claimed, "5.6.7.8", NOW, memory_license_repository
            ),
        )

        assert [first[1], second[1]].count(True) == 1
        assert first[0].bound_address == second[0].bound_address
        assert first[0].expiry == second[0].expiry

    async def test_suspend_missing(self, memory_license_repository, sample_license):
        """Test suspending a vanished record raises LicenseNotFoundError."""
        with pytest.raises(LicenseNotFoundError):
            await LicenseLifecycleManager.suspend_license(sample_license, memory_license_repository)
