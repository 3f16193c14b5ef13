"""
Unit tests for License domain entity.
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.domain.exceptions import LicenseAlreadyClaimedError
from core.domain.value_objects import LicenseState
from licenses.domain.license import MAX_LICENSE_DURATION_DAYS, License

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _activated(duration=30, address="1.2.3.4", at=NOW):
    return License.create(key="K", duration=duration, created=at).claim("alice").activate(address, at)


class TestLicense:
    """Tests for License entity."""

    def test_create_license(self):
        """Test creating a new license."""
        license = License.create(key="Abc.123", duration=30, created=NOW)

        assert license.key == "Abc.123"
        assert license.owner is None
        assert license.created == NOW
        assert license.duration == 30
        assert license.expiry is None
        assert license.bound_address is None
        assert license.suspended is False
        assert license.state == LicenseState.UNCLAIMED

    def test_create_defaults_created_to_now(self):
        """Test created defaults to the current UTC time."""
        license = License.create(key="K", duration=1)
        assert license.created.tzinfo is not None

    @pytest.mark.parametrize(
        "duration", [-1, 1.5, True, "30", None, MAX_LICENSE_DURATION_DAYS + 1]
    )
    def test_invalid_duration(self, duration):
        """Test invalid durations raise ValueError."""
        with pytest.raises(ValueError):
            License.create(key="K", duration=duration)

    def test_empty_key(self):
        """Test empty key raises ValueError."""
        with pytest.raises(ValueError):
            License.create(key="  ", duration=1)

    def test_expiry_without_address_is_rejected(self):
        """Test expiry and bound address must be set together."""
        with pytest.raises(ValueError):
            License(
                key="K",
                owner="alice",
                created=NOW,
                duration=1,
                expiry=NOW,
                bound_address=None,
                suspended=False,
            )

    def test_claim(self):
        """Test claiming sets the owner once."""
        claimed = License.create(key="K", duration=1).claim("alice")

        assert claimed.owner == "alice"
        assert claimed.state == LicenseState.CLAIMED
        with pytest.raises(LicenseAlreadyClaimedError):
            claimed.claim("bob")

    def test_claim_empty_owner(self):
        """Test claiming with an empty owner raises ValueError."""
        with pytest.raises(ValueError):
            License.create(key="K", duration=1).claim(" ")

    def test_activate(self):
        """Test activation binds expiry and address together."""
        license = _activated(duration=30)

        assert license.state == LicenseState.ACTIVATED
        assert license.bound_address == "1.2.3.4"
        assert license.expiry == NOW + timedelta(days=30)

    def test_activate_unclaimed(self):
        """Test unclaimed licenses cannot be activated."""
        with pytest.raises(ValueError):
            License.create(key="K", duration=1).activate("1.2.3.4", NOW)

    def test_activate_twice(self):
        """Test activation happens once."""
        with pytest.raises(ValueError):
            _activated().activate("5.6.7.8", NOW)

    def test_is_active(self):
        """Test is_active within validity."""
        license = _activated(duration=30)

        assert license.is_active(NOW) is True
        assert license.is_active(NOW + timedelta(days=30)) is True
        assert license.is_active(NOW + timedelta(days=30, seconds=1)) is False

    def test_zero_duration_is_active_only_at_activation(self):
        """Test a zero-day license is active at its activation instant only."""
        license = _activated(duration=0)

        assert license.is_active(NOW) is True
        assert license.is_active(NOW + timedelta(microseconds=1)) is False

    def test_unactivated_license_is_not_active(self):
        """Test claimed but unactivated licenses are not active."""
        license = License.create(key="K", duration=30).claim("alice")
        assert license.is_active(NOW) is False

    def test_suspend(self):
        """Test suspension makes the license inactive."""
        suspended = _activated().suspend()

        assert suspended.suspended is True
        assert suspended.is_active(NOW) is False

    def test_authenticates(self):
        """Test authentication requires the bound address and an active license."""
        license = _activated()

        assert license.authenticates("1.2.3.4", NOW) is True
        assert license.authenticates("5.6.7.8", NOW) is False
        assert license.suspend().authenticates("1.2.3.4", NOW) is False

    def test_immutability(self):
        """Test that License is immutable."""
        license = License.create(key="K", duration=1)
        with pytest.raises(Exception):
            license.owner = "mallory"
