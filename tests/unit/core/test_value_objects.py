"""
Unit tests for value objects.
"""

import pytest

from core.domain.value_objects import Email, LicenseState, NetworkAddress, Rank


class TestEmail:
    """Tests for Email value object."""

    def test_valid_email(self):
        """Test creating valid email."""
        email = Email("test@example.com")
        assert str(email) == "test@example.com"

    def test_invalid_email(self):
        """Test invalid email raises error."""
        with pytest.raises(ValueError):
            Email("invalid-email")

    def test_email_equality(self):
        """Test email equality."""
        assert Email("test@example.com") == Email("test@example.com")
        assert Email("test@example.com") != Email("other@example.com")


class TestNetworkAddress:
    """Tests for NetworkAddress value object."""

    def test_valid_address(self):
        """Test creating a valid address."""
        assert str(NetworkAddress("1.2.3.4")) == "1.2.3.4"

    def test_ipv6_address(self):
        """Test IPv6 addresses are accepted."""
        assert str(NetworkAddress("2001:db8::1")) == "2001:db8::1"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_address(self, value):
        """Test empty address raises error."""
        with pytest.raises(ValueError):
            NetworkAddress(value)

    def test_address_too_long(self):
        """Test over-long address raises error."""
        with pytest.raises(ValueError):
            NetworkAddress("1" * 65)


class TestRank:
    """Tests for Rank enum."""

    def test_ordering(self):
        """Test ranks compare by tier."""
        assert Rank.MEMBER < Rank.MODERATOR < Rank.ADMIN
        assert Rank.ADMIN >= 3

    def test_str(self):
        """Test rank string form."""
        assert str(Rank.ADMIN) == "admin"
        assert str(Rank.MEMBER) == "member"

    def test_unknown_value(self):
        """Test unknown rank values are rejected."""
        with pytest.raises(ValueError):
            Rank(7)


def test_license_state_str():
    """Test license state string form."""
    assert str(LicenseState.ACTIVATED) == "activated"
