"""
Integration tests for the create_account management command.
"""

from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from accounts.infrastructure.models import Account


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestCreateAccountCommand:
    """Integration tests for create_account."""

    def test_creates_admin_and_prints_token(self):
        """Test the command stores the account and prints its token."""
        out = StringIO()

        call_command(
            "create_account",
            "--username=root",
            "--email=root@example.com",
            "--password=s3cret",
            "--rank=admin",
            stdout=out,
        )

        token = out.getvalue().strip().splitlines()[-1]
        # pylint: disable=no-member
        stored = Account.objects.get(username="root")
        assert stored.rank == 3
        assert stored.token == token

    def test_duplicate_username_fails(self):
        """Test a taken username raises CommandError."""
        args = ["--username=root", "--email=root@example.com", "--password=s3cret"]
        call_command("create_account", *args, stdout=StringIO())

        with pytest.raises(CommandError, match="USERNAME_TAKEN"):
            call_command("create_account", *args, stdout=StringIO())
