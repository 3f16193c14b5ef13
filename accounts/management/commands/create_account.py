"""
Django management command to create a caller account.

Used to bootstrap the first admin account, which the license
creation, suspension and deletion endpoints require.
"""

import asyncio
import getpass

from django.core.management.base import BaseCommand, CommandError

from accounts.application.services.account_service import AccountService
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from core.domain.value_objects import Rank

RANK_NAMES = {str(rank): rank for rank in Rank}


class Command(BaseCommand):
    """Command to create an account and print its token."""

    help = "Create an account (default rank: member) and print its token"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("--username", type=str, required=True, help="Account username")
        parser.add_argument("--email", type=str, required=True, help="Account email")
        parser.add_argument(
            "--password",
            type=str,
            default=None,
            help="Account password (prompted when omitted)",
        )
        parser.add_argument(
            "--rank",
            type=str,
            choices=sorted(RANK_NAMES),
            default=str(Rank.MEMBER),
            help="Account rank (default: member)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        password = options["password"] or getpass.getpass("Password: ")
        rank = RANK_NAMES[options["rank"]]

        service = AccountService(DjangoAccountRepository())
        result = asyncio.run(
            service.create_account(
                username=options["username"],
                email=options["email"],
                password=password,
                rank=rank,
            )
        )
        if not result.success:
            raise CommandError(f"{result.code}: {result.message}")

        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(f"Created {rank} account: {options['username']}")
        )
        self.stdout.write(result.data["token"])
