"""
Model registration for the accounts app.

Django imports ``<app>.models`` while populating the app registry.
"""
from accounts.infrastructure.models import Account  # noqa: F401
