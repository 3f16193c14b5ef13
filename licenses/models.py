"""
Model registration for the licenses app.

Django imports ``<app>.models`` while populating the app registry.
"""
from licenses.infrastructure.models import License  # noqa: F401
