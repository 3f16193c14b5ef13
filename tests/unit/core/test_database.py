"""
Unit tests for the store call wrapper.
"""

import time

import pytest
from django.db import OperationalError

from core.domain.exceptions import PersistenceError
from core.infrastructure.database import run_in_store


@pytest.mark.asyncio
async def test_returns_result():
    """Test the wrapped callable's result is returned."""
    assert await run_in_store("add", lambda a, b: a + b, 2, b=3) == 5


@pytest.mark.asyncio
async def test_database_error_becomes_persistence_error():
    """Test database faults are wrapped."""

    def fail():
        raise OperationalError("connection lost")

    with pytest.raises(PersistenceError):
        await run_in_store("fail", fail)


@pytest.mark.asyncio
async def test_timeout_becomes_persistence_error(settings):
    """Test a call outliving STORE_TIMEOUT_SECONDS is reported as a store fault."""
    settings.STORE_TIMEOUT_SECONDS = 0.05

    with pytest.raises(PersistenceError):
        await run_in_store("slow", time.sleep, 0.3)
