"""
Database utilities for store adapters.

Every ORM call made by a repository goes through ``run_in_store`` so that
it runs off the event loop, carries a bounded timeout, and surfaces
database faults as ``PersistenceError``.
"""

import asyncio
import logging
from typing import Any, Callable

from asgiref.sync import sync_to_async
from django.conf import settings
from django.db import DatabaseError

from core.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_STORE_TIMEOUT_SECONDS = 5.0


def store_timeout() -> float:
    """Configured timeout for a single store call, in seconds."""
    return float(getattr(settings, "STORE_TIMEOUT_SECONDS", DEFAULT_STORE_TIMEOUT_SECONDS))


async def run_in_store(operation: str, func: Callable[..., Any], *args, **kwargs) -> Any:
    """
    Run a synchronous ORM callable with a timeout.

    Args:
        operation: Name used in logs and in the raised error
        func: Callable performing the database work
        *args: Positional arguments for func
        **kwargs: Keyword arguments for func

    Returns:
        Whatever func returns

    Raises:
        PersistenceError: On timeout or any django.db.DatabaseError
    """
    timeout = store_timeout()
    # On timeout wait_for stops waiting but cannot interrupt the ORM call, which keeps
    # the thread-sensitive executor busy until it returns. The PostgreSQL
    # statement_timeout (LicenseServer.settings.base) is what ends the query itself.
    try:
        return await asyncio.wait_for(sync_to_async(func)(*args, **kwargs), timeout=timeout)
    except asyncio.TimeoutError as exc:
        logger.error("Store operation %s timed out after %ss", operation, timeout)
        raise PersistenceError(operation, exc) from exc
    except DatabaseError as exc:
        logger.error("Store operation %s failed: %s", operation, exc)
        raise PersistenceError(operation, exc) from exc
