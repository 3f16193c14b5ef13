"""
App configuration for the core app.
"""

import logging
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

# Commands that never serve requests
SKIP_OBSERVABILITY_COMMANDS = {
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "test",
    "check",
    "createsuperuser",
    "create_account",
}


class CoreConfig(AppConfig):
    """App configuration for core."""

    name = "core"
    verbose_name = "License Server Core"

    def ready(self):
        """Register event handlers and set up tracing once apps are loaded."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()

        if not settings.OTEL_ENABLED:
            return
        if len(sys.argv) > 1 and sys.argv[1] in SKIP_OBSERVABILITY_COMMANDS:
            return

        from core.instrumentation import setup_opentelemetry

        logger.info("Setting up observability...")
        setup_opentelemetry()
