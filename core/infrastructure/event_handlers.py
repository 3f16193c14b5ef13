"""
Event handlers for domain events.

These handlers process domain events for side effects
like audit logging and metrics.
"""

import logging

from accounts.domain.events import AccountCreated
from core import metrics
from core.domain.events import DomainEvent, EventHandler
from licenses.domain.events import (
    LicenseActivated,
    LicenseAuthenticated,
    LicenseClaimed,
    LicenseCreated,
    LicenseDeleted,
    LicenseSuspended,
)

logger = logging.getLogger(__name__)

audit_logger = logging.getLogger("audit")


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes one structured line per state-changing event.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        audit_logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra=event.to_dict(),
        )


class MetricsEventHandler(EventHandler):
    """Event handler that updates Prometheus counters."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for metrics.

        Args:
            event: Domain event
        """
        if isinstance(event, LicenseCreated):
            metrics.licenses_created_total.inc()
        elif isinstance(event, LicenseClaimed):
            metrics.licenses_claimed_total.inc()
        elif isinstance(event, LicenseActivated):
            metrics.licenses_activated_total.inc()
        elif isinstance(event, LicenseSuspended):
            metrics.licenses_suspended_total.inc()
        elif isinstance(event, LicenseDeleted):
            metrics.licenses_deleted_total.inc()
        elif isinstance(event, LicenseAuthenticated):
            metrics.license_authentications_total.labels(
                valid=str(event.valid).lower()
            ).inc()
        elif isinstance(event, AccountCreated):
            metrics.accounts_created_total.labels(rank=str(event.rank)).inc()


AUDITED_EVENTS = (
    LicenseCreated,
    LicenseClaimed,
    LicenseActivated,
    LicenseSuspended,
    LicenseDeleted,
    AccountCreated,
)


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    metrics_handler = MetricsEventHandler()

    for event_type in AUDITED_EVENTS:
        event_bus.subscribe(event_type, audit_handler)
        event_bus.subscribe(event_type, metrics_handler)

    # Authentication outcomes are counted but not audited
    event_bus.subscribe(LicenseAuthenticated, metrics_handler)

    logger.info("Event handlers registered")
