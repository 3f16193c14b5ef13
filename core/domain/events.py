"""
Domain event primitives.

Events are published after a state change has been stored. Subscribers
(audit logging, metrics) react to them; nothing on the write path
depends on their outcome.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type


class DomainEvent:
    """
    Base class for all domain events.

    ``event_type`` is the subclass name. Payload fields are set by
    subclasses as plain attributes and are included in ``to_dict``.
    """

    event_type = "DomainEvent"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.event_type = cls.__name__

    def __init__(self, aggregate_id: str, occurred_at: Optional[datetime] = None):
        """
        Initialize event metadata.

        Args:
            aggregate_id: Identifier of the record the event is about
            occurred_at: When the event occurred (defaults to now, UTC)
        """
        self.event_id = uuid.uuid4()
        self.aggregate_id = str(aggregate_id)
        self.occurred_at = occurred_at or datetime.now(timezone.utc)

    def payload(self) -> Dict[str, Any]:
        """Subclass attributes other than the event metadata."""
        metadata = {"event_id", "aggregate_id", "occurred_at"}
        return {name: value for name, value in vars(self).items() if name not in metadata}

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
            **self.payload(),
        }


class EventHandler(ABC):
    """Subscriber invoked for each published event of its types."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """React to ``event``."""


class EventBus(ABC):
    """Publish/subscribe seam between handlers and side effects."""

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to every handler subscribed to its type."""

    @abstractmethod
    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Register ``handler`` for events of exactly ``event_type``."""
