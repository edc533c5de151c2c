"""
Event handlers for domain events.

These handlers process domain events for side effects such as
structured logging and Prometheus counters.
"""

import logging

from accounts.domain.events import AccountRegistered, LoginFailed, LoginSucceeded
from core import metrics
from core.domain.events import DomainEvent, EventHandler
from licenses.domain.events import (
    LicenseChecked,
    LicenseExtended,
    LicenseInvalidated,
    LicenseIssued,
)

logger = logging.getLogger(__name__)


class EventLoggingHandler(EventHandler):
    """Logs every domain event it receives."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by logging it.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Domain event: %s",
            event.event_type,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )


class MetricsEventHandler(EventHandler):
    """Updates Prometheus counters from domain events."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by incrementing the matching counter.

        Args:
            event: Domain event
        """
        if isinstance(event, LicenseIssued):
            metrics.licenses_issued_total.inc()
        elif isinstance(event, LicenseExtended):
            metrics.licenses_extended_total.inc()
        elif isinstance(event, LicenseInvalidated):
            metrics.licenses_invalidated_total.inc()
        elif isinstance(event, LicenseChecked):
            metrics.license_checks_total.labels(result=event.result).inc()
        elif isinstance(event, AccountRegistered):
            metrics.accounts_registered_total.inc()
        elif isinstance(event, LoginSucceeded):
            metrics.logins_total.labels(result="success").inc()
        elif isinstance(event, LoginFailed):
            metrics.logins_total.labels(result="failure").inc()


LOGGED_EVENTS = (
    LicenseIssued,
    LicenseExtended,
    LicenseInvalidated,
    AccountRegistered,
)

COUNTED_EVENTS = (
    LicenseIssued,
    LicenseExtended,
    LicenseInvalidated,
    LicenseChecked,
    AccountRegistered,
    LoginSucceeded,
    LoginFailed,
)


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    logging_handler = EventLoggingHandler()
    metrics_handler = MetricsEventHandler()

    for event_type in LOGGED_EVENTS:
        event_bus.subscribe(event_type, logging_handler)
    for event_type in COUNTED_EVENTS:
        event_bus.subscribe(event_type, metrics_handler)

    logger.info("Event handlers registered")
