"""
Event handlers for domain events.

These handlers process domain events for side effects such as
structured logging and Prometheus counters.
"""

import logging

from core import metrics
from core.domain.events import DomainEvent, EventHandler
from licenses.domain.events import (
    LicenseKeyCreated,
    LicenseKeyDeleted,
    LicenseKeyStatusToggled,
    LicenseKeyUpdated,
    LicenseKeyValidated,
)

logger = logging.getLogger(__name__)

LICENSE_KEY_EVENTS = (
    LicenseKeyCreated,
    LicenseKeyUpdated,
    LicenseKeyDeleted,
    LicenseKeyStatusToggled,
    LicenseKeyValidated,
)


class EventLogHandler(EventHandler):
    """Writes every domain event to the log as a structured record."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by logging it.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Domain event: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )


class LicenseKeyMetricsHandler(EventHandler):
    """Increments the license key Prometheus counters."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by recording metrics.

        Args:
            event: License key domain event
        """
        if isinstance(event, LicenseKeyCreated):
            metrics.license_keys_created_total.labels(
                application_id=str(event.application_id)
            ).inc()
        elif isinstance(event, LicenseKeyUpdated):
            metrics.license_keys_updated_total.inc()
        elif isinstance(event, LicenseKeyDeleted):
            metrics.license_keys_deleted_total.inc()
        elif isinstance(event, LicenseKeyStatusToggled):
            metrics.license_key_status_toggles_total.labels(
                is_active=str(event.is_active).lower()
            ).inc()
        elif isinstance(event, LicenseKeyValidated):
            metrics.license_key_validations_total.labels(result=event.result).inc()


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    log_handler = EventLogHandler()
    metrics_handler = LicenseKeyMetricsHandler()

    for event_type in LICENSE_KEY_EVENTS:
        event_bus.subscribe(event_type, log_handler)
        event_bus.subscribe(event_type, metrics_handler)

    logger.info("Event handlers registered")
