"""
App configuration for KeyGuard service.
"""
import logging
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class KeyGuardServiceConfig(AppConfig):
    """App configuration for KeyGuardService."""

    name = "KeyGuardService"
    verbose_name = "KeyGuard"

    def ready(self):
        """Called when Django starts."""
        self.register_event_handlers()

        # Exporters are not needed for schema changes
        if len(sys.argv) > 1 and sys.argv[1] in ["migrate", "makemigrations", "collectstatic"]:
            return
        if settings.OTEL_ENABLED:
            self.setup_observability()

    def setup_observability(self):
        """Setup tracing exporters after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Failed to setup OpenTelemetry: %s", e)

    def register_event_handlers(self):
        """Subscribe event handlers to the event bus."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()
