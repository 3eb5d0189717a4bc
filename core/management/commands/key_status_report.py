"""
Django management command to report license key status.

Prints key counts by derived status and the keys expiring soon.
Meant to be run periodically (e.g., via cron).
"""

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from applications.infrastructure.models import Application as ApplicationModel
from core.domain.value_objects import KeyStatus
from licenses.infrastructure.models import LicenseKey as LicenseKeyModel


class Command(BaseCommand):
    """Command to report license key status."""

    help = "Report license key counts by status and keys expiring soon"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--days",
            type=int,
            default=30,
            help="Report active keys expiring within this many days (default: 30)",
        )
        parser.add_argument(
            "--application",
            type=str,
            default=None,
            help="Restrict the report to one application (name)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if options["days"] < 0:
            raise CommandError("--days must not be negative")

        today = timezone.localdate()
        # pylint: disable=no-member
        queryset = LicenseKeyModel.objects.select_related("application")
        if options["application"]:
            application = ApplicationModel.objects.filter(name=options["application"]).first()
            if application is None:
                raise CommandError(f"Application not found: {options['application']}")
            queryset = queryset.filter(application=application)

        self.stdout.write(f"License keys on {today.isoformat()}:")
        for status in KeyStatus:
            count = queryset.with_status(status.value, today).count()
            self.stdout.write(f"  {status.value:<12} {count}")

        expiring = queryset.expiring_within(today, options["days"]).order_by("end_date")
        if not expiring:
            # pylint: disable=no-member
            self.stdout.write(
                self.style.SUCCESS(f"No active keys expire within {options['days']} day(s)")
            )
            return

        # pylint: disable=no-member
        self.stdout.write(
            self.style.WARNING(f"{len(expiring)} key(s) expire within {options['days']} day(s):")
        )
        for key in expiring:
            self.stdout.write(
                f"  - {key.key_value} ({key.application.name}) "
                f"{key.user_name} <{key.user_contact}> ends {key.end_date.isoformat()}"
            )
