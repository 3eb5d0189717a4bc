"""
Django management command to seed a KeyGuard installation.

Creates:
- The superadmin account (email from settings)
- Optionally, demo applications, license keys and an admin user
"""

import logging
from datetime import timedelta

from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from accounts.domain.user import AdminUser
from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from applications.domain.application import Application
from applications.infrastructure.repositories.django_application_repository import (
    DjangoApplicationRepository,
)
from core.domain.value_objects import Permission
from licenses.domain.license_key import LicenseKey
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)

logger = logging.getLogger(__name__)

DEMO_APPLICATIONS = ["PhotoEditor Pro", "CodeCompiler X"]


class Command(BaseCommand):
    """Command to seed the superadmin and demo data."""

    help = "Create the superadmin account and, optionally, demo data"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--password",
            type=str,
            default=None,
            help="Superadmin password (default: the configured reset password)",
        )
        parser.add_argument(
            "--name",
            type=str,
            default="Super Admin",
            help="Superadmin display name (default: Super Admin)",
        )
        parser.add_argument(
            "--with-demo-data",
            action="store_true",
            help="Also create demo applications, keys and an admin user",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        self.user_repository = DjangoUserRepository()
        self.application_repository = DjangoApplicationRepository()
        self.license_key_repository = DjangoLicenseKeyRepository()

        self.create_superadmin(options["name"], options["password"])
        if options["with_demo_data"]:
            self.create_demo_data()

    def create_superadmin(self, name, password):
        """Create the superadmin unless it already exists."""
        email = settings.KEYGUARD["SUPER_ADMIN_EMAIL"]
        if async_to_sync(self.user_repository.find_by_email)(email):
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Superadmin {email} already exists"))
            return

        if not password:
            password = settings.KEYGUARD["DEFAULT_RESET_PASSWORD"]
            # pylint: disable=no-member
            self.stdout.write(
                self.style.WARNING("No --password given; using the default reset password")
            )

        user = AdminUser.create(email=email, name=name, super_admin_email=email)
        async_to_sync(self.user_repository.add)(user, password)
        logger.info("Seeded superadmin %s", user.id)
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created superadmin {email}"))

    def create_demo_data(self):
        """Create demo applications, one key per status and a limited admin."""
        existing = async_to_sync(self.application_repository.list_all)()
        if existing:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING("Applications exist; skipping demo data"))
            return

        applications = [
            async_to_sync(self.application_repository.save)(Application.create(name=name))
            for name in DEMO_APPLICATIONS
        ]

        today = timezone.localdate()
        photo_editor = applications[0]
        demo_keys = [
            LicenseKey.create(
                application_id=photo_editor.id,
                user_name="Alice Johnson",
                user_contact="alice@example.com",
                start_date=today - timedelta(days=30),
                end_date=today + timedelta(days=335),
                key_value="KG-DEMO-ACTIVE-123",
            ),
            LicenseKey.create(
                application_id=photo_editor.id,
                user_name="Bob Smith",
                user_contact="+1-555-0100",
                start_date=today - timedelta(days=400),
                end_date=today - timedelta(days=35),
                key_value="KG-DEMO-EXPIRED-456",
            ),
            LicenseKey.create(
                application_id=applications[1].id,
                user_name="Carol White",
                user_contact="carol@example.com",
                start_date=today + timedelta(days=7),
                end_date=today + timedelta(days=372),
                key_value="KG-DEMO-PENDING-789",
            ),
            LicenseKey.create(
                application_id=applications[1].id,
                user_name="Dan Brown",
                user_contact="dan@example.com",
                start_date=today - timedelta(days=10),
                end_date=today + timedelta(days=355),
                key_value="KG-DEMO-DISABLED-000",
                is_active=False,
            ),
        ]
        for key in demo_keys:
            async_to_sync(self.license_key_repository.save)(key)

        super_admin_email = settings.KEYGUARD["SUPER_ADMIN_EMAIL"]
        editor = AdminUser.create(
            email="editor@keyguard.local",
            name="Key Editor",
            super_admin_email=super_admin_email,
            permissions={
                Permission.CREATE_KEYS.value: True,
                Permission.EDIT_KEYS.value: True,
                Permission.TOGGLE_KEY_STATUS.value: True,
            },
        )
        if not async_to_sync(self.user_repository.find_by_email)(editor.email.value):
            async_to_sync(self.user_repository.add)(
                editor, settings.KEYGUARD["DEFAULT_RESET_PASSWORD"]
            )

        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(
                f"Created {len(applications)} application(s), {len(demo_keys)} key(s) "
                f"and admin {editor.email}"
            )
        )
