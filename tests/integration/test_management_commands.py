"""
Integration tests for management commands.
"""
from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import CommandError, call_command
from django.utils import timezone

from accounts.infrastructure.models import AdminUser as AdminUserModel
from applications.infrastructure.models import Application as ApplicationModel
from licenses.infrastructure.models import LicenseKey as LicenseKeyModel


def _run(*args, **options):
    out = StringIO()
    call_command(*args, stdout=out, **options)
    return out.getvalue()


@pytest.mark.django_db
@pytest.mark.integration
class TestSeedKeyguardCommand:
    """Tests for seed_keyguard."""

    def test_creates_superadmin(self, settings):
        output = _run("seed_keyguard", password="s3cret")

        user = AdminUserModel.objects.get(email=settings.KEYGUARD["SUPER_ADMIN_EMAIL"])
        assert user.role == "superadmin"
        assert user.permissions is None
        assert user.check_password("s3cret")
        assert "Created superadmin" in output

    def test_is_idempotent(self):
        _run("seed_keyguard", password="s3cret")
        output = _run("seed_keyguard", password="other")

        assert AdminUserModel.objects.count() == 1
        assert "already exists" in output

    def test_demo_data(self):
        today = timezone.localdate()

        _run("seed_keyguard", with_demo_data=True)

        assert sorted(ApplicationModel.objects.values_list("name", flat=True)) == [
            "CodeCompiler X",
            "PhotoEditor Pro",
        ]
        statuses = {
            key.key_value: status
            for status in ("Active", "Expired", "Pending", "Deactivated")
            for key in LicenseKeyModel.objects.with_status(status, today)
        }
        assert statuses == {
            "KG-DEMO-ACTIVE-123": "Active",
            "KG-DEMO-EXPIRED-456": "Expired",
            "KG-DEMO-PENDING-789": "Pending",
            "KG-DEMO-DISABLED-000": "Deactivated",
        }
        editor = AdminUserModel.objects.get(email="editor@keyguard.local")
        assert editor.permissions["CREATE_KEYS"] is True
        assert editor.permissions["DELETE_KEYS"] is False

    def test_demo_data_skipped_when_applications_exist(self, db_application):
        output = _run("seed_keyguard", with_demo_data=True)

        assert LicenseKeyModel.objects.count() == 0
        assert "skipping demo data" in output


@pytest.mark.django_db
@pytest.mark.integration
class TestKeyStatusReportCommand:
    """Tests for key_status_report."""

    def test_counts_and_expiring_keys(self, db_license_key_factory):
        today = timezone.localdate()
        db_license_key_factory(key_value="KG-SOON", end_date=today + timedelta(days=5))
        db_license_key_factory(key_value="KG-LATER", end_date=today + timedelta(days=200))
        db_license_key_factory(key_value="KG-OFF", is_active=False)

        output = _run("key_status_report", days=7)

        assert f"License keys on {today.isoformat()}:" in output
        assert "Active       2" in output
        assert "Deactivated  1" in output
        assert "1 key(s) expire within 7 day(s):" in output
        assert "KG-SOON (PhotoEditor Pro)" in output
        assert "KG-LATER" not in output

    def test_nothing_expiring(self, db_license_key_factory):
        db_license_key_factory(end_date=timezone.localdate() + timedelta(days=200))

        output = _run("key_status_report")

        assert "No active keys expire within 30 day(s)" in output

    def test_filter_by_application(self, db_license_key_factory, application_repository):
        from asgiref.sync import async_to_sync

        from applications.domain.application import Application

        other = async_to_sync(application_repository.save)(Application.create(name="CodeCompiler X"))
        db_license_key_factory(key_value="KG-PHOTO")
        db_license_key_factory(key_value="KG-CODE", application_id=other.id)

        output = _run("key_status_report", application="CodeCompiler X", days=365)

        assert "KG-CODE" in output
        assert "KG-PHOTO" not in output

    def test_unknown_application(self, db):
        with pytest.raises(CommandError, match="Application not found: Nope"):
            _run("key_status_report", application="Nope")

    def test_negative_days(self, db):
        with pytest.raises(CommandError):
            _run("key_status_report", days=-1)
