"""
Integration tests for the Django repositories.
"""
from datetime import date, timedelta

import pytest
from asgiref.sync import async_to_sync
from django.db.models import ProtectedError
from django.utils import timezone

from applications.domain.application import Application
from applications.infrastructure.models import Application as ApplicationModel
from licenses.infrastructure.models import LicenseKey as LicenseKeyModel
from tests.conftest import SUPER_ADMIN_EMAIL, make_admin


@pytest.mark.django_db
@pytest.mark.integration
class TestDjangoUserRepository:
    """Tests for DjangoUserRepository."""

    def test_add_hashes_password(self, user_repository):
        from accounts.infrastructure.models import AdminUser as AdminUserModel

        user = async_to_sync(user_repository.add)(make_admin(email="ed@example.com"), "secret")

        stored = AdminUserModel.objects.get(id=user.id)
        assert stored.password != "secret"
        assert stored.check_password("secret")

    def test_check_credentials(self, user_repository, db_admin_factory):
        user = db_admin_factory(email="ed@example.com", password="secret")

        assert async_to_sync(user_repository.check_credentials)("ED@example.com", "secret").id == user.id
        assert async_to_sync(user_repository.check_credentials)("ed@example.com", "wrong") is None
        assert async_to_sync(user_repository.check_credentials)("ghost@example.com", "secret") is None

    def test_superadmin_round_trip(self, user_repository, db_superadmin):
        found = async_to_sync(user_repository.find_by_email)(SUPER_ADMIN_EMAIL)

        assert found.is_superadmin
        assert found.permissions is None

    def test_save_permissions(self, user_repository, db_admin_factory):
        user = db_admin_factory()

        async_to_sync(user_repository.save)(user.update_profile("Renamed", {"EDIT_KEYS": True}))
        found = async_to_sync(user_repository.find_by_id)(user.id)

        assert found.name == "Renamed"
        assert found.granted_permissions()[0].value == "EDIT_KEYS"

    def test_set_password(self, user_repository, db_admin_factory):
        user = db_admin_factory(email="ed@example.com")

        async_to_sync(user_repository.set_password)(user.id, "changed")

        assert async_to_sync(user_repository.check_credentials)("ed@example.com", "changed") is not None


@pytest.mark.django_db
@pytest.mark.integration
class TestDjangoApplicationRepository:
    """Tests for DjangoApplicationRepository."""

    def test_save_and_rename(self, application_repository):
        application = async_to_sync(application_repository.save)(Application.create(name="Beta"))
        async_to_sync(application_repository.save)(application.rename("Gamma"))

        assert async_to_sync(application_repository.find_by_id)(application.id).name == "Gamma"
        assert ApplicationModel.objects.count() == 1

    def test_list_ordered_by_name(self, application_repository):
        for name in ("Zeta", "Alpha", "Mid"):
            async_to_sync(application_repository.save)(Application.create(name=name))

        names = [a.name for a in async_to_sync(application_repository.list_all)()]

        assert names == ["Alpha", "Mid", "Zeta"]

    def test_referenced_application_is_protected(self, db_application, db_license_key_factory):
        db_license_key_factory()

        with pytest.raises(ProtectedError):
            ApplicationModel.objects.filter(id=db_application.id).delete()


@pytest.mark.django_db
@pytest.mark.integration
class TestDjangoLicenseKeyRepository:
    """Tests for DjangoLicenseKeyRepository."""

    def test_round_trip(self, license_key_repository, db_license_key_factory):
        key = db_license_key_factory(key_value="KG-ROUND-TRIP")

        found = async_to_sync(license_key_repository.find_by_key_value)("KG-ROUND-TRIP")

        assert found.id == key.id
        assert found.start_date == key.start_date
        assert found.is_active is True

    def test_save_updates_existing_row(self, license_key_repository, db_license_key_factory):
        key = db_license_key_factory()

        async_to_sync(license_key_repository.save)(key.toggled())

        assert LicenseKeyModel.objects.count() == 1
        assert async_to_sync(license_key_repository.find_by_id)(key.id).is_active is False

    def test_key_value_taken(self, license_key_repository, db_license_key_factory):
        key = db_license_key_factory(key_value="KG-TAKEN")

        assert async_to_sync(license_key_repository.key_value_taken)("KG-TAKEN") is True
        assert async_to_sync(license_key_repository.key_value_taken)("KG-TAKEN", exclude_id=key.id) is False
        assert async_to_sync(license_key_repository.key_value_taken)("KG-FREE") is False

    def test_exists_for_application(self, license_key_repository, db_application, db_license_key_factory):
        assert async_to_sync(license_key_repository.exists_for_application)(db_application.id) is False
        db_license_key_factory()
        assert async_to_sync(license_key_repository.exists_for_application)(db_application.id) is True

    def test_list_all_newest_first(self, license_key_repository, db_license_key_factory):
        older = db_license_key_factory(key_value="KG-OLDER")
        newer = db_license_key_factory(key_value="KG-NEWER")
        now = timezone.now()
        LicenseKeyModel.objects.filter(id=older.id).update(created_at=now - timedelta(hours=1))
        LicenseKeyModel.objects.filter(id=newer.id).update(created_at=now)

        keys = async_to_sync(license_key_repository.list_all)()

        assert [key.key_value for key in keys] == ["KG-NEWER", "KG-OLDER"]

    def test_delete(self, license_key_repository, db_license_key_factory):
        key = db_license_key_factory()

        async_to_sync(license_key_repository.delete)(key.id)

        assert async_to_sync(license_key_repository.find_by_id)(key.id) is None


@pytest.mark.django_db
@pytest.mark.integration
class TestLicenseKeyQuerySet:
    """Tests for the SQL status filters."""

    def test_with_status_matches_domain_status(self, db_license_key_factory):
        today = timezone.localdate()
        active = db_license_key_factory(key_value="KG-A")
        expired = db_license_key_factory(
            key_value="KG-E", start_date=today - timedelta(days=60), end_date=today - timedelta(days=1)
        )
        pending = db_license_key_factory(
            key_value="KG-P", start_date=today + timedelta(days=1), end_date=today + timedelta(days=60)
        )
        disabled = db_license_key_factory(key_value="KG-D", is_active=False)

        for status, key in (
            ("Active", active),
            ("Expired", expired),
            ("Pending", pending),
            ("Deactivated", disabled),
        ):
            ids = list(LicenseKeyModel.objects.with_status(status, today).values_list("id", flat=True))
            assert ids == [key.id]
            assert key.status(today).value == status

    def test_unknown_status_is_empty(self, db_license_key_factory):
        db_license_key_factory()
        assert not LicenseKeyModel.objects.with_status("Lost", date.today()).exists()

    def test_expiring_within(self, db_license_key_factory):
        today = timezone.localdate()
        soon = db_license_key_factory(key_value="KG-SOON", end_date=today + timedelta(days=3))
        db_license_key_factory(key_value="KG-LATER", end_date=today + timedelta(days=90))

        ids = list(LicenseKeyModel.objects.expiring_within(today, 7).values_list("id", flat=True))

        assert ids == [soon.id]
