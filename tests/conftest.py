"""
Pytest configuration and shared fixtures.
"""

import uuid
from datetime import date, timedelta

import pytest
from asgiref.sync import async_to_sync
from django.core.cache import cache

from accounts.domain.user import AdminUser
from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from accounts.ports.user_repository import UserRepository
from applications.domain.application import Application
from applications.infrastructure.repositories.django_application_repository import (
    DjangoApplicationRepository,
)
from applications.ports.application_repository import ApplicationRepository
from core.domain.value_objects import Permission
from licenses.domain.license_key import LicenseKey
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)
from licenses.ports.license_key_repository import LicenseKeyRepository

SUPER_ADMIN_EMAIL = "root@keyguard.test"
TODAY = date(2024, 6, 15)


class InMemoryUserRepository(UserRepository):
    """UserRepository keeping users and plain passwords in dictionaries."""

    def __init__(self):
        self.users = {}
        self.passwords = {}

    async def add(self, user, raw_password):
        self.users[user.id] = user
        self.passwords[user.id] = raw_password
        return user

    async def save(self, user):
        self.users[user.id] = user
        return user

    async def find_by_id(self, user_id):
        return self.users.get(user_id)

    async def find_by_email(self, email):
        email = email.strip().lower()
        return next((u for u in self.users.values() if u.email.value == email), None)

    async def list_all(self):
        return sorted(self.users.values(), key=lambda u: u.name)

    async def delete(self, user_id):
        self.users.pop(user_id, None)
        self.passwords.pop(user_id, None)

    async def set_password(self, user_id, raw_password):
        self.passwords[user_id] = raw_password

    async def check_credentials(self, email, raw_password):
        user = await self.find_by_email(email)
        if user is None or self.passwords.get(user.id) != raw_password:
            return None
        return user


class InMemoryApplicationRepository(ApplicationRepository):
    """ApplicationRepository backed by a dictionary."""

    def __init__(self):
        self.applications = {}

    async def save(self, application):
        self.applications[application.id] = application
        return application

    async def find_by_id(self, application_id):
        return self.applications.get(application_id)

    async def list_all(self):
        return sorted(self.applications.values(), key=lambda a: a.name)

    async def delete(self, application_id):
        self.applications.pop(application_id, None)


class InMemoryLicenseKeyRepository(LicenseKeyRepository):
    """LicenseKeyRepository backed by a dictionary."""

    def __init__(self):
        self.keys = {}

    async def save(self, license_key):
        self.keys[license_key.id] = license_key
        return license_key

    async def find_by_id(self, license_key_id):
        return self.keys.get(license_key_id)

    async def find_by_key_value(self, key_value):
        return next((k for k in self.keys.values() if k.key_value == key_value), None)

    async def list_all(self):
        return sorted(self.keys.values(), key=lambda k: k.created_at, reverse=True)

    async def delete(self, license_key_id):
        self.keys.pop(license_key_id, None)

    async def key_value_taken(self, key_value, exclude_id=None):
        return any(
            k.key_value == key_value and k.id != exclude_id for k in self.keys.values()
        )

    async def exists_for_application(self, application_id):
        return any(k.application_id == application_id for k in self.keys.values())


class FakeCache:
    """CachePort fake recording what was stored."""

    def __init__(self):
        self.values = {}

    async def get(self, key):
        return self.values.get(key)

    async def set(self, key, value, timeout=None):
        self.values[key] = value

    async def delete_many(self, keys):
        for key in keys:
            self.values.pop(key, None)


@pytest.fixture(autouse=True)
def clear_cache():
    """Start every test with an empty Django cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def today():
    """Fixed evaluation day."""
    return TODAY


@pytest.fixture
def clock():
    """Clock returning the fixed evaluation day."""
    return lambda: TODAY


@pytest.fixture
def fake_cache():
    """Fixture for an in-memory CachePort."""
    return FakeCache()


@pytest.fixture
def memory_user_repository():
    """Fixture for an in-memory UserRepository."""
    return InMemoryUserRepository()


@pytest.fixture
def memory_application_repository():
    """Fixture for an in-memory ApplicationRepository."""
    return InMemoryApplicationRepository()


@pytest.fixture
def memory_license_key_repository():
    """Fixture for an in-memory LicenseKeyRepository."""
    return InMemoryLicenseKeyRepository()


@pytest.fixture
def user_repository():
    """Fixture for UserRepository."""
    return DjangoUserRepository()


@pytest.fixture
def application_repository():
    """Fixture for ApplicationRepository."""
    return DjangoApplicationRepository()


@pytest.fixture
def license_key_repository():
    """Fixture for LicenseKeyRepository."""
    return DjangoLicenseKeyRepository()


def make_admin(*permissions, name="Test Admin", email=None):
    """Build an admin entity holding the given permissions."""
    return AdminUser.create(
        email=email or f"admin-{uuid.uuid4().hex[:8]}@example.com",
        name=name,
        super_admin_email=SUPER_ADMIN_EMAIL,
        permissions={permission.value: True for permission in permissions},
    )


@pytest.fixture
def superadmin():
    """Fixture for the superadmin entity."""
    return AdminUser.create(email=SUPER_ADMIN_EMAIL, name="Root", super_admin_email=SUPER_ADMIN_EMAIL)


@pytest.fixture
def plain_admin():
    """Fixture for an admin without permissions."""
    return make_admin()


@pytest.fixture
def key_manager():
    """Fixture for an admin holding every key permission."""
    return make_admin(
        Permission.CREATE_KEYS,
        Permission.EDIT_KEYS,
        Permission.DELETE_KEYS,
        Permission.TOGGLE_KEY_STATUS,
        name="Key Manager",
    )


@pytest.fixture
def sample_application():
    """Fixture for a sample Application entity."""
    return Application.create(name="PhotoEditor Pro")


@pytest.fixture
def sample_license_key(sample_application):
    """Fixture for a sample LicenseKey entity valid through 2024."""
    return LicenseKey.create(
        application_id=sample_application.id,
        user_name="Alice Johnson",
        user_contact="alice@example.com",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        key_value="KG-TEST-0001",
    )


@pytest.fixture
def db_superadmin(db, user_repository):
    """Fixture for the superadmin saved in database."""
    user = AdminUser.create(email=SUPER_ADMIN_EMAIL, name="Root", super_admin_email=SUPER_ADMIN_EMAIL)
    return async_to_sync(user_repository.add)(user, "root-password")


@pytest.fixture
def db_admin_factory(db, user_repository):
    """Factory saving admins with the given permissions in database."""

    def create(*permissions, name="Test Admin", email=None, password="secret"):
        user = make_admin(*permissions, name=name, email=email)
        return async_to_sync(user_repository.add)(user, password)

    return create


@pytest.fixture
def db_application(db, application_repository):
    """Fixture for an Application saved in database."""
    return async_to_sync(application_repository.save)(Application.create(name="PhotoEditor Pro"))


@pytest.fixture
def db_license_key_factory(db, db_application, license_key_repository):
    """Factory saving license keys in database."""

    def create(
        key_value=None,
        start_date=None,
        end_date=None,
        is_active=True,
        application_id=None,
        user_name="Alice Johnson",
        user_contact="alice@example.com",
    ):
        from django.utils import timezone

        today = timezone.localdate()
        key = LicenseKey.create(
            application_id=application_id or db_application.id,
            user_name=user_name,
            user_contact=user_contact,
            start_date=start_date or today - timedelta(days=10),
            end_date=end_date or today + timedelta(days=30),
            key_value=key_value,
            is_active=is_active,
        )
        return async_to_sync(license_key_repository.save)(key)

    return create


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def client_as():
    """Return an API client acting as the given admin."""
    from rest_framework.test import APIClient

    def build(user):
        client = APIClient()
        client.credentials(HTTP_X_ADMIN_USER=str(user.id))
        return client

    return build
