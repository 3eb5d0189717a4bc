"""
Unit tests for ValidateLicenseKeyHandler.
"""
from datetime import date

import pytest

from core.domain.events import EventHandler
from core.infrastructure.events import event_bus
from licenses.application.handlers.validate_license_key_handler import ValidateLicenseKeyHandler
from licenses.application.queries.validate_license_key import ValidateLicenseKeyQuery
from licenses.application.services.validation_cache_service import ValidationCacheService
from licenses.domain.events import LicenseKeyValidated
from licenses.domain.license_key import LicenseKey


@pytest.fixture
def handler(memory_license_key_repository, memory_application_repository, fake_cache, clock):
    """Handler wired to in-memory repositories and the fake cache."""
    return ValidateLicenseKeyHandler(
        license_key_repository=memory_license_key_repository,
        application_repository=memory_application_repository,
        validation_cache=ValidationCacheService(cache=fake_cache),
        clock=clock,
    )


@pytest.fixture
async def store(memory_license_key_repository, memory_application_repository, sample_application):
    """Save keys for the sample application."""
    await memory_application_repository.save(sample_application)

    async def save(key_value, start_date, end_date, is_active=True):
        return await memory_license_key_repository.save(
            LicenseKey.create(
                application_id=sample_application.id,
                user_name="Alice Johnson",
                user_contact="alice@example.com",
                start_date=start_date,
                end_date=end_date,
                key_value=key_value,
                is_active=is_active,
            )
        )

    return save


@pytest.mark.asyncio
class TestValidateLicenseKeyHandler:
    """Tests for ValidateLicenseKeyHandler."""

    async def test_valid_key_returns_details(self, handler, store):
        """Test an active key returns its details."""
        await store("KG-VALID", date(2024, 1, 1), date(2024, 12, 31))

        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-VALID"))

        assert result.status is True
        assert result.result == "valid"
        assert result.info == {
            "keyValue": "KG-VALID",
            "applicationName": "PhotoEditor Pro",
            "userName": "Alice Johnson",
            "userContact": "alice@example.com",
            "startDate": "2024-01-01",
            "endDate": "2024-12-31",
        }

    async def test_unknown_key(self, handler):
        """Test an unknown key has no info."""
        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-NOPE"))

        assert result.status is False
        assert result.info is None
        assert result.result == "not_found"

    async def test_expired_key(self, handler, store):
        """Test an expired key explains when it expired."""
        await store("KG-OLD", date(2023, 1, 1), date(2024, 6, 14))

        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-OLD"))

        assert result.status is False
        assert result.info == {"message": "Key expired on 2024-06-14."}
        assert result.result == "expired"

    async def test_pending_key(self, handler, store):
        """Test a future key explains when it starts."""
        await store("KG-SOON", date(2024, 6, 16), date(2024, 12, 31))

        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-SOON"))

        assert result.status is False
        assert result.info == {"message": "Key is not yet active. It will be valid from 2024-06-16."}
        assert result.result == "pending"

    async def test_deactivated_key(self, handler, store):
        """Test a deactivated key is rejected even inside its period."""
        await store("KG-OFF", date(2024, 1, 1), date(2024, 12, 31), is_active=False)

        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-OFF"))

        assert result.status is False
        assert result.info == {"message": "Key has been deactivated by an administrator."}

    async def test_boundary_days_are_valid(self, handler, store):
        """Test the first and last day of the period are inclusive."""
        await store("KG-START", date(2024, 6, 15), date(2024, 12, 31))
        await store("KG-END", date(2024, 1, 1), date(2024, 6, 15))

        assert (await handler.handle(ValidateLicenseKeyQuery(key_value="KG-START"))).status is True
        assert (await handler.handle(ValidateLicenseKeyQuery(key_value="KG-END"))).status is True

    async def test_key_value_is_trimmed(self, handler, store):
        """Test surrounding whitespace is ignored."""
        await store("KG-VALID", date(2024, 1, 1), date(2024, 12, 31))

        result = await handler.handle(ValidateLicenseKeyQuery(key_value="  KG-VALID  "))

        assert result.status is True

    async def test_blank_key_is_rejected(self, handler):
        """Test a blank key value."""
        with pytest.raises(ValueError, match="keyValue is required"):
            await handler.handle(ValidateLicenseKeyQuery(key_value="   "))

    async def test_response_is_cached(self, handler, store, memory_license_key_repository, fake_cache):
        """Test the second lookup is served from the cache."""
        key = await store("KG-VALID", date(2024, 1, 1), date(2024, 12, 31))

        await handler.handle(ValidateLicenseKeyQuery(key_value="KG-VALID"))
        assert len(fake_cache.values) == 1

        await memory_license_key_repository.delete(key.id)
        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-VALID"))

        assert result.status is True

    async def test_missing_application_name(self, handler, memory_license_key_repository, sample_license_key):
        """Test a key whose application is gone."""
        await memory_license_key_repository.save(sample_license_key)

        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-TEST-0001"))

        assert result.status is True
        assert result.info["applicationName"] == "Unknown Application"

    async def test_application_rename_waits_for_cache_expiry(
        self, handler, store, memory_application_repository, sample_application
    ):
        """Test a cached answer keeps the old application name until it expires."""
        await store("KG-VALID", date(2024, 1, 1), date(2024, 12, 31))
        await handler.handle(ValidateLicenseKeyQuery(key_value="KG-VALID"))

        await memory_application_repository.save(sample_application.rename("PhotoEditor Max"))
        result = await handler.handle(ValidateLicenseKeyQuery(key_value="KG-VALID"))

        assert result.info["applicationName"] == "PhotoEditor Pro"


class _RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


@pytest.fixture
def validated_events():
    """Collect LicenseKeyValidated events published while the test runs."""
    recorder = _RecordingHandler()
    event_bus.subscribe(LicenseKeyValidated, recorder)
    yield recorder.events
    event_bus._handlers[LicenseKeyValidated].remove(recorder)


@pytest.mark.asyncio
class TestValidationEvents:
    """Tests for the event published on every validation."""

    async def test_known_key_event_uses_key_id(self, handler, store, validated_events):
        key = await store("KG-SECRET-VALUE-1234", date(2024, 1, 1), date(2024, 12, 31))

        await handler.handle(ValidateLicenseKeyQuery(key_value="KG-SECRET-VALUE-1234"))
        await handler.handle(ValidateLicenseKeyQuery(key_value="KG-SECRET-VALUE-1234"))

        assert [event.aggregate_id for event in validated_events] == [str(key.id), str(key.id)]
        assert all(event.license_key_id == key.id for event in validated_events)

    async def test_unknown_key_event_hides_key(self, handler, validated_events):
        await handler.handle(ValidateLicenseKeyQuery(key_value="KG-GUESSED-KEY-9999"))

        event = validated_events[-1]
        assert event.license_key_id is None
        assert event.aggregate_id.startswith("key:")
        assert "KG-GUESSED" not in event.aggregate_id
