"""
License key management handlers.

Handlers for creating, updating, deleting and toggling license keys.
Each operation is gated on its own permission.
"""
import logging
from datetime import date
from typing import Callable, Optional

from django.utils import timezone

from accounts.domain.services import AccessPolicy
from applications.ports.application_repository import ApplicationRepository
from core.domain.exceptions import (
    ApplicationNotFoundError,
    DuplicateKeyValueError,
    LicenseKeyNotFoundError,
)
from core.domain.value_objects import Permission
from core.infrastructure.events import event_bus
from licenses.application.commands.create_license_key import CreateLicenseKeyCommand
from licenses.application.commands.delete_license_key import DeleteLicenseKeyCommand
from licenses.application.commands.toggle_key_status import ToggleKeyStatusCommand
from licenses.application.commands.update_license_key import UpdateLicenseKeyCommand
from licenses.application.dto.license_key_dto import LicenseKeyDTO
from licenses.application.services.validation_cache_service import ValidationCacheService
from licenses.domain.events import (
    LicenseKeyCreated,
    LicenseKeyDeleted,
    LicenseKeyStatusToggled,
    LicenseKeyUpdated,
)
from licenses.domain.license_key import LicenseKey
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)


class _LicenseKeyHandler:
    """Shared wiring for license key handlers."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        validation_cache: Optional[ValidationCacheService] = None,
        clock: Callable[[], date] = timezone.localdate,
    ):
        """Initialize handler with repository, validation cache and clock."""
        self.license_key_repository = license_key_repository
        self.validation_cache = validation_cache or ValidationCacheService()
        self.clock = clock

    async def _get_key(self, license_key_id) -> LicenseKey:
        license_key = await self.license_key_repository.find_by_id(license_key_id)
        if not license_key:
            raise LicenseKeyNotFoundError(f"License key {license_key_id} not found")
        return license_key


class CreateLicenseKeyHandler(_LicenseKeyHandler):
    """Handler for CreateLicenseKeyCommand."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        application_repository: ApplicationRepository,
        key_prefix: str = "KG",
        validation_cache: Optional[ValidationCacheService] = None,
        clock: Callable[[], date] = timezone.localdate,
    ):
        """Initialize handler with repositories and the generated key prefix."""
        super().__init__(license_key_repository, validation_cache, clock)
        self.application_repository = application_repository
        self.key_prefix = key_prefix

    async def handle(self, command: CreateLicenseKeyCommand) -> LicenseKeyDTO:
        """
        Handle create license key command.

        Args:
            command: CreateLicenseKeyCommand

        Returns:
            LicenseKeyDTO of the created key

        Raises:
            ApplicationNotFoundError: If the application does not exist
            DuplicateKeyValueError: If the key value is taken
            InvalidKeyPeriodError: If the end date precedes the start date
        """
        AccessPolicy.ensure_permission(command.actor, Permission.CREATE_KEYS)

        application = await self.application_repository.find_by_id(command.application_id)
        if not application:
            raise ApplicationNotFoundError(f"Application {command.application_id} not found")

        today = self.clock()
        license_key = LicenseKey.create(
            application_id=application.id,
            user_name=command.user_name,
            user_contact=command.user_contact,
            start_date=command.start_date or today,
            end_date=command.end_date,
            key_value=command.key_value,
            prefix=self.key_prefix,
            is_active=command.is_active,
        )
        if await self.license_key_repository.key_value_taken(license_key.key_value):
            raise DuplicateKeyValueError()

        saved = await self.license_key_repository.save(license_key)
        await self.validation_cache.invalidate([saved.key_value], today)

        await event_bus.publish(
            LicenseKeyCreated(
                license_key_id=saved.id,
                application_id=saved.application_id,
                key_value=saved.key_value,
            )
        )
        logger.info("Created license key %s for application %s", saved.id, application.id)
        return LicenseKeyDTO.from_entity(saved, today)


class UpdateLicenseKeyHandler(_LicenseKeyHandler):
    """Handler for UpdateLicenseKeyCommand."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        application_repository: ApplicationRepository,
        validation_cache: Optional[ValidationCacheService] = None,
        clock: Callable[[], date] = timezone.localdate,
    ):
        """Initialize handler with repositories."""
        super().__init__(license_key_repository, validation_cache, clock)
        self.application_repository = application_repository

    async def handle(self, command: UpdateLicenseKeyCommand) -> LicenseKeyDTO:
        """
        Handle update license key command.

        Raises:
            LicenseKeyNotFoundError: If the key does not exist
            ApplicationNotFoundError: If the application does not exist
            DuplicateKeyValueError: If another key uses the new value
            InvalidKeyPeriodError: If the end date precedes the start date
        """
        AccessPolicy.ensure_permission(command.actor, Permission.EDIT_KEYS)

        license_key = await self._get_key(command.license_key_id)
        if not await self.application_repository.find_by_id(command.application_id):
            raise ApplicationNotFoundError(f"Application {command.application_id} not found")

        updated = license_key.update(
            key_value=command.key_value,
            application_id=command.application_id,
            user_name=command.user_name,
            user_contact=command.user_contact,
            start_date=command.start_date,
            end_date=command.end_date,
            is_active=command.is_active,
        )
        if await self.license_key_repository.key_value_taken(
            updated.key_value, exclude_id=license_key.id
        ):
            raise DuplicateKeyValueError()

        saved = await self.license_key_repository.save(updated)
        today = self.clock()
        await self.validation_cache.invalidate([license_key.key_value, saved.key_value], today)

        await event_bus.publish(LicenseKeyUpdated(license_key_id=saved.id))
        logger.info("Updated license key %s", saved.id)
        return LicenseKeyDTO.from_entity(saved, today)


class DeleteLicenseKeyHandler(_LicenseKeyHandler):
    """Handler for DeleteLicenseKeyCommand."""

    async def handle(self, command: DeleteLicenseKeyCommand) -> None:
        """
        Handle delete license key command.

        Raises:
            LicenseKeyNotFoundError: If the key does not exist
        """
        AccessPolicy.ensure_permission(command.actor, Permission.DELETE_KEYS)

        license_key = await self._get_key(command.license_key_id)
        await self.license_key_repository.delete(license_key.id)
        await self.validation_cache.invalidate([license_key.key_value], self.clock())

        await event_bus.publish(
            LicenseKeyDeleted(license_key_id=license_key.id, key_value=license_key.key_value)
        )
        logger.info("Deleted license key %s", license_key.id)


class ToggleKeyStatusHandler(_LicenseKeyHandler):
    """Handler for ToggleKeyStatusCommand."""

    async def handle(self, command: ToggleKeyStatusCommand) -> LicenseKeyDTO:
        """
        Handle toggle key status command.

        Returns:
            LicenseKeyDTO of the key after the toggle

        Raises:
            LicenseKeyNotFoundError: If the key does not exist
        """
        AccessPolicy.ensure_permission(command.actor, Permission.TOGGLE_KEY_STATUS)

        license_key = await self._get_key(command.license_key_id)
        saved = await self.license_key_repository.save(license_key.toggled())
        today = self.clock()
        await self.validation_cache.invalidate([saved.key_value], today)

        await event_bus.publish(
            LicenseKeyStatusToggled(license_key_id=saved.id, is_active=saved.is_active)
        )
        logger.info(
            "License key %s %s", saved.id, "activated" if saved.is_active else "deactivated"
        )
        return LicenseKeyDTO.from_entity(saved, today)
