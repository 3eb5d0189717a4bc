"""
Django implementation of LicenseKeyRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from licenses.domain.license_key import LicenseKey
from licenses.infrastructure.models import (
    LicenseKey as LicenseKeyModel,
)
from licenses.ports.license_key_repository import LicenseKeyRepository


class DjangoLicenseKeyRepository(LicenseKeyRepository):
    """
    Django ORM implementation of LicenseKeyRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseKeyModel) -> LicenseKey:
        """
        Convert Django model to domain entity.

        Args:
            model: Django LicenseKey model

        Returns:
            LicenseKey domain entity
        """
        return LicenseKey(
            id=model.id,
            key_value=model.key_value,
            application_id=model.application_id,
            user_name=model.user_name,
            user_contact=model.user_contact,
            start_date=model.start_date,
            end_date=model.end_date,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, license_key: LicenseKey) -> LicenseKeyModel:
        """
        Convert domain entity to Django model.

        Args:
            license_key: LicenseKey domain entity

        Returns:
            Django LicenseKey model
        """
        # pylint: disable=no-member
        model, created = LicenseKeyModel.objects.get_or_create(
            id=license_key.id,
            defaults={
                "key_value": license_key.key_value,
                "application_id": license_key.application_id,
                "user_name": license_key.user_name,
                "user_contact": license_key.user_contact,
                "start_date": license_key.start_date,
                "end_date": license_key.end_date,
                "is_active": license_key.is_active,
            },
        )
        if not created:
            model.key_value = license_key.key_value
            model.application_id = license_key.application_id
            model.user_name = license_key.user_name
            model.user_contact = license_key.user_contact
            model.start_date = license_key.start_date
            model.end_date = license_key.end_date
            model.is_active = license_key.is_active
            model.save()
        return model

    @sync_to_async
    def save(self, license_key: LicenseKey) -> LicenseKey:
        """
        Save a license key entity.

        Args:
            license_key: LicenseKey entity to save

        Returns:
            Saved license key entity
        """
        model = self._to_model(license_key)
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, license_key_id: uuid.UUID) -> Optional[LicenseKey]:
        """
        Find a license key by ID.

        Args:
            license_key_id: License key UUID

        Returns:
            LicenseKey entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = LicenseKeyModel.objects.get(id=license_key_id)
            return self._to_domain(model)
        except LicenseKeyModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def find_by_key_value(self, key_value: str) -> Optional[LicenseKey]:
        """
        Find a license key by its exact value.

        Args:
            key_value: The key string

        Returns:
            LicenseKey entity or None if not found
        """
        # pylint: disable=no-member
        model = LicenseKeyModel.objects.filter(key_value=key_value).first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def list_all(self) -> List[LicenseKey]:
        """
        List every license key, newest first.

        Returns:
            List of LicenseKey entities
        """
        # pylint: disable=no-member
        queryset = LicenseKeyModel.objects.order_by("-created_at")
        return [self._to_domain(model) for model in queryset]

    @sync_to_async
    def delete(self, license_key_id: uuid.UUID) -> None:
        """
        Delete a license key.

        Args:
            license_key_id: License key UUID
        """
        # pylint: disable=no-member
        LicenseKeyModel.objects.filter(id=license_key_id).delete()

    @sync_to_async
    def key_value_taken(
        self, key_value: str, exclude_id: Optional[uuid.UUID] = None
    ) -> bool:
        """
        Check whether another key already uses ``key_value``.

        Args:
            key_value: The key string
            exclude_id: Key to ignore (the one being edited)

        Returns:
            True if the value is in use
        """
        # pylint: disable=no-member
        queryset = LicenseKeyModel.objects.filter(key_value=key_value)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    @sync_to_async
    def exists_for_application(self, application_id: uuid.UUID) -> bool:
        """
        Check whether any key references an application.

        Args:
            application_id: Application UUID

        Returns:
            True if at least one key is issued for the application
        """
        # pylint: disable=no-member
        return LicenseKeyModel.objects.filter(application_id=application_id).exists()
