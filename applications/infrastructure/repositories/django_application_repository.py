"""
Django implementation of ApplicationRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from applications.domain.application import Application
from applications.infrastructure.models import Application as ApplicationModel
from applications.ports.application_repository import ApplicationRepository


class DjangoApplicationRepository(ApplicationRepository):
    """Django ORM implementation of ApplicationRepository."""

    def _to_domain(self, model: ApplicationModel) -> Application:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Application model

        Returns:
            Application domain entity
        """
        return Application(
            id=model.id,
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @sync_to_async
    def save(self, application: Application) -> Application:
        """
        Save an application entity.

        Args:
            application: Application entity to save

        Returns:
            Saved application entity
        """
        # pylint: disable=no-member
        model, created = ApplicationModel.objects.get_or_create(
            id=application.id,
            defaults={"name": application.name},
        )
        if not created:
            model.name = application.name
            model.save()
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, application_id: uuid.UUID) -> Optional[Application]:
        """
        Find an application by ID.

        Args:
            application_id: Application UUID

        Returns:
            Application entity or None if not found
        """
        try:
            # pylint: disable=no-member
            return self._to_domain(ApplicationModel.objects.get(id=application_id))
        except ApplicationModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def list_all(self) -> List[Application]:
        """
        List all applications ordered by name.

        Returns:
            List of Application entities
        """
        # pylint: disable=no-member
        return [self._to_domain(model) for model in ApplicationModel.objects.order_by("name")]

    @sync_to_async
    def delete(self, application_id: uuid.UUID) -> None:
        """
        Delete an application.

        Args:
            application_id: Application UUID
        """
        # pylint: disable=no-member
        ApplicationModel.objects.filter(id=application_id).delete()
