"""
Application management handlers.

Listing is open to any signed-in admin; every change requires the
``MANAGE_APPLICATIONS`` permission.
"""
import logging
from typing import List, Optional

from accounts.domain.services import AccessPolicy
from accounts.domain.user import AdminUser
from applications.application.commands.create_application import CreateApplicationCommand
from applications.application.commands.delete_application import DeleteApplicationCommand
from applications.application.commands.update_application import UpdateApplicationCommand
from applications.application.dto.application_dto import ApplicationDTO
from applications.domain.application import Application
from applications.ports.application_repository import ApplicationRepository
from core.domain.exceptions import ApplicationInUseError, ApplicationNotFoundError
from core.domain.value_objects import Permission
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)


class ListApplicationsHandler:
    """Handler listing applications ordered by name."""

    def __init__(self, application_repository: ApplicationRepository):
        """Initialize handler with repository."""
        self.application_repository = application_repository

    async def handle(self, actor: Optional[AdminUser]) -> List[ApplicationDTO]:
        """
        List every application.

        Raises:
            AuthenticationRequiredError: If there is no actor
        """
        AccessPolicy.ensure_authenticated(actor)
        applications = await self.application_repository.list_all()
        return [ApplicationDTO.from_entity(application) for application in applications]


class CreateApplicationHandler:
    """Handler for CreateApplicationCommand."""

    def __init__(self, application_repository: ApplicationRepository):
        """Initialize handler with repository."""
        self.application_repository = application_repository

    async def handle(self, command: CreateApplicationCommand) -> ApplicationDTO:
        """
        Handle create application command.

        Args:
            command: CreateApplicationCommand

        Returns:
            ApplicationDTO of the created application
        """
        AccessPolicy.ensure_permission(command.actor, Permission.MANAGE_APPLICATIONS)

        application = Application.create(name=command.name)
        saved = await self.application_repository.save(application)
        logger.info("Created application %s (%s)", saved.id, saved.name)
        return ApplicationDTO.from_entity(saved)


class UpdateApplicationHandler:
    """Handler for UpdateApplicationCommand."""

    def __init__(self, application_repository: ApplicationRepository):
        """Initialize handler with repository."""
        self.application_repository = application_repository

    async def handle(self, command: UpdateApplicationCommand) -> ApplicationDTO:
        """
        Handle update application command.

        Raises:
            ApplicationNotFoundError: If the application does not exist
        """
        AccessPolicy.ensure_permission(command.actor, Permission.MANAGE_APPLICATIONS)

        application = await self.application_repository.find_by_id(command.application_id)
        if application is None:
            raise ApplicationNotFoundError(f"Application {command.application_id} not found")

        saved = await self.application_repository.save(application.rename(command.name))
        logger.info("Renamed application %s to %s", saved.id, saved.name)
        return ApplicationDTO.from_entity(saved)


class DeleteApplicationHandler:
    """Handler for DeleteApplicationCommand."""

    def __init__(
        self,
        application_repository: ApplicationRepository,
        license_key_repository: LicenseKeyRepository,
    ):
        """Initialize handler with repositories."""
        self.application_repository = application_repository
        self.license_key_repository = license_key_repository

    async def handle(self, command: DeleteApplicationCommand) -> None:
        """
        Handle delete application command.

        Raises:
            ApplicationNotFoundError: If the application does not exist
            ApplicationInUseError: If any license key references it
        """
        AccessPolicy.ensure_permission(command.actor, Permission.MANAGE_APPLICATIONS)

        application = await self.application_repository.find_by_id(command.application_id)
        if application is None:
            raise ApplicationNotFoundError(f"Application {command.application_id} not found")

        if await self.license_key_repository.exists_for_application(application.id):
            raise ApplicationInUseError()

        await self.application_repository.delete(application.id)
        logger.info("Deleted application %s", application.id)
