"""
User management handlers.

Handlers for listing, creating, updating and deleting admin users and for
resetting their passwords. All of them are reserved to the superadmin.
"""
import logging
from typing import List, Optional

from accounts.application.commands.create_user import CreateUserCommand
from accounts.application.commands.delete_user import DeleteUserCommand
from accounts.application.commands.reset_password import ResetPasswordCommand
from accounts.application.commands.update_user import UpdateUserCommand
from accounts.application.dto.user_dto import UserDTO
from accounts.domain.services import AccessPolicy
from accounts.domain.user import AdminUser
from accounts.ports.user_repository import UserRepository
from core.domain.exceptions import UserAlreadyExistsError, UserNotFoundError

logger = logging.getLogger(__name__)


class ListUsersHandler:
    """Handler listing every admin user."""

    def __init__(self, user_repository: UserRepository):
        """Initialize handler with repository."""
        self.user_repository = user_repository

    async def handle(self, actor: Optional[AdminUser]) -> List[UserDTO]:
        """
        List users ordered by name.

        Raises:
            AuthenticationRequiredError: If there is no actor
            PermissionDeniedError: If the actor is not the superadmin
        """
        AccessPolicy.ensure_superadmin(actor)
        users = await self.user_repository.list_all()
        return [UserDTO.from_entity(user) for user in users]


class CreateUserHandler:
    """Handler for CreateUserCommand."""

    def __init__(self, user_repository: UserRepository, super_admin_email: str):
        """Initialize handler with repository and the configured superadmin email."""
        self.user_repository = user_repository
        self.super_admin_email = super_admin_email

    async def handle(self, command: CreateUserCommand) -> UserDTO:
        """
        Handle create user command.

        Args:
            command: CreateUserCommand

        Returns:
            UserDTO of the created user

        Raises:
            UserAlreadyExistsError: If the email is taken
        """
        AccessPolicy.ensure_superadmin(command.actor)

        user = AdminUser.create(
            email=command.email,
            name=command.name,
            super_admin_email=self.super_admin_email,
            permissions=command.permissions,
        )
        if await self.user_repository.find_by_email(user.email.value):
            raise UserAlreadyExistsError()

        saved = await self.user_repository.add(user, command.password)
        logger.info("Created %s user %s", saved.role.value, saved.id)
        return UserDTO.from_entity(saved)


class UpdateUserHandler:
    """Handler for UpdateUserCommand."""

    def __init__(self, user_repository: UserRepository):
        """Initialize handler with repository."""
        self.user_repository = user_repository

    async def handle(self, command: UpdateUserCommand) -> UserDTO:
        """
        Handle update user command.

        Raises:
            UserNotFoundError: If the user does not exist
            SuperAdminProtectedError: If the target is the superadmin
        """
        AccessPolicy.ensure_superadmin(command.actor)

        user = await self.user_repository.find_by_id(command.user_id)
        if user is None:
            raise UserNotFoundError(f"User {command.user_id} not found")

        updated = user.update_profile(command.name, command.permissions)
        saved = await self.user_repository.save(updated)
        logger.info("Updated user %s", saved.id)
        return UserDTO.from_entity(saved)


class DeleteUserHandler:
    """Handler for DeleteUserCommand."""

    def __init__(self, user_repository: UserRepository):
        """Initialize handler with repository."""
        self.user_repository = user_repository

    async def handle(self, command: DeleteUserCommand) -> None:
        """
        Handle delete user command.

        Raises:
            UserNotFoundError: If the user does not exist
            SuperAdminProtectedError: If the target is the superadmin
        """
        AccessPolicy.ensure_superadmin(command.actor)

        user = await self.user_repository.find_by_id(command.user_id)
        if user is None:
            raise UserNotFoundError(f"User {command.user_id} not found")
        user.ensure_not_superadmin()

        await self.user_repository.delete(user.id)
        logger.info("Deleted user %s", user.id)


class ResetPasswordHandler:
    """Handler for ResetPasswordCommand."""

    def __init__(self, user_repository: UserRepository, default_password: str):
        """Initialize handler with repository and the reset password."""
        self.user_repository = user_repository
        self.default_password = default_password

    async def handle(self, command: ResetPasswordCommand) -> None:
        """
        Handle reset password command.

        Raises:
            UserNotFoundError: If the user does not exist
            SuperAdminProtectedError: If the target is the superadmin
        """
        AccessPolicy.ensure_superadmin(command.actor)

        user = await self.user_repository.find_by_id(command.user_id)
        if user is None:
            raise UserNotFoundError(f"User {command.user_id} not found")
        user.ensure_not_superadmin()

        await self.user_repository.set_password(user.id, self.default_password)
        logger.info("Reset password for user %s", user.id)
