"""
AuthenticateUserHandler.

Handler for signing an admin in.
"""
import logging

from accounts.application.commands.authenticate_user import AuthenticateUserCommand
from accounts.application.dto.user_dto import UserDTO
from accounts.ports.user_repository import UserRepository
from core.domain.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthenticateUserHandler:
    """Handler for AuthenticateUserCommand."""

    def __init__(self, user_repository: UserRepository):
        """Initialize handler with repository."""
        self.user_repository = user_repository

    async def handle(self, command: AuthenticateUserCommand) -> UserDTO:
        """
        Handle authenticate user command.

        Args:
            command: AuthenticateUserCommand

        Returns:
            UserDTO of the signed-in admin

        Raises:
            InvalidCredentialsError: If the email/password pair does not match
        """
        if not command.email or not command.password:
            raise InvalidCredentialsError()

        user = await self.user_repository.check_credentials(command.email, command.password)
        if user is None:
            logger.warning("Failed sign-in attempt for %s", command.email.strip().lower())
            raise InvalidCredentialsError()

        logger.info("Admin %s signed in", user.id)
        return UserDTO.from_entity(user)
