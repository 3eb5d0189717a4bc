"""
Unit tests for application handlers.
"""
import uuid

import pytest

from applications.application.commands.create_application import CreateApplicationCommand
from applications.application.commands.delete_application import DeleteApplicationCommand
from applications.application.commands.update_application import UpdateApplicationCommand
from applications.application.handlers.application_handlers import (
    CreateApplicationHandler,
    DeleteApplicationHandler,
    ListApplicationsHandler,
    UpdateApplicationHandler,
)
from applications.domain.application import Application
from core.domain.exceptions import (
    ApplicationInUseError,
    ApplicationNotFoundError,
    AuthenticationRequiredError,
    PermissionDeniedError,
)
from core.domain.value_objects import Permission
from tests.conftest import make_admin


@pytest.fixture
def app_manager():
    """Admin allowed to manage applications."""
    return make_admin(Permission.MANAGE_APPLICATIONS, name="App Manager")


class TestApplicationEntity:
    """Tests for Application entity."""

    def test_name_is_trimmed(self):
        assert Application.create(name="  CodeCompiler X ").name == "CodeCompiler X"

    def test_blank_name(self):
        with pytest.raises(ValueError):
            Application.create(name="   ")

    def test_rename_keeps_identity(self, sample_application):
        renamed = sample_application.rename("PhotoEditor Max")
        assert renamed.id == sample_application.id
        assert renamed.name == "PhotoEditor Max"


@pytest.mark.asyncio
class TestApplicationHandlers:
    """Tests for application handlers."""

    async def test_list_ordered_by_name(self, memory_application_repository, plain_admin):
        """Test any admin can list applications."""
        await memory_application_repository.save(Application.create(name="Zeta"))
        await memory_application_repository.save(Application.create(name="Alpha"))

        result = await ListApplicationsHandler(memory_application_repository).handle(plain_admin)

        assert [application.name for application in result] == ["Alpha", "Zeta"]

    async def test_list_requires_actor(self, memory_application_repository):
        with pytest.raises(AuthenticationRequiredError):
            await ListApplicationsHandler(memory_application_repository).handle(None)

    async def test_create(self, memory_application_repository, app_manager):
        result = await CreateApplicationHandler(memory_application_repository).handle(
            CreateApplicationCommand(actor=app_manager, name="CodeCompiler X")
        )

        assert result.name == "CodeCompiler X"
        assert await memory_application_repository.find_by_id(result.id) is not None

    async def test_create_requires_permission(self, memory_application_repository, key_manager):
        """Test key permissions do not cover applications."""
        with pytest.raises(PermissionDeniedError):
            await CreateApplicationHandler(memory_application_repository).handle(
                CreateApplicationCommand(actor=key_manager, name="Nope")
            )

    async def test_update(self, memory_application_repository, sample_application, superadmin):
        await memory_application_repository.save(sample_application)

        result = await UpdateApplicationHandler(memory_application_repository).handle(
            UpdateApplicationCommand(
                actor=superadmin, application_id=sample_application.id, name="PhotoEditor Max"
            )
        )

        assert result.id == sample_application.id
        assert result.name == "PhotoEditor Max"

    async def test_update_missing(self, memory_application_repository, app_manager):
        with pytest.raises(ApplicationNotFoundError):
            await UpdateApplicationHandler(memory_application_repository).handle(
                UpdateApplicationCommand(actor=app_manager, application_id=uuid.uuid4(), name="X")
            )

    async def test_delete_unused(
        self, memory_application_repository, memory_license_key_repository, sample_application, app_manager
    ):
        await memory_application_repository.save(sample_application)
        handler = DeleteApplicationHandler(memory_application_repository, memory_license_key_repository)

        await handler.handle(
            DeleteApplicationCommand(actor=app_manager, application_id=sample_application.id)
        )

        assert await memory_application_repository.find_by_id(sample_application.id) is None

    async def test_delete_in_use_is_rejected(
        self,
        memory_application_repository,
        memory_license_key_repository,
        sample_application,
        sample_license_key,
        app_manager,
    ):
        """Test an application referenced by a key is kept."""
        await memory_application_repository.save(sample_application)
        await memory_license_key_repository.save(sample_license_key)
        handler = DeleteApplicationHandler(memory_application_repository, memory_license_key_repository)

        with pytest.raises(ApplicationInUseError):
            await handler.handle(
                DeleteApplicationCommand(actor=app_manager, application_id=sample_application.id)
            )
        assert await memory_application_repository.find_by_id(sample_application.id) is not None
