"""
ListLicenseKeysHandler.

Handler for listing license keys with their derived status.
"""
from datetime import date
from typing import Callable, List

from django.utils import timezone

from accounts.domain.services import AccessPolicy
from licenses.application.dto.license_key_dto import LicenseKeyDTO
from licenses.application.queries.list_license_keys import ListLicenseKeysQuery
from licenses.domain.services import KeyFilter
from licenses.ports.license_key_repository import LicenseKeyRepository


class ListLicenseKeysHandler:
    """Handler for ListLicenseKeysQuery."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        clock: Callable[[], date] = timezone.localdate,
    ):
        """Initialize handler with repository and clock."""
        self.license_key_repository = license_key_repository
        self.clock = clock

    async def handle(self, query: ListLicenseKeysQuery) -> List[LicenseKeyDTO]:
        """
        Handle list license keys query.

        Args:
            query: ListLicenseKeysQuery

        Returns:
            Matching keys, newest first

        Raises:
            AuthenticationRequiredError: If there is no actor
        """
        AccessPolicy.ensure_authenticated(query.actor)

        today = self.clock()
        keys = await self.license_key_repository.list_all()
        matching = KeyFilter.apply(
            keys,
            today,
            status=query.status,
            application_id=query.application_id,
            search=query.search,
        )
        return [LicenseKeyDTO.from_entity(key, today) for key in matching]
