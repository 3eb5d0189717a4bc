"""
ValidateLicenseKeyHandler.

Handler client applications call to check whether a key grants access.
This endpoint is public: no actor is required.
"""
import logging
from datetime import date
from typing import Callable, Optional

from django.utils import timezone

from applications.ports.application_repository import ApplicationRepository
from core.infrastructure.events import event_bus
from licenses.application.dto.license_key_dto import KeyValidationDTO
from licenses.application.queries.validate_license_key import ValidateLicenseKeyQuery
from licenses.application.services.validation_cache_service import ValidationCacheService
from licenses.domain.events import LicenseKeyValidated
from licenses.domain.services import KeyValidator
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)


class ValidateLicenseKeyHandler:
    """Handler for ValidateLicenseKeyQuery."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        application_repository: ApplicationRepository,
        validation_cache: Optional[ValidationCacheService] = None,
        clock: Callable[[], date] = timezone.localdate,
    ):
        """Initialize handler with repositories, validation cache and clock."""
        self.license_key_repository = license_key_repository
        self.application_repository = application_repository
        self.validation_cache = validation_cache or ValidationCacheService()
        self.clock = clock

    async def handle(self, query: ValidateLicenseKeyQuery) -> KeyValidationDTO:
        """
        Handle validate license key query.

        Args:
            query: ValidateLicenseKeyQuery

        Returns:
            KeyValidationDTO; unknown keys yield ``status=False`` and no info

        Raises:
            ValueError: If the key value is blank
        """
        key_value = (query.key_value or "").strip()
        if not key_value:
            raise ValueError("keyValue is required")

        today = self.clock()
        response = await self.validation_cache.get(key_value, today)
        if response is None:
            response = await self._evaluate(key_value, today)
            await self.validation_cache.set(key_value, today, response)

        await event_bus.publish(
            LicenseKeyValidated(
                key_value=key_value,
                result=response.result,
                license_key_id=response.license_key_id,
            )
        )
        logger.info("Validated key %s...: %s", key_value[:6], response.result)
        return response

    async def _evaluate(self, key_value: str, today: date) -> KeyValidationDTO:
        license_key = await self.license_key_repository.find_by_key_value(key_value)
        application_name = None
        if license_key is not None:
            application = await self.application_repository.find_by_id(
                license_key.application_id
            )
            application_name = application.name if application else None

        result = KeyValidator.validate(license_key, today, application_name)
        return KeyValidationDTO.from_result(result)
