from typing import Any

from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.locality import Locality
from warehouse_api.repositories.locality_repository import LocalityRepository
from .base_service import BaseService


class LocalityService(BaseService[Locality, LocalityRepository]):
    # the client-chosen id is the business key
    business_key = "id"
    messages = ErrorMessages(
        not_found="locality not found",
        already_exists="id already exists",
    )

    async def report_sellers(self, locality_id: str | None = None) -> list[dict[str, Any]]:
        return await self._report(
            self.repository.get_sellers_report,
            self.repository.get_sellers_report_by_id,
            locality_id,
            self.messages.not_found,
        )

    async def report_carries(self, locality_id: str | None = None) -> list[dict[str, Any]]:
        return await self._report(
            self.repository.get_carries_report,
            self.repository.get_carries_report_by_id,
            locality_id,
            self.messages.not_found,
        )
