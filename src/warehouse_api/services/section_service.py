from typing import Any

from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.section import Section
from warehouse_api.repositories.section_repository import SectionRepository
from .base_service import BaseService

# Below absolute zero: a PATCH temperature with this value is ignored.
TEMPERATURE_UNSET = -273
TEMPERATURE_FIELDS = frozenset({"current_temperature", "minimum_temperature"})


class SectionService(BaseService[Section, SectionRepository]):
    business_key = "section_number"
    messages = ErrorMessages(
        not_found="section not found",
        already_exists="section_number already exists",
        foreign_keys={"warehouses": "the associated warehouse does not exist"},
    )

    def is_absent(self, field: str, value: Any) -> bool:
        if field in TEMPERATURE_FIELDS and value == TEMPERATURE_UNSET:
            return True
        return super().is_absent(field, value)

    async def delete(self, entity_id: Any) -> None:
        await self.get(entity_id)
        await super().delete(entity_id)

    async def report_products(self, section_id: int | None = None) -> list[dict[str, Any]]:
        return await self._report(
            self.repository.get_products_report,
            self.repository.get_products_report_by_id,
            section_id,
            self.messages.not_found,
        )
