from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.product_batch import ProductBatch
from warehouse_api.models.section import Section
from .base_repository import BaseRepository


class SectionRepository(BaseRepository[Section]):
    """Sections; `section_number` is the business key."""

    def __init__(self, db: AsyncSession):
        super().__init__(Section, db)

    @staticmethod
    def _products_query() -> Select:
        # products_count is the stock on hand: the sum of current quantities, 0 when empty
        return (
            select(
                Section.id.label("section_id"),
                Section.section_number,
                func.coalesce(func.sum(ProductBatch.current_quantity), 0).label("products_count"),
            )
            .select_from(Section)
            .outerjoin(ProductBatch, ProductBatch.section_id == Section.id)
            .group_by(Section.id, Section.section_number)
            .order_by(Section.id)
        )

    async def get_products_report(self) -> list[dict[str, Any]]:
        return await self._fetch_report(self._products_query())

    async def get_products_report_by_id(self, section_id: int) -> list[dict[str, Any]]:
        return await self._fetch_report(self._products_query(), Section.id, section_id)
