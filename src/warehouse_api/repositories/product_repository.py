from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.product import Product
from warehouse_api.models.product_record import ProductRecord
from .base_repository import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Products; `product_code` is the business key."""

    def __init__(self, db: AsyncSession):
        super().__init__(Product, db)

    @staticmethod
    def _records_query() -> Select:
        return (
            select(
                Product.id.label("product_id"),
                Product.description,
                func.count(ProductRecord.id).label("records_count"),
            )
            .select_from(Product)
            .outerjoin(ProductRecord, ProductRecord.product_id == Product.id)
            .group_by(Product.id, Product.description)
            .order_by(Product.id)
        )

    async def get_records_report(self) -> list[dict[str, Any]]:
        return await self._fetch_report(self._records_query())

    async def get_records_report_by_id(self, product_id: int) -> list[dict[str, Any]]:
        return await self._fetch_report(self._records_query(), Product.id, product_id)
