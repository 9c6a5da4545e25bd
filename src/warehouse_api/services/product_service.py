from typing import Any

from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.product import Product
from warehouse_api.repositories.product_repository import ProductRepository
from .base_service import BaseService


class ProductService(BaseService[Product, ProductRepository]):
    business_key = "product_code"
    messages = ErrorMessages(
        not_found="product not found",
        already_exists="product code already exists",
        foreign_keys={"sellers": "seller not found"},
    )

    async def report_records(self, product_id: int | None = None) -> list[dict[str, Any]]:
        return await self._report(
            self.repository.get_records_report,
            self.repository.get_records_report_by_id,
            product_id,
            self.messages.not_found,
        )
