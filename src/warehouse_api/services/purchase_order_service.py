from typing import Any

from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.purchase_order import PurchaseOrder
from warehouse_api.repositories.purchase_order_repository import PurchaseOrderRepository
from .base_service import BaseService


class PurchaseOrderService(BaseService[PurchaseOrder, PurchaseOrderRepository]):
    business_key = "order_number"
    messages = ErrorMessages(
        not_found="purchase order not found",
        already_exists="order_number already exists",
        foreign_keys={
            "buyers": "buyer not found",
            "product_records": "product record not found",
        },
    )

    async def report_by_buyer(self, buyer_id: int | None = None) -> list[dict[str, Any]]:
        return await self._report(
            self.repository.get_orders_by_buyer_report,
            self.repository.get_orders_by_buyer_report_by_id,
            buyer_id,
            "buyer not found",
        )
