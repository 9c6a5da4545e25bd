from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.buyer import Buyer
from warehouse_api.models.purchase_order import PurchaseOrder
from .base_repository import BaseRepository


class PurchaseOrderRepository(BaseRepository[PurchaseOrder]):
    """Purchase orders and the orders-per-buyer report."""

    def __init__(self, db: AsyncSession):
        super().__init__(PurchaseOrder, db)

    @staticmethod
    def _orders_by_buyer_query() -> Select:
        return (
            select(
                Buyer.id.label("buyer_id"),
                Buyer.card_number_id,
                Buyer.first_name,
                Buyer.last_name,
                func.count(PurchaseOrder.id).label("orders_count"),
            )
            .select_from(Buyer)
            .outerjoin(PurchaseOrder, PurchaseOrder.buyer_id == Buyer.id)
            .group_by(Buyer.id, Buyer.card_number_id, Buyer.first_name, Buyer.last_name)
            .order_by(Buyer.id)
        )

    async def get_orders_by_buyer_report(self) -> list[dict[str, Any]]:
        return await self._fetch_report(self._orders_by_buyer_query())

    async def get_orders_by_buyer_report_by_id(self, buyer_id: int) -> list[dict[str, Any]]:
        return await self._fetch_report(self._orders_by_buyer_query(), Buyer.id, buyer_id)
