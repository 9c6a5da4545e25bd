from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.employee import Employee
from warehouse_api.models.inbound_order import InboundOrder
from .base_repository import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """Employees; `card_number_id` is the business key."""

    def __init__(self, db: AsyncSession):
        super().__init__(Employee, db)

    @staticmethod
    def _inbound_orders_query() -> Select:
        return (
            select(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
                func.count(InboundOrder.id).label("inbound_orders_count"),
            )
            .select_from(Employee)
            .outerjoin(InboundOrder, InboundOrder.employee_id == Employee.id)
            .group_by(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
            )
            .order_by(Employee.id)
        )

    async def get_inbound_orders_report(self) -> list[dict[str, Any]]:
        return await self._fetch_report(self._inbound_orders_query())

    async def get_inbound_orders_report_by_id(self, employee_id: int) -> list[dict[str, Any]]:
        return await self._fetch_report(self._inbound_orders_query(), Employee.id, employee_id)
