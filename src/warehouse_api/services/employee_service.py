from typing import Any

from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.employee import Employee
from warehouse_api.repositories.employee_repository import EmployeeRepository
from .base_service import BaseService

# card_number_id is fixed once the employee exists
PATCHABLE_FIELDS = frozenset({"first_name", "last_name", "warehouse_id"})


class EmployeeService(BaseService[Employee, EmployeeRepository]):
    business_key = "card_number_id"
    messages = ErrorMessages(
        not_found="employee not found",
        already_exists="employee already exists",
        foreign_keys={"warehouses": "the associated warehouse does not exist"},
    )

    def is_absent(self, field: str, value: Any) -> bool:
        return field not in PATCHABLE_FIELDS or super().is_absent(field, value)

    async def report_inbound_orders(self, employee_id: int | None = None) -> list[dict[str, Any]]:
        return await self._report(
            self.repository.get_inbound_orders_report,
            self.repository.get_inbound_orders_report_by_id,
            employee_id,
            self.messages.not_found,
        )
