from typing import Any

from warehouse_api.exceptions.base import InvalidValueError
from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.inbound_order import InboundOrder
from warehouse_api.repositories.inbound_order_repository import InboundOrderRepository
from .base_service import BaseService


class InboundOrderService(BaseService[InboundOrder, InboundOrderRepository]):
    business_key = "order_number"
    messages = ErrorMessages(
        not_found="inbound order not found",
        already_exists="inbound order already exists",
        foreign_keys={
            "employees": "the associated employee does not exist",
            "warehouses": "the associated warehouse does not exist",
            "product_batches": "the associated product batch does not exist",
        },
    )

    def validate_create(self, data: dict[str, Any]) -> dict[str, Any]:
        if not data.get("order_number", "").strip():
            raise InvalidValueError("orderNumber field cannot be empty", fields=["order_number"])
        return data
