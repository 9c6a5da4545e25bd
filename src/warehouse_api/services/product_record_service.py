from datetime import date
from typing import Any

from warehouse_api.exceptions.base import InvalidValueError
from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.product_record import ProductRecord
from warehouse_api.repositories.product_record_repository import ProductRecordRepository
from .base_service import BaseService


class ProductRecordService(BaseService[ProductRecord, ProductRecordRepository]):
    messages = ErrorMessages(
        not_found="product record not found",
        foreign_keys={"products": "product not found"},
        invalid_value="invalid date",
    )

    def validate_create(self, data: dict[str, Any]) -> dict[str, Any]:
        # a record describes the current price, it cannot be back-dated
        if data["last_update_date"] < date.today():
            raise InvalidValueError(self.messages.invalid_value, fields=["last_update_date"])
        return data
