from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.warehouse import Warehouse
from warehouse_api.repositories.warehouse_repository import WarehouseRepository
from .base_service import BaseService


class WarehouseService(BaseService[Warehouse, WarehouseRepository]):
    business_key = "warehouse_code"
    messages = ErrorMessages(
        not_found="warehouse not found",
        already_exists="warehouse code already exists",
        foreign_keys={"localities": "locality not found"},
    )
