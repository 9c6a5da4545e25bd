from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.carry import Carry
from warehouse_api.repositories.carry_repository import CarryRepository
from .base_service import BaseService


class CarryService(BaseService[Carry, CarryRepository]):
    business_key = "cid"
    messages = ErrorMessages(
        not_found="carry not found",
        already_exists="carry cid already exists",
        foreign_keys={"localities": "locality not found"},
        invalid_value="a field exceeds the maximum length",
    )
