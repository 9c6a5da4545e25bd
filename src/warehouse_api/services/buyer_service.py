from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.buyer import Buyer
from warehouse_api.repositories.buyer_repository import BuyerRepository
from .base_service import BaseService


class BuyerService(BaseService[Buyer, BuyerRepository]):
    business_key = "card_number_id"
    messages = ErrorMessages(
        not_found="buyer not found",
        already_exists="card_number_id already exists",
    )
