from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.seller import Seller
from warehouse_api.repositories.seller_repository import SellerRepository
from .base_service import BaseService


class SellerService(BaseService[Seller, SellerRepository]):
    business_key = "cid"
    messages = ErrorMessages(
        not_found="seller not found",
        already_exists="cid already exists",
        foreign_keys={"localities": "locality not found"},
    )
