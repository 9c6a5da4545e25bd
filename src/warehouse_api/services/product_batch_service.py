from warehouse_api.exceptions.mapper import ErrorMessages
from warehouse_api.models.product_batch import ProductBatch
from warehouse_api.repositories.product_batch_repository import ProductBatchRepository
from .base_service import BaseService


class ProductBatchService(BaseService[ProductBatch, ProductBatchRepository]):
    business_key = "batch_number"
    messages = ErrorMessages(
        not_found="product batch not found",
        already_exists="batch_number already exists",
        foreign_keys={
            "products": "the associated product does not exist",
            "sections": "the associated section does not exist",
        },
        invalid_value="the string provided does not match the valid date format yyyy-mm-dd",
    )
