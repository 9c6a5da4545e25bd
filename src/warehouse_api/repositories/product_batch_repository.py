from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.product_batch import ProductBatch
from .base_repository import BaseRepository


class ProductBatchRepository(BaseRepository[ProductBatch]):
    """Product batches; `batch_number` is the business key."""

    def __init__(self, db: AsyncSession):
        super().__init__(ProductBatch, db)
