from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.product_record import ProductRecord
from .base_repository import BaseRepository


class ProductRecordRepository(BaseRepository[ProductRecord]):
    def __init__(self, db: AsyncSession):
        super().__init__(ProductRecord, db)
