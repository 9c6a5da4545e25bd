from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.warehouse import Warehouse
from .base_repository import BaseRepository


class WarehouseRepository(BaseRepository[Warehouse]):
    def __init__(self, db: AsyncSession):
        super().__init__(Warehouse, db)
