from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.buyer import Buyer
from .base_repository import BaseRepository


class BuyerRepository(BaseRepository[Buyer]):
    def __init__(self, db: AsyncSession):
        super().__init__(Buyer, db)
