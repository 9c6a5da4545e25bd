from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.seller import Seller
from .base_repository import BaseRepository


class SellerRepository(BaseRepository[Seller]):
    """Sellers; `cid` is the business key."""

    def __init__(self, db: AsyncSession):
        super().__init__(Seller, db)
