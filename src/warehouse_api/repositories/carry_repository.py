from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.carry import Carry
from .base_repository import BaseRepository


class CarryRepository(BaseRepository[Carry]):
    """Carriers; `cid` is the business key."""

    def __init__(self, db: AsyncSession):
        super().__init__(Carry, db)
