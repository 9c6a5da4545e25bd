from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.inbound_order import InboundOrder
from .base_repository import BaseRepository


class InboundOrderRepository(BaseRepository[InboundOrder]):
    def __init__(self, db: AsyncSession):
        super().__init__(InboundOrder, db)
