from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.models.carry import Carry
from warehouse_api.models.locality import Locality
from warehouse_api.models.seller import Seller
from .base_repository import BaseRepository


class LocalityRepository(BaseRepository[Locality]):
    """
    Localities plus the two per-locality reports: how many sellers and how many
    carriers are registered in each. Localities without any appear with a zero count.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Locality, db)

    @staticmethod
    def _count_by_locality(child, count_label: str) -> Select:
        return (
            select(
                Locality.id.label("locality_id"),
                Locality.locality_name,
                func.count(child.id).label(count_label),
            )
            .select_from(Locality)
            .outerjoin(child, child.locality_id == Locality.id)
            .group_by(Locality.id, Locality.locality_name)
            .order_by(Locality.id)
        )

    async def get_sellers_report(self) -> list[dict[str, Any]]:
        return await self._fetch_report(self._count_by_locality(Seller, "sellers_count"))

    async def get_sellers_report_by_id(self, locality_id: str) -> list[dict[str, Any]]:
        return await self._fetch_report(
            self._count_by_locality(Seller, "sellers_count"), Locality.id, locality_id
        )

    async def get_carries_report(self) -> list[dict[str, Any]]:
        return await self._fetch_report(self._count_by_locality(Carry, "carries_count"))

    async def get_carries_report_by_id(self, locality_id: str) -> list[dict[str, Any]]:
        return await self._fetch_report(
            self._count_by_locality(Carry, "carries_count"), Locality.id, locality_id
        )
