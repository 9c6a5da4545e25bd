import pytest

from warehouse_api.exceptions.base import NotFoundError
from warehouse_api.repositories import (
    EmployeeRepository,
    LocalityRepository,
    PurchaseOrderRepository,
    SectionRepository,
)
from warehouse_api.services import (
    EmployeeService,
    LocalityService,
    PurchaseOrderService,
    SectionService,
)


@pytest.mark.asyncio
class TestReportDispatch:

    async def test_without_key_covers_every_parent(self, db_session, create_locality):
        """
        Behavior:
            - No key: one row per locality.
            - A key: exactly that locality's row.
        """
        service = LocalityService(LocalityRepository(db_session))
        first = await create_locality()
        second = await create_locality()

        everything = await service.report_sellers()
        one = await service.report_sellers(second.id)

        assert {row["locality_id"] for row in everything} == {first.id, second.id}
        assert [row["locality_id"] for row in one] == [second.id]

    async def test_unknown_key_is_not_found(self, db_session):
        service = SectionService(SectionRepository(db_session))

        with pytest.raises(NotFoundError) as exc_info:
            await service.report_products(999_999)

        assert exc_info.value.message == "section not found"
        assert exc_info.value.http_status() == 404

    async def test_empty_all_report_is_empty_list(self, db_session):
        service = EmployeeService(EmployeeRepository(db_session))

        assert await service.report_inbound_orders() == []

    async def test_buyer_report_unknown_buyer(self, db_session):
        service = PurchaseOrderService(PurchaseOrderRepository(db_session))

        with pytest.raises(NotFoundError) as exc_info:
            await service.report_by_buyer(5)

        assert exc_info.value.message == "buyer not found"
