import pytest

from warehouse_api.exceptions.storage import RecordNotFoundError
from warehouse_api.repositories import (
    EmployeeRepository,
    LocalityRepository,
    ProductRepository,
    PurchaseOrderRepository,
    SectionRepository,
)


@pytest.mark.asyncio
class TestLocalityReports:

    async def test_sellers_report_counts_every_locality(self, db_session, create_locality, create_seller):
        """
        Behavior:
            - One row per locality, including localities without sellers (count 0),
              ordered by locality id.

        Importance:
            - The "all" report must not drop empty parents.
        """
        # Arrange
        busy = await create_locality(id="1001", locality_name="Busy")
        await create_locality(id="1002", locality_name="Empty")
        await create_seller(locality_id=busy.id)
        await create_seller(locality_id=busy.id)

        # Act
        rows = await LocalityRepository(db_session).get_sellers_report()

        # Assert
        assert rows == [
            {"locality_id": "1001", "locality_name": "Busy", "sellers_count": 2},
            {"locality_id": "1002", "locality_name": "Empty", "sellers_count": 0},
        ]

    async def test_sellers_report_by_id(self, db_session, create_locality, create_seller):
        locality = await create_locality(id="2001")
        await create_seller(locality_id=locality.id)

        rows = await LocalityRepository(db_session).get_sellers_report_by_id("2001")

        assert len(rows) == 1
        assert rows[0]["sellers_count"] == 1

    async def test_report_by_unknown_id_is_not_found(self, db_session):
        with pytest.raises(RecordNotFoundError):
            await LocalityRepository(db_session).get_carries_report_by_id("nope")

    async def test_carries_report(self, db_session, create_locality, create_carry):
        locality = await create_locality(id="3001")
        await create_carry(locality_id=locality.id)

        rows = await LocalityRepository(db_session).get_carries_report()

        assert rows == [{"locality_id": "3001", "locality_name": locality.locality_name, "carries_count": 1}]


@pytest.mark.asyncio
class TestSectionProductsReport:

    async def test_sum_of_current_quantities(self, db_session, create_section, create_product_batch):
        """
        Behavior:
            - products_count is the sum of current_quantity over the section's batches,
              and 0 for a section with no batches.
        """
        full = await create_section()
        empty = await create_section()
        await create_product_batch(section_id=full.id, current_quantity=150)
        await create_product_batch(section_id=full.id, current_quantity=50)

        rows = await SectionRepository(db_session).get_products_report()

        by_id = {row["section_id"]: row for row in rows}
        assert by_id[full.id]["products_count"] == 200
        assert by_id[empty.id]["products_count"] == 0
        assert by_id[full.id]["section_number"] == full.section_number


@pytest.mark.asyncio
class TestEmployeeInboundOrdersReport:

    async def test_employee_without_orders_counts_zero(self, db_session, create_employee):
        employee = await create_employee()

        rows = await EmployeeRepository(db_session).get_inbound_orders_report_by_id(employee.id)

        assert rows == [
            {
                "id": employee.id,
                "card_number_id": employee.card_number_id,
                "first_name": employee.first_name,
                "last_name": employee.last_name,
                "warehouse_id": employee.warehouse_id,
                "inbound_orders_count": 0,
            }
        ]

    async def test_counts_orders(self, db_session, create_inbound_order):
        order = await create_inbound_order()
        await create_inbound_order(employee_id=order.employee_id, warehouse_id=order.warehouse_id)

        rows = await EmployeeRepository(db_session).get_inbound_orders_report()

        counts = {row["id"]: row["inbound_orders_count"] for row in rows}
        assert counts[order.employee_id] == 2


@pytest.mark.asyncio
class TestProductAndBuyerReports:

    async def test_records_per_product(self, db_session, create_product, create_product_record):
        product = await create_product(description="Bananas")
        await create_product_record(product_id=product.id)
        await create_product_record(product_id=product.id)

        rows = await ProductRepository(db_session).get_records_report_by_id(product.id)

        assert rows == [{"product_id": product.id, "description": "Bananas", "records_count": 2}]

    async def test_orders_per_buyer(self, db_session, create_buyer, create_purchase_order):
        buyer = await create_buyer()
        idle = await create_buyer()
        await create_purchase_order(buyer_id=buyer.id)

        rows = await PurchaseOrderRepository(db_session).get_orders_by_buyer_report()

        counts = {row["buyer_id"]: row["orders_count"] for row in rows}
        assert counts == {buyer.id: 1, idle.id: 0}
        assert rows[0]["card_number_id"] == buyer.card_number_id
