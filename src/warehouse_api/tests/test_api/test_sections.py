import pytest


@pytest.mark.asyncio
class TestSectionsApi:

    async def test_patch_temperature_zero_and_sentinel(self, client, create_section):
        section = await create_section(current_temperature=8, minimum_temperature=-3)

        resp = await client.patch(
            f"/api/v1/sections/{section.id}",
            json={"current_temperature": 0, "minimum_temperature": -273},
        )

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["current_temperature"] == 0
        assert data["minimum_temperature"] == -3

    async def test_products_report_dispatch(self, client, create_section, create_product_batch):
        first = await create_section()
        second = await create_section()
        await create_product_batch(section_id=first.id, current_quantity=30)

        everything = await client.get("/api/v1/sections/reportProducts")
        one = await client.get("/api/v1/sections/reportProducts", params={"id": first.id})
        missing = await client.get("/api/v1/sections/reportProducts", params={"id": 999_999})

        assert everything.status_code == 200
        assert [row["section_id"] for row in everything.json()["data"]] == [first.id, second.id]
        assert one.json()["data"] == [
            {"section_id": first.id, "section_number": first.section_number, "products_count": 30}
        ]
        assert missing.status_code == 404

    async def test_report_id_must_be_numeric(self, client):
        resp = await client.get("/api/v1/sections/reportProducts", params={"id": "aaa"})

        assert resp.status_code == 400

    async def test_delete_then_missing(self, client, create_section):
        section = await create_section()

        deleted = await client.delete(f"/api/v1/sections/{section.id}")
        again = await client.delete(f"/api/v1/sections/{section.id}")

        assert deleted.status_code == 204
        assert again.status_code == 404
        assert again.json() == {"error": "section not found"}

    async def test_delete_while_batches_point_at_it(self, client, create_section, create_product_batch):
        """
        Behavior:
            - A section holding a batch cannot be deleted.
            - The failure is an internal error, not "a referenced entity does not exist",
              and the section is still there afterwards.
        """
        # Arrange
        section = await create_section()
        await create_product_batch(section_id=section.id)

        # Act
        resp = await client.delete(f"/api/v1/sections/{section.id}")
        still_there = await client.get(f"/api/v1/sections/{section.id}")

        # Assert
        assert resp.status_code == 500
        assert resp.json() == {"error": "internal server error"}
        assert still_there.status_code == 200
