import pytest

WAREHOUSE = {
    "address": "Rua Pedro Dias, 33",
    "telephone": "4833723307",
    "warehouse_code": "RDW",
    "minimum_capacity": 10,
    "minimum_temperature": -5,
}


@pytest.mark.asyncio
class TestWarehousesApi:

    async def test_create_without_locality_then_get(self, client):
        """
        Behavior:
            - locality_id is optional; omitted, it is stored and returned as null.
            - GET /warehouses/{id} returns what POST stored.
        """
        # Act
        created = await client.post("/api/v1/warehouses", json=WAREHOUSE)
        warehouse_id = created.json()["data"]["id"]
        fetched = await client.get(f"/api/v1/warehouses/{warehouse_id}")

        # Assert
        assert created.status_code == 201
        assert fetched.json() == {"data": {**WAREHOUSE, "locality_id": None, "id": warehouse_id}}

    async def test_create_with_known_locality(self, client, create_locality):
        locality = await create_locality()

        resp = await client.post("/api/v1/warehouses", json={**WAREHOUSE, "locality_id": locality.id})

        assert resp.status_code == 201
        assert resp.json()["data"]["locality_id"] == locality.id

    async def test_unknown_locality_conflict(self, client):
        resp = await client.post("/api/v1/warehouses", json={**WAREHOUSE, "locality_id": "99999"})

        assert resp.status_code == 409
        assert resp.json() == {"error": "locality not found"}

    async def test_duplicate_code_conflict(self, client):
        await client.post("/api/v1/warehouses", json=WAREHOUSE)

        resp = await client.post("/api/v1/warehouses", json={**WAREHOUSE, "address": "elsewhere"})

        assert resp.status_code == 409
        assert resp.json() == {"error": "warehouse code already exists"}

    async def test_patch_to_taken_code_conflict(self, client, create_warehouse):
        taken = await create_warehouse()
        warehouse = await create_warehouse()

        resp = await client.patch(
            f"/api/v1/warehouses/{warehouse.id}", json={"warehouse_code": taken.warehouse_code}
        )

        assert resp.status_code == 409
        assert resp.json() == {"error": "warehouse code already exists"}

    async def test_patch_keeps_absent_fields(self, client, create_warehouse):
        warehouse = await create_warehouse(minimum_capacity=10, minimum_temperature=-5)

        resp = await client.patch(
            f"/api/v1/warehouses/{warehouse.id}",
            json={"minimum_temperature": 0, "address": ""},
        )

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["minimum_temperature"] == 0
        assert data["minimum_capacity"] == 10
        assert data["address"] == warehouse.address
        assert data["warehouse_code"] == warehouse.warehouse_code

    async def test_patch_unknown_locality_conflict(self, client, create_warehouse):
        warehouse = await create_warehouse()

        resp = await client.patch(f"/api/v1/warehouses/{warehouse.id}", json={"locality_id": "99999"})

        assert resp.status_code == 409
        assert resp.json() == {"error": "locality not found"}

    async def test_delete(self, client, create_warehouse):
        warehouse = await create_warehouse()

        deleted = await client.delete(f"/api/v1/warehouses/{warehouse.id}")
        again = await client.delete(f"/api/v1/warehouses/{warehouse.id}")

        assert deleted.status_code == 204
        assert again.status_code == 404
        assert again.json() == {"error": "warehouse not found"}
