from datetime import date, timedelta

import pytest

PRODUCT = {
    "description": "Apples",
    "expiration_rate": 1,
    "freezing_rate": 2,
    "height": 6.4,
    "length": 4.5,
    "net_weight": 3.4,
    "product_code": "PROD01",
    "recommended_freezing_temperature": 1.3,
    "width": 1.2,
    "product_type_id": 1,
    "seller_id": None,
}


@pytest.mark.asyncio
class TestProductsApi:

    async def test_patch_merges_into_stored_product(self, client):
        """
        Behavior:
            - PATCH with net_weight and description returns the merged entity; GET agrees.
        """
        created = await client.post("/api/v1/products", json=PRODUCT)
        product_id = created.json()["data"]["id"]

        patched = await client.patch(
            f"/api/v1/products/{product_id}", json={"net_weight": 13.0, "description": "Bananas"}
        )
        fetched = await client.get(f"/api/v1/products/{product_id}")

        expected = {**PRODUCT, "id": product_id, "net_weight": 13.0, "description": "Bananas"}
        assert patched.status_code == 200
        assert patched.json()["data"] == expected
        assert fetched.json()["data"] == expected

    async def test_unknown_seller(self, client):
        resp = await client.post("/api/v1/products", json={**PRODUCT, "seller_id": 99})

        assert resp.status_code == 409
        assert resp.json() == {"error": "seller not found"}

    async def test_duplicate_code(self, client):
        await client.post("/api/v1/products", json=PRODUCT)

        resp = await client.post("/api/v1/products", json=PRODUCT)

        assert resp.status_code == 409
        assert resp.json() == {"error": "product code already exists"}

    async def test_records_report(self, client, create_product, create_product_record):
        product = await create_product()
        await create_product_record(product_id=product.id)

        one = await client.get("/api/v1/products/reportRecords", params={"id": product.id})
        missing = await client.get("/api/v1/products/reportRecords", params={"id": 999})

        assert one.status_code == 200
        assert one.json()["data"] == [
            {"product_id": product.id, "description": product.description, "records_count": 1}
        ]
        assert missing.status_code == 404
        assert missing.json() == {"error": "product not found"}


@pytest.mark.asyncio
class TestProductRecordsApi:

    async def test_past_date_is_unprocessable(self, client, create_product):
        product = await create_product()
        body = {"last_update_date": "2021-12-24", "purchase_price": 2.5, "sale_price": 3.5, "product_id": product.id}

        resp = await client.post("/api/v1/productRecords", json=body)

        assert resp.status_code == 422
        assert resp.json() == {"error": "invalid date"}

    async def test_today_is_created(self, client, create_product):
        product = await create_product()
        today = date.today().isoformat()
        body = {"last_update_date": today, "purchase_price": 2.5, "sale_price": 3.5, "product_id": product.id}

        resp = await client.post("/api/v1/productRecords", json=body)

        assert resp.status_code == 201
        assert resp.json()["data"]["last_update_date"] == today


@pytest.mark.asyncio
class TestProductBatchesApi:

    async def test_create_accepts_legacy_temperature_key(self, client, create_product, create_section):
        product = await create_product()
        section = await create_section()
        body = {
            "batch_number": 111,
            "current_quantity": 200,
            "current_temperature": 20,
            "due_date": (date.today() + timedelta(days=10)).isoformat(),
            "initial_quantity": 10,
            "manufacturing_date": "2022-04-04",
            "manufacturing_hour": 10,
            "minumum_temperature": 5,
            "product_id": product.id,
            "section_id": section.id,
        }

        resp = await client.post("/api/v1/productBatches", json=body)

        assert resp.status_code == 201
        assert resp.json()["data"]["minimum_temperature"] == 5

    async def test_malformed_date_is_unprocessable(self, client):
        body = {
            "batch_number": 1,
            "current_quantity": 1,
            "current_temperature": 1,
            "due_date": "04/04/2022",
            "initial_quantity": 1,
            "manufacturing_date": "2022-04-04",
            "manufacturing_hour": 1,
            "minimum_temperature": 1,
            "product_id": 1,
            "section_id": 1,
        }

        resp = await client.post("/api/v1/productBatches", json=body)

        assert resp.status_code == 422
