import pytest

BUYER = {"card_number_id": "402323", "first_name": "Jhon", "last_name": "Doe"}


@pytest.mark.asyncio
class TestBuyersApi:

    async def test_create_then_get(self, client):
        """
        Behavior:
            - POST /buyers returns 201 and the stored buyer with a generated id.
            - GET /buyers/{id} returns the same fields.
        """
        # Act
        created = await client.post("/api/v1/buyers", json=BUYER)
        buyer_id = created.json()["data"]["id"]
        fetched = await client.get(f"/api/v1/buyers/{buyer_id}")

        # Assert
        assert created.status_code == 201
        assert fetched.status_code == 200
        assert fetched.json() == {"data": {**BUYER, "id": buyer_id}}

    async def test_duplicate_card_number_conflict(self, client):
        await client.post("/api/v1/buyers", json=BUYER)

        resp = await client.post("/api/v1/buyers", json={**BUYER, "first_name": "Other"})

        assert resp.status_code == 409
        assert resp.json() == {"error": "card_number_id already exists"}

    async def test_patch_to_taken_card_number_conflict(self, client, create_buyer):
        taken = await create_buyer()
        buyer = await create_buyer()

        resp = await client.patch(f"/api/v1/buyers/{buyer.id}", json={"card_number_id": taken.card_number_id})

        assert resp.status_code == 409
        assert resp.json() == {"error": "card_number_id already exists"}

    async def test_patch_own_card_number_is_not_a_conflict(self, client, create_buyer):
        """
        Behavior:
            - Sending the buyer's current card number with another change succeeds;
              only a change of the key is checked against other rows.
        """
        buyer = await create_buyer(last_name="Before")

        resp = await client.patch(
            f"/api/v1/buyers/{buyer.id}",
            json={"card_number_id": buyer.card_number_id, "last_name": "After"},
        )

        assert resp.status_code == 200
        assert resp.json()["data"]["last_name"] == "After"
        assert resp.json()["data"]["first_name"] == buyer.first_name

    async def test_list_and_delete(self, client, create_buyer):
        first = await create_buyer()
        second = await create_buyer()

        listed = await client.get("/api/v1/buyers")
        deleted = await client.delete(f"/api/v1/buyers/{first.id}")
        gone = await client.get(f"/api/v1/buyers/{first.id}")

        assert [b["id"] for b in listed.json()["data"]] == [first.id, second.id]
        assert deleted.status_code == 204
        assert gone.status_code == 404
        assert gone.json() == {"error": "buyer not found"}

    async def test_patch_unknown(self, client):
        resp = await client.patch("/api/v1/buyers/4242", json={"first_name": "X"})

        assert resp.status_code == 404
        assert resp.json() == {"error": "buyer not found"}
