import pytest

from warehouse_api.exceptions.storage import RecordNotFoundError, StorageError, StorageErrorKind
from warehouse_api.models.seller import Seller
from warehouse_api.repositories.base_repository import BaseRepository
from warehouse_api.repositories.seller_repository import SellerRepository


@pytest.fixture
def seller_repo(db_session) -> SellerRepository:
    return SellerRepository(db_session)


@pytest.fixture
async def seller_values(create_locality) -> dict:
    locality = await create_locality(id="5700")
    return {
        "cid": 10,
        "company_name": "Kiosco",
        "address": "Av. Siempre Viva 742",
        "telephone": "555-0100",
        "locality_id": locality.id,
    }


@pytest.mark.asyncio
class TestBaseRepositorySave:

    async def test_save_returns_generated_id_and_persists(self, seller_repo, seller_values):
        """
        Behavior:
            - save(**values) inserts the row and returns the server-assigned id.
            - get(id) returns an entity equal to the input in every field but id.

        Importance:
            - Round-trip guarantee every CRUD resource relies on.

        Fixtures:
            - seller_repo: SellerRepository on the test session.
            - seller_values: a valid seller whose locality exists.
        """
        # Act
        new_id = await seller_repo.save(**seller_values)
        await seller_repo.commit()
        seller = await seller_repo.get(new_id)

        # Assert
        assert new_id >= 1
        for field, value in seller_values.items():
            assert getattr(seller, field) == value

    async def test_save_unknown_field_is_rejected_before_touching_db(self, seller_repo, seller_values):
        """
        Behavior:
            - A key that is not a mapped column raises StorageError naming the key.

        Importance:
            - Typos surface as a clear error instead of a TypeError from the model constructor.
        """
        with pytest.raises(StorageError) as exc_info:
            await seller_repo.save(**seller_values, colour="red")

        assert exc_info.value.kind is StorageErrorKind.INTERNAL
        assert exc_info.value.fields == ["colour"]

    async def test_save_missing_required_field_is_value_out_of_range(self, seller_repo, seller_values):
        """
        Behavior:
            - Omitting a NOT NULL column without default raises VALUE_OUT_OF_RANGE
              listing the missing column.
        """
        seller_values.pop("company_name")

        with pytest.raises(StorageError) as exc_info:
            await seller_repo.save(**seller_values)

        assert exc_info.value.kind is StorageErrorKind.VALUE_OUT_OF_RANGE
        assert exc_info.value.fields == ["company_name"]

    async def test_save_duplicate_business_key(self, seller_repo, seller_values):
        """
        Behavior:
            - A second row with the same unique cid is classified as DUPLICATE_KEY.

        Importance:
            - The service layer relies on the kind, not on driver-specific exceptions.
        """
        await seller_repo.save(**seller_values)
        await seller_repo.commit()

        with pytest.raises(StorageError) as exc_info:
            await seller_repo.save(**seller_values)

        assert exc_info.value.kind is StorageErrorKind.DUPLICATE_KEY

    async def test_save_missing_parent_names_the_parent_table(self, seller_repo, seller_values):
        """
        Behavior:
            - A locality_id that does not exist is FOREIGN_KEY_MISSING with
              parent == "localities".

        Importance:
            - Lets services tell the client which referenced entity is missing.
        """
        seller_values["locality_id"] = "does-not-exist"

        with pytest.raises(StorageError) as exc_info:
            await seller_repo.save(**seller_values)

        assert exc_info.value.kind is StorageErrorKind.FOREIGN_KEY_MISSING
        assert exc_info.value.parent == "localities"


@pytest.mark.asyncio
class TestBaseRepositoryRead:

    async def test_get_missing_raises_not_found(self, seller_repo):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await seller_repo.get(999)

        assert exc_info.value.kind is StorageErrorKind.NOT_FOUND

    async def test_get_all_is_ordered_by_id(self, seller_repo, create_seller):
        # Arrange
        created = [await create_seller() for _ in range(3)]

        # Act
        sellers = await seller_repo.get_all()

        # Assert
        assert [s.id for s in sellers] == sorted(s.id for s in created)

    async def test_get_all_empty_is_not_an_error(self, seller_repo):
        assert await seller_repo.get_all() == []

    async def test_get_all_pagination(self, seller_repo, create_seller):
        for _ in range(4):
            await create_seller()

        page = await seller_repo.get_all(offset=1, limit=2)

        assert len(page) == 2

    async def test_exists_by_business_key(self, seller_repo, create_seller):
        seller = await create_seller(cid=77)

        assert await seller_repo.exists(cid=77) is True
        assert await seller_repo.exists(cid=78) is False
        assert await seller_repo.exists(id=seller.id, cid=77) is True

    async def test_exists_unknown_field_raises(self, seller_repo):
        with pytest.raises(StorageError):
            await seller_repo.exists(nickname="x")


@pytest.mark.asyncio
class TestBaseRepositoryUpdateDelete:

    async def test_update_writes_only_given_columns(self, seller_repo, create_seller):
        """
        Behavior:
            - update(id, telephone=...) changes telephone and leaves the rest untouched.
        """
        seller = await create_seller(company_name="Old", telephone="1")

        await seller_repo.update(seller.id, telephone="2")
        await seller_repo.commit()
        updated = await seller_repo.get(seller.id)

        assert updated.telephone == "2"
        assert updated.company_name == "Old"

    async def test_update_with_same_values_is_not_an_error(self, seller_repo, create_seller):
        """
        Behavior:
            - Writing the values a row already has must succeed (zero changed rows is fine).
        """
        seller = await create_seller(telephone="1")

        await seller_repo.update(seller.id, telephone="1")
        await seller_repo.update(seller.id)

        assert (await seller_repo.get(seller.id)).telephone == "1"

    async def test_update_to_taken_business_key_is_duplicate(self, seller_repo, create_seller):
        first = await create_seller(cid=1)
        second = await create_seller(cid=2)

        with pytest.raises(StorageError) as exc_info:
            await seller_repo.update(second.id, cid=first.cid)

        assert exc_info.value.kind is StorageErrorKind.DUPLICATE_KEY

    async def test_delete_removes_row(self, seller_repo, create_seller):
        seller = await create_seller()

        await seller_repo.delete(seller.id)
        await seller_repo.commit()

        with pytest.raises(RecordNotFoundError):
            await seller_repo.get(seller.id)

    async def test_delete_unknown_id_is_not_found(self, seller_repo):
        """
        Behavior:
            - Deleting an id that matches no row raises NOT_FOUND (unlike update).
        """
        with pytest.raises(RecordNotFoundError):
            await seller_repo.delete(12345)


async def test_generic_repository_reports_model_name(db_session):
    repo = BaseRepository(Seller, db_session)

    assert repo.model_name == "Seller"
