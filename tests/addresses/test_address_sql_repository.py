import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.addresses.models import Address
from src.addresses.repositories import SQLAlchemyAddressRepository


def _record(owner_id: str = "u1", street: str = "Main") -> dict:
    return {
        "owner_id": owner_id,
        "street": street,
        "number": "1",
        "complement": None,
        "neighborhood": "N",
        "city": "C",
        "state": "S",
        "zip_code": "00000",
        "country": None,
    }


@pytest.mark.asyncio
async def test_create_returns_string_id(db_session: AsyncSession):
    repository = SQLAlchemyAddressRepository(db_session)

    created = await repository.create(_record())

    assert isinstance(created.id, str)
    assert created.is_primary is False
    fetched = await repository.get_by_id(created.id)
    assert fetched == created

@pytest.mark.asyncio
async def test_find_all_filters_by_owner(db_session: AsyncSession):
    repository = SQLAlchemyAddressRepository(db_session)
    await repository.create(_record("u1"))
    await repository.create(_record("u1", street="Second"))
    await repository.create(_record("u2"))

    assert len(await repository.find_all()) == 3
    owned = await repository.find_all({"owner_id": "u1"})
    assert {a.street for a in owned} == {"Main", "Second"}
    assert await repository.find_all({"owner_id": "inconnu"}) == []

@pytest.mark.asyncio
async def test_malformed_id_behaves_as_absent(db_session: AsyncSession):
    repository = SQLAlchemyAddressRepository(db_session)

    assert await repository.get_by_id("abc") is None
    assert await repository.find_one({"id": "abc"}) is None
    assert await repository.update("abc", {"city": "X"}) is None
    assert await repository.delete("abc") is False
    assert await repository.set_primary("u1", "abc") is False

@pytest.mark.asyncio
async def test_update_merges_values(db_session: AsyncSession, test_address: Address):
    repository = SQLAlchemyAddressRepository(db_session)

    updated = await repository.update(str(test_address.id), {"city": "Paris"})

    assert updated.city == "Paris"
    assert updated.street == "Rue des Lilas"

@pytest.mark.asyncio
async def test_update_where_returns_row_count(db_session: AsyncSession, test_address: Address, test_address_2: Address):
    repository = SQLAlchemyAddressRepository(db_session)

    count = await repository.update_where({"owner_id": "u1"}, {"country": "France"})

    assert count == 2
    for address in await repository.find_all({"owner_id": "u1"}):
        assert address.country == "France"

@pytest.mark.asyncio
async def test_delete(db_session: AsyncSession, test_address: Address):
    repository = SQLAlchemyAddressRepository(db_session)

    assert await repository.delete(str(test_address.id)) is True
    assert await repository.get_by_id(str(test_address.id)) is None
    assert await repository.delete(str(test_address.id)) is False

@pytest.mark.asyncio
async def test_set_primary_keeps_single_primary(db_session: AsyncSession, test_address: Address, test_address_2: Address):
    repository = SQLAlchemyAddressRepository(db_session)
    a_id, b_id = str(test_address.id), str(test_address_2.id)

    assert await repository.set_primary("u1", a_id) is True
    assert await repository.set_primary("u1", b_id) is True

    primaries = await repository.find_all({"owner_id": "u1", "is_primary": True})
    assert [a.id for a in primaries] == [b_id]
    assert (await repository.get_by_id(a_id)).is_primary is False

@pytest.mark.asyncio
async def test_set_primary_wrong_owner_writes_nothing(db_session: AsyncSession, test_address: Address):
    repository = SQLAlchemyAddressRepository(db_session)
    await repository.set_primary("u1", str(test_address.id))

    assert await repository.set_primary("u2", str(test_address.id)) is False

    assert (await repository.get_by_id(str(test_address.id))).is_primary is True
