import pytest

from src.addresses.dependencies import (
    get_address_repository,
    get_mongo_address_repository,
    get_sql_address_repository,
    normalize_db_type,
    select_repository_provider,
)
from src.addresses.exceptions import StoreConfigurationError
from src.addresses.mongo_repository import MongoAddressRepository


@pytest.mark.parametrize("db_type, expected", [
    ("sql", "sql"),
    ("mysql", "sql"),
    ("MySQL", "sql"),
    (" mongo ", "mongo"),
])
def test_normalize_db_type(db_type, expected):
    assert normalize_db_type(db_type) == expected

@pytest.mark.parametrize("db_type", ["postgres", "", None])
def test_unknown_db_type_fails(db_type):
    with pytest.raises(StoreConfigurationError):
        select_repository_provider(db_type)

def test_select_repository_provider():
    assert select_repository_provider("mysql") is get_sql_address_repository
    assert select_repository_provider("mongo") is get_mongo_address_repository

def test_default_backend_is_sql():
    assert get_address_repository is get_sql_address_repository

def test_mongo_provider_builds_repository():
    assert isinstance(get_mongo_address_repository(), MongoAddressRepository)
