import logging
from typing import Annotated, Callable, Optional
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.database import get_db_session
from src.addresses.constants import DB_TYPE_ALIASES, SQL_BACKEND, MONGO_BACKEND
from src.addresses.exceptions import StoreConfigurationError
from src.addresses.interfaces.repositories import AbstractAddressRepository
from src.addresses.repositories import SQLAlchemyAddressRepository
from src.addresses.mongo_repository import MongoAddressRepository
from src.addresses.service import AddressService

logger = logging.getLogger(__name__)

DbSessionDep = Annotated[AsyncSession, Depends(get_db_session)]

# --- Fournisseurs de repository, un par backend ---
def get_sql_address_repository(db: DbSessionDep) -> AbstractAddressRepository:
    """Injecte l'implémentation SQL du repository d'adresses."""
    return SQLAlchemyAddressRepository(session=db)

def get_mongo_address_repository() -> AbstractAddressRepository:
    """Injecte l'implémentation Mongo (Beanie doit être initialisé au démarrage)."""
    return MongoAddressRepository()

REPOSITORY_PROVIDERS = {
    SQL_BACKEND: get_sql_address_repository,
    MONGO_BACKEND: get_mongo_address_repository,
}

def normalize_db_type(db_type: Optional[str]) -> str:
    """
    Ramène DB_TYPE à un backend connu ("mysql" -> "sql").

    Raises:
        StoreConfigurationError: Si la valeur ne désigne aucun backend
    """
    backend = DB_TYPE_ALIASES.get((db_type or "").strip().lower())
    if backend is None:
        raise StoreConfigurationError(db_type)
    return backend

def select_repository_provider(db_type: Optional[str]) -> Callable[..., AbstractAddressRepository]:
    """Retourne la dépendance FastAPI fournissant le repository du backend configuré."""
    backend = normalize_db_type(db_type)
    logger.info(f"Backend de stockage des adresses sélectionné: {backend}")
    return REPOSITORY_PROVIDERS[backend]

# Sélection faite une seule fois, au chargement du module
get_address_repository = select_repository_provider(settings.DB_TYPE)

AddressRepositoryDep = Annotated[AbstractAddressRepository, Depends(get_address_repository)]

# Dépendance pour obtenir le service d'adresses
def get_address_service(repository: AddressRepositoryDep) -> AddressService:
    """
    Fournit une instance du service d'adresses sur le repository sélectionné.

    Args:
        repository: Repository du backend configuré

    Returns:
        AddressService: Instance configurée du service d'adresses
    """
    return AddressService(repository=repository)

# Alias pour l'injection simplifiée du service
AddressServiceDep = Annotated[AddressService, Depends(get_address_service)]
