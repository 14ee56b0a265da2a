import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
# Importer SQLModel pour utiliser ses métadonnées
from sqlmodel import SQLModel

# Importer settings depuis config
from src.config import settings

logger = logging.getLogger(__name__)

try:
    # Créer le moteur de base de données asynchrone
    engine = create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO_LOG, # Utiliser la variable de config pour echo
        future=True # Utilise l'API 2.0 de SQLAlchemy
    )

    # Créer une classe de session asynchrone
    AsyncSessionLocal = sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False # Empêche les objets d'expirer après commit
    )

    logger.info("Moteur et Session Factory SQLAlchemy Async configurés.")

except Exception as e:
    logger.critical(f"Erreur lors de la configuration de SQLAlchemy Async: {e}", exc_info=True)
    engine = None
    AsyncSessionLocal = None

# Fonction dépendance pour obtenir une session de base de données asynchrone
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides an async database session."""
    if AsyncSessionLocal is None:
        logger.error("La factory de session SQLAlchemy n'est pas initialisée.")
        raise RuntimeError("Database session factory is not initialized.")

    async with AsyncSessionLocal() as session:
        try:
            yield session
            # Les commits sont faits par le repository, opération par opération.
        except Exception as e:
            logger.error(f"Erreur durant la session DB, rollback: {e}", exc_info=True)
            await session.rollback()
            raise
        finally:
            await session.close()
            logger.debug("Session DB fermée.")

async def create_tables():
    """Crée toutes les tables définies dans SQLModel.metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

async def init_mongo():
    """
    Initialise Beanie sur la base MongoDB configurée.

    Returns:
        AsyncMongoClient: Le client ouvert, à fermer à l'arrêt de l'application
    """
    # Imports locaux : inutiles tant que le backend SQL est sélectionné
    from beanie import init_beanie
    from pymongo import AsyncMongoClient
    from src.addresses.mongo_repository import AddressDocument

    client = AsyncMongoClient(settings.MONGO_URL)
    await init_beanie(database=client[settings.MONGO_DB], document_models=[AddressDocument])
    logger.info(f"Beanie initialisé sur la base Mongo '{settings.MONGO_DB}'.")
    return client
