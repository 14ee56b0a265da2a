# Standard Library

from typing import AsyncGenerator, Dict

# Third-Party Libraries
import pytest
import pytest_asyncio

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# First-Party Libraries (Your project)
from src.main import app
from src.database import get_db_session
from src.auth.security import create_access_token
from src.addresses.models import Address  # Enregistre la table dans SQLModel.metadata

# URL de base pour la DB en mémoire
TEST_DATABASE_BASE_URL = "sqlite+aiosqlite:///:memory:"

ADDRESSES_API_PREFIX = "/api/v1/addresses"

USER_ID = "u1"
OTHER_USER_ID = "u2"
ADMIN_ID = "admin-1"

# --- Fixtures de Base ---

@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Crée un engine, des tables, et fournit une session DB en mémoire pour chaque test."""
    # Une seule connexion partagée : la base :memory: survit aux commits
    engine: AsyncEngine = create_async_engine(
        TEST_DATABASE_BASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with TestingSessionLocal() as session:
        yield session

    await engine.dispose()

@pytest_asyncio.fixture(scope="function")
async def test_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Fournit un AsyncClient httpx qui utilise la session DB de test isolée."""
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    del app.dependency_overrides[get_db_session]

# --- Fixtures d'authentification ---

def _bearer(user_id: str, role: str) -> Dict[str, str]:
    access_token = create_access_token(data={"sub": user_id, "role": role})
    return {"Authorization": f"Bearer {access_token}"}

@pytest.fixture
def auth_headers_user() -> Dict[str, str]:
    """Headers d'authentification pour l'utilisateur standard u1."""
    return _bearer(USER_ID, "Customer")

@pytest.fixture
def auth_headers_user_2() -> Dict[str, str]:
    """Headers d'authentification pour le deuxième utilisateur standard u2."""
    return _bearer(OTHER_USER_ID, "Customer")

@pytest.fixture
def auth_headers_admin() -> Dict[str, str]:
    """Headers d'authentification pour un administrateur."""
    return _bearer(ADMIN_ID, "Admin")

# --- Fixtures Adresses ---

@pytest.fixture
def address_payload() -> Dict[str, str]:
    return {
        "ownerId": USER_ID,
        "street": "Main",
        "number": "1",
        "neighborhood": "N",
        "city": "C",
        "state": "S",
        "zipCode": "00000",
    }

@pytest_asyncio.fixture(scope="function")
async def test_address(db_session: AsyncSession) -> Address:
    """Crée une adresse pour u1 directement en base."""
    address = Address(
        owner_id=USER_ID,
        street="Rue des Lilas",
        number="12",
        neighborhood="Centre",
        city="Lyon",
        state="Rhône",
        zip_code="69001",
        country="France",
    )
    db_session.add(address)
    await db_session.commit()
    await db_session.refresh(address)
    return address

@pytest_asyncio.fixture(scope="function")
async def test_address_2(db_session: AsyncSession) -> Address:
    """Deuxième adresse de u1."""
    address = Address(
        owner_id=USER_ID,
        street="Avenue Foch",
        number="3",
        neighborhood="Bellecour",
        city="Lyon",
        state="Rhône",
        zip_code="69002",
    )
    db_session.add(address)
    await db_session.commit()
    await db_session.refresh(address)
    return address
