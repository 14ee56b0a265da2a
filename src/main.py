"""
Module principal de l'application FastAPI Address API.

Ce module configure et initialise l'instance FastAPI, initialise le backend de stockage
sélectionné (SQL ou MongoDB), ajoute le middleware CORS, enregistre les gestionnaires
d'exceptions et inclut le routeur des adresses.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import settings
from src.database import engine, create_tables, init_mongo
from src.core.exceptions import ApiException
from src.addresses.constants import MONGO_BACKEND
from src.addresses.dependencies import normalize_db_type

# --- Importer les routeurs ---
from src.addresses.router import router as address_router

# Configurer le logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

# Lève StoreConfigurationError si DB_TYPE est invalide
STORE_BACKEND = normalize_db_type(settings.DB_TYPE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le backend de stockage au démarrage et libère les connexions à l'arrêt."""
    mongo_client = None
    if STORE_BACKEND == MONGO_BACKEND:
        mongo_client = await init_mongo()
    elif settings.DB_CREATE_TABLES:
        logger.info("Création des tables SQL si nécessaire...")
        await create_tables()
    logger.info(f"Application démarrée (backend: {STORE_BACKEND}).")

    yield

    if mongo_client is not None:
        await mongo_client.close()
    elif engine is not None:
        await engine.dispose()
    logger.info("Application arrêtée.")


app = FastAPI(
    title="Address API",
    description="API de gestion des adresses postales et de l'adresse principale des utilisateurs.",
    version="1.0.0",
    lifespan=lifespan,
)

# Configurer CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ======================================================
# Gestionnaires d'exceptions
# ======================================================
@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException):
    return JSONResponse(
        status_code=exc.status_code,
        content={exc.body_key: exc.detail},
        headers=exc.headers,
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Les erreurs de forme de requête sont renvoyées en 400 {error}, comme les champs manquants."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", []) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    logger.warning(f"Requête invalide sur {request.url.path}: {messages}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(messages) or "Requête invalide."},
    )

# ======================================================
# Inclure les routeurs
# ======================================================
app.include_router(address_router, prefix=f"{settings.API_V1_PREFIX}/addresses")


@app.get("/", tags=["Health"])
async def health_check():
    return {"status": "ok", "service": "address-api", "backend": STORE_BACKEND}
