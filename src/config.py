import logging
from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from typing import List

logger = logging.getLogger(__name__)

# Charger les variables d'environnement AVANT de définir la classe Settings
load_dotenv()

DEFAULT_JWT_SECRET_KEY = "remplacer_par_une_vraie_cle_secrete_forte"

# Classe de configuration utilisant Pydantic BaseSettings
class Settings(BaseSettings):
    # --- Sélection du backend de stockage ---
    # "sql" (ou "mysql") : SQLAlchemy async + FastCRUD, "mongo" : Beanie
    DB_TYPE: str = "sql"

    # --- Base de Données SQL ---
    DATABASE_URL: str = "sqlite+aiosqlite:///./addresses.db"
    DB_ECHO_LOG: bool = False
    DB_CREATE_TABLES: bool = True

    # --- MongoDB ---
    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DB: str = "addresses"

    # --- JWT ---
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET_KEY
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # --- Rôles ---
    # Rôles autorisés à agir pour le compte d'un autre propriétaire
    ELEVATED_ROLES: List[str] = ["Admin"]

    # --- Application ---
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore' # Ignorer les variables d'env non définies dans le modèle

# Instancier la classe de configuration
settings = Settings()

if settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET_KEY:
    logger.warning("La variable JWT_SECRET_KEY utilise la valeur par défaut. Veuillez définir une clé secrète forte.")

logger.info(f"Configuration chargée: DB_TYPE={settings.DB_TYPE}, prefixe API={settings.API_V1_PREFIX}")
