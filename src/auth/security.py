"""
Fonctions utilitaires de sécurité pour l'authentification.

Comprend la création et le décodage des tokens JWT. L'émission des tokens
relève du fournisseur d'identité ; create_access_token sert aux outils et aux tests.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import JWTError, jwt
import logging

# Importer la configuration du module
from src.auth.config import JWT_SECRET_KEY, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from src.auth.constants import CLAIM_SUBJECT

logger = logging.getLogger(__name__)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Crée un token JWT avec les données fournies et une expiration."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Décode un token JWT et retourne ses claims, ou None si invalide/expiré/sans 'sub'."""
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"Erreur de décodage JWT: {e}") # Inclut expiration, signature invalide, etc.
        return None

    subject = payload.get(CLAIM_SUBJECT)
    if subject is None or str(subject).strip() == "":
        logger.warning("Token JWT décodé mais sans champ 'sub' (user_id).")
        return None
    return payload
