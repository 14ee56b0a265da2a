"""
Module définissant les dépendances FastAPI pour l'authentification.

Fournit des dépendances pour:
- L'obtention de l'utilisateur courant à partir du token JWT
- La vérification des droits élevés (admin)
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from src.auth.config import OAUTH2_TOKEN_URL
from src.auth.constants import CLAIM_SUBJECT, CLAIM_ROLE
from src.auth.exceptions import TokenMissingException, TokenInvalidException, PermissionDeniedException
from src.auth.models import CurrentUser
from src.auth.security import decode_access_token

logger = logging.getLogger(__name__)

# --- Dépendances OAuth2 ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=OAUTH2_TOKEN_URL, auto_error=False)

async def get_current_user(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
) -> CurrentUser:
    """
    Vérifie le token JWT et retourne l'utilisateur courant.

    Args:
        token: Token JWT optionnel

    Returns:
        CurrentUser: Identité et rôle de l'appelant

    Raises:
        TokenMissingException: Si le token est manquant
        TokenInvalidException: Si le token est invalide
    """
    if token is None:
        logger.warning("Token manquant dans la requête.")
        raise TokenMissingException()

    claims = decode_access_token(token)
    if claims is None:
        logger.warning("Token invalide.")
        raise TokenInvalidException()

    user = CurrentUser(id=str(claims[CLAIM_SUBJECT]), role=claims.get(CLAIM_ROLE))
    logger.debug(f"Utilisateur authentifié: ID {user.id} (rôle {user.role})")
    return user

async def get_current_admin_user(
    current_user: Annotated[CurrentUser, Depends(get_current_user)]
) -> CurrentUser:
    """
    Vérifie que l'utilisateur courant possède un rôle élevé.

    Raises:
        PermissionDeniedException: Si l'utilisateur n'a pas de rôle élevé
    """
    if not current_user.is_elevated:
        logger.warning(f"Tentative d'accès à une ressource admin par un utilisateur non-admin: ID {current_user.id}")
        raise PermissionDeniedException()
    return current_user

CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
AdminUserDep = Annotated[CurrentUser, Depends(get_current_admin_user)]
