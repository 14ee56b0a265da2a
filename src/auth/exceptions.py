"""
Exceptions personnalisées pour le module d'authentification.

Ce module contient les exceptions spécifiques au module d'authentification.
"""
from fastapi import status

from src.core.exceptions import ApiException
from src.auth.constants import (
    ERROR_TOKEN_INVALID,
    ERROR_TOKEN_MISSING,
    ERROR_PERMISSION_DENIED,
    HEADER_WWW_AUTHENTICATE,
    HEADER_WWW_AUTHENTICATE_VALUE,
)

class TokenInvalidException(ApiException):
    """Exception pour un token JWT invalide."""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ERROR_TOKEN_INVALID,
            headers={HEADER_WWW_AUTHENTICATE: HEADER_WWW_AUTHENTICATE_VALUE},
        )

class TokenMissingException(ApiException):
    """Exception pour un token JWT manquant."""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ERROR_TOKEN_MISSING,
            headers={HEADER_WWW_AUTHENTICATE: HEADER_WWW_AUTHENTICATE_VALUE},
        )

class PermissionDeniedException(ApiException):
    """Exception pour une permission refusée."""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=ERROR_PERMISSION_DENIED,
        )
