"""
Exceptions communes à l'API.

Les routeurs convertissent les exceptions du domaine en ApiException ;
le gestionnaire enregistré dans src.main les rend sous la forme {clé: message}.
"""
from typing import Dict, Optional

from fastapi import HTTPException, status


class FieldValidationException(Exception):
    """Levée lorsqu'un champ obligatoire est absent ou vide."""
    def __init__(self, message: str, fields=None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields or [])


class ApiException(HTTPException):
    """
    HTTPException dont le corps JSON utilise une clé explicite.

    Attributes:
        body_key: Clé du corps JSON ("error" ou "message")
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        body_key: str = "error",
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.body_key = body_key


class BadRequestException(ApiException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundException(ApiException):
    def __init__(self, detail: str, body_key: str = "error"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail, body_key=body_key)


class InternalServerException(ApiException):
    def __init__(self, detail: str = "Erreur interne du serveur."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
