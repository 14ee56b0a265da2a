"""
Module définissant le contexte d'authentification.

Ce module contient :
- CurrentUser : identité de l'appelant extraite du token ({id, role}).
"""
from typing import Optional

from sqlmodel import SQLModel

from src.config import settings

# =====================================================
# Schémas: Contexte d'authentification
# =====================================================

class CurrentUser(SQLModel):
    """Appelant authentifié, tel que décrit par les claims du token."""
    id: str
    role: Optional[str] = None

    @property
    def is_elevated(self) -> bool:
        """Vrai si le rôle permet d'agir pour le compte d'autres propriétaires."""
        return self.role is not None and self.role in settings.ELEVATED_ROLES

    def resolve_owner_id(self, requested_owner_id: Optional[str] = None) -> str:
        """
        Détermine le propriétaire sur lequel l'appelant peut agir.

        Un rôle élevé obtient le propriétaire demandé (ou lui-même si rien n'est fourni) ;
        tout autre appelant est ramené à son propre identifiant.
        """
        if self.is_elevated and requested_owner_id:
            return str(requested_owner_id)
        return self.id
