"""Interfaces pour les repositories d'adresses.

Ce fichier contient le contrat commun aux backends de stockage des adresses
(SQL via FastCRUD, MongoDB via Beanie).
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.addresses.models import AddressRead


class AbstractAddressRepository(ABC):
    """
    Interface pour le repository des adresses.

    Les filtres utilisent les noms de champs du modèle (owner_id, is_primary, id).
    Un identifiant inconnu ou mal formé est traité comme une adresse absente.
    """

    @abstractmethod
    async def create(self, address_data: Dict[str, Any]) -> AddressRead:
        """Crée une nouvelle adresse."""
        pass

    @abstractmethod
    async def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[AddressRead]:
        """Liste les adresses correspondant aux filtres (toutes si aucun filtre)."""
        pass

    @abstractmethod
    async def find_one(self, filters: Dict[str, Any]) -> Optional[AddressRead]:
        """Récupère la première adresse correspondant aux filtres."""
        pass

    @abstractmethod
    async def get_by_id(self, address_id: str) -> Optional[AddressRead]:
        """Récupère une adresse par son ID."""
        pass

    @abstractmethod
    async def update_where(self, filters: Dict[str, Any], values: Dict[str, Any]) -> int:
        """Met à jour toutes les adresses correspondant aux filtres. Retourne le nombre de lignes touchées."""
        pass

    @abstractmethod
    async def update(self, address_id: str, address_data: Dict[str, Any]) -> Optional[AddressRead]:
        """Fusionne les champs fournis dans une adresse existante."""
        pass

    @abstractmethod
    async def delete(self, address_id: str) -> bool:
        """Supprime une adresse. Retourne False si elle n'existe pas."""
        pass

    @abstractmethod
    async def set_primary(self, owner_id: str, address_id: str) -> bool:
        """
        Définit l'adresse principale d'un propriétaire.

        Retire le statut aux autres adresses du propriétaire puis l'attribue à address_id.
        Retourne False, sans rien modifier, si l'adresse n'appartient pas au propriétaire.
        """
        pass
