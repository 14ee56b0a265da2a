"""
Implémentation MongoDB du repository des adresses (Beanie).

Utilisée lorsque DB_TYPE vaut "mongo". La collection est "addresses".
"""
import logging
from datetime import datetime
from typing import Optional, List, Dict, Any

from beanie import Document, Indexed, PydanticObjectId
from beanie.operators import Set
from bson import ObjectId
from pydantic import Field
from pymongo import ASCENDING, DESCENDING

from src.addresses.models import AddressRead, utcnow
from src.addresses.interfaces.repositories import AbstractAddressRepository

logger = logging.getLogger(__name__)


class AddressDocument(Document):
    owner_id: Indexed(str)
    street: str
    number: str
    complement: Optional[str] = None
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: Optional[str] = None
    is_primary: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "addresses"


def _parse_object_id(address_id: Any) -> Optional[PydanticObjectId]:
    if address_id is None or not ObjectId.is_valid(str(address_id)):
        return None
    return PydanticObjectId(str(address_id))


def _to_query(filters: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Traduit les filtres du modèle en requête Mongo. None si l'id est mal formé."""
    query = dict(filters or {})
    if "id" in query:
        oid = _parse_object_id(query.pop("id"))
        if oid is None:
            return None
        query["_id"] = oid
    return query


def _to_read(document: AddressDocument) -> AddressRead:
    return AddressRead.model_validate(document)


class MongoAddressRepository(AbstractAddressRepository):
    """Implémentation Beanie du repository d'adresses."""

    async def create(self, address_data: Dict[str, Any]) -> AddressRead:
        """Crée une nouvelle adresse."""
        document = AddressDocument(**address_data)
        try:
            await document.insert()
        except Exception as e:
            logger.error(f"[Repo Adr Mongo] Erreur création adresse pour owner {address_data.get('owner_id')}: {e}", exc_info=True)
            raise
        logger.info(f"[Repo Adr Mongo] Adresse ID {document.id} créée pour owner {document.owner_id}.")
        return _to_read(document)

    async def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[AddressRead]:
        query = _to_query(filters)
        if query is None:
            return []
        documents = await AddressDocument.find(query).sort(
            [("is_primary", DESCENDING), ("_id", ASCENDING)]
        ).to_list()
        return [_to_read(doc) for doc in documents]

    async def find_one(self, filters: Dict[str, Any]) -> Optional[AddressRead]:
        query = _to_query(filters)
        if query is None:
            return None
        document = await AddressDocument.find_one(query)
        return _to_read(document) if document else None

    async def get_by_id(self, address_id: str) -> Optional[AddressRead]:
        """Récupère une adresse par son ID."""
        oid = _parse_object_id(address_id)
        if oid is None:
            return None
        document = await AddressDocument.get(oid)
        return _to_read(document) if document else None

    async def update_where(self, filters: Dict[str, Any], values: Dict[str, Any]) -> int:
        query = _to_query(filters)
        if query is None:
            return 0
        result = await AddressDocument.find(query).update(Set({**values, "updated_at": utcnow()}))
        return result.modified_count if result is not None else 0

    async def update(self, address_id: str, address_data: Dict[str, Any]) -> Optional[AddressRead]:
        """Met à jour une adresse existante."""
        oid = _parse_object_id(address_id)
        document = await AddressDocument.get(oid) if oid is not None else None
        if not document:
            logger.warning(f"[Repo Adr Mongo] Tentative MAJ adresse ID {address_id} non trouvée.")
            return None
        await document.set({**address_data, "updated_at": utcnow()})
        return _to_read(document)

    async def delete(self, address_id: str) -> bool:
        """Supprime une adresse."""
        oid = _parse_object_id(address_id)
        document = await AddressDocument.get(oid) if oid is not None else None
        if not document:
            logger.warning(f"[Repo Adr Mongo] Tentative suppression adresse ID {address_id} non trouvée.")
            return False
        await document.delete()
        return True

    async def set_primary(self, owner_id: str, address_id: str) -> bool:
        """
        Définit l'adresse principale du propriétaire.

        Une seule mise à jour par pipeline recalcule is_primary pour toutes les
        adresses du propriétaire : la cible passe à True, les autres à False.
        """
        oid = _parse_object_id(address_id)
        document = await AddressDocument.get(oid) if oid is not None else None
        if not document or document.owner_id != owner_id:
            logger.warning(f"[Repo Adr Mongo] Adresse {address_id} non trouvée ou n'appartient pas à owner {owner_id}.")
            return False

        now = utcnow()
        await AddressDocument.get_pymongo_collection().update_many(
            {"owner_id": owner_id},
            [{"$set": {"is_primary": {"$eq": ["$_id", oid]}, "updated_at": now}}],
        )
        logger.info(f"[Repo Adr Mongo] Adresse ID {address_id} définie comme principale pour owner {owner_id}.")
        return True
