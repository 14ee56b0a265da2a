"""
Implémentation SQL du repository des adresses.

Ce fichier contient l'implémentation SQLAlchemy/FastCRUD du repository
utilisée lorsque DB_TYPE vaut "sql" (ou "mysql").
"""
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import update, case
from fastcrud import FastCRUD

from src.addresses.models import Address, AddressRead, utcnow
from src.addresses.interfaces.repositories import AbstractAddressRepository

logger = logging.getLogger(__name__)

# Initialisation de FastCRUD pour le modèle Address
crud_address = FastCRUD(Address)


def _parse_id(address_id: Any) -> Optional[int]:
    """Convertit un identifiant opaque en clé primaire SQL. None si mal formé."""
    try:
        return int(str(address_id).strip())
    except (TypeError, ValueError):
        return None


def _prepare_filters(filters: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Convertit le filtre "id" en clé primaire. None si l'id est mal formé (aucun résultat possible)."""
    prepared = dict(filters or {})
    if "id" in prepared:
        pk = _parse_id(prepared["id"])
        if pk is None:
            return None
        prepared["id"] = pk
    return prepared


class SQLAlchemyAddressRepository(AbstractAddressRepository):
    """Implémentation SQLAlchemy du repository d'adresses."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, address_data: Dict[str, Any]) -> AddressRead:
        """Crée une nouvelle adresse."""
        address = Address(**address_data)
        try:
            self.session.add(address)
            await self.session.commit()
            await self.session.refresh(address)
        except Exception as e:
            await self.session.rollback()
            logger.error(f"[Repo Adr] Erreur création adresse pour owner {address_data.get('owner_id')}: {e}", exc_info=True)
            raise
        logger.info(f"[Repo Adr] Adresse ID {address.id} créée pour owner {address.owner_id}.")
        return AddressRead.model_validate(address)

    async def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[AddressRead]:
        prepared = _prepare_filters(filters)
        if prepared is None:
            return []
        result = await crud_address.get_multi(
            db=self.session,
            offset=0,
            limit=None,
            sort_columns=["is_primary", "id"],
            sort_orders=["desc", "asc"],
            **prepared
        )
        return [AddressRead.model_validate(addr) for addr in result.get("data", [])]

    async def find_one(self, filters: Dict[str, Any]) -> Optional[AddressRead]:
        prepared = _prepare_filters(filters)
        if prepared is None:
            return None
        address = await crud_address.get(db=self.session, **prepared)
        return AddressRead.model_validate(address) if address else None

    async def get_by_id(self, address_id: str) -> Optional[AddressRead]:
        """Récupère une adresse par son ID."""
        return await self.find_one({"id": address_id})

    async def update_where(self, filters: Dict[str, Any], values: Dict[str, Any]) -> int:
        prepared = _prepare_filters(filters)
        if prepared is None:
            return 0
        query = (
            update(Address)
            .filter_by(**prepared)
            .values(**values, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(query)
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"[Repo Adr] Erreur MAJ multiple adresses {prepared}: {e}", exc_info=True)
            raise
        return result.rowcount

    async def update(self, address_id: str, address_data: Dict[str, Any]) -> Optional[AddressRead]:
        """Met à jour une adresse existante."""
        pk = _parse_id(address_id)
        if pk is None or not await crud_address.exists(db=self.session, id=pk):
            logger.warning(f"[Repo Adr] Tentative MAJ adresse ID {address_id} non trouvée.")
            return None

        try:
            await crud_address.update(db=self.session, object=dict(address_data), id=pk)
        except Exception as e:
            await self.session.rollback()
            logger.error(f"[Repo Adr] Erreur MAJ adresse {address_id}: {e}", exc_info=True)
            raise
        return await self.get_by_id(pk)

    async def delete(self, address_id: str) -> bool:
        """Supprime une adresse."""
        pk = _parse_id(address_id)
        if pk is None or not await crud_address.exists(db=self.session, id=pk):
            logger.warning(f"[Repo Adr] Tentative suppression adresse ID {address_id} non trouvée.")
            return False

        try:
            await crud_address.delete(db=self.session, id=pk)
        except Exception as e:
            await self.session.rollback()
            logger.error(f"[Repo Adr] Erreur suppression adresse {address_id}: {e}", exc_info=True)
            raise
        return True

    async def set_primary(self, owner_id: str, address_id: str) -> bool:
        """
        Définit une adresse comme étant l'adresse principale du propriétaire.

        Une seule requête UPDATE bascule toutes les adresses du propriétaire :
        la cible passe à True, les autres à False. Rien n'est modifié si la
        cible n'appartient pas au propriétaire.
        """
        pk = _parse_id(address_id)
        if pk is None or not await crud_address.exists(db=self.session, id=pk, owner_id=owner_id):
            logger.warning(f"[Repo Adr] Adresse {address_id} non trouvée ou n'appartient pas à owner {owner_id}.")
            return False

        query = (
            update(Address)
            .where(Address.owner_id == owner_id)
            .values(
                is_primary=case((Address.id == pk, True), else_=False),
                updated_at=utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            await self.session.execute(query)
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"[Repo Adr] Erreur set_primary adresse {address_id} owner {owner_id}: {e}", exc_info=True)
            raise
        logger.info(f"[Repo Adr] Adresse ID {address_id} définie comme principale pour owner {owner_id}.")
        return True
