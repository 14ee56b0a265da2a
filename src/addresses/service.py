"""
Module définissant le service pour la gestion des adresses.
"""
import logging
from typing import List, Optional

# First-party imports
from src.addresses.constants import REQUIRED_ADDRESS_FIELDS
from src.addresses.exceptions import AddressNotFoundException, PrimaryAddressNotFoundException
from src.addresses.interfaces.repositories import AbstractAddressRepository
from src.addresses.models import AddressCreate, AddressRead, AddressUpdate
from src.core.validators import is_blank, validate_fields


logger = logging.getLogger(__name__)

class AddressService:
    """
    Service pour gérer la logique métier des adresses.

    Ce service encapsule la logique métier liée aux adresses,
    en utilisant le repository sélectionné au démarrage (SQL ou Mongo).
    Il lève des exceptions du domaine ; leur traduction HTTP revient au routeur.
    """

    def __init__(self, repository: AbstractAddressRepository):
        """
        Initialise le service avec un repository.

        Args:
            repository: Repository pour les opérations sur les adresses
        """
        self.repository = repository
        logger.debug("AddressService initialisé.")

    async def create_address(self, address_data: AddressCreate) -> AddressRead:
        """
        Crée une nouvelle adresse après vérification des champs obligatoires.

        Args:
            address_data: Données de l'adresse à créer

        Returns:
            AddressRead: L'adresse créée

        Raises:
            FieldValidationException: Si un champ obligatoire est absent ou vide
        """
        validate_fields(address_data.required_fields(), required=True)
        logger.debug(f"[AddrService] Création adresse pour owner {address_data.owner_id}")
        return await self.repository.create(address_data.to_record())

    async def list_owner_addresses(self, owner_id: str) -> List[AddressRead]:
        """
        Liste les adresses d'un propriétaire, adresse principale en tête.

        Raises:
            AddressNotFoundException: Si le propriétaire n'a aucune adresse
        """
        logger.debug(f"[AddrService] Listage adresses pour owner {owner_id}")
        addresses = await self.repository.find_all({"owner_id": owner_id})
        if not addresses:
            raise AddressNotFoundException(owner_id=owner_id)
        return addresses

    async def list_all_addresses(self) -> List[AddressRead]:
        logger.debug("[AddrService] Listage de toutes les adresses")
        return await self.repository.find_all()

    async def get_address(self, address_id: Optional[str]) -> AddressRead:
        """Récupère une adresse par ID. Lève AddressNotFoundException si absente."""
        if is_blank(address_id):
            raise AddressNotFoundException()
        address = await self.repository.get_by_id(address_id)
        if not address:
            raise AddressNotFoundException(address_id=address_id)
        return address

    async def set_primary_address(self, owner_id: str, address_id: Optional[str]) -> None:
        """
        Définit l'adresse principale d'un propriétaire.

        Raises:
            AddressNotFoundException: Si l'adresse n'existe pas pour ce propriétaire (aucune écriture)
        """
        if is_blank(address_id):
            raise AddressNotFoundException(owner_id=owner_id)
        logger.debug(f"[AddrService] Définition adresse principale {address_id} pour owner {owner_id}")
        updated = await self.repository.set_primary(owner_id=owner_id, address_id=address_id)
        if not updated:
            raise AddressNotFoundException(address_id=address_id, owner_id=owner_id)

    async def get_primary_address(self, owner_id: str) -> AddressRead:
        """
        Récupère l'adresse principale d'un propriétaire.

        Raises:
            PrimaryAddressNotFoundException: Si aucune adresse principale n'est définie
        """
        address = await self.repository.find_one({"owner_id": owner_id, "is_primary": True})
        if not address:
            raise PrimaryAddressNotFoundException(owner_id=owner_id)
        return address

    async def update_address(self, address_id: Optional[str], address_data: AddressUpdate) -> AddressRead:
        """
        Met à jour une adresse existante.

        Seuls les champs fournis sont fusionnés ; un champ obligatoire fourni
        vide est refusé.

        Args:
            address_id: Identifiant de l'adresse
            address_data: Champs à modifier

        Returns:
            AddressRead: L'adresse mise à jour

        Raises:
            AddressNotFoundException: Si l'adresse n'existe pas
            FieldValidationException: Si un champ obligatoire est vidé
        """
        existing = await self.get_address(address_id)
        patch = address_data.to_patch()

        supplied_required = {
            name: patch[field]
            for name, field in REQUIRED_ADDRESS_FIELDS.items()
            if field in patch
        }
        validate_fields(supplied_required, required=True)

        if not patch:
            logger.info(f"[AddrService] Aucune donnée à mettre à jour pour l'adresse {address_id}")
            return existing

        updated = await self.repository.update(existing.id, patch)
        if not updated:
            # Supprimée entre la lecture et l'écriture
            raise AddressNotFoundException(address_id=address_id)
        logger.info(f"[AddrService] Adresse ID {address_id} mise à jour.")
        return updated

    async def delete_address(self, address_id: Optional[str]) -> None:
        """Supprime une adresse. Lève AddressNotFoundException si absente."""
        if is_blank(address_id):
            raise AddressNotFoundException()
        deleted = await self.repository.delete(address_id)
        if not deleted:
            raise AddressNotFoundException(address_id=address_id)
        logger.info(f"[AddrService] Adresse ID {address_id} supprimée.")
