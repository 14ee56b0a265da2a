import logging
from typing import Annotated, List, Optional, Union
from fastapi import APIRouter, Body, status

from src.auth.dependencies import CurrentUserDep, AdminUserDep
from src.core.exceptions import BadRequestException, NotFoundException, InternalServerException, FieldValidationException
from src.core.schemas import MessageResponse
from src.core.validators import is_blank
from src.addresses.constants import (
    ERROR_ADDRESS_NOT_FOUND,
    ERROR_PRIMARY_ADDRESS_NOT_FOUND,
    ERROR_NO_ADDRESSES_FOR_USER,
    ERROR_ADDRESS_NOT_CREATED,
    MESSAGE_PRIMARY_ADDRESS_UPDATED,
    MESSAGE_ADDRESS_DELETED,
)
from src.addresses.models import AddressCreate, AddressRead, AddressUpdate
from src.addresses.dependencies import AddressServiceDep

# Exceptions
from src.addresses.exceptions import AddressNotFoundException, PrimaryAddressNotFoundException

logger = logging.getLogger(__name__)

# Création du routeur FastAPI (préfixe ajouté dans src.main)
router = APIRouter(tags=["Addresses"])

# Identifiants acceptés aussi dans le corps JSON (entiers ou chaînes)
BodyId = Optional[Union[str, int]]
AddressIdBody = Annotated[BodyId, Body(alias="addressId", embed=True)]
UserIdBody = Annotated[BodyId, Body(alias="userId", embed=True)]
OwnerIdBody = Annotated[BodyId, Body(alias="ownerId", embed=True)]


def first_present(*values) -> Optional[str]:
    """Premier identifiant non vide, dans l'ordre chemin, query, corps."""
    for value in values:
        if not is_blank(value):
            return str(value)
    return None


@router.post("", response_model=AddressRead, status_code=status.HTTP_201_CREATED)
async def create_address(
    address_data: AddressCreate,
    current_user: CurrentUserDep,
    address_service: AddressServiceDep
):
    """
    Crée une nouvelle adresse.
    Tous les champs sauf complement et country sont obligatoires.
    """
    logger.info(f"[AddrRouter] Tentative création adresse pour owner {address_data.owner_id} (par user {current_user.id})")
    try:
        return await address_service.create_address(address_data)
    except FieldValidationException as e:
        logger.warning(f"[AddrRouter] Création refusée: {e.message}")
        raise BadRequestException(detail=e.message)
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur création adresse owner {address_data.owner_id}: {e}", exc_info=True)
        raise BadRequestException(detail=ERROR_ADDRESS_NOT_CREATED)

@router.get("/all", response_model=List[AddressRead])
async def list_all_addresses(
    current_user: AdminUserDep,
    address_service: AddressServiceDep
):
    """
    Liste toutes les adresses, tous propriétaires confondus (rôle élevé requis).
    """
    logger.info(f"[AddrRouter] Listage de toutes les adresses par user {current_user.id}")
    try:
        return await address_service.list_all_addresses()
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur listage de toutes les adresses: {e}", exc_info=True)
        raise InternalServerException()

@router.get("/user", response_model=List[AddressRead])
@router.get("/user/{user_id}", response_model=List[AddressRead])
async def list_owner_addresses(
    current_user: CurrentUserDep,
    address_service: AddressServiceDep,
    user_id: Optional[str] = None,
    body_user_id: UserIdBody = None,
    body_owner_id: OwnerIdBody = None,
):
    """
    Liste les adresses d'un propriétaire.

    Un rôle élevé peut cibler n'importe quel propriétaire (chemin, query ou corps) ;
    les autres utilisateurs obtiennent toujours leurs propres adresses.
    """
    owner_id = current_user.resolve_owner_id(first_present(user_id, body_user_id, body_owner_id))
    logger.info(f"[AddrRouter] Listage adresses owner {owner_id} par user {current_user.id}")
    try:
        return await address_service.list_owner_addresses(owner_id)
    except AddressNotFoundException:
        logger.warning(f"[AddrRouter] Aucune adresse pour owner {owner_id}")
        raise NotFoundException(detail=ERROR_NO_ADDRESSES_FOR_USER, body_key="message")
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur listage adresses owner {owner_id}: {e}", exc_info=True)
        raise InternalServerException()

@router.get("/primary", response_model=AddressRead)
@router.get("/primary/{user_id}", response_model=AddressRead)
async def read_primary_address(
    current_user: CurrentUserDep,
    address_service: AddressServiceDep,
    user_id: Optional[str] = None,
    body_user_id: UserIdBody = None,
):
    """
    Récupère l'adresse principale d'un propriétaire.
    Seul un rôle élevé peut cibler un autre propriétaire que lui-même.
    """
    owner_id = current_user.resolve_owner_id(first_present(user_id, body_user_id))
    logger.info(f"[AddrRouter] Lecture adresse principale owner {owner_id} par user {current_user.id}")
    try:
        return await address_service.get_primary_address(owner_id)
    except PrimaryAddressNotFoundException:
        logger.warning(f"[AddrRouter] Pas d'adresse principale pour owner {owner_id}")
        raise NotFoundException(detail=ERROR_PRIMARY_ADDRESS_NOT_FOUND)
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur lecture adresse principale owner {owner_id}: {e}", exc_info=True)
        raise InternalServerException()

@router.patch("/primary", response_model=MessageResponse)
@router.post("/primary", response_model=MessageResponse)
@router.patch("/primary/{user_id}/{address_id}", response_model=MessageResponse)
@router.post("/primary/{user_id}/{address_id}", response_model=MessageResponse)
async def set_primary_address(
    current_user: CurrentUserDep,
    address_service: AddressServiceDep,
    user_id: Optional[str] = None,
    address_id: Optional[str] = None,
    body_user_id: UserIdBody = None,
    body_address_id: AddressIdBody = None,
):
    """
    Définit l'adresse principale d'un propriétaire.
    Les autres adresses du propriétaire perdent leur statut dans la même écriture.
    Seul un rôle élevé peut cibler un autre propriétaire que lui-même.
    """
    owner_id = current_user.resolve_owner_id(first_present(user_id, body_user_id))
    target_id = first_present(address_id, body_address_id)
    logger.info(f"[AddrRouter] Définition adresse principale {target_id} pour owner {owner_id}")
    try:
        await address_service.set_primary_address(owner_id=owner_id, address_id=target_id)
        return MessageResponse(message=MESSAGE_PRIMARY_ADDRESS_UPDATED)
    except AddressNotFoundException as e:
        logger.warning(f"[AddrRouter] set_primary refusé: {e}")
        raise NotFoundException(detail=ERROR_ADDRESS_NOT_FOUND)
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur définition adresse principale {target_id} owner {owner_id}: {e}", exc_info=True)
        raise InternalServerException()

@router.get("", response_model=AddressRead)
@router.get("/{address_id}", response_model=AddressRead)
async def read_address(
    current_user: CurrentUserDep,
    address_service: AddressServiceDep,
    address_id: Optional[str] = None,
    body_address_id: AddressIdBody = None,
):
    """
    Récupère une adresse par son ID (chemin, query ou corps).
    """
    target_id = first_present(address_id, body_address_id)
    logger.info(f"[AddrRouter] Lecture adresse ID {target_id} par user {current_user.id}")
    try:
        return await address_service.get_address(target_id)
    except AddressNotFoundException:
        logger.warning(f"[AddrRouter] Adresse ID {target_id} non trouvée")
        raise NotFoundException(detail=ERROR_ADDRESS_NOT_FOUND)
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur lecture adresse {target_id}: {e}", exc_info=True)
        raise InternalServerException()

@router.put("", response_model=AddressRead)
@router.patch("", response_model=AddressRead)
@router.put("/{address_id}", response_model=AddressRead)
@router.patch("/{address_id}", response_model=AddressRead)
async def update_address(
    current_user: CurrentUserDep,
    address_service: AddressServiceDep,
    address_id: Optional[str] = None,
    address_data: Optional[AddressUpdate] = None,
):
    """
    Met à jour une adresse existante.
    Seuls les champs fournis dans le corps de la requête seront mis à jour.
    """
    address_data = address_data or AddressUpdate()
    target_id = first_present(address_id, address_data.address_id)
    logger.info(f"[AddrRouter] Tentative MAJ adresse ID {target_id} par user {current_user.id}")
    try:
        return await address_service.update_address(target_id, address_data)
    except FieldValidationException as e:
        logger.warning(f"[AddrRouter] MAJ adresse {target_id} refusée: {e.message}")
        raise BadRequestException(detail=e.message)
    except AddressNotFoundException:
        logger.warning(f"[AddrRouter] Adresse ID {target_id} non trouvée pour MAJ")
        raise NotFoundException(detail=ERROR_ADDRESS_NOT_FOUND)
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur MAJ adresse {target_id}: {e}", exc_info=True)
        raise InternalServerException()

@router.delete("", response_model=MessageResponse)
@router.delete("/{address_id}", response_model=MessageResponse)
async def delete_address(
    current_user: CurrentUserDep,
    address_service: AddressServiceDep,
    address_id: Optional[str] = None,
    body_address_id: AddressIdBody = None,
):
    """
    Supprime une adresse.
    """
    target_id = first_present(address_id, body_address_id)
    logger.info(f"[AddrRouter] Tentative suppression adresse ID {target_id} par user {current_user.id}")
    try:
        await address_service.delete_address(target_id)
        return MessageResponse(message=MESSAGE_ADDRESS_DELETED)
    except AddressNotFoundException:
        logger.warning(f"[AddrRouter] Adresse ID {target_id} non trouvée pour suppression")
        raise NotFoundException(detail=ERROR_ADDRESS_NOT_FOUND)
    except Exception as e:
        logger.error(f"[AddrRouter] Erreur suppression adresse {target_id}: {e}", exc_info=True)
        raise InternalServerException()
