from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlmodel import SQLModel, Field
from pydantic import AliasChoices, field_validator
from pydantic import Field as SchemaField

from src.core.schemas import ApiBaseModel
from src.addresses.constants import (
    REQUIRED_ADDRESS_FIELDS,
    MAX_OWNER_ID_LENGTH,
    MAX_STREET_LENGTH,
    MAX_NUMBER_LENGTH,
    MAX_COMPLEMENT_LENGTH,
    MAX_NEIGHBORHOOD_LENGTH,
    MAX_CITY_LENGTH,
    MAX_STATE_LENGTH,
    MAX_ZIP_CODE_LENGTH,
    MAX_COUNTRY_LENGTH,
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _stringify_number(v: Any) -> Any:
    # Les clients envoient parfois numéro, CEP ou identifiants sous forme numérique
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


# --- Modèle de table pour les adresses ---
class Address(SQLModel, table=True):
    """
    Modèle de table représentant une adresse postale.

    Attributes:
        id: Identifiant unique attribué par la base
        owner_id: Identifiant de l'utilisateur propriétaire
        complement: Complément d'adresse (optionnel)
        country: Pays (optionnel)
        is_primary: Indique si c'est l'adresse principale du propriétaire
    """
    __tablename__ = "addresses"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: str = Field(max_length=MAX_OWNER_ID_LENGTH, index=True)
    street: str = Field(max_length=MAX_STREET_LENGTH)
    number: str = Field(max_length=MAX_NUMBER_LENGTH)
    complement: Optional[str] = Field(default=None, max_length=MAX_COMPLEMENT_LENGTH)
    neighborhood: str = Field(max_length=MAX_NEIGHBORHOOD_LENGTH)
    city: str = Field(max_length=MAX_CITY_LENGTH)
    state: str = Field(max_length=MAX_STATE_LENGTH)
    zip_code: str = Field(max_length=MAX_ZIP_CODE_LENGTH)
    country: Optional[str] = Field(default=None, max_length=MAX_COUNTRY_LENGTH)
    is_primary: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# --- Schémas API pour les adresses ---
class AddressCreate(ApiBaseModel):
    """
    Schéma pour la création d'une adresse.

    Tous les champs sont optionnels au niveau du schéma : la présence des champs
    obligatoires est vérifiée par validate_fields, qui produit un message lisible.
    "userId" est accepté comme synonyme de "ownerId".
    """
    owner_id: Optional[str] = SchemaField(
        default=None, validation_alias=AliasChoices("ownerId", "userId", "owner_id")
    )
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None

    @field_validator("owner_id", "number", "zip_code", mode="before")
    @classmethod
    def normalize_numbers(cls, v):
        return _stringify_number(v)

    def required_fields(self) -> Dict[str, Any]:
        """Champs obligatoires indexés par leur nom côté client."""
        return {name: getattr(self, field) for name, field in REQUIRED_ADDRESS_FIELDS.items()}

    def to_record(self) -> Dict[str, Any]:
        """Données prêtes pour le repository (noms de champs du modèle)."""
        return self.model_dump(by_alias=False)


class AddressUpdate(ApiBaseModel):
    """
    Schéma pour la mise à jour partielle d'une adresse.

    Seuls les champs fournis sont fusionnés. Le propriétaire et le statut
    d'adresse principale ne sont pas modifiables ici (endpoint dédié pour isPrimary).
    L'identifiant peut être transmis dans le corps ("addressId").
    """
    address_id: Optional[str] = None
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None

    @field_validator("address_id", "number", "zip_code", mode="before")
    @classmethod
    def normalize_numbers(cls, v):
        return _stringify_number(v)

    def to_patch(self) -> Dict[str, Any]:
        """Champs effectivement fournis par le client, hors identifiant."""
        return self.model_dump(exclude_unset=True, exclude={"address_id"}, by_alias=False)


class AddressRead(ApiBaseModel):
    """
    Schéma pour la lecture d'une adresse.

    L'identifiant est opaque et toujours exposé sous forme de chaîne,
    quel que soit le backend (entier SQL ou ObjectId Mongo).
    """
    id: str
    owner_id: str
    street: str
    number: str
    complement: Optional[str] = None
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: Optional[str] = None
    is_primary: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("id", "owner_id", "number", "zip_code", mode="before")
    @classmethod
    def stringify_identifiers(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)
