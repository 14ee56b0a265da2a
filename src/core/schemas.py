from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ======================================================
# Configuration Commune Pydantic
# ======================================================

class ApiBaseModel(BaseModel):
    """
    Base commune des schémas API.

    Les champs sont déclarés en snake_case côté Python et exposés en camelCase
    dans le JSON (ownerId, zipCode, isPrimary...). Les deux formes sont acceptées
    en entrée.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True # Remplace orm_mode
    )

class MessageResponse(BaseModel):
    """Corps de réponse de confirmation."""
    message: str
