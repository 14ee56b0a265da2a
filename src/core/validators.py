"""
Validation des champs obligatoires.
"""
import logging
from typing import Any, Dict

from src.core.exceptions import FieldValidationException

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """Vrai si la valeur est absente ou une chaîne vide."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


def validate_fields(fields: Dict[str, Any], required: bool = True) -> None:
    """
    Vérifie un ensemble de champs nommés.

    Args:
        fields: Champs à vérifier, indexés par le nom vu par le client (ex: "zipCode")
        required: Si True, chaque champ doit être présent et non vide

    Raises:
        FieldValidationException: Si au moins un champ obligatoire manque
    """
    if not required:
        return

    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        logger.debug(f"Validation échouée, champs manquants: {missing}")
        raise FieldValidationException(
            f"Champs obligatoires manquants ou vides: {', '.join(missing)}.",
            fields=missing,
        )
