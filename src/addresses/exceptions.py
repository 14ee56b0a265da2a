"""Exceptions spécifiques au domaine Address."""
from typing import Optional

class AddressDomainException(Exception):
    """Classe de base pour les exceptions du domaine Address."""
    pass

class AddressNotFoundException(AddressDomainException):
    """Levée lorsqu'une adresse, ou les adresses d'un propriétaire, ne sont pas trouvées."""
    def __init__(self, address_id: Optional[str] = None, owner_id: Optional[str] = None):
        self.address_id = address_id
        self.owner_id = owner_id
        if address_id and owner_id:
            super().__init__(f"Adresse avec ID {address_id} non trouvée pour l'utilisateur ID {owner_id}.")
        elif address_id:
            super().__init__(f"Adresse avec ID {address_id} non trouvée.")
        elif owner_id:
            super().__init__(f"Aucune adresse trouvée pour l'utilisateur ID {owner_id}.")
        else:
            super().__init__("Adresse non trouvée.")

class PrimaryAddressNotFoundException(AddressDomainException):
    """Levée lorsqu'un propriétaire n'a pas d'adresse principale."""
    def __init__(self, owner_id: Optional[str] = None):
        super().__init__(f"Aucune adresse principale pour l'utilisateur ID {owner_id}.")
        self.owner_id = owner_id

class StoreConfigurationError(AddressDomainException):
    """Levée au démarrage lorsque DB_TYPE ne désigne aucun backend connu."""
    def __init__(self, db_type: Optional[str]):
        super().__init__(f"DB_TYPE invalide: '{db_type}'. Valeurs acceptées: 'sql', 'mysql' ou 'mongo'.")
        self.db_type = db_type
