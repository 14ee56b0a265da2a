"""
Constantes du domaine pour le module addresses.
"""

# Messages d'erreur
ERROR_ADDRESS_NOT_FOUND = "Adresse non trouvée."
ERROR_PRIMARY_ADDRESS_NOT_FOUND = "Adresse principale non trouvée."
ERROR_NO_ADDRESSES_FOR_USER = "Aucune adresse trouvée pour cet utilisateur."
ERROR_ADDRESS_NOT_CREATED = "Impossible de créer l'adresse."

# Messages de confirmation
MESSAGE_PRIMARY_ADDRESS_UPDATED = "Adresse principale mise à jour avec succès."
MESSAGE_ADDRESS_DELETED = "Adresse supprimée avec succès."

# Champs obligatoires : nom côté client -> nom du champ du modèle
REQUIRED_ADDRESS_FIELDS = {
    "ownerId": "owner_id",
    "street": "street",
    "number": "number",
    "neighborhood": "neighborhood",
    "city": "city",
    "state": "state",
    "zipCode": "zip_code",
}

# Limites et contraintes
MAX_OWNER_ID_LENGTH = 64
MAX_STREET_LENGTH = 255
MAX_NUMBER_LENGTH = 20
MAX_COMPLEMENT_LENGTH = 255
MAX_NEIGHBORHOOD_LENGTH = 100
MAX_CITY_LENGTH = 100
MAX_STATE_LENGTH = 100
MAX_ZIP_CODE_LENGTH = 20
MAX_COUNTRY_LENGTH = 100

# Backends de stockage acceptés pour DB_TYPE
SQL_BACKEND = "sql"
MONGO_BACKEND = "mongo"
DB_TYPE_ALIASES = {
    "sql": SQL_BACKEND,
    "mysql": SQL_BACKEND,
    "mongo": MONGO_BACKEND,
}
