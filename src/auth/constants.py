"""
Constantes pour le module d'authentification.

Ce module contient les constantes utilisées dans le module d'authentification.
"""

# --- Messages d'erreur ---
ERROR_TOKEN_INVALID = "Token d'authentification invalide"
ERROR_TOKEN_MISSING = "Token d'authentification manquant"
ERROR_PERMISSION_DENIED = "Permission refusée"

# --- Claims JWT ---
CLAIM_SUBJECT = "sub"
CLAIM_ROLE = "role"

# --- En-têtes HTTP ---
HEADER_WWW_AUTHENTICATE = "WWW-Authenticate"
HEADER_WWW_AUTHENTICATE_VALUE = "Bearer"
