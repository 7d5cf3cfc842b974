"""Lecture des clés API depuis l'environnement."""

import os
from typing import Optional

from loguru import logger

from tvrenamer.api.exceptions import APIConfigurationError
from tvrenamer.config.settings import TVDB_API_KEY_ENV


def get_api_key(key_name: str) -> Optional[str]:
    """
    Récupère une clé API depuis les variables d'environnement.

    Args:
        key_name: Nom de la variable d'environnement.

    Returns:
        La valeur de la clé API ou None si non définie.
    """
    return os.getenv(key_name)


def require_tvdb_api_key() -> str:
    """
    Retourne la clé TVDB ou lève une erreur si elle est absente.

    Raises:
        APIConfigurationError: Si TVDB_API_KEY n'est pas définie.
    """
    key = get_api_key(TVDB_API_KEY_ENV)
    if not key:
        logger.error(f"Clé API manquante: {TVDB_API_KEY_ENV}")
        raise APIConfigurationError(TVDB_API_KEY_ENV)
    return key
