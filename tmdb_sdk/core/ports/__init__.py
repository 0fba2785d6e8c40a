"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Port cache : contrat des backends de stockage
- ICacheBackend : get/set/has/delete/clear + derivation des cles
- CacheEntry : entree stockee avec ses metadonnees d'expiration
- derive_cache_key : cle deterministe endpoint + parametres tries

Port transport : contrat des appels HTTP reels
- IHttpTransport : execution d'une requete vers l'API TMDB
"""

from tmdb_sdk.core.ports.cache import (
    DEFAULT_TTL,
    CacheEntry,
    ICacheBackend,
    QueryParams,
    QueryValue,
    derive_cache_key,
)
from tmdb_sdk.core.ports.transport import IHttpTransport

__all__ = [
    # Cache
    "DEFAULT_TTL",
    "CacheEntry",
    "ICacheBackend",
    "QueryParams",
    "QueryValue",
    "derive_cache_key",
    # Transport
    "IHttpTransport",
]
