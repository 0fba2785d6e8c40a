"""
tmdb-sdk - Client asynchrone pour l'API The Movie Database (TMDB) v3.

Ce package expose les endpoints movie, discover, keyword et search derriere
une couche de cache optionnelle et interchangeable (fichiers, Redis,
diskcache, mémoire).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Ports (ICacheBackend, IHttpTransport) et exceptions
- adapters/ : Transport httpx, orchestration TMDBClient, backends de cache, endpoints
"""

from loguru import logger

from tmdb_sdk.adapters.api.client import CacheStats, TMDBClient
from tmdb_sdk.adapters.api.transport import HttpxTransport
from tmdb_sdk.adapters.cache import (
    DiskCacheBackend,
    FileCacheBackend,
    InMemoryCacheBackend,
    RedisCacheBackend,
    create_cache_backend,
)
from tmdb_sdk.config import Settings
from tmdb_sdk.core.exceptions import (
    CacheClearError,
    CacheWriteError,
    ConfigurationError,
    TMDBError,
    TransportError,
)
from tmdb_sdk.core.ports import ICacheBackend, IHttpTransport, derive_cache_key
from tmdb_sdk.logging_config import configure_logging, configure_logging_from_settings
from tmdb_sdk.sdk import TMDB

# Bibliotheque : silencieuse tant que configure_logging() n'est pas appele
logger.disable("tmdb_sdk")

__all__ = [
    "TMDB",
    "TMDBClient",
    "CacheStats",
    "HttpxTransport",
    "Settings",
    "configure_logging",
    "configure_logging_from_settings",
    # Cache
    "ICacheBackend",
    "IHttpTransport",
    "derive_cache_key",
    "DiskCacheBackend",
    "FileCacheBackend",
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "create_cache_backend",
    # Erreurs
    "TMDBError",
    "ConfigurationError",
    "TransportError",
    "CacheWriteError",
    "CacheClearError",
]
