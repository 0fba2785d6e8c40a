"""
Backends de cache implementant ICacheBackend.

- FileCacheBackend : un fichier JSON par entree, expiration paresseuse
- RedisCacheBackend : chaines JSON dans Redis, expiration native (SET EX)
- DiskCacheBackend : base diskcache (SQLite)
- InMemoryCacheBackend : dictionnaire du processus courant

create_cache_backend() choisit le backend d'apres les Settings.
"""

from tmdb_sdk.adapters.cache.disk_cache import DiskCacheBackend
from tmdb_sdk.adapters.cache.factory import create_cache_backend
from tmdb_sdk.adapters.cache.file_cache import FileCacheBackend
from tmdb_sdk.adapters.cache.memory_cache import InMemoryCacheBackend
from tmdb_sdk.adapters.cache.redis_cache import RedisCacheBackend

__all__ = [
    "DiskCacheBackend",
    "FileCacheBackend",
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "create_cache_backend",
]
