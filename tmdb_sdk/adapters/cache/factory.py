"""Construction du backend de cache a partir des Settings."""

from typing import Optional

from loguru import logger
from redis.asyncio import Redis

from tmdb_sdk.adapters.cache.disk_cache import DiskCacheBackend
from tmdb_sdk.adapters.cache.file_cache import FileCacheBackend
from tmdb_sdk.adapters.cache.memory_cache import InMemoryCacheBackend
from tmdb_sdk.adapters.cache.redis_cache import RedisCacheBackend
from tmdb_sdk.config import Settings
from tmdb_sdk.core.exceptions import ConfigurationError
from tmdb_sdk.core.ports.cache import ICacheBackend


def create_cache_backend(settings: Settings) -> Optional[ICacheBackend]:
    """
    Instancie le backend designe par settings.cache_backend.

    Args:
        settings: Configuration du SDK

    Returns:
        Le backend configure, ou None si le cache est desactive

    Raises:
        ConfigurationError: Backend redis sans TMDB_REDIS_URL, ou nom inconnu
    """
    if not settings.cache_enabled:
        logger.debug("Cache desactive")
        return None

    backend = settings.cache_backend
    if backend == "file":
        cache: ICacheBackend = FileCacheBackend(
            directory=settings.cache_dir, default_ttl=settings.cache_ttl
        )
    elif backend == "disk":
        cache = DiskCacheBackend(cache_dir=settings.cache_dir, default_ttl=settings.cache_ttl)
    elif backend == "memory":
        cache = InMemoryCacheBackend(default_ttl=settings.cache_ttl)
    elif backend == "redis":
        if not settings.redis_url:
            raise ConfigurationError("TMDB_REDIS_URL is required for the redis cache backend")
        cache = RedisCacheBackend(
            Redis.from_url(settings.redis_url),
            key_prefix=settings.redis_key_prefix,
            default_ttl=settings.cache_ttl,
            owns_client=True,
        )
    else:
        raise ConfigurationError(f"Unknown cache backend: {backend}")

    logger.debug(f"Backend de cache: {type(cache).__name__}")
    return cache
