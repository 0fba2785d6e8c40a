"""
Cache persistant adosse a diskcache (SQLite sous le capot).

Alternative au FileCacheBackend quand le nombre d'entrees devient important :
diskcache gere lui-meme l'expiration et l'eviction. Les appels bloquants
passent par run_in_executor.
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Any, Callable, Optional, Union

from diskcache import Cache
from loguru import logger

from tmdb_sdk.core.exceptions import CacheWriteError
from tmdb_sdk.core.ports.cache import DEFAULT_TTL, ICacheBackend


class DiskCacheBackend(ICacheBackend):
    """
    Backend de cache asynchrone au-dessus de diskcache.Cache.

    Example:
        cache = DiskCacheBackend(cache_dir=".cache/tmdb")
        await cache.set("/movie/550:{}", {"title": "Fight Club"}, ttl=3600)
        data = await cache.get("/movie/550:{}")
    """

    def __init__(
        self, cache_dir: Union[str, Path] = ".cache/tmdb", default_ttl: int = DEFAULT_TTL
    ) -> None:
        """
        Args:
            cache_dir: Repertoire de la base diskcache (cree si inexistant)
            default_ttl: TTL en secondes utilise quand set() n'en recoit pas
        """
        self._cache = Cache(str(cache_dir))
        self.default_ttl = default_ttl

    async def _run(self, func: Callable[..., Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func)

    async def get(self, key: str) -> Optional[Any]:
        try:
            return await self._run(partial(self._cache.get, key))
        except Exception as e:
            logger.warning(f"diskcache error (get {key}): {e}")
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """
        Raises:
            CacheWriteError: Si diskcache ne peut pas ecrire l'entree
        """
        ttl = self._resolve_ttl(ttl)
        expire = ttl if ttl > 0 else None
        try:
            await self._run(partial(self._cache.set, key, value, expire=expire))
        except Exception as e:
            raise CacheWriteError(f"Failed to write to cache: {e}") from e

    async def has(self, key: str) -> bool:
        try:
            return await self._run(partial(self._cache.__contains__, key))
        except Exception as e:
            logger.warning(f"diskcache error (has {key}): {e}")
            return False

    async def delete(self, key: str) -> bool:
        try:
            return await self._run(partial(self._cache.delete, key))
        except Exception as e:
            logger.warning(f"diskcache error (delete {key}): {e}")
            return False

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        await self._run(self._cache.clear)

    async def close(self) -> None:
        """Ferme la connexion au cache."""
        self._cache.close()
