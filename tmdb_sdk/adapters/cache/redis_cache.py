"""
Cache Redis : les entrees sont stockees sous forme de chaines JSON.

Les cles sont prefixees (par defaut "tmdb:") pour partager une instance Redis
avec d'autres applications. L'expiration est deleguee a Redis (SET ... EX).
Le cache reste une optimisation : toute erreur Redis est journalisee et
degradee en valeur par defaut, jamais propagee.
"""

import json
import re
from typing import Any, Optional

from loguru import logger
from redis.asyncio import Redis

from tmdb_sdk.core.exceptions import ConfigurationError
from tmdb_sdk.core.ports.cache import DEFAULT_TTL, ICacheBackend

DEFAULT_KEY_PREFIX = "tmdb:"

# Nombre de cles supprimees par commande DEL lors d'un clear()
_CLEAR_BATCH_SIZE = 500

_GLOB_SPECIAL_CHARS = re.compile(r"([*?\[\]\\])")


class RedisCacheBackend(ICacheBackend):
    """
    Backend de cache adosse a un client redis.asyncio fourni par l'appelant.

    Example:
        redis = Redis.from_url("redis://localhost:6379/0")
        cache = RedisCacheBackend(redis, key_prefix="tmdb:api:", default_ttl=7200)
    """

    def __init__(
        self,
        client: Optional[Redis],
        key_prefix: str = DEFAULT_KEY_PREFIX,
        default_ttl: int = DEFAULT_TTL,
        owns_client: bool = False,
    ) -> None:
        """
        Args:
            client: Client redis.asyncio deja configure (requis)
            key_prefix: Prefixe ajoute a toutes les cles
            default_ttl: TTL en secondes utilise quand set() n'en recoit pas
            owns_client: Si True, close() ferme aussi le client Redis

        Raises:
            ConfigurationError: Si aucun client n'est fourni
        """
        if client is None:
            raise ConfigurationError("Redis client is required")
        self._redis = client
        self._owns_client = owns_client
        self.key_prefix = key_prefix
        self.default_ttl = default_ttl

    def _prefixed(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def get(self, key: str) -> Optional[Any]:
        try:
            data = await self._redis.get(self._prefixed(key))
            if not data:
                return None
            return json.loads(data)
        except Exception as e:
            logger.warning(f"Redis cache error (get {key}): {e}")
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        ttl = self._resolve_ttl(ttl)
        try:
            serialized = json.dumps(value, ensure_ascii=False)
            if ttl > 0:
                await self._redis.set(self._prefixed(key), serialized, ex=ttl)
            else:
                await self._redis.set(self._prefixed(key), serialized)
        except Exception as e:
            logger.warning(f"Redis cache error (set {key}): {e}")

    async def has(self, key: str) -> bool:
        try:
            return await self._redis.exists(self._prefixed(key)) == 1
        except Exception as e:
            logger.warning(f"Redis cache error (has {key}): {e}")
            return False

    async def delete(self, key: str) -> bool:
        try:
            return await self._redis.delete(self._prefixed(key)) == 1
        except Exception as e:
            logger.warning(f"Redis cache error (delete {key}): {e}")
            return False

    async def clear(self) -> None:
        """Supprime uniquement les cles commencant par le prefixe configure."""
        escaped_prefix = _GLOB_SPECIAL_CHARS.sub(r"\\\1", self.key_prefix)
        pattern = f"{escaped_prefix}*"
        deleted = 0
        try:
            batch: list[Any] = []
            async for redis_key in self._redis.scan_iter(match=pattern):
                batch.append(redis_key)
                if len(batch) >= _CLEAR_BATCH_SIZE:
                    deleted += await self._redis.delete(*batch)
                    batch = []
            if batch:
                deleted += await self._redis.delete(*batch)
        except Exception as e:
            logger.warning(f"Redis cache error (clear {pattern}): {e}")
            return
        logger.debug(f"Cache Redis vide: {deleted} cle(s) supprimee(s) pour {pattern}")

    async def close(self) -> None:
        """Ferme la connexion Redis si elle a ete creee par le SDK."""
        if self._owns_client:
            await self._redis.aclose()
