"""Cache en memoire, limite au processus courant."""

import time
from typing import Any, Callable, Optional

from tmdb_sdk.core.ports.cache import DEFAULT_TTL, CacheEntry, ICacheBackend


class InMemoryCacheBackend(ICacheBackend):
    """
    Backend de cache dans un dictionnaire, avec expiration paresseuse.

    Pratique pour les scripts courts et les tests : rien n'est persiste.
    """

    def __init__(
        self, default_ttl: int = DEFAULT_TTL, clock: Callable[[], float] = time.time
    ) -> None:
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    async def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._now_ms()):
            del self._entries[key]
            return None
        return entry.value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        self._entries[key] = CacheEntry.create(value, self._resolve_ttl(ttl), self._now_ms())

    async def has(self, key: str) -> bool:
        return await self.get(key) is not None

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    async def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
