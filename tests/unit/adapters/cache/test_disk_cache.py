"""
Tests unitaires pour DiskCacheBackend.

Ces tests verifient:
- Stockage et recuperation de valeurs
- Entrees sans expiration (TTL 0)
- has/delete/clear
- Operations asynchrones non-bloquantes
"""

import asyncio
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tmdb_sdk.adapters.cache.disk_cache import DiskCacheBackend
from tmdb_sdk.core.exceptions import CacheWriteError


class TestDiskCacheBackend:
    """Tests pour la classe DiskCacheBackend."""

    @pytest.fixture
    async def cache(self, tmp_path: Path) -> DiskCacheBackend:
        """Cree un cache avec un repertoire temporaire."""
        cache = DiskCacheBackend(cache_dir=tmp_path / "disk_cache")
        yield cache
        await cache.close()

    @pytest.mark.asyncio
    async def test_get_returns_none_for_missing_key(self, cache: DiskCacheBackend) -> None:
        """get() retourne None pour une cle inexistante."""
        assert await cache.get("nonexistent_key") is None

    @pytest.mark.asyncio
    async def test_set_and_get_round_trip(self, cache: DiskCacheBackend) -> None:
        """set() puis get() retourne la valeur stockee."""
        value = {"title": "Fight Club", "year": 1999}

        await cache.set("/movie/550:{}", value, ttl=3600)

        assert await cache.get("/movie/550:{}") == value

    @pytest.mark.asyncio
    async def test_zero_ttl_stores_without_expiry(self, cache: DiskCacheBackend) -> None:
        """Un TTL de 0 est transmis a diskcache comme expire=None."""
        fake = MagicMock()
        cache._cache = fake

        await cache.set("key", "value", ttl=0)

        fake.set.assert_called_once_with("key", "value", expire=None)

    @pytest.mark.asyncio
    async def test_positive_ttl_is_forwarded(self, cache: DiskCacheBackend) -> None:
        fake = MagicMock()
        cache._cache = fake

        await cache.set("key", "value", ttl=60)

        fake.set.assert_called_once_with("key", "value", expire=60)

    @pytest.mark.asyncio
    async def test_has_and_delete(self, cache: DiskCacheBackend) -> None:
        """has() et delete() refletent la presence de l'entree."""
        assert await cache.has("key") is False
        await cache.set("key", "value")
        assert await cache.has("key") is True

        assert await cache.delete("key") is True
        assert await cache.has("key") is False
        assert await cache.delete("key") is False

    @pytest.mark.asyncio
    async def test_get_degrades_on_backend_error(self, cache: DiskCacheBackend) -> None:
        """Une erreur diskcache en lecture est traitee comme un miss."""
        fake = MagicMock()
        fake.get.side_effect = OSError("database is locked")
        cache._cache = fake

        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_set_raises_cache_write_error(self, cache: DiskCacheBackend) -> None:
        """Une erreur diskcache en ecriture leve CacheWriteError."""
        fake = MagicMock()
        fake.set.side_effect = OSError("disk full")
        cache._cache = fake

        with pytest.raises(CacheWriteError):
            await cache.set("key", "value")

    @pytest.mark.asyncio
    async def test_clear_removes_all_entries(self, cache: DiskCacheBackend) -> None:
        """clear() supprime toutes les entrees du cache."""
        await cache.set("key1", "value1", ttl=3600)
        await cache.set("key2", "value2", ttl=3600)

        await cache.clear()

        assert await cache.get("key1") is None
        assert await cache.get("key2") is None

    @pytest.mark.asyncio
    async def test_async_operations_dont_block(self, cache: DiskCacheBackend) -> None:
        """Plusieurs operations peuvent etre lancees en parallele."""
        keys = [f"key_{i}" for i in range(10)]
        values = [f"value_{i}" for i in range(10)]

        await asyncio.gather(*[cache.set(k, v, ttl=3600) for k, v in zip(keys, values)])
        results = await asyncio.gather(*[cache.get(k) for k in keys])

        assert results == values
