"""Tests unitaires pour InMemoryCacheBackend."""

import pytest

from tmdb_sdk.adapters.cache.memory_cache import InMemoryCacheBackend
from tests.conftest import FakeClock


@pytest.fixture
def cache(clock: FakeClock) -> InMemoryCacheBackend:
    return InMemoryCacheBackend(default_ttl=60, clock=clock)


@pytest.mark.asyncio
async def test_round_trip(cache: InMemoryCacheBackend) -> None:
    await cache.set("key", {"id": 550}, ttl=10)
    assert await cache.get("key") == {"id": 550}


@pytest.mark.asyncio
async def test_expiry_is_lazy(cache: InMemoryCacheBackend, clock: FakeClock) -> None:
    """L'entree expiree reste stockee jusqu'a sa prochaine lecture."""
    await cache.set("key", "value", ttl=1)
    clock.advance(2)
    assert len(cache) == 1

    assert await cache.has("key") is False
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_zero_ttl_never_expires(cache: InMemoryCacheBackend, clock: FakeClock) -> None:
    await cache.set("key", "value", ttl=0)
    clock.advance(10**9)
    assert await cache.get("key") == "value"


@pytest.mark.asyncio
async def test_delete_and_clear(cache: InMemoryCacheBackend) -> None:
    await cache.set("a", 1)
    await cache.set("b", 2)

    assert await cache.delete("a") is True
    assert await cache.delete("a") is False

    await cache.clear()
    assert await cache.get("b") is None
