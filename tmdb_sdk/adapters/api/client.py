"""
Client TMDB : orchestration des requetes et du cache.

Toutes les requetes passent par TMDBClient. Pour un GET eligible au cache :

    cle = cache.derive_key(endpoint, params)
    cache hit  -> valeur retournee, aucun appel HTTP
    cache miss -> appel HTTP, ecriture en cache avec le TTL resolu, valeur retournee

Le cache est une optimisation, jamais une source d'echec : une erreur de
lecture est traitee comme un miss, une erreur d'ecriture est journalisee et
l'appelant recoit quand meme la reponse fraiche. Les POST et DELETE ne
consultent ni n'alimentent le cache.

Usage:
    transport = HttpxTransport(api_key="xxx")
    client = TMDBClient(transport, cache=FileCacheBackend("./cache"))
    movie = await client.get("/movie/550", {"language": "en-US"})
    fresh = await client.get("/movie/550", {"language": "en-US"}, use_cache=False)
    await client.close()
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger

from tmdb_sdk.adapters.api.retry import RateLimitError
from tmdb_sdk.core.exceptions import TransportError
from tmdb_sdk.core.ports.cache import DEFAULT_TTL, ICacheBackend, QueryParams
from tmdb_sdk.core.ports.transport import IHttpTransport


@dataclass
class CacheStats:
    """
    Compteurs d'utilisation du cache pour un client.

    Attributs :
        hits : Requetes servies depuis le cache
        misses : Requetes eligibles au cache ayant necessite un appel HTTP
        errors : Lectures ou ecritures de cache en echec
        bypassed : Requetes GET executees sans cache
    """

    hits: int = 0
    misses: int = 0
    errors: int = 0
    bypassed: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class TMDBClient:
    """
    Orchestrateur des requetes vers l'API TMDB.

    Le backend de cache est injecte explicitement ; sans backend, toutes les
    requetes partent directement vers le transport.

    Attributes:
        cache: Backend de cache (None = pas de cache)
        enable_cache: Active le cache pour les GET (surchargeable par requete)
        cache_ttl: TTL par defaut en secondes (surchargeable par requete)
    """

    def __init__(
        self,
        transport: IHttpTransport,
        cache: Optional[ICacheBackend] = None,
        enable_cache: bool = True,
        cache_ttl: int = DEFAULT_TTL,
        deduplicate_requests: bool = False,
    ) -> None:
        """
        Initialise le client.

        Args:
            transport: Transport HTTP utilise pour les appels reels
            cache: Backend de cache optionnel
            enable_cache: Active le cache pour les requetes GET
            cache_ttl: TTL par defaut des entrees en secondes (0 = sans expiration)
            deduplicate_requests: Partage un seul appel HTTP entre les requetes
                identiques concurrentes qui ratent le cache (le TTL du premier
                appelant s'applique a l'ecriture partagee)
        """
        self._transport = transport
        self.cache = cache
        self.enable_cache = enable_cache
        self.cache_ttl = cache_ttl
        self._deduplicate = deduplicate_requests
        self._inflight: dict[str, asyncio.Future] = {}
        self.stats = CacheStats()

    async def get(
        self,
        endpoint: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """
        Execute un GET, en passant par le cache si possible.

        Args:
            endpoint: Chemin de l'endpoint (ex: "/movie/550")
            params: Parametres de query string
            use_cache: Surcharge enable_cache pour cet appel uniquement
            cache_ttl: Surcharge le TTL pour cet appel uniquement

        Returns:
            Le corps de reponse decode

        Raises:
            TransportError: Si l'appel HTTP echoue
        """
        params = dict(params or {})
        should_cache = self.enable_cache if use_cache is None else use_cache
        if not should_cache or self.cache is None:
            self.stats.bypassed += 1
            return await self._fetch("GET", endpoint, params=params)

        ttl = self.cache_ttl if cache_ttl is None else cache_ttl
        cache_key = self.cache.derive_key(endpoint, params)

        cached = await self._read_cache(cache_key)
        if cached is not None:
            self.stats.hits += 1
            logger.debug(f"Cache hit: {cache_key}")
            return cached

        self.stats.misses += 1
        logger.debug(f"Cache miss: {cache_key}")

        if not self._deduplicate:
            return await self._fetch_and_store(endpoint, params, cache_key, ttl)

        pending = self._inflight.get(cache_key)
        if pending is None:
            pending = asyncio.ensure_future(
                self._fetch_and_store(endpoint, params, cache_key, ttl)
            )
            self._inflight[cache_key] = pending
            pending.add_done_callback(lambda done: self._forget_inflight(cache_key, done))
        else:
            logger.debug(f"Requete identique en cours, attente: {cache_key}")
        return await asyncio.shield(pending)

    async def post(self, endpoint: str, data: Optional[Any] = None) -> Any:
        """POST sans cache. Leve TransportError en cas d'echec."""
        return await self._fetch("POST", endpoint, json=data if data is not None else {})

    async def delete(self, endpoint: str) -> Any:
        """DELETE sans cache. Leve TransportError en cas d'echec."""
        return await self._fetch("DELETE", endpoint)

    async def invalidate(self, endpoint: str, params: Optional[QueryParams] = None) -> bool:
        """
        Supprime l'entree de cache d'une requete GET.

        Returns:
            True si une entree existait
        """
        if self.cache is None:
            return False
        return await self.cache.delete(self.cache.derive_key(endpoint, dict(params or {})))

    async def clear_cache(self) -> None:
        """Vide le backend de cache (sans effet s'il n'y en a pas)."""
        if self.cache is not None:
            await self.cache.clear()

    async def close(self) -> None:
        """Ferme le transport et le backend de cache."""
        await self._transport.close()
        if self.cache is not None:
            await self.cache.close()

    async def __aenter__(self) -> "TMDBClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _fetch_and_store(
        self, endpoint: str, params: dict[str, Any], cache_key: str, ttl: int
    ) -> Any:
        data = await self._fetch("GET", endpoint, params=params)
        await self._write_cache(cache_key, data, ttl)
        return data

    async def _read_cache(self, cache_key: str) -> Optional[Any]:
        try:
            return await self.cache.get(cache_key)
        except Exception as e:
            self.stats.errors += 1
            logger.warning(f"Lecture du cache impossible, appel API direct ({cache_key}): {e}")
            return None

    async def _write_cache(self, cache_key: str, data: Any, ttl: int) -> None:
        try:
            await self.cache.set(cache_key, data, ttl)
        except Exception as e:
            self.stats.errors += 1
            logger.error(f"Ecriture du cache impossible ({cache_key}): {e}")

    def _forget_inflight(self, cache_key: str, done: asyncio.Future) -> None:
        if self._inflight.get(cache_key) is done:
            del self._inflight[cache_key]
        # Tous les appelants ont pu etre annules : l'erreur est recuperee ici
        if not done.cancelled() and done.exception() is not None:
            logger.debug(f"Requete partagee en echec ({cache_key}): {done.exception()}")

    async def _fetch(
        self,
        method: str,
        endpoint: str,
        params: Optional[QueryParams] = None,
        json: Optional[Any] = None,
    ) -> Any:
        try:
            return await self._transport.request(method, endpoint, params=params, json=json)
        except (httpx.HTTPError, RateLimitError) as e:
            raise self._normalize_error(e) from e

    @staticmethod
    def _normalize_error(error: Exception) -> TransportError:
        """Convertit une erreur de transport en TransportError uniforme."""
        if isinstance(error, httpx.HTTPStatusError):
            response = error.response
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("status_message") if isinstance(body, dict) else None
            return TransportError(response.status_code, message or "Unknown error")
        if isinstance(error, RateLimitError):
            return TransportError(429, str(error))
        return TransportError(None, str(error) or type(error).__name__)
