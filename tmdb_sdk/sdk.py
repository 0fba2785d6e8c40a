"""
Facade du SDK : un client TMDB et ses groupes d'endpoints.

Usage:
    async with TMDB(api_key, cache=FileCacheBackend("./tmdb-cache")) as tmdb:
        movie = await tmdb.movie.get_details(550, {"language": "en-US"})
        results = await tmdb.search.movies("Fight Club")

    # Ou entierement depuis l'environnement (TMDB_API_KEY, TMDB_CACHE_BACKEND...)
    tmdb = TMDB.from_settings()
"""

from typing import Optional

from dependency_injector import providers

from tmdb_sdk.adapters.api.client import TMDBClient
from tmdb_sdk.adapters.api.transport import TMDB_BASE_URL, HttpxTransport
from tmdb_sdk.adapters.endpoints import (
    DiscoverEndpoint,
    KeywordEndpoint,
    MovieEndpoint,
    SearchEndpoint,
)
from tmdb_sdk.config import Settings
from tmdb_sdk.container import Container
from tmdb_sdk.core.ports.cache import DEFAULT_TTL, ICacheBackend


class TMDB:
    """
    Point d'entree du SDK.

    Attributes:
        client: TMDBClient partage par tous les groupes d'endpoints
        movie: Endpoints /movie
        discover: Endpoints /discover
        keyword: Endpoints /keyword
        search: Endpoints /search
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        cache: Optional[ICacheBackend] = None,
        enable_cache: bool = True,
        cache_ttl: int = DEFAULT_TTL,
        deduplicate_requests: bool = False,
        base_url: str = TMDB_BASE_URL,
        timeout: float = 30.0,
        client: Optional[TMDBClient] = None,
    ) -> None:
        """
        Initialise le SDK.

        Args:
            api_key: Cle API v3 ou Read Access Token v4 (requis sans client)
            cache: Backend de cache optionnel
            enable_cache: Active le cache pour les GET
            cache_ttl: TTL par defaut en secondes
            deduplicate_requests: Partage les appels identiques concurrents
            base_url: URL de base de l'API
            timeout: Timeout HTTP en secondes
            client: TMDBClient deja construit (les autres options sont ignorees)

        Raises:
            ConfigurationError: Si ni client ni cle API ne sont fournis
        """
        if client is None:
            client = TMDBClient(
                HttpxTransport(api_key, base_url=base_url, timeout=timeout),
                cache=cache,
                enable_cache=enable_cache,
                cache_ttl=cache_ttl,
                deduplicate_requests=deduplicate_requests,
            )
        self.client = client
        self.movie = MovieEndpoint(client)
        self.discover = DiscoverEndpoint(client)
        self.keyword = KeywordEndpoint(client)
        self.search = SearchEndpoint(client)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TMDB":
        """
        Construit le SDK via le container DI.

        Args:
            settings: Configuration explicite (par defaut lue depuis l'environnement)
        """
        container = Container()
        if settings is not None:
            container.config.override(providers.Object(settings))
        return cls(client=container.client())

    async def close(self) -> None:
        """Ferme le transport HTTP et le backend de cache."""
        await self.client.close()

    async def __aenter__(self) -> "TMDB":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
