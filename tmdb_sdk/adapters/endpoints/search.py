"""
Endpoints /search : collections, societes, mots-cles, films, personnes, series.

Chaque recherche exige une requete non vide. Les valeurs par defaut
(langue, contenu adulte, page) suivent celles de l'API TMDB.
"""

from typing import Any, Optional

from tmdb_sdk.adapters.endpoints.base import DEFAULT_LANGUAGE, Endpoint
from tmdb_sdk.core.ports.cache import QueryParams

# Recherches localisees (language + include_adult)
_LOCALIZED_DEFAULTS = {
    "language": DEFAULT_LANGUAGE,
    "include_adult": False,
    "page": 1,
}
# Societes et mots-cles : ni langue ni filtre adulte
_PLAIN_DEFAULTS = {"page": 1}


class SearchEndpoint(Endpoint):
    """
    Recherche plein texte dans le catalogue TMDB.

    Example:
        results = await tmdb.search.movies("Fight Club", {"year": 1999})
        people = await tmdb.search.people("Fincher")
    """

    async def _search(
        self,
        path: str,
        query: str,
        params: Optional[QueryParams],
        defaults: QueryParams,
        use_cache: Optional[bool],
        cache_ttl: Optional[int],
    ) -> Any:
        if not query:
            raise ValueError("Search query is required")
        return await self._get(
            path,
            params,
            defaults={"query": query, **defaults},
            use_cache=use_cache,
            cache_ttl=cache_ttl,
        )

    async def collections(
        self,
        query: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._search(
            "/search/collection", query, params, _LOCALIZED_DEFAULTS, use_cache, cache_ttl
        )

    async def companies(
        self,
        query: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._search(
            "/search/company", query, params, _PLAIN_DEFAULTS, use_cache, cache_ttl
        )

    async def keywords(
        self,
        query: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._search(
            "/search/keyword", query, params, _PLAIN_DEFAULTS, use_cache, cache_ttl
        )

    async def movies(
        self,
        query: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """Recherche de films (params: year, primary_release_year, region...)."""
        return await self._search(
            "/search/movie", query, params, _LOCALIZED_DEFAULTS, use_cache, cache_ttl
        )

    async def multi(
        self,
        query: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """Recherche combinee films, series et personnes."""
        return await self._search(
            "/search/multi", query, params, _LOCALIZED_DEFAULTS, use_cache, cache_ttl
        )

    async def people(
        self,
        query: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._search(
            "/search/person", query, params, _LOCALIZED_DEFAULTS, use_cache, cache_ttl
        )

    async def tv_shows(
        self,
        query: str,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """Recherche de series (params: first_air_date_year, year...)."""
        return await self._search(
            "/search/tv", query, params, _LOCALIZED_DEFAULTS, use_cache, cache_ttl
        )
