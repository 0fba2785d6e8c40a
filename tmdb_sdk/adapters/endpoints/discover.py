"""Endpoints /discover : recherche de films et series par criteres."""

from typing import Any, Optional

from tmdb_sdk.adapters.endpoints.base import DEFAULT_LANGUAGE, Endpoint
from tmdb_sdk.core.ports.cache import QueryParams


class DiscoverEndpoint(Endpoint):
    """
    Decouverte de films et series (filtres genres, dates, notes, plateformes...).

    Les criteres TMDB contenant un point (ex: "vote_average.gte",
    "primary_release_date.lte") se passent dans le dictionnaire params.

    Example:
        page = await tmdb.discover.movies({"with_genres": "878", "vote_count.gte": 500})
    """

    MOVIE_DEFAULTS = {
        "language": DEFAULT_LANGUAGE,
        "page": 1,
        "sort_by": "popularity.desc",
        "include_adult": False,
        "include_video": False,
    }
    TV_DEFAULTS = {
        "language": DEFAULT_LANGUAGE,
        "page": 1,
        "sort_by": "popularity.desc",
        "include_adult": False,
        "include_null_first_air_dates": False,
    }

    async def movies(
        self,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            "/discover/movie",
            params,
            defaults=self.MOVIE_DEFAULTS,
            use_cache=use_cache,
            cache_ttl=cache_ttl,
        )

    async def tv_shows(
        self,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            "/discover/tv",
            params,
            defaults=self.TV_DEFAULTS,
            use_cache=use_cache,
            cache_ttl=cache_ttl,
        )
