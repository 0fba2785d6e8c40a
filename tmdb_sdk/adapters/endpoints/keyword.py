"""Endpoints /keyword."""

from typing import Any, Optional

from tmdb_sdk.adapters.endpoints.base import DEFAULT_LANGUAGE, Endpoint, MediaId, require_id
from tmdb_sdk.core.ports.cache import QueryParams


class KeywordEndpoint(Endpoint):
    """Mots-cles TMDB et films associes."""

    MOVIES_DEFAULTS = {
        "language": DEFAULT_LANGUAGE,
        "include_adult": False,
        "page": 1,
    }

    async def get_details(
        self,
        keyword_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        keyword_id = require_id(keyword_id, "Keyword ID")
        return await self._get(f"/keyword/{keyword_id}", use_cache=use_cache, cache_ttl=cache_ttl)

    async def get_movies(
        self,
        keyword_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """Films etiquetes avec ce mot-cle."""
        keyword_id = require_id(keyword_id, "Keyword ID")
        return await self._get(
            f"/keyword/{keyword_id}/movies",
            params,
            defaults=self.MOVIES_DEFAULTS,
            use_cache=use_cache,
            cache_ttl=cache_ttl,
        )
