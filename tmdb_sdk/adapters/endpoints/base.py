"""Socle commun des groupes d'endpoints."""

from typing import Any, Optional, Union

from tmdb_sdk.adapters.api.client import TMDBClient
from tmdb_sdk.core.ports.cache import QueryParams

MediaId = Union[int, str]

DEFAULT_LANGUAGE = "en-US"


class Endpoint:
    """
    Groupe d'endpoints TMDB partageant un TMDBClient.

    Les methodes de lecture acceptent des parametres de query string
    (fusionnes par-dessus les valeurs par defaut de l'endpoint) et les
    surcharges de cache use_cache / cache_ttl pour un appel.
    """

    def __init__(self, client: TMDBClient) -> None:
        self._client = client

    async def _get(
        self,
        path: str,
        params: Optional[QueryParams] = None,
        defaults: Optional[QueryParams] = None,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        merged = {**(defaults or {}), **(params or {})}
        return await self._client.get(path, merged, use_cache=use_cache, cache_ttl=cache_ttl)


def require_id(value: Optional[MediaId], label: str) -> MediaId:
    """
    Verifie qu'un identifiant est fourni.

    Raises:
        ValueError: Si l'identifiant est vide ou None
    """
    if value is None or value == "":
        raise ValueError(f"{label} is required")
    return value
