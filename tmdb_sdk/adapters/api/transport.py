"""
Transport HTTP vers l'API TMDB v3, base sur httpx.

Gere l'authentification (cle v3 ou token v4), la serialisation des
parametres de query string et le retry sur rate limiting. Ne fait aucun
cache : c'est le role de TMDBClient.
"""

from typing import Any, Optional

import httpx
from loguru import logger

from tmdb_sdk.adapters.api.retry import request_with_retry
from tmdb_sdk.core.exceptions import ConfigurationError
from tmdb_sdk.core.ports.cache import QueryParams
from tmdb_sdk.core.ports.transport import IHttpTransport

TMDB_BASE_URL = "https://api.themoviedb.org/3"


def _encode_params(params: Optional[QueryParams]) -> dict[str, str | int | float]:
    """Convertit les booleens au format attendu par TMDB et retire les None."""
    encoded: dict[str, str | int | float] = {}
    for name, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[name] = "true" if value else "false"
        else:
            encoded[name] = value
    return encoded


class HttpxTransport(IHttpTransport):
    """
    Transport httpx avec client cree paresseusement.

    Supporte les deux modes d'authentification TMDB:
    - API Key v3 (32 caracteres hex) : passee en parametre api_key
    - Read Access Token v4 (long JWT) : passe en header Bearer

    Example:
        transport = HttpxTransport(api_key="xxx")
        data = await transport.request("GET", "/movie/550", params={"language": "en-US"})
        await transport.close()
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_BASE_URL,
        timeout: float = 30.0,
        max_attempts: int = 5,
    ) -> None:
        """
        Args:
            api_key: Cle API v3 ou Read Access Token v4 (requis)
            base_url: URL de base de l'API
            timeout: Timeout des requetes en secondes
            max_attempts: Nombre de tentatives sur 429

        Raises:
            ConfigurationError: Si aucune cle API n'est fournie
        """
        if not api_key:
            raise ConfigurationError("TMDB API key is required")
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json", "Content-Type": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[QueryParams] = None,
        json: Optional[Any] = None,
    ) -> Any:
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = _encode_params(params)
        if json is not None:
            kwargs["json"] = json

        logger.debug(f"TMDB {method} {endpoint}")
        response = await request_with_retry(
            self._get_client(), method, endpoint, max_attempts=self._max_attempts, **kwargs
        )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise httpx.DecodingError(
                f"Invalid JSON response (HTTP {response.status_code}): {e}",
                request=response.request,
            ) from e

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
