"""
Port du transport HTTP.

TMDBClient ne parle jamais HTTP directement : il consomme cette interface
pour les appels reels (cache miss, POST, DELETE).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from tmdb_sdk.core.ports.cache import QueryParams


class IHttpTransport(ABC):
    """
    Interface de transport vers l'API TMDB.

    Les implementations levent httpx.HTTPStatusError (reponse non 2xx),
    httpx.RequestError (erreur reseau) ou RateLimitError (429 persistant).
    TMDBClient normalise ces erreurs en TransportError.
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[QueryParams] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Execute un appel et retourne le corps JSON decode.

        Args:
            method: Methode HTTP (GET, POST, DELETE)
            endpoint: Chemin relatif a l'URL de base (ex: "/movie/550")
            params: Parametres de query string
            json: Corps JSON pour POST

        Returns:
            Le corps de reponse decode
        """
        ...

    async def close(self) -> None:
        """Ferme les connexions ouvertes."""
