"""
Acces a l'API TMDB.

- HttpxTransport : appels HTTP reels (authentification, retry sur 429)
- TMDBClient : orchestration cache / transport pour chaque requete
- RateLimitError, with_retry, request_with_retry : gestion du rate limiting
"""

from tmdb_sdk.adapters.api.client import CacheStats, TMDBClient
from tmdb_sdk.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from tmdb_sdk.adapters.api.transport import TMDB_BASE_URL, HttpxTransport

__all__ = [
    "CacheStats",
    "HttpxTransport",
    "RateLimitError",
    "TMDBClient",
    "TMDB_BASE_URL",
    "request_with_retry",
    "with_retry",
]
