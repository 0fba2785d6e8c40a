"""
Groupes d'endpoints TMDB exposes par la facade TMDB.

Chaque groupe traduit ses methodes en appels TMDBClient (GET en cache,
POST/DELETE directs).
"""

from tmdb_sdk.adapters.endpoints.discover import DiscoverEndpoint
from tmdb_sdk.adapters.endpoints.keyword import KeywordEndpoint
from tmdb_sdk.adapters.endpoints.movie import MovieEndpoint
from tmdb_sdk.adapters.endpoints.search import SearchEndpoint

__all__ = [
    "DiscoverEndpoint",
    "KeywordEndpoint",
    "MovieEndpoint",
    "SearchEndpoint",
]
