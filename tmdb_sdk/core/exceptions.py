"""
Hierarchie des exceptions du SDK.

- ConfigurationError : parametre de construction manquant ou invalide (fatal)
- TransportError : echec d'un appel HTTP vers l'API TMDB (jamais mis en cache)
- CacheWriteError : ecriture impossible dans un cache local (erreur operateur)
- CacheClearError : vidage partiel ou impossible d'un cache local

Les erreurs de lecture du cache ne sont jamais levees : elles sont traitees
comme un cache miss par les backends et par TMDBClient.
"""

from typing import Optional


class TMDBError(Exception):
    """Exception de base pour toutes les erreurs du SDK."""


class ConfigurationError(TMDBError):
    """Parametre de construction requis absent ou invalide."""


class TransportError(TMDBError):
    """
    Echec d'un appel HTTP vers l'API TMDB.

    Attributes:
        status: Code HTTP de la reponse, ou None pour une erreur reseau
        message: Message d'erreur (status_message de l'API si disponible)
    """

    def __init__(self, status: Optional[int], message: str) -> None:
        self.status = status
        self.message = message
        if status is None:
            super().__init__(f"TMDB API Error: {message}")
        else:
            super().__init__(f"TMDB API Error {status}: {message}")


class CacheWriteError(TMDBError):
    """Ecriture impossible dans un cache local (repertoire absent, disque plein...)."""


class CacheClearError(TMDBError):
    """
    Vidage incomplet d'un cache local.

    Attributes:
        failures: Chemins (ou cles) qui n'ont pas pu etre supprimes
    """

    def __init__(self, message: str, failures: Optional[list[str]] = None) -> None:
        self.failures = failures or []
        super().__init__(message)
