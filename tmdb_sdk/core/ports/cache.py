"""
Port du cache : contrat commun a tous les backends de stockage.

Un backend (fichiers, Redis, diskcache, memoire) implemente ICacheBackend.
La derivation des cles est concrete et partagee : deux requetes vers le meme
endpoint avec les memes parametres produisent toujours la meme cle, quel que
soit l'ordre dans lequel les parametres ont ete fournis.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

# Valeur scalaire acceptee dans une query string TMDB
QueryValue = Union[str, int, float, bool, None]
QueryParams = Mapping[str, QueryValue]

DEFAULT_TTL = 3600  # 1 heure


@dataclass
class CacheEntry:
    """
    Entree de cache avec ses metadonnees d'expiration.

    Attributs :
        value : Corps de reponse stocke (serialisable en JSON)
        created_at : Date d'ecriture en millisecondes epoch
        expires_at : Date d'expiration en millisecondes epoch, None = n'expire jamais
    """

    value: Any
    created_at: int
    expires_at: Optional[int] = None

    @classmethod
    def create(cls, value: Any, ttl: int, now_ms: int) -> "CacheEntry":
        """Construit une entree expirant dans ttl secondes (jamais si ttl <= 0)."""
        expires_at = now_ms + ttl * 1000 if ttl > 0 else None
        return cls(value=value, created_at=now_ms, expires_at=expires_at)

    def is_expired(self, now_ms: int) -> bool:
        """Vrai si l'entree a une date d'expiration depassee."""
        return self.expires_at is not None and self.expires_at < now_ms

    def to_dict(self) -> dict[str, Any]:
        """Format persiste sur disque."""
        return {
            "value": self.value,
            "createdAt": self.created_at,
            "expiresAt": self.expires_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CacheEntry":
        """
        Reconstruit une entree depuis son format persiste.

        Raises:
            ValueError: Si le contenu ne ressemble pas a une entree de cache
        """
        if not isinstance(data, Mapping) or "value" not in data:
            raise ValueError("Entree de cache invalide")
        expires_at = data.get("expiresAt")
        if expires_at is not None and (
            isinstance(expires_at, bool) or not isinstance(expires_at, (int, float))
        ):
            raise ValueError(f"expiresAt invalide: {expires_at!r}")
        return cls(
            value=data["value"],
            created_at=int(data.get("createdAt") or 0),
            expires_at=expires_at,
        )


def derive_cache_key(endpoint: str, params: Optional[QueryParams] = None) -> str:
    """
    Calcule la cle de cache d'une requete.

    Les parametres sont tries par nom puis serialises en JSON compact, et
    concatenes a l'endpoint avec ':' comme separateur.

    Example:
        >>> derive_cache_key("/movie/550", {"page": 1, "language": "en-US"})
        '/movie/550:{"language":"en-US","page":1}'
    """
    sorted_params = {name: (params or {})[name] for name in sorted(params or {})}
    serialized = json.dumps(sorted_params, separators=(",", ":"), ensure_ascii=False)
    return f"{endpoint}:{serialized}"


class ICacheBackend(ABC):
    """
    Interface des backends de cache.

    Toutes les operations sont asynchrones. Une erreur de lecture ne doit
    jamais remonter : get() et has() la traitent comme une absence.

    Attributes:
        default_ttl: TTL applique par set() quand aucun TTL n'est fourni
    """

    default_ttl: int = DEFAULT_TTL

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur non expiree.

        Args:
            key: Cle de cache

        Returns:
            La valeur stockee, ou None si absente, expiree ou illisible
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """
        Stocke une valeur, en ecrasant l'entree existante.

        Args:
            key: Cle de cache
            value: Valeur serialisable en JSON
            ttl: Duree de vie en secondes (None = default_ttl, <= 0 = sans expiration)
        """
        ...

    @abstractmethod
    async def has(self, key: str) -> bool:
        """Vrai si get() retournerait une valeur pour cette cle."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Supprime une entree.

        Returns:
            True si une entree existait et a ete supprimee
        """
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Supprime toutes les entrees appartenant a ce backend."""
        ...

    def derive_key(self, endpoint: str, params: Optional[QueryParams] = None) -> str:
        """Cle de cache pour un endpoint et ses parametres."""
        return derive_cache_key(endpoint, params)

    def _resolve_ttl(self, ttl: Optional[int]) -> int:
        return self.default_ttl if ttl is None else ttl

    async def close(self) -> None:
        """Libere les ressources du backend (rien a faire par defaut)."""
