"""
Cache sur disque : un fichier JSON par entree.

Chaque cle est encodee en base64 (caracteres '/', '+', '=' remplaces par '_')
pour obtenir un nom de fichier valide. Le fichier contient la valeur et ses
metadonnees d'expiration :

    {"value": {...}, "createdAt": 1700000000000, "expiresAt": 1700003600000}

L'expiration est paresseuse : une entree expiree n'est supprimee que lorsqu'elle
est relue. Les erreurs de lecture sont traitees comme un cache miss, les erreurs
d'ecriture sont levees (CacheWriteError) car elles signalent un repertoire
mal configure.
"""

import asyncio
import base64
import json
import os
import time
import uuid
from functools import partial
from pathlib import Path
from typing import Any, Callable, Optional, Union

from loguru import logger

from tmdb_sdk.core.exceptions import CacheClearError, CacheWriteError
from tmdb_sdk.core.ports.cache import DEFAULT_TTL, CacheEntry, ICacheBackend

_UNSAFE_FILENAME_CHARS = str.maketrans({"/": "_", "+": "_", "=": "_"})


class FileCacheBackend(ICacheBackend):
    """
    Backend de cache stockant une entree par fichier dans un repertoire.

    Les operations bloquantes (mkdir, lecture, ecriture) sont executees
    dans l'executor par defaut pour ne pas bloquer la boucle d'evenements.

    Example:
        cache = FileCacheBackend(directory="./tmdb-cache", default_ttl=7200)
        await cache.set("/movie/550:{}", {"title": "Fight Club"})
        data = await cache.get("/movie/550:{}")
    """

    FILE_SUFFIX = ".json"

    def __init__(
        self,
        directory: Union[str, Path] = "./cache",
        default_ttl: int = DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialise le backend (le repertoire est cree au premier usage).

        Args:
            directory: Repertoire de stockage des entrees
            default_ttl: TTL en secondes utilise quand set() n'en recoit pas
            clock: Source de temps en secondes epoch (injectable pour les tests)
        """
        self.directory = Path(directory)
        self.default_ttl = default_ttl
        self._clock = clock
        self._initialized = False

    async def _run(self, func: Callable[..., Any], *args: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, *args))

    async def _ensure_directory(self) -> None:
        """Cree le repertoire si necessaire (idempotent, sans risque en concurrence)."""
        if self._initialized:
            return
        await self._run(partial(self.directory.mkdir, parents=True, exist_ok=True))
        self._initialized = True

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _file_path(self, key: str) -> Path:
        """Chemin du fichier associe a une cle."""
        encoded = base64.b64encode(key.encode("utf-8")).decode("ascii")
        safe_name = encoded.translate(_UNSAFE_FILENAME_CHARS)
        return self.directory / f"{safe_name}{self.FILE_SUFFIX}"

    @staticmethod
    def _read_entry(path: Path) -> CacheEntry:
        return CacheEntry.from_dict(json.loads(path.read_text(encoding="utf-8")))

    @staticmethod
    def _write_entry(path: Path, payload: str) -> None:
        # Un lecteur ne voit jamais de fichier tronque
        temp = path.with_name(f".tmp_{uuid.uuid4().hex}_{path.name}")
        try:
            temp.write_text(payload, encoding="utf-8")
            os.replace(temp, path)
        except OSError:
            if temp.exists():
                temp.unlink()
            raise

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere la valeur associee a une cle.

        Returns:
            La valeur, ou None si le fichier est absent, illisible ou expire
        """
        path = self._file_path(key)
        try:
            await self._ensure_directory()
            entry = await self._run(self._read_entry, path)
        except FileNotFoundError:
            return None
        except (OSError, ValueError, TypeError) as e:
            logger.debug(f"Entree de cache illisible {path.name}: {e}")
            return None

        if entry.is_expired(self._now_ms()):
            await self.delete(key)
            return None

        return entry.value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """
        Ecrit une entree sur disque.

        Raises:
            CacheWriteError: Si le repertoire ou le fichier ne peut pas etre ecrit
        """
        entry = CacheEntry.create(value, self._resolve_ttl(ttl), self._now_ms())
        path = self._file_path(key)
        try:
            await self._ensure_directory()
            payload = json.dumps(entry.to_dict(), ensure_ascii=False)
            await self._run(self._write_entry, path, payload)
        except (OSError, TypeError, ValueError) as e:
            raise CacheWriteError(f"Failed to write to cache: {e}") from e

    async def has(self, key: str) -> bool:
        """Vrai si une entree non expiree existe pour cette cle."""
        return await self.get(key) is not None

    async def delete(self, key: str) -> bool:
        """Supprime le fichier d'une entree. Retourne False s'il n'existait pas."""
        try:
            await self._run(self._file_path(key).unlink)
        except OSError:
            return False
        return True

    async def clear(self) -> None:
        """
        Supprime tous les fichiers d'entree du repertoire.

        Chaque suppression est tentee independamment ; les fichiers qui ne
        sont pas des entrees (autre extension) sont conserves.

        Raises:
            CacheClearError: Si le repertoire ne peut pas etre liste ou si au
                moins une suppression a echoue
        """
        try:
            files = await self._run(self._list_entry_files)
        except FileNotFoundError:
            return
        except OSError as e:
            raise CacheClearError(f"Failed to clear cache: {e}") from e

        results = await asyncio.gather(
            *(self._run(partial(path.unlink, missing_ok=True)) for path in files),
            return_exceptions=True,
        )
        failures = [
            str(path) for path, result in zip(files, results) if isinstance(result, Exception)
        ]
        if failures:
            raise CacheClearError(
                f"Failed to clear cache: {len(failures)} entries could not be deleted",
                failures=failures,
            )
        logger.debug(f"Cache vide: {len(files)} entree(s) supprimee(s) dans {self.directory}")

    def _list_entry_files(self) -> list[Path]:
        return [
            path
            for path in self.directory.iterdir()
            if path.is_file() and path.suffix == self.FILE_SUFFIX
        ]
