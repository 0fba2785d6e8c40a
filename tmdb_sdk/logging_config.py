"""
Configuration du logging du SDK via loguru.

Le package désactive ses logs à l'import. configure_logging() les réactive et installe :
- Sortie console : lisible par l'humain, colorée
- Sortie fichier (optionnelle) : sérialisée en JSON, avec rotation
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from tmdb_sdk.config import Settings


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure et active le logging du SDK.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log JSON (aucun fichier si None)
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Les cache hits/misses sont journalisés en DEBUG, les opérations de cache
    dégradées en WARNING et les échecs d'écriture du cache en ERROR.
    """
    # Supprime le handler par défaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,
        )

    logger.enable("tmdb_sdk")
    logger.debug(f"Logging configuré (niveau {log_level}, fichier {log_file})")


def configure_logging_from_settings(settings: Settings) -> None:
    """Raccourci : configure le logging depuis les Settings."""
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
