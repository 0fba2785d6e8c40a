"""
Configuration du SDK via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TMDB_,
et peut optionnellement être fournie via un fichier .env.

Seule la clé API est indispensable pour appeler TMDB ; le cache est actif par défaut
avec un backend fichier dans ./cache.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CacheBackendName = Literal["file", "redis", "disk", "memory", "none"]


class Settings(BaseSettings):
    """Paramètres du SDK avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TMDB_.
    Exemple : TMDB_CACHE_BACKEND=redis TMDB_REDIS_URL=redis://localhost:6379/0

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default="https://api.themoviedb.org/3")
    request_timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=5, ge=1)

    # Cache
    enable_cache: bool = Field(default=True)
    cache_ttl: int = Field(default=3600, ge=0)
    cache_backend: CacheBackendName = Field(default="file")
    cache_dir: Path = Field(default=Path("./cache"))
    redis_url: Optional[str] = Field(default=None)
    redis_key_prefix: str = Field(default="tmdb:")
    deduplicate_requests: bool = Field(default=False)

    # Logging (stderr, fichier JSON optionnel avec rotation)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None:
            return None
        return Path(v).expanduser()

    @property
    def cache_enabled(self) -> bool:
        """Vérifie si un cache doit être placé devant les requêtes GET."""
        return self.enable_cache and self.cache_backend != "none"
