"""
Fixtures pytest partagees pour les tests du SDK.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock du transport HTTP (IHttpTransport)
- Horloge manipulable pour tester l'expiration
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from tmdb_sdk.config import Settings
from tmdb_sdk.core.ports.transport import IHttpTransport
from tests.fixtures.tmdb_responses import TMDB_MOVIE_550_RESPONSE


class FakeClock:
    """Horloge controlee par les tests (secondes epoch)."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Horloge figee, avancee explicitement par les tests."""
    return FakeClock()


@pytest.fixture
def mock_transport() -> AsyncMock:
    """
    Mock de IHttpTransport.

    Retourne les details de Fight Club par defaut. Configurer
    request.side_effect dans chaque test pour des comportements specifiques.
    """
    transport = AsyncMock(spec=IHttpTransport)
    transport.request.return_value = TMDB_MOVIE_550_RESPONSE
    return transport


@pytest.fixture
def test_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Settings de test isoles de l'environnement.

    Les variables TMDB_* de la machine ne doivent pas influencer les tests.
    """
    monkeypatch.chdir(tmp_path)
    return Settings(
        api_key="test_api_key",
        cache_backend="file",
        cache_dir=tmp_path / "cache",
        cache_ttl=3600,
        log_file=tmp_path / "test.log",
    )
