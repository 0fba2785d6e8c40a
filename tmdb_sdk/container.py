"""
Container d'injection de dependances via dependency-injector.

Assemble Settings -> backend de cache -> transport -> TMDBClient. Le backend
est injecte dans le client : aucun cache global n'est partage entre clients.
"""

from dependency_injector import containers, providers

from .adapters.api.client import TMDBClient
from .adapters.api.transport import HttpxTransport
from .adapters.cache.factory import create_cache_backend
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI du SDK.

    Utilisation :
        container = Container()
        container.config.override(providers.Object(Settings(api_key="xxx")))
        client = container.client()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Backend de cache (None si desactive)
    cache_backend = providers.Singleton(create_cache_backend, settings=config)

    transport = providers.Singleton(
        HttpxTransport,
        api_key=config.provided.api_key,
        base_url=config.provided.base_url,
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.max_attempts,
    )

    client = providers.Singleton(
        TMDBClient,
        transport=transport,
        cache=cache_backend,
        enable_cache=config.provided.enable_cache,
        cache_ttl=config.provided.cache_ttl,
        deduplicate_requests=config.provided.deduplicate_requests,
    )
