"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, clients des fournisseurs et service d'agregation.
"""

from dependency_injector import containers, providers

from .adapters.api.omdb_client import OMDbClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.api.trakt_client import TraktClient
from .config import Settings
from .services.aggregation import AggregationService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.aggregation_service()
        result = await service.aggregate(1396, MediaType.SERIES)
        await close_clients(container)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Clients API - Singleton : un client httpx (pool de connexions) par fournisseur
    # Une cle absente donne une chaine vide : l'API repond 401 et la donnee
    # est traitee comme indisponible
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=providers.Callable(lambda s: s.tmdb_api_key or "", config),
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.retry_max_attempts,
    )

    omdb_client = providers.Singleton(
        OMDbClient,
        api_key=providers.Callable(lambda s: s.omdb_api_key or "", config),
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.retry_max_attempts,
    )

    trakt_client = providers.Singleton(
        TraktClient,
        client_id=providers.Callable(lambda s: s.trakt_client_id or "", config),
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.retry_max_attempts,
    )

    # Service d'agregation - Factory, sans etat entre requetes
    aggregation_service = providers.Factory(
        AggregationService,
        catalog=tmdb_client,
        ratings=omdb_client,
        social=trakt_client,
        timeout=config.provided.aggregation_timeout,
    )


async def close_clients(container: Container) -> None:
    """Ferme les clients HTTP des fournisseurs (sans effet s'ils sont deja fermes)."""
    for provider in (container.tmdb_client, container.omdb_client, container.trakt_client):
        await provider().close()
