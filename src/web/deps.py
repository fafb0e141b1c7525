"""
Dependances partagees de l'application web.

Les routes obtiennent le Container DI depuis app.state et en tirent les
clients et services ; les tests remplacent ces dependances via
app.dependency_overrides.
"""

from fastapi import Depends, Request

from ..container import Container
from ..core.ports.api_clients import ICatalogProvider
from ..services.aggregation import AggregationService


def get_container(request: Request) -> Container:
    """Container DI attache a l'application au demarrage."""
    return request.app.state.container


def get_catalog(container: Container = Depends(get_container)) -> ICatalogProvider:
    """Client du catalogue (TMDB) pour la recherche."""
    return container.tmdb_client()


def get_aggregation_service(
    container: Container = Depends(get_container),
) -> AggregationService:
    """Service d'agregation, nouvelle instance par requete."""
    return container.aggregation_service()
