"""
Route de recherche de films et series.

Interroge le catalogue TMDB et renvoie les resultats en camelCase.
"""

from fastapi import APIRouter, Depends, Query, status
from loguru import logger

from ...core.exceptions import ProviderRequestError
from ...core.ports.api_clients import ICatalogProvider
from ...utils.constants import MIN_SEARCH_QUERY_LENGTH
from ..deps import get_catalog
from ..errors import error_response
from ..schemas import SearchResultSchema

router = APIRouter(prefix="/api")


@router.get("/search")
async def search(
    q: str = Query(..., min_length=MIN_SEARCH_QUERY_LENGTH),
    catalog: ICatalogProvider = Depends(get_catalog),
):
    """Recherche multi (films + series) par titre."""
    try:
        results = await catalog.search(q)
    except ProviderRequestError as e:
        logger.error(f"Recherche TMDB en echec pour '{q}': {e}")
        return error_response(
            status.HTTP_502_BAD_GATEWAY,
            "Failed to fetch search results from TMDB",
            "TMDB_ERROR",
        )
    return [
        SearchResultSchema.from_domain(result).model_dump(mode="json", by_alias=True)
        for result in results
    ]
