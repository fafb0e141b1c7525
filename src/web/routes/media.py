"""
Route d'agregation des notes d'un media.

Les erreurs du service (media introuvable, catalogue indisponible) sont
converties par les gestionnaires de web/errors.py.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...services.aggregation import AggregationService
from ..deps import get_aggregation_service
from ..schemas import AggregatedRatingsSchema

router = APIRouter(prefix="/api/media")


@router.get("/aggregate")
async def aggregate(
    tmdb_id: int = Query(..., alias="tmdbId", gt=0),
    media_type: str = Query(..., alias="mediaType", pattern="^(movie|series|tv)$"),
    service: AggregationService = Depends(get_aggregation_service),
) -> JSONResponse:
    """Notes TMDB, IMDb et Trakt d'un film ou d'une serie."""
    result = await service.aggregate(tmdb_id, media_type)
    return JSONResponse(AggregatedRatingsSchema.from_domain(result).to_json())
