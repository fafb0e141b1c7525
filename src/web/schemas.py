"""
Schemas de reponse de l'API HTTP.

Modeles pydantic exposes au client web en camelCase. Ils sont construits
depuis les objets du domaine par from_domain() et ne sont jamais utilises
dans les couches core/ ou services/.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.core.entities.media import (
    AggregatedRatings,
    EpisodeRatingEntry,
    UnifiedMediaId,
)
from src.core.ports.api_clients import SearchResult
from src.core.value_objects.rating import OverallRating


class APIModel(BaseModel):
    """Base des schemas : alias camelCase, construction par nom de champ."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDetail(APIModel):
    message: str
    code: Optional[str] = None


class ErrorResponse(APIModel):
    """Enveloppe d'erreur : {data: null, error: {message, code}}."""

    data: None = None
    error: ErrorDetail


class SearchResultSchema(APIModel):
    provider: str
    tmdb_id: int
    imdb_id: Optional[str] = None
    media_type: str
    title: str
    original_title: Optional[str] = None
    year: Optional[int] = None
    overview: Optional[str] = None
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None

    @classmethod
    def from_domain(cls, result: SearchResult) -> "SearchResultSchema":
        return cls(
            provider=result.provider,
            tmdb_id=result.tmdb_id,
            imdb_id=result.imdb_id,
            media_type=result.media_type.value,
            title=result.title,
            original_title=result.original_title,
            year=result.year,
            overview=result.overview,
            poster_url=result.poster_url,
            backdrop_url=result.backdrop_url,
        )


class UnifiedMediaIdSchema(APIModel):
    media_type: str
    tmdb_id: int
    imdb_id: Optional[str] = None
    trakt_id: Optional[str] = None

    @classmethod
    def from_domain(cls, ids: UnifiedMediaId) -> "UnifiedMediaIdSchema":
        return cls(
            media_type=ids.media_type.value,
            tmdb_id=ids.tmdb_id,
            imdb_id=ids.imdb_id,
            trakt_id=ids.trakt_id,
        )


class OverallRatingSchema(APIModel):
    source: str
    score: Optional[float] = None
    votes: Optional[int] = None

    @classmethod
    def from_domain(cls, rating: Optional[OverallRating]) -> Optional["OverallRatingSchema"]:
        if rating is None:
            return None
        return cls(source=rating.source.value, score=rating.score, votes=rating.votes)


class OverallRatingsSchema(APIModel):
    tmdb: Optional[OverallRatingSchema] = None
    imdb: Optional[OverallRatingSchema] = None
    trakt: Optional[OverallRatingSchema] = None


class EpisodeRatingSchema(APIModel):
    season_number: int
    episode_number: int
    title: Optional[str] = None
    tmdb_score: Optional[float] = None
    trakt_score: Optional[float] = None

    @classmethod
    def from_domain(cls, entry: EpisodeRatingEntry) -> "EpisodeRatingSchema":
        return cls(
            season_number=entry.season_number,
            episode_number=entry.episode_number,
            title=entry.title,
            tmdb_score=entry.tmdb_score,
            trakt_score=entry.trakt_score,
        )


class AggregatedRatingsSchema(APIModel):
    ids: UnifiedMediaIdSchema
    title: str
    year: Optional[int] = None
    media_type: str
    overview: Optional[str] = None
    poster_url: Optional[str] = None
    overall: OverallRatingsSchema
    episodes_by_season: Optional[dict[int, list[EpisodeRatingSchema]]] = None

    @classmethod
    def from_domain(cls, result: AggregatedRatings) -> "AggregatedRatingsSchema":
        episodes = None
        if result.episodes_by_season is not None:
            episodes = {
                season: [EpisodeRatingSchema.from_domain(entry) for entry in entries]
                for season, entries in result.episodes_by_season.items()
            }
        return cls(
            ids=UnifiedMediaIdSchema.from_domain(result.ids),
            title=result.title,
            year=result.year,
            media_type=result.media_type.value,
            overview=result.overview,
            poster_url=result.poster_url,
            overall=OverallRatingsSchema(
                tmdb=OverallRatingSchema.from_domain(result.overall.tmdb),
                imdb=OverallRatingSchema.from_domain(result.overall.imdb),
                trakt=OverallRatingSchema.from_domain(result.overall.trakt),
            ),
            episodes_by_season=episodes,
        )

    def to_json(self) -> dict[str, Any]:
        """
        Serialise en camelCase.

        Les notes absentes restent a null ; episodesBySeason n'apparait que
        pour une serie avec des episodes.
        """
        exclude = {"episodes_by_season"} if self.episodes_by_season is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
