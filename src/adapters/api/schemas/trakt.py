"""Reponses de l'API Trakt v2 (sous-ensemble utile)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TraktModel(BaseModel):
    """Base des modeles Trakt : les champs inconnus sont ignores."""

    model_config = ConfigDict(extra="ignore")


class TraktIds(TraktModel):
    trakt: Optional[int] = None
    slug: Optional[str] = None
    imdb: Optional[str] = None
    tmdb: Optional[int] = None


class TraktMedia(TraktModel):
    """Film ou serie dans un resultat de recherche."""

    title: Optional[str] = None
    year: Optional[int] = None
    ids: TraktIds = Field(default_factory=TraktIds)


class TraktSearchResult(TraktModel):
    """Element de /search/tmdb/{id}."""

    type: Optional[str] = None
    score: Optional[float] = None
    movie: Optional[TraktMedia] = None
    show: Optional[TraktMedia] = None

    @property
    def ids(self) -> Optional[TraktIds]:
        """IDs du film ou de la serie trouve."""
        media = self.movie or self.show
        return media.ids if media else None


class TraktRating(TraktModel):
    """Reponse de /{movies|shows}/{id}/ratings."""

    rating: Optional[float] = None
    votes: Optional[int] = None
    distribution: dict[str, int] = {}


class TraktEpisode(TraktModel):
    """Episode d'une saison ; le numero peut manquer sur des fiches incompletes."""

    number: Optional[int] = None
    title: Optional[str] = None
    rating: Optional[float] = None
    votes: Optional[int] = None


class TraktSeason(TraktModel):
    """Saison de /shows/{id}/seasons?extended=episodes."""

    number: Optional[int] = None
    episodes: Optional[list[TraktEpisode]] = None
