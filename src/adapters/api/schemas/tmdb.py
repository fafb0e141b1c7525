"""Reponses de l'API TMDB v3 (sous-ensemble utile)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class TMDBModel(BaseModel):
    """Base des modeles TMDB : les champs inconnus sont ignores."""

    model_config = ConfigDict(extra="ignore")


class TMDBSearchItem(TMDBModel):
    """Element de /search/multi (film, serie ou personne)."""

    id: int
    media_type: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    original_title: Optional[str] = None
    original_name: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None


class TMDBSearchResponse(TMDBModel):
    """Reponse de /search/multi."""

    page: int = 1
    results: list[TMDBSearchItem] = []


class TMDBMediaDetails(TMDBModel):
    """Reponse de /movie/{id} et /tv/{id}."""

    id: int
    title: Optional[str] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    number_of_seasons: Optional[int] = None


class TMDBExternalIds(TMDBModel):
    """Reponse de /{movie|tv}/{id}/external_ids."""

    imdb_id: Optional[str] = None
    tvdb_id: Optional[int] = None


class TMDBEpisode(TMDBModel):
    """Episode d'une saison TMDB."""

    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    name: Optional[str] = None
    vote_average: Optional[float] = None


class TMDBSeasonDetails(TMDBModel):
    """Reponse de /tv/{id}/season/{n}."""

    season_number: Optional[int] = None
    episodes: list[TMDBEpisode] = []
