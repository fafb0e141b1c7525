"""
Objets valeur pour la classification des medias et des sources de notes.
"""

from enum import Enum


class MediaType(Enum):
    """Type de media manipule par l'agregation.

    Valeurs:
        MOVIE: Film (long-metrage)
        SERIES: Serie TV (avec saisons et episodes)
    """

    MOVIE = "movie"
    SERIES = "series"

    @classmethod
    def parse(cls, value: "str | MediaType") -> "MediaType":
        """
        Convertit une chaine en MediaType.

        Accepte aussi "tv" (vocabulaire TMDB) comme alias de SERIES.

        Raises:
            ValueError: Si la valeur ne correspond a aucun type
        """
        if isinstance(value, MediaType):
            return value
        normalized = value.strip().lower()
        if normalized == "tv":
            return cls.SERIES
        return cls(normalized)

    @property
    def tmdb_segment(self) -> str:
        """Segment d'URL TMDB (movie / tv)."""
        return "movie" if self is MediaType.MOVIE else "tv"

    @property
    def trakt_type(self) -> str:
        """Type Trakt pour la recherche (movie / show)."""
        return "movie" if self is MediaType.MOVIE else "show"


class RatingSource(Enum):
    """Fournisseur d'une note globale."""

    TMDB = "tmdb"
    IMDB = "imdb"
    TRAKT = "trakt"
