"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaType : Type de media (MOVIE, SERIES)
- RatingSource : Fournisseur de note (TMDB, IMDB, TRAKT)
- OverallRating : Note globale d'un fournisseur
"""

from src.core.value_objects.media_type import MediaType, RatingSource
from src.core.value_objects.rating import (
    OverallRating,
    validate_score,
    validate_votes,
)

__all__ = [
    "MediaType",
    "RatingSource",
    "OverallRating",
    "validate_score",
    "validate_votes",
]
