"""
Objets valeur pour les notes.

Une note est toujours exprimee sur 10. Les validations sont faites a la
construction : un objet invalide ne peut pas exister.
"""

import math
from dataclasses import dataclass
from typing import Optional

from src.core.value_objects.media_type import RatingSource

MIN_SCORE = 0.0
MAX_SCORE = 10.0


def validate_score(score: Optional[float], field_name: str = "score") -> None:
    """
    Verifie qu'une note est dans l'intervalle [0, 10].

    Raises:
        ValueError: Si la note est hors intervalle ou n'est pas un nombre fini
    """
    if score is None:
        return
    if math.isnan(score) or not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError(f"{field_name} doit etre compris entre 0 et 10 (recu: {score})")


def validate_votes(votes: Optional[int]) -> None:
    """
    Verifie qu'un nombre de votes est un entier positif ou nul.

    Raises:
        ValueError: Si le nombre de votes est negatif
    """
    if votes is None:
        return
    if votes < 0:
        raise ValueError(f"votes doit etre positif ou nul (recu: {votes})")


@dataclass(frozen=True)
class OverallRating:
    """
    Note globale d'un media chez un fournisseur.

    Attributs:
        source: Fournisseur de la note (tmdb, imdb, trakt)
        score: Note sur 10, None si le fournisseur n'en a pas
        votes: Nombre de votes, None si inconnu
    """

    source: RatingSource
    score: Optional[float] = None
    votes: Optional[int] = None

    def __post_init__(self) -> None:
        validate_score(self.score)
        validate_votes(self.votes)
