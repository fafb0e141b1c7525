"""
Entites media de l'agregation de notes.

Entites representant l'identite d'un media chez les differents fournisseurs,
les notes par episode et le resultat agrege renvoye au client.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from src.core.value_objects.media_type import MediaType
from src.core.value_objects.rating import OverallRating, validate_score

IMDB_ID_PATTERN = re.compile(r"^tt\d+$")


def is_valid_imdb_id(value: Optional[str]) -> bool:
    """Indique si la valeur a le format d'un ID IMDb (ttXXXXXXX)."""
    return bool(value) and IMDB_ID_PATTERN.match(value) is not None


@dataclass
class UnifiedMediaId:
    """
    Identite d'un media chez les trois fournisseurs.

    Complete une seule fois pendant l'agregation (ID Trakt resolu),
    immuable ensuite.

    Attributes:
        media_type: Film ou serie
        tmdb_id: ID numerique TMDB (toujours connu : point d'entree de l'agregation)
        imdb_id: ID IMDb (format ttXXXXXXX)
        trakt_id: Slug ou ID numerique Trakt
    """

    media_type: MediaType
    tmdb_id: int
    imdb_id: Optional[str] = None
    trakt_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.tmdb_id <= 0:
            raise ValueError(f"tmdb_id doit etre positif (recu: {self.tmdb_id})")
        if self.imdb_id is not None and not is_valid_imdb_id(self.imdb_id):
            raise ValueError(f"imdb_id invalide: {self.imdb_id!r}")
        if self.trakt_id is not None and not self.trakt_id:
            raise ValueError("trakt_id ne peut pas etre vide")


@dataclass
class EpisodeRatingEntry:
    """
    Notes d'un episode chez TMDB et Trakt.

    Produite separement par chaque fournisseur puis fusionnee : la fusion
    ne modifie que le titre (s'il manque) et la note Trakt.

    Attributes:
        season_number: Numero de saison (0 pour les specials)
        episode_number: Numero d'episode dans la saison (>= 1)
        title: Titre de l'episode
        tmdb_score: Note TMDB sur 10
        trakt_score: Note Trakt sur 10
    """

    season_number: int
    episode_number: int
    title: Optional[str] = None
    tmdb_score: Optional[float] = None
    trakt_score: Optional[float] = None

    def __post_init__(self) -> None:
        if self.season_number < 0:
            raise ValueError(f"season_number doit etre >= 0 (recu: {self.season_number})")
        if self.episode_number <= 0:
            raise ValueError(f"episode_number doit etre > 0 (recu: {self.episode_number})")
        validate_score(self.tmdb_score, "tmdb_score")
        validate_score(self.trakt_score, "trakt_score")

    @property
    def key(self) -> tuple[int, int]:
        """Cle composite (saison, episode)."""
        return (self.season_number, self.episode_number)


@dataclass
class OverallRatings:
    """Note globale de chaque fournisseur, None si indisponible."""

    tmdb: Optional[OverallRating] = None
    imdb: Optional[OverallRating] = None
    trakt: Optional[OverallRating] = None


@dataclass
class AggregatedRatings:
    """
    Resultat complet d'une agregation.

    Construit une fois par requete, jamais persiste.

    Attributes:
        ids: Identite du media chez les fournisseurs
        title: Titre affiche
        media_type: Film ou serie
        year: Annee de sortie / premiere diffusion
        overview: Resume
        poster_url: URL complete du poster, None si absent
        overall: Notes globales par fournisseur
        episodes_by_season: Episodes fusionnes par saison (series uniquement)
    """

    ids: UnifiedMediaId
    title: str
    media_type: MediaType
    year: Optional[int] = None
    overview: Optional[str] = None
    poster_url: Optional[str] = None
    overall: OverallRatings = field(default_factory=OverallRatings)
    episodes_by_season: Optional[dict[int, list[EpisodeRatingEntry]]] = None
