"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) definissant les contrats des trois fournisseurs
de notes. Les implementations (adaptateurs) traduisent les formats amont en
objets du domaine :
- ICatalogProvider : catalogue de metadonnees et de notes (TMDB)
- IRatingsProvider : notes indexees par ID IMDb (OMDb)
- ISocialProvider : notes communautaires globales et par episode (Trakt)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from src.core.entities.media import EpisodeRatingEntry
from src.core.value_objects.media_type import MediaType
from src.core.value_objects.rating import OverallRating


@dataclass
class SearchResult:
    """
    Resultat de recherche depuis le catalogue.

    Attributs :
        tmdb_id : ID TMDB
        media_type : Film ou serie
        title : Titre affiche
        original_title : Titre en langue originale
        year : Annee de sortie/diffusion
        overview : Resume
        poster_url : URL complete du poster
        backdrop_url : URL complete de l'image de fond
        imdb_id : ID IMDb (non fourni par la recherche)
        provider : Identifiant de la source ("tmdb")
    """

    tmdb_id: int
    media_type: MediaType
    title: str
    original_title: Optional[str] = None
    year: Optional[int] = None
    overview: Optional[str] = None
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    imdb_id: Optional[str] = None
    provider: str = "tmdb"


@dataclass
class MediaDetails:
    """
    Details bruts d'un media depuis le catalogue.

    Les films renseignent title/release_date, les series name/first_air_date.
    Le choix du titre et de l'annee affiches revient au service d'agregation.
    """

    tmdb_id: int
    media_type: MediaType
    title: Optional[str] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    number_of_seasons: Optional[int] = None


@dataclass
class ExternalIds:
    """IDs externes d'un media connus du catalogue."""

    imdb_id: Optional[str] = None
    tvdb_id: Optional[int] = None


class ICatalogProvider(ABC):
    """
    Interface du catalogue principal (recherche, details, notes, episodes).

    get_details et get_external_ids sont obligatoires pour l'agregation :
    leurs echecs levent ProviderRequestError. Les autres operations
    absorbent leurs erreurs.
    """

    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        """Recherche films et series par texte libre."""
        ...

    @abstractmethod
    async def get_details(self, tmdb_id: int, media_type: MediaType) -> MediaDetails:
        """
        Recupere les details d'un media.

        Raises:
            ProviderRequestError: Si le media est inconnu (404) ou l'API en erreur
        """
        ...

    @abstractmethod
    async def get_external_ids(self, tmdb_id: int, media_type: MediaType) -> ExternalIds:
        """
        Recupere les IDs externes (IMDb, TVDB).

        Raises:
            ProviderRequestError: Si le media est inconnu (404) ou l'API en erreur
        """
        ...

    @abstractmethod
    async def get_overall_rating(self, tmdb_id: int, media_type: MediaType) -> OverallRating:
        """Note globale TMDB, avec score None en cas d'echec."""
        ...

    @abstractmethod
    async def get_episode_ratings(self, tmdb_id: int) -> list[EpisodeRatingEntry]:
        """Notes TMDB de tous les episodes d'une serie, liste vide en cas d'echec."""
        ...

    @abstractmethod
    def poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        """Construit l'URL complete d'un poster."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...


class IRatingsProvider(ABC):
    """Interface des notes indexees par ID IMDb."""

    @abstractmethod
    async def get_overall_rating_by_imdb_id(self, imdb_id: str) -> Optional[OverallRating]:
        """Note IMDb, ou None si introuvable ou non numerique."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...


class ISocialProvider(ABC):
    """Interface du fournisseur communautaire (resolution d'ID, notes, episodes)."""

    @abstractmethod
    async def resolve_trakt_id(self, tmdb_id: int, media_type: MediaType) -> Optional[str]:
        """Resout l'ID TMDB en slug/ID Trakt, None si aucune correspondance."""
        ...

    @abstractmethod
    async def get_overall_rating(
        self, trakt_id: str, media_type: MediaType
    ) -> Optional[OverallRating]:
        """Note globale Trakt, ou None."""
        ...

    @abstractmethod
    async def get_episode_ratings(self, trakt_id: str) -> list[EpisodeRatingEntry]:
        """Notes Trakt de tous les episodes, liste vide en cas d'echec."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...
