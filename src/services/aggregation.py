"""
Service d'agregation des notes TMDB, IMDb (via OMDb) et Trakt.

Orchestre les appels aux trois fournisseurs pour un media :
1. Details + IDs externes TMDB en parallele (obligatoires)
2. Trois notes globales en parallele (optionnelles)
3. Pour une serie dont l'ID Trakt est resolu : episodes TMDB et Trakt en
   parallele, puis fusion par saison

Les branches optionnelles sont capturees dans un BranchOutcome : une erreur
devient une absence sans interrompre les branches soeurs. Les branches
obligatoires propagent une AggregationError typee.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar

from loguru import logger

from src.core.entities.media import (
    AggregatedRatings,
    EpisodeRatingEntry,
    OverallRatings,
    UnifiedMediaId,
)
from src.core.exceptions import MediaNotFoundError, ProviderError, ProviderRequestError
from src.core.ports.api_clients import (
    ExternalIds,
    ICatalogProvider,
    IRatingsProvider,
    ISocialProvider,
    MediaDetails,
)
from src.core.value_objects.media_type import MediaType
from src.core.value_objects.rating import OverallRating
from src.services.episode_merge import merge_episode_ratings
from src.utils.constants import UNKNOWN_TITLE
from src.utils.helpers import extract_year

T = TypeVar("T")


@dataclass(frozen=True)
class BranchOutcome(Generic[T]):
    """
    Resultat d'une branche optionnelle : une valeur ou une absence.

    Attributes:
        value: Valeur produite, None si absente
        error: Exception capturee quand la branche a echoue
    """

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: Optional[T]) -> "BranchOutcome[T]":
        return cls(value=value)

    @classmethod
    def absent(cls, error: Optional[BaseException] = None) -> "BranchOutcome[T]":
        return cls(value=None, error=error)

    @property
    def is_present(self) -> bool:
        return self.value is not None

    def value_or(self, default: T) -> T:
        """Retourne la valeur, ou default si la branche est absente."""
        return self.value if self.value is not None else default


class AggregationService:
    """
    Service d'agregation des notes d'un film ou d'une serie.

    Ne conserve aucun etat entre deux requetes : chaque appel a aggregate()
    est isole.

    Example:
        service = AggregationService(catalog=tmdb, ratings=omdb, social=trakt, timeout=10)
        result = await service.aggregate(1396, MediaType.SERIES)
        print(result.overall.imdb.score if result.overall.imdb else "Not available")
    """

    def __init__(
        self,
        catalog: ICatalogProvider,
        ratings: IRatingsProvider,
        social: ISocialProvider,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialise le service d'agregation.

        Args:
            catalog: Client du catalogue (TMDB)
            ratings: Client des notes IMDb (OMDb)
            social: Client communautaire (Trakt)
            timeout: Delai maximum par branche en secondes (None = illimite)
        """
        self._catalog = catalog
        self._ratings = ratings
        self._social = social
        self._timeout = timeout

    async def aggregate(self, tmdb_id: int, media_type: MediaType | str) -> AggregatedRatings:
        """
        Agrege les notes de tous les fournisseurs pour un media.

        Args:
            tmdb_id: ID TMDB du media
            media_type: Film ou serie

        Returns:
            AggregatedRatings ; les notes indisponibles valent None

        Raises:
            MediaNotFoundError: Si TMDB ne connait pas le media (404)
            ProviderError: Si les details ou IDs externes sont indisponibles
        """
        media_type = MediaType.parse(media_type)
        logger.info(f"Agregation des notes pour {media_type.value} {tmdb_id}")

        details, external_ids = await self._fetch_primary(tmdb_id, media_type)

        ids = UnifiedMediaId(
            media_type=media_type,
            tmdb_id=tmdb_id,
            imdb_id=external_ids.imdb_id,
        )

        tmdb_rating, imdb_rating, trakt_rating = await asyncio.gather(
            self._optional("note TMDB", self._catalog.get_overall_rating(tmdb_id, media_type)),
            self._imdb_branch(ids.imdb_id),
            self._optional("note Trakt", self._trakt_rating(ids)),
        )
        overall = OverallRatings(
            tmdb=tmdb_rating.value,
            imdb=imdb_rating.value,
            trakt=trakt_rating.value,
        )

        episodes_by_season = None
        if media_type is MediaType.SERIES and ids.trakt_id:
            episodes_by_season = await self._episodes_by_season(tmdb_id, ids.trakt_id)

        result = AggregatedRatings(
            ids=ids,
            title=details.title or details.name or UNKNOWN_TITLE,
            media_type=media_type,
            year=extract_year(details.release_date) or extract_year(details.first_air_date),
            overview=details.overview or None,
            poster_url=self._catalog.poster_url(details.poster_path),
            overall=overall,
            episodes_by_season=episodes_by_season,
        )
        logger.info(
            f"Agregation terminee pour {media_type.value} {tmdb_id}: "
            f"tmdb={'ok' if tmdb_rating.is_present else 'absent'}, "
            f"imdb={'ok' if imdb_rating.is_present else 'absent'}, "
            f"trakt={'ok' if trakt_rating.is_present else 'absent'}, "
            f"saisons={len(episodes_by_season) if episodes_by_season else 0}"
        )
        return result

    async def _fetch_primary(
        self, tmdb_id: int, media_type: MediaType
    ) -> tuple[MediaDetails, ExternalIds]:
        """
        Recupere details et IDs externes ; tout echec interrompt l'agregation.
        """
        try:
            details, external_ids = await asyncio.gather(
                self._with_timeout(self._catalog.get_details(tmdb_id, media_type)),
                self._with_timeout(self._catalog.get_external_ids(tmdb_id, media_type)),
            )
        except ProviderRequestError as e:
            if e.is_not_found:
                logger.info(f"Media introuvable: {media_type.value} {tmdb_id}")
                raise MediaNotFoundError() from e
            logger.error(f"Catalogue indisponible pour {media_type.value} {tmdb_id}: {e}")
            raise ProviderError() from e
        except TimeoutError as e:
            logger.error(f"Timeout du catalogue pour {media_type.value} {tmdb_id}")
            raise ProviderError() from e
        except Exception as e:
            logger.exception(f"Erreur inattendue du catalogue pour {media_type.value} {tmdb_id}")
            raise ProviderError() from e
        return details, external_ids

    async def _imdb_branch(self, imdb_id: Optional[str]) -> BranchOutcome[OverallRating]:
        """Note IMDb ; absente sans appel si l'ID IMDb est inconnu."""
        if not imdb_id:
            logger.debug("Pas d'ID IMDb, note IMDb ignoree")
            return BranchOutcome.absent()
        return await self._optional(
            "note IMDb", self._ratings.get_overall_rating_by_imdb_id(imdb_id)
        )

    async def _trakt_rating(self, ids: UnifiedMediaId) -> Optional[OverallRating]:
        """Resout l'ID Trakt, l'enregistre dans ids, puis recupere la note."""
        trakt_id = await self._social.resolve_trakt_id(ids.tmdb_id, ids.media_type)
        if not trakt_id:
            return None
        ids.trakt_id = trakt_id
        return await self._social.get_overall_rating(trakt_id, ids.media_type)

    async def _episodes_by_season(
        self, tmdb_id: int, trakt_id: str
    ) -> Optional[dict[int, list[EpisodeRatingEntry]]]:
        """Episodes TMDB et Trakt fusionnes, None si aucun fournisseur n'en a."""
        tmdb_episodes, trakt_episodes = await asyncio.gather(
            self._optional("episodes TMDB", self._catalog.get_episode_ratings(tmdb_id)),
            self._optional("episodes Trakt", self._social.get_episode_ratings(trakt_id)),
        )
        tmdb_list = tmdb_episodes.value_or([])
        trakt_list = trakt_episodes.value_or([])
        if not tmdb_list and not trakt_list:
            return None
        return merge_episode_ratings(tmdb_list, trakt_list)

    async def _optional(self, label: str, awaitable: Awaitable[T]) -> BranchOutcome[T]:
        """Execute une branche optionnelle ; toute erreur devient une absence."""
        try:
            value = await self._with_timeout(awaitable)
        except Exception as e:
            logger.debug(f"{label} absente: {type(e).__name__}: {e}")
            return BranchOutcome.absent(e)
        if value is None:
            logger.debug(f"{label} absente")
        return BranchOutcome.ok(value)

    async def _with_timeout(self, awaitable: Awaitable[Any]) -> Any:
        if self._timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout=self._timeout)
