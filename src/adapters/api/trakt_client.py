"""
Client Trakt : notes communautaires globales et par episode.

Implemente ISocialProvider. Trakt identifie les medias par un slug (ou un
ID numerique) : l'ID TMDB doit d'abord etre resolu via /search/tmdb/{id}.
Toutes les operations sont optionnelles pour l'agregation : les erreurs
sont tracees puis converties en None ou en liste vide.

Reference API: https://trakt.docs.apiary.io/
"""

from typing import Optional

from loguru import logger

from src.adapters.api.base import BaseAPIClient
from src.adapters.api.schemas.trakt import (
    TraktRating,
    TraktSearchResult,
    TraktSeason,
)
from src.core.entities.media import EpisodeRatingEntry
from src.core.exceptions import ProviderRequestError
from src.core.ports.api_clients import ISocialProvider
from src.core.value_objects.media_type import MediaType, RatingSource
from src.core.value_objects.rating import OverallRating
from src.utils.helpers import clean_title, score_or_none, votes_or_none


class TraktClient(BaseAPIClient, ISocialProvider):
    """
    Client Trakt v2.

    L'authentification se fait par le Client ID de l'application, envoye
    dans le header trakt-api-key.

    Example:
        client = TraktClient(client_id="your-client-id")
        trakt_id = await client.resolve_trakt_id(1396, MediaType.SERIES)
        if trakt_id:
            episodes = await client.get_episode_ratings(trakt_id)
        await client.close()
    """

    BASE_URL = "https://api.trakt.tv"
    API_VERSION = "2"
    SOURCE = "trakt"

    def __init__(
        self,
        client_id: str,
        timeout: float = 10.0,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialise le client Trakt.

        Args:
            client_id: Client ID de l'application Trakt
            timeout: Delai maximum par requete en secondes
            max_attempts: Nombre de tentatives sur reponse 429
        """
        super().__init__(timeout=timeout, max_attempts=max_attempts)
        self._client_id = client_id

    def _build_headers(self) -> dict[str, str]:
        headers = super()._build_headers()
        headers.update({
            "Content-Type": "application/json",
            "trakt-api-version": self.API_VERSION,
            "trakt-api-key": self._client_id,
        })
        return headers

    async def resolve_trakt_id(self, tmdb_id: int, media_type: MediaType) -> Optional[str]:
        """
        Resout un ID TMDB en identifiant Trakt.

        Le premier resultat est retenu ; son slug est prefere a l'ID numerique.

        Returns:
            Slug ou ID Trakt, None si aucune correspondance
        """
        try:
            results: list[TraktSearchResult] = await self._fetch(
                f"/search/tmdb/{tmdb_id}",
                list[TraktSearchResult],
                params={"type": media_type.trakt_type},
            )
        except ProviderRequestError as e:
            logger.warning(f"Trakt: resolution impossible pour TMDB {tmdb_id}: {e}")
            return None

        if not results:
            logger.info(f"Trakt: aucune correspondance pour TMDB {tmdb_id}")
            return None

        ids = results[0].ids
        if ids is None:
            return None
        if ids.slug:
            return ids.slug
        return str(ids.trakt) if ids.trakt is not None else None

    async def get_overall_rating(
        self, trakt_id: str, media_type: MediaType
    ) -> Optional[OverallRating]:
        """
        Recupere la note globale Trakt d'un film ou d'une serie.

        Returns:
            OverallRating(source=trakt), ou None si absente ou en erreur
        """
        endpoint = "movies" if media_type is MediaType.MOVIE else "shows"
        try:
            data: TraktRating = await self._fetch(f"/{endpoint}/{trakt_id}/ratings", TraktRating)
        except ProviderRequestError as e:
            logger.warning(f"Trakt: note indisponible pour {trakt_id}: {e}")
            return None

        if data.rating is None:
            return None

        try:
            return OverallRating(
                source=RatingSource.TRAKT,
                score=score_or_none(data.rating),
                votes=votes_or_none(data.votes),
            )
        except ValueError as e:
            logger.warning(f"Trakt: note invalide pour {trakt_id}: {e}")
            return None

    async def get_episode_ratings(self, trakt_id: str) -> list[EpisodeRatingEntry]:
        """
        Recupere les notes Trakt de tous les episodes d'une serie.

        Un seul appel : /shows/{id}/seasons?extended=episodes.
        Les saisons sans episodes sont ignorees.
        """
        try:
            seasons: list[TraktSeason] = await self._fetch(
                f"/shows/{trakt_id}/seasons",
                list[TraktSeason],
                params={"extended": "episodes"},
            )
        except ProviderRequestError as e:
            logger.warning(f"Trakt: episodes indisponibles pour {trakt_id}: {e}")
            return []

        episodes: list[EpisodeRatingEntry] = []
        for season in seasons:
            if season.number is None or not season.episodes:
                continue
            for episode in season.episodes:
                if episode.number is None:
                    logger.debug(f"Trakt: episode sans numero ignore pour {trakt_id}")
                    continue
                try:
                    episodes.append(
                        EpisodeRatingEntry(
                            season_number=season.number,
                            episode_number=episode.number,
                            title=clean_title(episode.title),
                            trakt_score=score_or_none(episode.rating),
                        )
                    )
                except ValueError as e:
                    logger.debug(f"Trakt: episode ignore pour {trakt_id}: {e}")
        return episodes
