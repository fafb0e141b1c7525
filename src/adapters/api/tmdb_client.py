"""
Client TMDB : catalogue principal de l'agregation.

Implemente ICatalogProvider pour TMDB (The Movie Database) :
recherche multi (films + series), details, IDs externes, note globale et
notes par episode. Utilise le mecanisme de retry pour gerer le rate limiting.

Usage:
    client = TMDBClient(api_key="your_key")
    results = await client.search("Breaking Bad")
    details = await client.get_details(1396, MediaType.SERIES)
    await client.close()
"""

import asyncio
from typing import Optional

from loguru import logger

from src.adapters.api.base import BaseAPIClient
from src.adapters.api.schemas.tmdb import (
    TMDBExternalIds,
    TMDBMediaDetails,
    TMDBSearchItem,
    TMDBSearchResponse,
    TMDBSeasonDetails,
)
from src.core.entities.media import EpisodeRatingEntry, is_valid_imdb_id
from src.core.exceptions import ProviderRequestError
from src.core.ports.api_clients import (
    ExternalIds,
    ICatalogProvider,
    MediaDetails,
    SearchResult,
)
from src.core.value_objects.media_type import MediaType, RatingSource
from src.core.value_objects.rating import OverallRating
from src.utils.helpers import clean_title, extract_year, score_or_none, votes_or_none


class TMDBClient(BaseAPIClient, ICatalogProvider):
    """
    Client API TMDB.

    Implemente ICatalogProvider avec:
    - Recherche de films et series par titre (/search/multi)
    - Details et IDs externes (obligatoires : erreurs propagees)
    - Note globale et notes par episode (optionnelles : erreurs absorbees)

    Attributes:
        BASE_URL: URL de base de l'API TMDB v3
        IMAGE_BASE_URL: URL de base pour les images (posters)

    Example:
        client = TMDBClient(api_key="xxx")

        results = await client.search("Inception")
        if results:
            rating = await client.get_overall_rating(results[0].tmdb_id, results[0].media_type)
            print(f"{results[0].title} - {rating.score}/10")

        await client.close()
    """

    BASE_URL = "https://api.themoviedb.org/3"
    IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
    SOURCE = "tmdb"

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (cle v3 ou Read Access Token v4)
            timeout: Delai maximum par requete en secondes
            max_attempts: Nombre de tentatives sur reponse 429
        """
        super().__init__(timeout=timeout, max_attempts=max_attempts)
        self._api_key = api_key

    def _is_v4_token(self) -> bool:
        """Cle v3 : 32 caracteres hex ; token v4 : long JWT."""
        return len(self._api_key) > 40

    def _build_headers(self) -> dict[str, str]:
        headers = super()._build_headers()
        if self._is_v4_token():
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _build_params(self) -> dict[str, str]:
        # API Key v3 : passee en parametre de requete
        if self._is_v4_token():
            return {}
        return {"api_key": self._api_key}

    def poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        """Prefixe le chemin d'image par l'hote d'images TMDB."""
        return f"{self.IMAGE_BASE_URL}{poster_path}" if poster_path else None

    async def search(self, query: str) -> list[SearchResult]:
        """
        Recherche des films et series par titre.

        Les personnes renvoyees par /search/multi sont ignorees.

        Args:
            query: Texte libre

        Returns:
            Liste de SearchResult (vide si aucun resultat)

        Raises:
            ProviderRequestError: Si l'API TMDB est en erreur
        """
        response: TMDBSearchResponse = await self._fetch(
            "/search/multi",
            TMDBSearchResponse,
            params={"query": query, "include_adult": "false"},
        )

        results = [
            self._to_search_result(item)
            for item in response.results
            if item.media_type in ("movie", "tv")
        ]
        logger.debug(f"TMDB: {len(results)} resultat(s) pour '{query}'")
        return results

    def _to_search_result(self, item: TMDBSearchItem) -> SearchResult:
        """Convertit un element de recherche TMDB en SearchResult."""
        title = clean_title(item.title) or clean_title(item.name) or ""
        original_title = clean_title(item.original_title) or clean_title(item.original_name)
        return SearchResult(
            tmdb_id=item.id,
            media_type=MediaType.parse(item.media_type),
            title=title,
            original_title=original_title,
            year=extract_year(item.release_date) or extract_year(item.first_air_date),
            overview=item.overview or None,
            poster_url=self.poster_url(item.poster_path),
            backdrop_url=self.poster_url(item.backdrop_path),
            imdb_id=None,
            provider=self.source,
        )

    async def get_details(self, tmdb_id: int, media_type: MediaType) -> MediaDetails:
        """
        Recupere les details d'un film ou d'une serie.

        Args:
            tmdb_id: ID TMDB
            media_type: Film ou serie

        Returns:
            MediaDetails avec les champs bruts utiles a l'agregation

        Raises:
            ProviderRequestError: Si le media est inconnu (404) ou l'API en erreur
        """
        data: TMDBMediaDetails = await self._fetch(
            f"/{media_type.tmdb_segment}/{tmdb_id}", TMDBMediaDetails
        )
        return MediaDetails(
            tmdb_id=data.id,
            media_type=media_type,
            title=clean_title(data.title),
            name=clean_title(data.name),
            overview=data.overview or None,
            poster_path=data.poster_path,
            release_date=data.release_date or None,
            first_air_date=data.first_air_date or None,
            vote_average=data.vote_average,
            vote_count=data.vote_count,
            number_of_seasons=data.number_of_seasons,
        )

    async def get_external_ids(self, tmdb_id: int, media_type: MediaType) -> ExternalIds:
        """
        Recupere les IDs externes (IMDb, TVDB) d'un media.

        Un ID IMDb vide ou mal forme est ignore.

        Raises:
            ProviderRequestError: Si le media est inconnu (404) ou l'API en erreur
        """
        data: TMDBExternalIds = await self._fetch(
            f"/{media_type.tmdb_segment}/{tmdb_id}/external_ids", TMDBExternalIds
        )
        imdb_id = data.imdb_id if is_valid_imdb_id(data.imdb_id) else None
        if data.imdb_id and imdb_id is None:
            logger.warning(f"TMDB: ID IMDb mal forme ignore pour {tmdb_id}: {data.imdb_id!r}")
        return ExternalIds(imdb_id=imdb_id, tvdb_id=data.tvdb_id)

    async def get_overall_rating(self, tmdb_id: int, media_type: MediaType) -> OverallRating:
        """
        Note globale TMDB (vote_average / vote_count).

        Ne leve jamais : en cas d'echec, retourne une note sans score.
        """
        try:
            details = await self.get_details(tmdb_id, media_type)
            return OverallRating(
                source=RatingSource.TMDB,
                score=score_or_none(details.vote_average),
                votes=votes_or_none(details.vote_count),
            )
        except (ProviderRequestError, ValueError) as e:
            logger.warning(f"TMDB: note globale indisponible pour {tmdb_id}: {e}")
            return OverallRating(source=RatingSource.TMDB, score=None, votes=None)

    async def get_episode_ratings(self, tmdb_id: int) -> list[EpisodeRatingEntry]:
        """
        Recupere les notes TMDB de tous les episodes d'une serie.

        Lit d'abord le nombre de saisons, puis recupere les saisons 1..n en
        parallele. Une saison en erreur est traitee comme vide.

        Returns:
            Liste des episodes (vide si la serie est introuvable)
        """
        try:
            details = await self.get_details(tmdb_id, MediaType.SERIES)
        except ProviderRequestError as e:
            logger.warning(f"TMDB: episodes indisponibles pour {tmdb_id}: {e}")
            return []

        number_of_seasons = details.number_of_seasons or 0
        if number_of_seasons <= 0:
            return []

        seasons = await asyncio.gather(
            *(
                self._fetch_season(tmdb_id, season_number)
                for season_number in range(1, number_of_seasons + 1)
            )
        )

        episodes: list[EpisodeRatingEntry] = []
        for season in seasons:
            if season is None:
                continue
            for episode in season.episodes:
                if episode.season_number is None or episode.episode_number is None:
                    logger.debug(f"TMDB: episode sans numero ignore pour {tmdb_id}")
                    continue
                try:
                    episodes.append(
                        EpisodeRatingEntry(
                            season_number=episode.season_number,
                            episode_number=episode.episode_number,
                            title=clean_title(episode.name),
                            tmdb_score=score_or_none(episode.vote_average),
                        )
                    )
                except ValueError as e:
                    logger.debug(f"TMDB: episode ignore pour {tmdb_id}: {e}")
        return episodes

    async def _fetch_season(
        self, tmdb_id: int, season_number: int
    ) -> Optional[TMDBSeasonDetails]:
        """Recupere une saison, None en cas d'erreur."""
        try:
            return await self._fetch(
                f"/tv/{tmdb_id}/season/{season_number}", TMDBSeasonDetails
            )
        except ProviderRequestError as e:
            logger.debug(f"TMDB: saison {season_number} ignoree pour {tmdb_id}: {e}")
            return None
