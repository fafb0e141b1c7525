"""
Client OMDb : notes IMDb indexees par ID IMDb.

Implemente IRatingsProvider. OMDb repond 200 meme quand le titre est
inconnu (Response="False") : ce cas, comme une note non numerique ("N/A")
ou une erreur reseau, donne None.

Reference API: https://www.omdbapi.com/
"""

from typing import Optional

from loguru import logger

from src.adapters.api.base import BaseAPIClient
from src.adapters.api.schemas.omdb import OMDbResponse
from src.core.exceptions import ProviderRequestError
from src.core.ports.api_clients import IRatingsProvider
from src.core.value_objects.media_type import RatingSource
from src.core.value_objects.rating import OverallRating
from src.utils.helpers import parse_float, parse_votes


class OMDbClient(BaseAPIClient, IRatingsProvider):
    """
    Client OMDb pour la note IMDb d'un film ou d'une serie.

    Example:
        client = OMDbClient(api_key="your-api-key")
        rating = await client.get_overall_rating_by_imdb_id("tt0903747")
        await client.close()
    """

    BASE_URL = "https://www.omdbapi.com"
    SOURCE = "omdb"

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb
            timeout: Delai maximum par requete en secondes
            max_attempts: Nombre de tentatives sur reponse 429
        """
        super().__init__(timeout=timeout, max_attempts=max_attempts)
        self._api_key = api_key

    def _build_params(self) -> dict[str, str]:
        return {"apikey": self._api_key}

    async def get_overall_rating_by_imdb_id(self, imdb_id: str) -> Optional[OverallRating]:
        """
        Recupere la note IMDb d'un titre.

        Args:
            imdb_id: ID IMDb (format ttXXXXXXX)

        Returns:
            OverallRating(source=imdb), ou None si introuvable ou non numerique
        """
        try:
            data: OMDbResponse = await self._fetch("/", OMDbResponse, params={"i": imdb_id})
        except ProviderRequestError as e:
            logger.warning(f"OMDb: note indisponible pour {imdb_id}: {e}")
            return None

        if not data.found:
            logger.info(f"OMDb: aucun resultat pour {imdb_id}: {data.error}")
            return None

        score = parse_float(data.imdb_rating)
        if score is None:
            logger.debug(f"OMDb: note non numerique pour {imdb_id}: {data.imdb_rating!r}")
            return None

        try:
            return OverallRating(
                source=RatingSource.IMDB,
                score=score,
                votes=parse_votes(data.imdb_votes),
            )
        except ValueError as e:
            logger.warning(f"OMDb: note invalide pour {imdb_id}: {e}")
            return None
