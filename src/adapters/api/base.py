"""
Socle commun des clients HTTP des fournisseurs de notes.

Centralise la creation paresseuse du client httpx, la fermeture, et la
conversion de toutes les erreurs amont (HTTP, reseau, timeout, rate limit,
payload invalide) en ProviderRequestError. Chaque adaptateur decide ensuite
si l'erreur est fatale (donnee obligatoire) ou absorbee (donnee optionnelle).
"""

from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from src.adapters.api.retry import RateLimitError, request_with_retry
from src.core.exceptions import ProviderRequestError


class BaseAPIClient:
    """
    Client HTTP de base partage par TMDB, OMDb et Trakt.

    Attributes:
        BASE_URL: URL de base de l'API (a definir dans les sous-classes)
        SOURCE: Identifiant du fournisseur dans les logs et erreurs
    """

    BASE_URL = ""
    SOURCE = ""

    def __init__(self, timeout: float = 10.0, max_attempts: int = 3) -> None:
        """
        Args:
            timeout: Delai maximum par requete HTTP en secondes
            max_attempts: Nombre de tentatives sur reponse 429
        """
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _build_headers(self) -> dict[str, str]:
        """Headers envoyes a chaque requete."""
        return {"Accept": "application/json"}

    def _build_params(self) -> dict[str, str]:
        """Parametres de requete envoyes a chaque requete."""
        return {}

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Un client unique par adaptateur pour beneficier du connection pooling.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers=self._build_headers(),
                params=self._build_params(),
                timeout=httpx.Timeout(self._timeout, connect=min(self._timeout, 5.0)),
            )
        return self._client

    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Execute un GET et retourne le JSON decode.

        Raises:
            ProviderRequestError: Pour toute erreur HTTP, reseau ou de decodage
        """
        client = self._get_client()
        try:
            response = await request_with_retry(
                client,
                "GET",
                path,
                max_attempts=self._max_attempts,
                max_wait=int(self._timeout) or 1,
                params=params,
            )
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(
                self.SOURCE, e.response.status_code, e.response.reason_phrase
            ) from e
        except RateLimitError as e:
            raise ProviderRequestError(self.SOURCE, 429, str(e)) from e
        except httpx.TimeoutException as e:
            raise ProviderRequestError(self.SOURCE, None, f"timeout sur {path}") from e
        except httpx.HTTPError as e:
            raise ProviderRequestError(self.SOURCE, None, str(e) or type(e).__name__) from e
        except ValueError as e:
            # JSON invalide
            raise ProviderRequestError(self.SOURCE, None, f"reponse illisible: {e}") from e

    async def _fetch(self, path: str, schema: Any, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Execute un GET et valide la reponse contre un schema pydantic.

        Args:
            path: Chemin relatif a BASE_URL
            schema: Modele pydantic ou type (ex: list[TraktSeason])
            params: Parametres de requete

        Raises:
            ProviderRequestError: Pour toute erreur HTTP ou payload non conforme
        """
        data = await self._get_json(path, params=params)
        try:
            return TypeAdapter(schema).validate_python(data)
        except ValidationError as e:
            logger.debug(f"{self.SOURCE}: payload non conforme pour {path}: {e}")
            raise ProviderRequestError(self.SOURCE, None, f"payload non conforme pour {path}") from e

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return self.SOURCE

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
