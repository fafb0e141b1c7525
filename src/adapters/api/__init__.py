"""
Clients API externes des fournisseurs de notes.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: catalogue (recherche, details, notes globales et par episode)
- OMDb: notes IMDb par ID IMDb
- Trakt: notes communautaires globales et par episode

Infrastructure partagee:
- BaseAPIClient: client httpx paresseux et conversion des erreurs amont
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: backoff exponentiel sur rate limiting

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from src.adapters.api.base import BaseAPIClient
from src.adapters.api.omdb_client import OMDbClient
from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from src.adapters.api.tmdb_client import TMDBClient
from src.adapters.api.trakt_client import TraktClient

__all__ = [
    "BaseAPIClient",
    "OMDbClient",
    "RateLimitError",
    "TMDBClient",
    "TraktClient",
    "request_with_retry",
    "with_retry",
]
