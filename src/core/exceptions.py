"""
Exceptions du domaine d'agregation.

Deux familles :
- ProviderRequestError : levee par un adaptateur quand une donnee obligatoire
  ne peut pas etre recuperee (porte le code HTTP amont)
- AggregationError : levee par le service d'agregation, avec un code court
  expose au client (NOT_FOUND, AGGREGATION_ERROR)

Les donnees optionnelles (notes, episodes, resolution d'ID) ne levent jamais
d'exception hors des adaptateurs : elles deviennent None ou une liste vide.
"""

from typing import Optional


class ProviderRequestError(Exception):
    """
    Echec d'un appel obligatoire vers un fournisseur.

    Attributes:
        provider: Identifiant du fournisseur ("tmdb", "omdb", "trakt")
        status_code: Code HTTP amont, None pour une erreur reseau ou un timeout
    """

    def __init__(
        self,
        provider: str,
        status_code: Optional[int] = None,
        message: str = "",
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        detail = message or "erreur inconnue"
        super().__init__(f"{provider}: {detail} (status={status_code})")

    @property
    def is_not_found(self) -> bool:
        """Le fournisseur a repondu 404."""
        return self.status_code == 404


class AggregationError(Exception):
    """Erreur de base du service d'agregation."""

    code = "AGGREGATION_ERROR"
    default_message = "Failed to aggregate ratings from providers"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MediaNotFoundError(AggregationError):
    """Le catalogue ne connait pas le media demande (HTTP 404)."""

    code = "NOT_FOUND"
    default_message = "Media not found"


class ProviderError(AggregationError):
    """Le catalogue est indisponible ou a renvoye une erreur (HTTP 502)."""
