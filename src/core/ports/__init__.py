"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour les fournisseurs de notes
- ICatalogProvider : Catalogue (recherche, details, notes, episodes)
- IRatingsProvider : Notes par ID IMDb
- ISocialProvider : Notes communautaires et resolution d'ID
- SearchResult, MediaDetails, ExternalIds : Donnees echangees
"""

from src.core.ports.api_clients import (
    ExternalIds,
    ICatalogProvider,
    IRatingsProvider,
    ISocialProvider,
    MediaDetails,
    SearchResult,
)

__all__ = [
    "ExternalIds",
    "ICatalogProvider",
    "IRatingsProvider",
    "ISocialProvider",
    "MediaDetails",
    "SearchResult",
]
