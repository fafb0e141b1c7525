"""
BingeScore - Agregation des notes de films et de series.

Ce package interroge trois fournisseurs de notes (TMDB, OMDb pour IMDb,
Trakt), fusionne leurs notes globales et, pour les series, les notes par
episode de TMDB et Trakt saison par saison.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (agregation, fusion des episodes)
- adapters/ : Couche infrastructure (clients API, CLI)
- web/ : API HTTP (FastAPI)
"""

__version__ = "0.1.0"
