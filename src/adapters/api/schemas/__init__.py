"""
Formats de reponse amont (wire formats) des fournisseurs.

Modeles pydantic valides a la frontiere de chaque adaptateur. Ils ne sortent
jamais de la couche adapters : les clients les convertissent en objets du
domaine (OverallRating, EpisodeRatingEntry, SearchResult...).
"""
