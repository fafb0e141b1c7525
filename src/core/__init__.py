"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur et
exceptions. Cette couche n'a AUCUNE dependance vers l'infrastructure
(adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Entites metier (UnifiedMediaId, EpisodeRatingEntry, AggregatedRatings)
- ports/ : Interfaces abstraites des fournisseurs de notes
- value_objects/ : Objets valeur immutables (MediaType, RatingSource, OverallRating)
"""
