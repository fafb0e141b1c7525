"""
Constantes globales pour BingeScore.

Ce module contient les constantes partagees entre les couches:
- Longueur minimale d'une recherche
- Titre affiche quand le catalogue n'en fournit aucun
"""

# Longueur minimale d'une requete de recherche (validee avant tout appel API)
MIN_SEARCH_QUERY_LENGTH = 2

# Titre de repli quand ni title ni name ne sont renseignes
UNKNOWN_TITLE = "Unknown"
