"""
Utilitaires et constantes pour BingeScore.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import MIN_SEARCH_QUERY_LENGTH, UNKNOWN_TITLE

__all__ = [
    "MIN_SEARCH_QUERY_LENGTH",
    "UNKNOWN_TITLE",
]
