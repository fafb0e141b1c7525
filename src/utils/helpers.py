"""
Fonctions utilitaires partagees dans le projet BingeScore.

Ce module centralise les conversions de valeurs amont reutilisees par les
adaptateurs et le service d'agregation :
- clean_title : nettoyage des titres renvoyes par les APIs
- extract_year : annee d'une date ISO (YYYY-MM-DD)
- parse_float / parse_votes : lecture des nombres formates en chaine (OMDb)
- score_or_none / votes_or_none : 0 signifie "pas de note" chez TMDB et Trakt
"""

import unicodedata
from typing import Optional


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caracteres Unicode invisibles d'une chaine.

    Supprime les caracteres de controle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    return "".join(char for char in text if unicodedata.category(char) not in ("Cf", "Cc"))


def clean_title(title: Optional[str]) -> Optional[str]:
    """Nettoie un titre ; retourne None si le titre est vide apres nettoyage."""
    if not title:
        return None
    cleaned = strip_invisible_chars(title).strip()
    return cleaned or None


def extract_year(date_str: Optional[str]) -> Optional[int]:
    """
    Extrait l'annee d'une date ISO.

    Returns:
        L'annee, ou None si la date est absente ou invalide
    """
    if not date_str or len(date_str) < 4 or not date_str[:4].isdigit():
        return None
    year = int(date_str[:4])
    return year if year > 0 else None


def parse_float(value: Optional[str]) -> Optional[float]:
    """Convertit une chaine en float, None si non numerique ("N/A")."""
    if value is None:
        return None
    try:
        result = float(value.strip())
    except ValueError:
        return None
    return None if result != result else result  # NaN


def parse_votes(value: Optional[str]) -> Optional[int]:
    """Convertit un nombre de votes formate ("1,234,567") en entier."""
    if not value:
        return None
    try:
        votes = int(value.replace(",", "").strip())
    except ValueError:
        return None
    return votes if votes >= 0 else None


def score_or_none(score: Optional[float]) -> Optional[float]:
    """Une note a 0 signifie "aucun vote" chez TMDB et Trakt."""
    return score if score else None


def votes_or_none(votes: Optional[int]) -> Optional[int]:
    """Un nombre de votes a 0 est traite comme inconnu."""
    return votes if votes else None
