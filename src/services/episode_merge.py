"""
Fusion des notes par episode TMDB et Trakt.

Les deux fournisseurs numerotent les episodes de la meme facon : la cle
composite (saison, episode) sert d'index et garantit l'absence de doublons.
"""

from dataclasses import replace
from typing import Iterable

from src.core.entities.media import EpisodeRatingEntry


def merge_episode_ratings(
    tmdb_episodes: Iterable[EpisodeRatingEntry],
    trakt_episodes: Iterable[EpisodeRatingEntry],
) -> dict[int, list[EpisodeRatingEntry]]:
    """
    Fusionne deux listes d'episodes et les regroupe par saison.

    Pour une cle presente des deux cotes, la note Trakt est reprise et le
    titre Trakt ne sert que si le titre TMDB est absent. Un episode connu
    seulement de Trakt est ajoute tel quel, meme sans titre.
    Les listes d'entree ne sont pas modifiees.

    Args:
        tmdb_episodes: Episodes notes par TMDB
        trakt_episodes: Episodes notes par Trakt

    Returns:
        Dictionnaire saison -> episodes tries par numero croissant
        (saisons en ordre croissant)
    """
    by_key: dict[tuple[int, int], EpisodeRatingEntry] = {}

    for episode in tmdb_episodes:
        by_key[episode.key] = replace(episode)

    for episode in trakt_episodes:
        existing = by_key.get(episode.key)
        if existing is None:
            by_key[episode.key] = replace(episode)
            continue
        existing.trakt_score = episode.trakt_score
        if not existing.title and episode.title:
            existing.title = episode.title

    episodes_by_season: dict[int, list[EpisodeRatingEntry]] = {}
    for episode in by_key.values():
        episodes_by_season.setdefault(episode.season_number, []).append(episode)

    return {
        season: sorted(episodes, key=lambda entry: entry.episode_number)
        for season, episodes in sorted(episodes_by_season.items())
    }
