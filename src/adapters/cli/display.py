"""
Affichage Rich des resultats de recherche et des notes agregees.
"""

from typing import Optional

from rich.markup import escape
from rich.table import Table

from src.adapters.cli.helpers import console
from src.core.entities.media import AggregatedRatings, EpisodeRatingEntry
from src.core.ports.api_clients import SearchResult
from src.core.value_objects.rating import OverallRating


def format_score(score: Optional[float]) -> str:
    """Note sur 10 avec une decimale, tiret si absente."""
    return f"{score:.1f}" if score is not None else "-"


def format_votes(votes: Optional[int]) -> str:
    """Nombre de votes avec separateur de milliers, tiret si absent."""
    return f"{votes:,}".replace(",", " ") if votes is not None else "-"


def display_search_results(results: list[SearchResult]) -> None:
    """Affiche les resultats de recherche dans un tableau."""
    table = Table(title=f"{len(results)} resultat(s)", show_lines=False)
    table.add_column("TMDB ID", style="cyan", justify="right")
    table.add_column("Type")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")

    for result in results:
        table.add_row(
            str(result.tmdb_id),
            result.media_type.value,
            escape(result.title),
            str(result.year) if result.year else "-",
        )
    console.print(table)


def _rating_row(label: str, rating: Optional[OverallRating]) -> tuple[str, str, str]:
    if rating is None:
        return label, "[dim]indisponible[/dim]", "-"
    return label, format_score(rating.score), format_votes(rating.votes)


def display_aggregated_ratings(result: AggregatedRatings) -> None:
    """Affiche les notes globales puis, pour une serie, un tableau par saison."""
    year = f" ({result.year})" if result.year else ""
    console.print(f"\n[bold cyan]{escape(result.title)}{year}[/bold cyan] [dim]{result.media_type.value}[/dim]")

    ids = [f"TMDB {result.ids.tmdb_id}"]
    if result.ids.imdb_id:
        ids.append(f"IMDb {result.ids.imdb_id}")
    if result.ids.trakt_id:
        ids.append(f"Trakt {result.ids.trakt_id}")
    console.print(f"[dim]{escape(' | '.join(ids))}[/dim]")
    if result.overview:
        console.print(f"\n{escape(result.overview)}")

    table = Table(title="Notes globales")
    table.add_column("Source", style="bold")
    table.add_column("Note", justify="right")
    table.add_column("Votes", justify="right")
    table.add_row(*_rating_row("TMDB", result.overall.tmdb))
    table.add_row(*_rating_row("IMDb", result.overall.imdb))
    table.add_row(*_rating_row("Trakt", result.overall.trakt))
    console.print(table)

    if result.episodes_by_season:
        for season, entries in result.episodes_by_season.items():
            display_season(season, entries)


def display_season(season: int, entries: list[EpisodeRatingEntry]) -> None:
    """Tableau des notes d'une saison."""
    label = "Specials" if season == 0 else f"Saison {season}"
    table = Table(title=label)
    table.add_column("Ep", justify="right", style="cyan")
    table.add_column("Titre")
    table.add_column("TMDB", justify="right")
    table.add_column("Trakt", justify="right")
    for entry in entries:
        table.add_row(
            str(entry.episode_number),
            escape(entry.title) if entry.title else "[dim]-[/dim]",
            format_score(entry.tmdb_score),
            format_score(entry.trakt_score),
        )
    console.print(table)
