"""
Commandes CLI de recherche et d'agregation des notes.
"""

import asyncio
import json
from typing import Annotated

import typer
from rich.markup import escape

from src.adapters.cli.display import display_aggregated_ratings, display_search_results
from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.container import Container
from src.core.exceptions import AggregationError, ProviderRequestError
from src.core.value_objects.media_type import MediaType
from src.utils.constants import MIN_SEARCH_QUERY_LENGTH
from src.web.schemas import AggregatedRatingsSchema


def search(
    query: Annotated[str, typer.Argument(help="Titre a rechercher")],
) -> None:
    """Recherche des films et series sur TMDB."""
    if len(query.strip()) < MIN_SEARCH_QUERY_LENGTH:
        console.print(
            f"[red]La recherche doit contenir au moins {MIN_SEARCH_QUERY_LENGTH} caracteres.[/red]"
        )
        raise typer.Exit(code=1)
    asyncio.run(_search_async(query.strip()))


@with_container()
async def _search_async(container: Container, query: str) -> None:
    """Implementation async de la commande search."""
    catalog = container.tmdb_client()
    try:
        with suppress_loguru():
            results = await catalog.search(query)
    except ProviderRequestError as e:
        console.print(f"[red]Recherche TMDB impossible: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if not results:
        console.print(f"[yellow]Aucun resultat pour '{escape(query)}'.[/yellow]")
        return
    display_search_results(results)


def aggregate(
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB du film ou de la serie", min=1)],
    media_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Type de media : movie ou series"),
    ] = "movie",
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON (format de l'API web)"),
    ] = False,
) -> None:
    """Agrege les notes TMDB, IMDb et Trakt d'un media."""
    try:
        parsed_type = MediaType.parse(media_type)
    except ValueError:
        console.print(f"[red]Type de media invalide: {escape(media_type)} (movie ou series)[/red]")
        raise typer.Exit(code=1)
    asyncio.run(_aggregate_async(tmdb_id, parsed_type, as_json))


@with_container()
async def _aggregate_async(
    container: Container, tmdb_id: int, media_type: MediaType, as_json: bool
) -> None:
    """Implementation async de la commande aggregate."""
    service = container.aggregation_service()
    try:
        with suppress_loguru():
            result = await service.aggregate(tmdb_id, media_type)
    except AggregationError as e:
        console.print(f"[red]{escape(e.message)} ({e.code})[/red]")
        raise typer.Exit(code=1)

    if as_json:
        payload = AggregatedRatingsSchema.from_domain(result).to_json()
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    display_aggregated_ratings(result)
