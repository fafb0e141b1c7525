"""
Point d'entree CLI de BingeScore.

Configure le logging et fournit les commandes CLI : recherche, agregation
des notes et lancement du serveur web.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import aggregate, search
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="bingescore",
    help="Agregation des notes de films et de series (TMDB, IMDb, Trakt)",
)
container = Container()

# Monter les commandes de notes
app.command()(search)
app.command()(aggregate)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration BingeScore")
    typer.echo(f"API TMDB : {'activee' if config.tmdb_enabled else 'desactivee'}")
    typer.echo(f"API OMDb : {'activee' if config.omdb_enabled else 'desactivee'}")
    typer.echo(f"API Trakt : {'activee' if config.trakt_enabled else 'desactivee'}")
    typer.echo(f"Timeout requete : {config.request_timeout}s")
    typer.echo(f"Origines CORS : {', '.join(config.cors_origins)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"BingeScore v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'ecoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'ecoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web BingeScore."""
    import uvicorn

    typer.echo(f"Demarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entree de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info(f"Demarrage de BingeScore v{__version__}")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
