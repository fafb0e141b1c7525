"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.ratings_commands import (
    aggregate,
    search,
)

__all__ = [
    "aggregate",
    "search",
]
