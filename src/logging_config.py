"""
Configuration du logging de l'application via loguru.

Deux sorties :
- Console : niveau choisi par l'utilisateur, format compact colore
- Fichier : JSON avec rotation, tous les niveaux

Les cles TMDB (v3) et OMDb voyagent dans la query string et les erreurs
httpx recopient l'URL complete : tout message est donc filtre par
redact_secrets() avant d'etre ecrit, quelle que soit la sortie.
"""

import re
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

# api_key=... (TMDB v3), apikey=... (OMDb), Authorization: Bearer ... (TMDB v4)
_SECRET_PATTERNS = (
    re.compile(r"(?i)(api_?key=)[^&\s'\"]+"),
    re.compile(r"(?i)(bearer\s+)[A-Za-z0-9._\-]+"),
)
REDACTED = "***"


def redact_secrets(message: str) -> str:
    """Masque les cles d'API presentes dans un message de log."""
    for pattern in _SECRET_PATTERNS:
        message = pattern.sub(rf"\g<1>{REDACTED}", message)
    return message


def _patch_record(record: dict[str, Any]) -> None:
    record["message"] = redact_secrets(record["message"])


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/bingescore.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum de la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON, None pour n'avoir que la console
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    logger.remove()
    logger.configure(patcher=_patch_record)

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> "
            "<level>{level: <7}</level> "
            "<cyan>{name}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # absences de notes et episodes ignores
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logging configure: {log_file} (rotation {rotation_size})")
