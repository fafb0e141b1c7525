"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe
BINGESCORE_, et peut optionnellement etre fournie via un fichier .env.

Les cles API (TMDB, OMDb, Trakt) sont optionnelles au chargement : un
fournisseur sans cle repond en erreur et sa note apparait comme indisponible.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe BINGESCORE_.
    Exemple : BINGESCORE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="BINGESCORE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Cles API des fournisseurs (opaques, injectees dans les clients)
    tmdb_api_key: Optional[str] = Field(default=None)
    omdb_api_key: Optional[str] = Field(default=None)
    trakt_client_id: Optional[str] = Field(default=None)

    # Appels sortants
    request_timeout: float = Field(default=10.0, gt=0)
    retry_max_attempts: int = Field(default=3, ge=1, le=10)
    # Delai maximum d'une branche d'agregation (plusieurs requetes pour les episodes)
    aggregation_timeout: float = Field(default=30.0, gt=0)

    # Serveur web
    cors_origins: list[str] = Field(default=["http://localhost:5173"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/bingescore.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Niveau de log en majuscules (debug -> DEBUG)."""
        return str(v).upper()

    @property
    def tmdb_enabled(self) -> bool:
        """Verifie si l'API TMDB est configuree."""
        return bool(self.tmdb_api_key)

    @property
    def omdb_enabled(self) -> bool:
        """Verifie si l'API OMDb est configuree."""
        return bool(self.omdb_api_key)

    @property
    def trakt_enabled(self) -> bool:
        """Verifie si l'API Trakt est configuree."""
        return bool(self.trakt_client_id)
