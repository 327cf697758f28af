"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
MOVIEFINDER_, et peut optionnellement être fournie via un fichier .env.

La clé API OMDb n'a pas de valeur par défaut : elle doit être injectée par
l'environnement et n'est jamais écrite en dur dans le code.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de moviefinder/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class AggregationPolicy(str, Enum):
    """Politique de collecte des details recuperes en parallele.

    Valeurs:
        FAIL_FAST: Le premier echec fait echouer tout le lot
        BEST_EFFORT: Les echecs sont ignores, les succes sont conserves
    """

    FAIL_FAST = "fail_fast"
    BEST_EFFORT = "best_effort"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIEFINDER_.
    Exemple : MOVIEFINDER_OMDB_API_KEY=abcd1234

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIEFINDER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API OMDb
    omdb_api_key: Optional[str] = Field(default=None)
    omdb_base_url: str = Field(default="https://www.omdbapi.com/")
    request_timeout: Optional[float] = Field(default=30.0, gt=0)

    # Recherche
    enrich_details: bool = Field(default=True)
    aggregation_policy: AggregationPolicy = Field(default=AggregationPolicy.FAIL_FAST)

    # Interface web
    session_cookie_name: str = Field(default="moviefinder_session")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/moviefinder.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("request_timeout", mode="before")
    @classmethod
    def empty_timeout_is_none(cls, v):
        """Une valeur vide désactive le timeout réseau."""
        if v == "":
            return None
        return v

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return bool(self.omdb_api_key)
