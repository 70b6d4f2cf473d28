"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINESEARCH_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est lue une seule fois ici puis injectée dans le client par le container DI.
Sans clé, l'application démarre mais chaque appel au fournisseur échouera.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de cinesearch/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINESEARCH_.
    Exemple : CINESEARCH_TMDB_API_KEY=xxxx

    Le chemin du fichier de log (log_file) est étendu (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINESEARCH_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fournisseur TMDB
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_language: str = Field(default="en-US")

    # Pas de timeout par defaut : une requete bloquee garde l'ecran en chargement
    request_timeout: Optional[float] = Field(default=None, gt=0)

    # Ecrans en memoire (une paire recherche/detail par session navigateur)
    max_sessions: int = Field(default=1000, ge=1)
    session_cookie_name: str = Field(default="cinesearch_session")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinesearch.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("tmdb_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Une clé vide (CINESEARCH_TMDB_API_KEY=) est traitée comme absente."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return self.tmdb_api_key is not None
