"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 (avec les filtres de présentation) et l'accès
aux écrans de la session courante.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..services.screens import Screens, ScreenRegistry
from ..utils import constants
from ..utils.helpers import (
    format_overview,
    format_rating,
    format_release_date,
    format_runtime,
    image_url,
    release_year,
)

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent


def _app_version() -> str:
    """Version lue depuis pyproject.toml, ou depuis les métadonnées du paquet installé."""
    pyproject = _PROJECT_ROOT / "pyproject.toml"
    if pyproject.exists():
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    try:
        return version("cinesearch")
    except PackageNotFoundError:
        return "dev"


templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version disponible dans tous les templates
templates.env.globals["app_version"] = f"CineSearch v{_app_version()}"

# Images : image_url(chemin, taille)
templates.env.globals["image_url"] = image_url
templates.env.globals["poster_size"] = constants.POSTER_SIZE
templates.env.globals["backdrop_size"] = constants.BACKDROP_SIZE
templates.env.globals["profile_size"] = constants.PROFILE_SIZE
templates.env.globals["not_available"] = constants.NOT_AVAILABLE

templates.env.filters["release_year"] = release_year
templates.env.filters["release_date"] = format_release_date
templates.env.filters["runtime"] = format_runtime
templates.env.filters["rating"] = format_rating
templates.env.filters["overview"] = format_overview


def is_htmx(request: Request) -> bool:
    """Vrai si la requête provient d'htmx (fragment attendu)."""
    return bool(request.headers.get("HX-Request"))


def get_screen_registry(request: Request) -> ScreenRegistry:
    return request.app.state.container.screen_registry()


def get_screens(request: Request) -> Screens:
    """Écrans de la session courante (clé posée par le middleware de session)."""
    return get_screen_registry(request).get(request.state.session_key)
