"""
Fonctions de presentation partagees par les templates.

Les valeurs absentes ou nulles (duree 0, note 0, date vide) sont rendues
"N/A" plutot que traitees comme des erreurs.
"""

from typing import Optional

from cinesearch.utils.constants import (
    NO_DESCRIPTION,
    NOT_AVAILABLE,
    TMDB_IMAGE_BASE_URL,
)


def image_url(path: Optional[str], size: str) -> Optional[str]:
    """
    Construit l'URL complete d'une image TMDB.

    Args:
        path: Fragment de chemin (ex: "/a.jpg"), None si pas d'image
        size: Taille TMDB ("original", "w500", "w200")

    Returns:
        URL de l'image, ou None si path est vide
    """
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE_URL}/{size}{path}"


def release_year(release_date: Optional[str]) -> Optional[str]:
    """Retourne l'annee (4 premiers caracteres) d'une date ISO, None si absente."""
    return release_date[:4] if release_date else None


def format_release_date(release_date: Optional[str]) -> str:
    return release_date or NOT_AVAILABLE


def format_runtime(runtime: Optional[int]) -> str:
    """Formate une duree en minutes ; 0 ou None signifie inconnue."""
    if not runtime:
        return NOT_AVAILABLE
    return f"{runtime} minutes"


def format_rating(vote_average: Optional[float]) -> str:
    """
    Formate une note sur 10.

    La note est affichee telle que recue, sans arrondi ; seul un ".0" final
    est omis : 8.0 -> "8/10", 7.6 -> "7.6/10", 7.1234567 -> "7.1234567/10".
    """
    if not vote_average:
        return NOT_AVAILABLE
    if float(vote_average).is_integer():
        vote_average = int(vote_average)
    return f"{vote_average}/10"


def format_overview(overview: Optional[str]) -> str:
    return overview or NO_DESCRIPTION
