"""
Entites film.

Objets valeur immutables representant les donnees recues du fournisseur.
Leur duree de vie est celle d'un cycle requete/reponse : rien n'est persiste,
tout est reconstruit depuis l'API a chaque navigation.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MovieSummary:
    """
    Film tel que retourne par la recherche par titre.

    Attributs:
        id: Identifiant TMDB du film
        title: Titre
        release_date: Date de sortie ISO (YYYY-MM-DD), None si inconnue
        poster_path: Fragment de chemin du poster, None si absent
    """

    id: int
    title: str
    release_date: Optional[str] = None
    poster_path: Optional[str] = None

    @property
    def year(self) -> Optional[str]:
        """Annee de sortie (4 premiers caracteres de la date)."""
        return self.release_date[:4] if self.release_date else None


@dataclass(frozen=True)
class Genre:
    """Genre TMDB (identifiant + nom)."""

    id: int
    name: str


@dataclass(frozen=True)
class MovieDetail:
    """
    Fiche detaillee d'un film.

    Attributs:
        id: Identifiant TMDB
        title: Titre
        overview: Synopsis (peut etre vide)
        release_date: Date de sortie ISO, None si inconnue
        poster_path: Fragment de chemin du poster
        backdrop_path: Fragment de chemin de l'image de fond
        genres: Genres dans l'ordre du fournisseur
        runtime: Duree en minutes (0 ou None = inconnue)
        vote_average: Note moyenne sur 10 (0 ou None = inconnue)
    """

    id: int
    title: str
    overview: str = ""
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    genres: tuple[Genre, ...] = ()
    runtime: Optional[int] = None
    vote_average: Optional[float] = None


@dataclass(frozen=True)
class CastMember:
    """
    Entree de distribution : un interprete associe a un role.

    Attributs:
        cast_id: Identifiant de l'emplacement dans la distribution
        character: Nom du personnage
        name: Nom de l'interprete
        profile_path: Fragment de chemin de la photo, None si absente
    """

    name: str
    character: str = ""
    cast_id: Optional[int] = None
    profile_path: Optional[str] = None


@dataclass(frozen=True)
class Credits:
    """Distribution d'un film, dans l'ordre d'affichage du fournisseur."""

    movie_id: Optional[int] = None
    cast: tuple[CastMember, ...] = ()
