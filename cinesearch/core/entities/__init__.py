"""
Entites du domaine.

Objets immutables construits a partir des reponses du fournisseur :
- MovieSummary : resultat de recherche
- MovieDetail : fiche complete d'un film
- Genre, CastMember, Credits : elements de la fiche
"""

from cinesearch.core.entities.movie import (
    CastMember,
    Credits,
    Genre,
    MovieDetail,
    MovieSummary,
)

__all__ = [
    "CastMember",
    "Credits",
    "Genre",
    "MovieDetail",
    "MovieSummary",
]
