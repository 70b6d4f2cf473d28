"""
Interfaces ports pour le client du fournisseur de metadonnees.

Definit le contrat que les controleurs d'ecran utilisent pour interroger
le fournisseur (TMDB), ainsi que la taxonomie des erreurs qu'il peut lever.
Les controleurs ne voient jamais d'exception httpx : l'adaptateur les
convertit toutes en ProviderError.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cinesearch.core.entities.movie import Credits, MovieDetail, MovieSummary


class ProviderError(Exception):
    """Echec d'un appel au fournisseur, quelle qu'en soit la cause."""

    def __init__(self, message: str, endpoint: Optional[str] = None) -> None:
        self.endpoint = endpoint
        super().__init__(message)


class ProviderTransportError(ProviderError):
    """La requete n'a pas abouti (reseau, DNS, timeout, boucle de redirections)."""


class ProviderStatusError(ProviderError):
    """
    Le fournisseur a repondu avec un statut HTTP non 2xx.

    Attributes:
        status_code: Code HTTP recu
        endpoint: Chemin appele (ex: "/movie/603/credits")
    """

    def __init__(self, status_code: int, endpoint: str) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} on {endpoint}", endpoint=endpoint)


class ProviderParseError(ProviderError):
    """Le corps de la reponse n'est pas du JSON ou ne respecte pas le schema attendu."""


class IMovieAPIClient(ABC):
    """
    Interface du fournisseur de metadonnees films.

    Chaque methode correspond a exactement une requete HTTP : pas de cache,
    pas de retry. Toute erreur est levee sous forme de ProviderError.
    """

    @abstractmethod
    async def search_movies(self, query: str) -> list[MovieSummary]:
        """
        Recherche des films par titre (premiere page uniquement).

        Args :
            query : Texte saisi par l'utilisateur (encode par la couche HTTP)

        Retourne :
            Liste des films trouves, vide si aucun resultat
        """
        ...

    @abstractmethod
    async def get_movie(self, movie_id: int) -> MovieDetail:
        """Recupere la fiche detaillee d'un film."""
        ...

    @abstractmethod
    async def get_credits(self, movie_id: int) -> Credits:
        """Recupere la distribution d'un film."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...
