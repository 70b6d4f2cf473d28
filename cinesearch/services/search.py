"""
Controleur de l'ecran de recherche.

Possede le texte saisi, la liste de resultats et l'indicateur de chargement.
Chaque soumission non vide emet une requete de recherche ; une soumission
vide ne fait rien.

Politique de concurrence : la derniere soumission gagne. Une soumission
plus recente annule la precedente, dont le resultat est ignore.
"""

from typing import Optional

from loguru import logger

from cinesearch.core.entities.movie import MovieSummary
from cinesearch.core.ports.api_clients import IMovieAPIClient, ProviderError
from cinesearch.services.task_runner import SupersedingTaskRunner, TaskSuperseded


class SearchController:
    """
    Etat et logique de l'ecran de recherche.

    Attributes:
        query: Dernier texte soumis
        results: Resultats de la derniere recherche aboutie (remplaces en bloc)
        loading: Vrai pendant qu'une recherche est en vol
        submitted: Vrai des qu'une recherche a ete soumise depuis le montage

    Example:
        controller = SearchController(client)
        movies = await controller.submit("Matrix")
    """

    def __init__(
        self,
        client: IMovieAPIClient,
        runner: Optional[SupersedingTaskRunner] = None,
    ) -> None:
        self._client = client
        self._runner = runner or SupersedingTaskRunner("search")
        self.query = ""
        self.results: list[MovieSummary] = []
        self.loading = False
        self.submitted = False

    def reset(self) -> None:
        """Remet l'ecran dans son etat initial (nouveau montage de la page)."""
        self._runner.cancel()
        self.query = ""
        self.results = []
        self.loading = False
        self.submitted = False

    async def submit(self, query: str) -> list[MovieSummary]:
        """
        Soumet une recherche.

        Les resultats precedents sont vides avant l'envoi de la requete. Tout
        echec du fournisseur est journalise et donne une liste vide.

        Args:
            query: Texte saisi (vide : aucune requete, etat inchange)

        Returns:
            Les resultats courants de l'ecran

        Raises:
            TaskSuperseded: Une soumission plus recente a pris la main
        """
        if not query:
            return self.results

        self.query = query
        self.submitted = True
        self.loading = True
        self.results = []

        superseded = False
        try:
            results = await self._runner.run(
                query, lambda: self._client.search_movies(query)
            )
        except TaskSuperseded:
            superseded = True
            logger.debug(f"Recherche '{query}' remplacee par une plus recente")
            raise
        except ProviderError as e:
            logger.error(f"Erreur lors de la recherche '{query}': {e}")
            results = []
        finally:
            if not superseded:
                self.loading = False

        self.results = results
        logger.info(f"Recherche '{query}': {len(results)} resultat(s)")
        return self.results
