"""
Controleur de l'ecran de fiche film.

A chaque declenchement (ID de film issu de la route), lance en parallele la
recuperation de la fiche et celle de la distribution, attend les deux
reponses et n'applique l'etat que si les deux aboutissent.

Rendu en quatre etats lineaires :

    LOADING : chargement en cours        -> spinner seul
    ERROR   : echec, message renseigne   -> message + bouton retour
    EMPTY   : aucune fiche, aucune erreur -> rien
    READY   : fiche presente             -> fiche complete
"""

import asyncio
from enum import Enum
from typing import Optional

from loguru import logger

from cinesearch.core.entities.movie import Credits, MovieDetail
from cinesearch.core.ports.api_clients import (
    IMovieAPIClient,
    ProviderError,
    ProviderStatusError,
    ProviderTransportError,
)
from cinesearch.services.task_runner import SupersedingTaskRunner, TaskSuperseded
from cinesearch.utils.constants import (
    CREDITS_FETCH_ERROR,
    MOVIE_FETCH_ERROR,
    UNEXPECTED_ERROR,
)


class DetailViewState(Enum):
    """Etat de rendu de l'ecran de fiche."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


class DetailFetchError(Exception):
    """Echec du chargement de la fiche ; le message est destine a l'utilisateur."""


class DetailController:
    """
    Etat et logique de l'ecran de fiche film.

    Attributes:
        movie_id: Dernier ID declenche
        movie: Fiche du film, None tant qu'aucun chargement n'a abouti
        credits: Distribution du film
        loading: Vrai pendant un chargement (et avant le premier declenchement)
        error: Message d'erreur du dernier chargement, None si aucun
    """

    def __init__(
        self,
        client: IMovieAPIClient,
        runner: Optional[SupersedingTaskRunner] = None,
    ) -> None:
        self._client = client
        self._runner = runner or SupersedingTaskRunner("detail")
        self.movie_id: Optional[int] = None
        self.movie: Optional[MovieDetail] = None
        self.credits: Optional[Credits] = None
        self.loading = True
        self.error: Optional[str] = None

    @property
    def view_state(self) -> DetailViewState:
        if self.loading:
            return DetailViewState.LOADING
        if self.error:
            return DetailViewState.ERROR
        if self.movie is None:
            return DetailViewState.EMPTY
        return DetailViewState.READY

    def cancel(self) -> None:
        """Annule le chargement en cours, s'il y en a un."""
        self._runner.cancel()

    def reset(self) -> None:
        """Remet l'ecran dans son etat initial (nouveau montage de la page)."""
        self._runner.cancel()
        self.movie_id = None
        self.movie = None
        self.credits = None
        self.loading = True
        self.error = None

    async def _fetch(self, movie_id: int) -> tuple[MovieDetail, Credits]:
        """
        Lance les deux requetes en parallele et attend que les deux se terminent.

        Les issues sont examinees dans un ordre fixe, independant de l'ordre
        d'arrivee des reponses : erreur de transport, statut de la fiche,
        statut de la distribution, puis corps invalide.

        Raises:
            DetailFetchError: Statut non 2xx sur la fiche ou la distribution
            ProviderError: Echec de transport ou corps invalide
        """
        movie, credits = await asyncio.gather(
            self._client.get_movie(movie_id),
            self._client.get_credits(movie_id),
            return_exceptions=True,
        )
        outcomes = (movie, credits)

        for outcome in outcomes:
            if isinstance(outcome, ProviderTransportError):
                raise outcome
        if isinstance(movie, ProviderStatusError):
            raise DetailFetchError(MOVIE_FETCH_ERROR) from movie
        if isinstance(credits, ProviderStatusError):
            raise DetailFetchError(CREDITS_FETCH_ERROR) from credits
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return movie, credits

    async def load(self, movie_id: int) -> DetailViewState:
        """
        Charge la fiche et la distribution d'un film.

        En cas d'echec, la fiche et la distribution deja affichees ne sont pas
        modifiees et error recoit le message destine a l'utilisateur. Le
        chargement est termine dans tous les cas, sauf si un declenchement
        plus recent a pris la main.

        Args:
            movie_id: ID TMDB du film

        Returns:
            L'etat de rendu atteint

        Raises:
            TaskSuperseded: Un declenchement plus recent a pris la main
        """
        self.movie_id = movie_id
        self.loading = True
        self.error = None

        superseded = False
        try:
            movie, credits = await self._runner.run(
                movie_id, lambda: self._fetch(movie_id)
            )
        except TaskSuperseded:
            superseded = True
            logger.debug(f"Chargement du film {movie_id} remplace par un plus recent")
            raise
        except DetailFetchError as e:
            logger.error(f"Erreur lors du chargement du film {movie_id}: {e} ({e.__cause__})")
            self.error = str(e)
        except ProviderError as e:
            logger.error(f"Erreur lors du chargement du film {movie_id}: {e}")
            self.error = UNEXPECTED_ERROR
        else:
            self.movie = movie
            self.credits = credits
            logger.info(f"Film {movie_id} charge: {movie.title} ({len(credits.cast)} interpretes)")
        finally:
            if not superseded:
                self.loading = False

        return self.view_state
