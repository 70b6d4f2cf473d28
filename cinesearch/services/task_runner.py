"""
Execution annulable des chargements d'un ecran.

Chaque ecran (recherche, fiche) n'a qu'un chargement utile a la fois : le
dernier declenche. Lorsqu'un nouveau declencheur arrive, la tache precedente
est annulee et son resultat ignore. Un resultat arrive en retard ne peut donc
plus ecraser l'etat produit par une demande plus recente.

Usage:
    runner = SupersedingTaskRunner("search")
    try:
        results = await runner.run("matrix", lambda: client.search_movies("matrix"))
    except TaskSuperseded:
        return  # une recherche plus recente a pris la main
"""

import asyncio
from typing import Any, Callable, Coroutine, Optional, TypeVar

from loguru import logger

T = TypeVar("T")


class TaskSuperseded(Exception):
    """
    Le chargement a ete annule par un declencheur plus recent.

    Attributes:
        screen: Ecran concerne ("search", "detail")
        trigger: Declencheur annule (texte de recherche, ID du film)
    """

    def __init__(self, screen: str, trigger: str) -> None:
        self.screen = screen
        self.trigger = trigger
        super().__init__(f"{screen}:{trigger} superseded by a newer request")


class SupersedingTaskRunner:
    """
    Une tache asyncio en vol au plus par ecran.

    Les taches sont cles par (ecran, declencheur) : le nom de la tache vaut
    "{screen}:{trigger}", ce qui les rend identifiables dans les logs et
    dans asyncio.all_tasks().
    """

    def __init__(self, screen: str) -> None:
        self._screen = screen
        self._task: Optional[asyncio.Task] = None

    @property
    def screen(self) -> str:
        return self._screen

    @property
    def busy(self) -> bool:
        """Vrai si une tache est en cours."""
        return self._task is not None and not self._task.done()

    def cancel(self) -> None:
        """Annule la tache en cours, s'il y en a une."""
        if self._task is not None and not self._task.done():
            logger.debug(f"Annulation de la tache {self._task.get_name()}")
            self._task.cancel()
        self._task = None

    def _release(self, task: asyncio.Task) -> bool:
        """Oublie la tache si elle est encore la courante. False si elle a ete remplacee."""
        if self._task is task:
            self._task = None
            return True
        return False

    async def run(
        self, trigger: object, factory: Callable[[], Coroutine[Any, Any, T]]
    ) -> T:
        """
        Lance factory() comme tache courante de l'ecran et attend son resultat.

        Une tache remplacee entre sa fin et la reprise de l'appelant est aussi
        perimee : son resultat ou son erreur est ignore.

        Args:
            trigger: Declencheur de la tache (sert a la nommer)
            factory: Fabrique de la coroutine a executer

        Returns:
            Le resultat de la coroutine

        Raises:
            TaskSuperseded: Un appel plus recent a run() (ou cancel()) a rendu la tache perimee
            asyncio.CancelledError: L'appelant lui-meme a ete annule
        """
        self.cancel()
        task = asyncio.create_task(factory(), name=f"{self._screen}:{trigger}")
        self._task = task
        try:
            result = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                self._release(task)
                raise
            raise TaskSuperseded(self._screen, str(trigger)) from None
        except Exception:
            if self._release(task):
                raise
            raise TaskSuperseded(self._screen, str(trigger)) from None

        if not self._release(task):
            raise TaskSuperseded(self._screen, str(trigger))
        return result
