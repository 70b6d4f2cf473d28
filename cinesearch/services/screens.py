"""
Registre des ecrans par session navigateur.

Chaque session (identifiee par un cookie) possede son propre couple de
controleurs recherche/fiche, vivant en memoire uniquement. Le registre est
borne : au-dela de max_sessions, la session la moins recemment utilisee est
oubliee et ses chargements en vol annules.
"""

from collections import OrderedDict
from dataclasses import dataclass

from loguru import logger

from cinesearch.core.ports.api_clients import IMovieAPIClient
from cinesearch.services.detail import DetailController
from cinesearch.services.search import SearchController


@dataclass
class Screens:
    """Controleurs d'une session."""

    search: SearchController
    detail: DetailController

    def cancel(self) -> None:
        self.search.reset()
        self.detail.reset()


class ScreenRegistry:
    """
    Controleurs de toutes les sessions actives (LRU borne).

    Example:
        registry = ScreenRegistry(client, max_sessions=100)
        screens = registry.get(session_key)
        await screens.search.submit("Matrix")
    """

    def __init__(self, client: IMovieAPIClient, max_sessions: int = 1000) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions doit etre >= 1")
        self._client = client
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, Screens] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_key: str) -> bool:
        return session_key in self._sessions

    def get(self, session_key: str) -> Screens:
        """Retourne les ecrans de la session, les cree si necessaire."""
        screens = self._sessions.get(session_key)
        if screens is not None:
            self._sessions.move_to_end(session_key)
            return screens

        screens = Screens(
            search=SearchController(self._client),
            detail=DetailController(self._client),
        )
        self._sessions[session_key] = screens
        while len(self._sessions) > self._max_sessions:
            evicted_key, evicted = self._sessions.popitem(last=False)
            evicted.cancel()
            logger.debug(f"Session {evicted_key} oubliee (limite {self._max_sessions})")
        return screens

    def discard(self, session_key: str) -> None:
        """Oublie une session et annule ses chargements."""
        screens = self._sessions.pop(session_key, None)
        if screens is not None:
            screens.cancel()

    def clear(self) -> None:
        """Oublie toutes les sessions (arret de l'application)."""
        for screens in self._sessions.values():
            screens.cancel()
        self._sessions.clear()
