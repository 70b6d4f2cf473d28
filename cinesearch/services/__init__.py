"""
Services applicatifs : controleurs d'ecran et orchestration des taches.

- SearchController : ecran de recherche par titre
- DetailController : ecran de fiche film (fiche + distribution en parallele)
- SupersedingTaskRunner : une tache annulable par ecran, la plus recente gagne
- ScreenRegistry : controleurs de chaque session navigateur
"""

from cinesearch.services.detail import DetailController, DetailFetchError, DetailViewState
from cinesearch.services.screens import Screens, ScreenRegistry
from cinesearch.services.search import SearchController
from cinesearch.services.task_runner import SupersedingTaskRunner, TaskSuperseded

__all__ = [
    "DetailController",
    "DetailFetchError",
    "DetailViewState",
    "ScreenRegistry",
    "Screens",
    "SearchController",
    "SupersedingTaskRunner",
    "TaskSuperseded",
]
