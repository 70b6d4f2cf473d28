"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour le launcher CLI et l'application Web.
La cle API est lue une seule fois dans Settings puis injectee dans le client TMDB :
aucun autre module ne lit l'environnement.
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBClient
from .config import Settings
from .services.screens import ScreenRegistry


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.tmdb_client()
        screens = container.screen_registry().get(session_key)

    En test, le client peut etre remplace :
        container.tmdb_client.override(providers.Object(fake_client))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client API - Singleton partage par toutes les sessions
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        base_url=config.provided.tmdb_base_url,
        language=config.provided.tmdb_language,
        timeout=config.provided.request_timeout,
    )

    # Controleurs d'ecran par session - Singleton (etat en memoire du processus)
    screen_registry = providers.Singleton(
        ScreenRegistry,
        client=tmdb_client,
        max_sessions=config.provided.max_sessions,
    )
