"""
Point d'entrée CLI de CineSearch.

Configure le logging et fournit les commandes de lancement du serveur web.
"""

from typing import Annotated

import typer
from loguru import logger

from .config import Settings
from .container import Container
from .logging_config import configure_logging

APP_VERSION = "0.1.0"

app = typer.Typer(
    name="cinesearch",
    help="Recherche de films et fiches detaillees (TMDB)",
)
container = Container()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineSearch")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"URL TMDB : {config.tmdb_base_url}")
    typer.echo(f"Langue : {config.tmdb_language}")
    timeout = f"{config.request_timeout}s" if config.request_timeout else "aucun"
    typer.echo(f"Timeout : {timeout}")
    typer.echo(f"Sessions max : {config.max_sessions}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineSearch v{APP_VERSION}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web CineSearch."""
    import uvicorn

    if not get_config().tmdb_enabled:
        logger.warning("CINESEARCH_TMDB_API_KEY non définie : les recherches échoueront")
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("cinesearch.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de CineSearch", version=APP_VERSION)

    app()


if __name__ == "__main__":
    main()
