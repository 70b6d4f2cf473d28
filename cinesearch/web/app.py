"""
Application FastAPI de CineSearch.

Initialise l'application web avec le Container DI, attribue un cookie de
session à chaque navigateur, configure les fichiers statiques et monte les routes.
"""

import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from .routes.detail import router as detail_router
from .routes.search import router as search_router

_WEB_DIR = Path(__file__).parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et ferme le client TMDB à l'arrêt.

    Un container déjà posé sur app.state (tests) est réutilisé.
    """
    container = getattr(app.state, "container", None)
    if container is None:
        container = Container()
        app.state.container = container

    if not container.config().tmdb_enabled:
        logger.warning("CINESEARCH_TMDB_API_KEY non définie : les appels TMDB échoueront")

    yield

    container.screen_registry().clear()
    await container.tmdb_client().close()


app = FastAPI(title="CineSearch", lifespan=lifespan)


@app.middleware("http")
async def session_cookie(request: Request, call_next):
    """Identifie la session navigateur ; pose le cookie à la première visite.

    Les logs émis pendant la requête portent la clé de session (extra["session"]).
    """
    cookie_name = request.app.state.container.config().session_cookie_name
    session_key = request.cookies.get(cookie_name)
    is_new = not session_key
    if is_new:
        session_key = uuid.uuid4().hex
    request.state.session_key = session_key

    with logger.contextualize(session=session_key):
        if is_new:
            logger.debug("Nouvelle session")
        response = await call_next(request)
    if is_new:
        response.set_cookie(cookie_name, session_key, httponly=True, samesite="lax")
    return response


# Fichiers statiques
app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

# Routes
app.include_router(search_router)
app.include_router(detail_router)
