"""
Routes de la fiche film.

/movie/{id} remonte l'écran de fiche et renvoie la page en état de chargement ;
htmx y charge ensuite /movie/{id}/content, qui déclenche le contrôleur et
rend l'état atteint.
"""

from fastapi import APIRouter, Depends, Request, Response

from ...services.detail import DetailViewState
from ...services.screens import Screens
from ...services.task_runner import TaskSuperseded
from ...utils.constants import CAST_DISPLAY_LIMIT
from ..deps import get_screens, is_htmx, templates

router = APIRouter(prefix="/movie")


def _page_title(state: DetailViewState, title: str | None) -> str:
    if state is DetailViewState.READY and title:
        return f"{title} - Movie Details"
    if state is DetailViewState.ERROR:
        return "Error - Movie Details"
    return "Movie Details"


@router.get("/{movie_id}")
async def movie_page(
    request: Request,
    movie_id: int,
    screens: Screens = Depends(get_screens),
):
    """Page de fiche d'un film, en état de chargement (nouveau montage de l'écran)."""
    screens.detail.reset()
    return templates.TemplateResponse(
        request,
        "movie/page.html",
        {"movie_id": movie_id, "page_title": _page_title(DetailViewState.LOADING, None)},
    )


@router.get("/{movie_id}/content")
async def movie_content(
    request: Request,
    movie_id: int,
    screens: Screens = Depends(get_screens),
):
    """Charge la fiche et la distribution puis rend l'état de l'écran."""
    detail = screens.detail
    try:
        state = await detail.load(movie_id)
    except TaskSuperseded:
        return Response(status_code=204)

    movie = detail.movie
    cast = detail.credits.cast[:CAST_DISPLAY_LIMIT] if detail.credits else ()
    context = {
        "movie_id": movie_id,
        "state": state.value,
        "movie": movie,
        "cast": cast,
        "error": detail.error,
        "page_title": _page_title(state, movie.title if movie else None),
        "fragment": is_htmx(request),
    }

    template = "movie/_content.html" if is_htmx(request) else "movie/detail.html"
    response = templates.TemplateResponse(request, template, context)
    response.headers["Vary"] = "HX-Request"
    return response
