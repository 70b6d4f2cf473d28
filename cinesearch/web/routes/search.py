"""
Route de la page de recherche.

Sans paramètre query, l'écran est (re)monté ; avec query, la recherche est
soumise au contrôleur de la session. Les requêtes htmx reçoivent seulement
la grille de résultats.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from ...services.screens import Screens
from ...services.task_runner import TaskSuperseded
from ..deps import get_screens, is_htmx, templates

router = APIRouter()


@router.get("/")
async def search_page(
    request: Request,
    query: Optional[str] = None,
    screens: Screens = Depends(get_screens),
):
    """Page de recherche de films par titre."""
    search = screens.search
    if query is None:
        search.reset()
    else:
        try:
            await search.submit(query)
        except TaskSuperseded:
            # Une recherche plus récente de la même session a pris la main
            return Response(status_code=204)

    context = {
        "query": query if query is not None else search.query,
        "movies": search.results,
        "loading": search.loading,
        "submitted": search.submitted,
    }

    template = "search/_results.html" if is_htmx(request) else "search/index.html"
    response = templates.TemplateResponse(request, template, context)
    response.headers["Vary"] = "HX-Request"
    return response
