"""
Routes de recherche : soumission du formulaire, reset et API JSON.

Les requêtes HTMX reçoivent uniquement le fragment de recherche,
les requêtes classiques la page complète.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Form, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ...core.entities.search_session import ResultItem, SearchSession
from ...core.exceptions import InvalidTransitionError
from ...services.search import SearchErrorKind
from ..deps import get_search_session, remember_session, templates

router = APIRouter()

_ERROR_STATUS = {
    SearchErrorKind.VALIDATION: 422,
    SearchErrorKind.UPSTREAM: 404,
    SearchErrorKind.FETCH: 502,
}


def _render(request: Request, session_id: str, session: SearchSession, status_code: int = 200):
    """Rend le fragment HTMX ou la page complète selon l'origine de la requête."""
    template = "_search.html" if request.headers.get("HX-Request") else "index.html"
    response = templates.TemplateResponse(
        request, template, {"session": session}, status_code=status_code
    )
    response.headers["Vary"] = "HX-Request"
    return remember_session(request, response, session_id)


def _serialize(item: ResultItem) -> dict[str, Any]:
    data = asdict(item)
    data.setdefault("country", None)
    return data


@router.post("/search")
async def submit_search(
    request: Request,
    title: str = Form(""),
    category: str = Form("movie"),
):
    """Soumission du formulaire de recherche."""
    session_id, session = get_search_session(request)
    service = request.app.state.container.search_service()
    await service.submit(session, title, category)
    return _render(request, session_id, session)


@router.post("/reset")
async def reset_search(request: Request):
    """Efface le titre et les résultats, conserve la catégorie."""
    session_id, session = get_search_session(request)
    try:
        session.reset()
    except InvalidTransitionError as e:
        logger.debug(str(e))
        return _render(request, session_id, session, status_code=409)
    return _render(request, session_id, session)


@router.get("/api/search")
async def api_search(request: Request, title: str = "", category: str = "movie"):
    """Recherche sans état, résultat en JSON."""
    service = request.app.state.container.search_service()
    outcome = await service.search(title, category)
    if outcome.ok:
        return {"results": [_serialize(item) for item in outcome.results]}
    return JSONResponse(
        {"error": outcome.error},
        status_code=_ERROR_STATUS[outcome.error_kind],
    )
