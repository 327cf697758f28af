"""
Route de la page d'accueil.

Affiche le formulaire de recherche et l'état courant du navigateur
(chargement, erreur ou tableau de résultats).
"""

from fastapi import APIRouter, Request

from ..deps import get_search_session, remember_session, templates

router = APIRouter()


@router.get("/")
async def home(request: Request):
    """Page de recherche."""
    session_id, session = get_search_session(request)
    response = templates.TemplateResponse(request, "index.html", {"session": session})
    return remember_session(request, response, session_id)
