"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 et l'accès à l'état de recherche du navigateur.
"""

from pathlib import Path

from fastapi import Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..core.entities.search_session import SearchSession
from ..core.value_objects.search import SearchCategory

_WEB_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")
templates.env.globals["categories"] = list(SearchCategory)

# Version du package installe, disponible dans tous les templates
templates.env.globals["app_version"] = f"MovieFinder v{__version__}"


def get_search_session(request: Request) -> tuple[str, SearchSession]:
    """Retourne l'identifiant et l'état de recherche associés au cookie du navigateur."""
    container = request.app.state.container
    cookie_name = container.config().session_cookie_name
    return container.session_store().get_or_create(request.cookies.get(cookie_name))


def remember_session(request: Request, response: Response, session_id: str) -> Response:
    """Pose le cookie de session si le navigateur n'a pas encore le bon identifiant."""
    cookie_name = request.app.state.container.config().session_cookie_name
    if request.cookies.get(cookie_name) != session_id:
        response.set_cookie(cookie_name, session_id, httponly=True, samesite="lax")
    return response
