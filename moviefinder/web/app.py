"""
Application FastAPI de MovieFinder.

Initialise l'application web avec le Container DI, configure les fichiers
statiques et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from .routes.home import router as home_router
from .routes.search import router as search_router

_WEB_DIR = Path(__file__).parent


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI a utiliser (un nouveau est cree si absent)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Ferme le client HTTP et oublie les sessions à l'arrêt."""
        settings = app.state.container.config()
        if not settings.omdb_enabled:
            logger.warning("Clé API OMDb absente (MOVIEFINDER_OMDB_API_KEY)")
        yield
        await app.state.container.omdb_client().close()
        app.state.container.session_store().clear()

    app = FastAPI(title="MovieFinder", lifespan=lifespan)
    app.state.container = container or Container()

    # Fichiers statiques
    app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

    # Routes
    app.include_router(home_router)
    app.include_router(search_router)
    return app


app = create_app()
