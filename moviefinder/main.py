"""
Point d'entrée CLI de MovieFinder.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import asyncio
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .core.value_objects.search import SearchCategory
from .logging_config import configure_logging
from .services.search import SearchOutcome

app = typer.Typer(
    name="moviefinder",
    help="Recherche de films, séries et épisodes via OMDb",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _print_outcome(outcome: SearchOutcome) -> None:
    """Affiche le résultat d'une recherche sous forme de tableau rich."""
    if not outcome.ok:
        console.print(f"[red]{outcome.error}[/red]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Title")
    table.add_column("Year")
    table.add_column("Country")
    table.add_column("Type")
    table.add_column("Poster", overflow="fold")
    for movie in outcome.results:
        table.add_row(
            movie.title,
            movie.year,
            movie.country or "",
            movie.category,
            movie.poster_url or "",
        )
    console.print(table)


async def _run_search(title: str, category: SearchCategory) -> SearchOutcome:
    service = container.search_service()
    try:
        return await service.search(title, category)
    finally:
        await container.omdb_client().close()


@app.command()
def search(
    title: Annotated[str, typer.Argument(help="Titre recherché")],
    category: Annotated[
        SearchCategory,
        typer.Option("--category", "-c", help="Type de média"),
    ] = SearchCategory.MOVIE,
) -> None:
    """Recherche un titre et affiche les résultats enrichis."""
    outcome = asyncio.run(_run_search(title, category))
    _print_outcome(outcome)
    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MovieFinder")
    typer.echo(f"API OMDb : {'activée' if config.omdb_enabled else 'désactivée'}")
    typer.echo(f"URL OMDb : {config.omdb_base_url}")
    timeout = f"{config.request_timeout}s" if config.request_timeout else "aucun"
    typer.echo(f"Timeout réseau : {timeout}")
    typer.echo(f"Enrichissement des détails : {'oui' if config.enrich_details else 'non'}")
    typer.echo(f"Politique de collecte : {config.aggregation_policy.value}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieFinder v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web MovieFinder."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("moviefinder.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de MovieFinder", version=__version__)

    app()


if __name__ == "__main__":
    main()
