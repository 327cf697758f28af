"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from .adapters.api.omdb_client import OMDbClient
from .config import Settings
from .core.ports.api_clients import IMovieAPIClient
from .infrastructure.session_store import SessionStore
from .services.enricher import DetailEnricherService
from .services.search import MovieSearchService


def _build_search_service(
    settings: Settings,
    api_client: IMovieAPIClient,
    enricher: DetailEnricherService,
) -> MovieSearchService:
    """Construit le service de recherche, avec ou sans enrichissement des details."""
    return MovieSearchService(
        api_client=api_client,
        enricher=enricher if settings.enrich_details else None,
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.search_service()
        store = container.session_store()

    Dans les tests, les providers peuvent etre surcharges :
        container.omdb_client.override(providers.Object(fake_client))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client API - Singleton avec api_key depuis config
    omdb_client = providers.Singleton(
        OMDbClient,
        api_key=config.provided.omdb_api_key,
        base_url=config.provided.omdb_base_url,
        timeout=config.provided.request_timeout,
    )

    # Services (stateless - Singletons)
    detail_enricher = providers.Singleton(
        DetailEnricherService,
        api_client=omdb_client,
        policy=config.provided.aggregation_policy,
    )

    search_service = providers.Singleton(
        _build_search_service,
        settings=config,
        api_client=omdb_client,
        enricher=detail_enricher,
    )

    # Etats de recherche en memoire, partages par toutes les requetes web
    session_store = providers.Singleton(SessionStore)
