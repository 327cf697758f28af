"""
Service de recherche de films.

Orchestre le flux complet d'une recherche:
    validation -> recherche -> enrichissement (optionnel) -> resultat

Toutes les erreurs sont capturees ici et converties en un message unique
destine a la zone d'erreur. Aucune erreur ne remonte a l'interface et
aucune n'est relancee automatiquement.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from loguru import logger

from moviefinder.core.entities.search_session import ResultItem, SearchSession
from moviefinder.core.exceptions import (
    FetchError,
    SearchValidationError,
    UpstreamError,
)
from moviefinder.core.ports.api_clients import IMovieAPIClient
from moviefinder.core.value_objects.search import SearchCategory, SearchQuery
from moviefinder.services.enricher import DetailEnricherService
from moviefinder.utils.constants import FETCH_ERROR_MESSAGE, NO_RESULTS_MESSAGE


class SearchErrorKind(str, Enum):
    """Origine d'un echec de recherche."""

    VALIDATION = "validation"
    UPSTREAM = "upstream"
    FETCH = "fetch"


@dataclass(frozen=True)
class SearchOutcome:
    """
    Resultat d'une recherche complete.

    Attributes:
        results: Resultats dans l'ordre de l'API (vide en cas d'erreur)
        error: Message affiche a l'utilisateur, None en cas de succes
        error_kind: Origine de l'erreur
    """

    results: tuple[ResultItem, ...] = ()
    error: Optional[str] = None
    error_kind: Optional[SearchErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str, kind: SearchErrorKind) -> "SearchOutcome":
        return cls(error=message, error_kind=kind)


class MovieSearchService:
    """
    Service de recherche avec enrichissement optionnel des details.

    Sans enricher, les resumes de la recherche sont affiches tels quels.

    Example:
        service = MovieSearchService(api_client, enricher)
        outcome = await service.search("batman", "movie")
        if outcome.ok:
            for movie in outcome.results:
                print(movie.title, movie.country)
    """

    def __init__(
        self,
        api_client: IMovieAPIClient,
        enricher: Optional[DetailEnricherService] = None,
    ) -> None:
        self._api_client = api_client
        self._enricher = enricher

    async def search(
        self,
        title: str,
        category: Union[str, SearchCategory] = SearchCategory.MOVIE,
    ) -> SearchOutcome:
        """
        Valide les champs bruts du formulaire puis execute la recherche.

        Un titre vide est refuse sans aucun appel reseau.
        """
        try:
            query = SearchQuery.create(title, category)
        except SearchValidationError as e:
            return SearchOutcome.failure(e.message, SearchErrorKind.VALIDATION)
        return await self.execute(query)

    async def execute(self, query: SearchQuery) -> SearchOutcome:
        """
        Execute une requete deja validee.

        Returns:
            SearchOutcome avec les resultats, ou le message d'erreur a afficher
        """
        logger.info(f"Recherche '{query.title}' ({query.category.value})")

        try:
            summaries = await self._api_client.search(query)
        except UpstreamError as e:
            logger.info(f"Aucun resultat pour '{query.title}': {e.message}")
            return SearchOutcome.failure(e.message, SearchErrorKind.UPSTREAM)
        except FetchError as e:
            logger.error(f"Echec de la recherche '{query.title}': {e.message}")
            return SearchOutcome.failure(FETCH_ERROR_MESSAGE, SearchErrorKind.FETCH)
        except Exception:
            logger.exception(f"Echec de la recherche '{query.title}'")
            return SearchOutcome.failure(FETCH_ERROR_MESSAGE, SearchErrorKind.FETCH)

        if not summaries:
            return SearchOutcome.failure(NO_RESULTS_MESSAGE, SearchErrorKind.UPSTREAM)

        if self._enricher is None:
            logger.info(f"{len(summaries)} resultat(s) pour '{query.title}'")
            return SearchOutcome(results=tuple(summaries))

        try:
            details = await self._enricher.enrich(summaries)
        except (FetchError, UpstreamError) as e:
            logger.error(f"Echec de l'enrichissement pour '{query.title}': {e.message}")
            return SearchOutcome.failure(FETCH_ERROR_MESSAGE, SearchErrorKind.FETCH)
        except Exception:
            logger.exception(f"Echec de l'enrichissement pour '{query.title}'")
            return SearchOutcome.failure(FETCH_ERROR_MESSAGE, SearchErrorKind.FETCH)

        if not details:
            # BEST_EFFORT sans aucun succes
            return SearchOutcome.failure(FETCH_ERROR_MESSAGE, SearchErrorKind.FETCH)

        logger.info(
            f"{len(details)}/{len(summaries)} resultat(s) enrichi(s) pour '{query.title}'"
        )
        return SearchOutcome(results=tuple(details))

    async def submit(
        self,
        session: SearchSession,
        title: str,
        category: Union[str, SearchCategory] = SearchCategory.MOVIE,
    ) -> SearchOutcome:
        """
        Soumission du formulaire : fait evoluer l'etat de la session.

        La session passe en LOADING pendant la recherche puis en RESULTS ou
        ERROR. Si une recherche plus recente a ete soumise entre-temps,
        le resultat de celle-ci n'est pas applique.
        """
        try:
            query = SearchQuery.create(title, category)
        except SearchValidationError as e:
            session.reject(title or "", e.message, category=_parse_category(category))
            return SearchOutcome.failure(e.message, SearchErrorKind.VALIDATION)

        generation = session.begin(query)
        outcome = await self.execute(query)

        if outcome.ok:
            session.succeed(generation, outcome.results)
        else:
            session.fail(generation, outcome.error)
        return outcome


def _parse_category(value: Union[str, SearchCategory]) -> Optional[SearchCategory]:
    try:
        return SearchCategory.parse(value)
    except SearchValidationError:
        return None
