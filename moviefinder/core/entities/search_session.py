"""
Etat de l'interface de recherche.

SearchSession est le conteneur explicite de l'etat affiche par l'interface:
champs du formulaire, etat courant et resultats. Toutes les modifications
passent par les methodes de transition, testables sans rendu.

Transitions :
    IDLE/RESULTS/ERROR --begin--> LOADING
    LOADING --succeed--> RESULTS
    LOADING --fail--> ERROR
    *       --reject--> ERROR      (validation, aucun appel reseau)
    RESULTS --reset--> IDLE

Chaque begin/reject incremente le compteur de generation. Une reponse
portant une generation depassee est ignoree : une recherche lente ne peut
pas ecraser le resultat d'une recherche plus recente.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from loguru import logger

from moviefinder.core.exceptions import InvalidTransitionError
from moviefinder.core.ports.api_clients import MovieDetail, MovieSummary
from moviefinder.core.value_objects.search import SearchCategory, SearchQuery

ResultItem = Union[MovieDetail, MovieSummary]


class SearchStatus(str, Enum):
    """Etat d'affichage de la recherche (mutuellement exclusifs)."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    RESULTS = "results"


@dataclass
class SearchSession:
    """
    Etat de la recherche pour un navigateur.

    Attributes:
        title: Contenu du champ titre
        category: Categorie selectionnee
        status: Etat d'affichage courant
        results: Resultats affiches, dans l'ordre de l'API
        error: Message de la zone d'erreur
        generation: Numero de la derniere recherche soumise
    """

    title: str = ""
    category: SearchCategory = SearchCategory.MOVIE
    status: SearchStatus = SearchStatus.IDLE
    results: tuple[ResultItem, ...] = ()
    error: Optional[str] = None
    generation: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status is SearchStatus.LOADING

    @property
    def can_reset(self) -> bool:
        """Le reset n'est propose que si des resultats sont affiches."""
        return self.status is SearchStatus.RESULTS and bool(self.results)

    def can_submit(self, title: Optional[str] = None) -> bool:
        """
        Indique si le formulaire peut etre soumis.

        Args:
            title: Titre a verifier (par defaut le titre courant)
        """
        candidate = self.title if title is None else title
        return not self.is_loading and bool(candidate.strip())

    def begin(self, query: SearchQuery) -> int:
        """
        Demarre une recherche : efface l'etat precedent et passe en LOADING.

        Returns:
            Generation de la recherche, a fournir a succeed() ou fail()
        """
        self.generation += 1
        self.title = query.title
        self.category = query.category
        self.results = ()
        self.error = None
        self.status = SearchStatus.LOADING
        return self.generation

    def succeed(self, generation: int, results: Sequence[ResultItem]) -> bool:
        """
        Termine la recherche avec des resultats.

        Returns:
            False si la generation est depassee (etat inchange)
        """
        if not self._is_current(generation, "succeed"):
            return False
        self.results = tuple(results)
        self.error = None
        self.status = SearchStatus.RESULTS
        return True

    def fail(self, generation: int, message: str) -> bool:
        """
        Termine la recherche en erreur.

        Returns:
            False si la generation est depassee (etat inchange)
        """
        if not self._is_current(generation, "fail"):
            return False
        self.results = ()
        self.error = message
        self.status = SearchStatus.ERROR
        return True

    def reject(
        self,
        title: str,
        message: str,
        category: Optional[SearchCategory] = None,
    ) -> None:
        """Refuse une soumission invalide sans lancer de recherche."""
        self.generation += 1
        self.title = title
        if category is not None:
            self.category = category
        self.results = ()
        self.error = message
        self.status = SearchStatus.ERROR

    def reset(self) -> None:
        """
        Efface le titre et les resultats. La categorie est conservee.

        Raises:
            InvalidTransitionError: Si aucun resultat n'est affiche
        """
        if self.status is SearchStatus.IDLE:
            return
        if not self.can_reset:
            raise InvalidTransitionError("reset", self.status.value)
        self.title = ""
        self.results = ()
        self.error = None
        self.status = SearchStatus.IDLE

    def _is_current(self, generation: int, action: str) -> bool:
        if generation != self.generation or not self.is_loading:
            logger.debug(
                "Reponse obsolete ignoree",
                action=action,
                generation=generation,
                current=self.generation,
            )
            return False
        return True
