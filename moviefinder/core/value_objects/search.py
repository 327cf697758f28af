"""
Objets valeur pour la requete de recherche.

Une SearchQuery est creee a la soumission du formulaire et reste immutable
pendant tout le cycle d'une requete.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from moviefinder.core.exceptions import SearchValidationError
from moviefinder.utils.constants import EMPTY_SEARCH_TERM_MESSAGE


class SearchCategory(str, Enum):
    """Type de media filtre lors de la recherche.

    Les valeurs correspondent au parametre "type" de l'API OMDb.

    Valeurs:
        MOVIE: Film
        SERIES: Serie TV
        EPISODE: Episode de serie
    """

    MOVIE = "movie"
    SERIES = "series"
    EPISODE = "episode"

    @property
    def label(self) -> str:
        """Libelle affiche dans le selecteur."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union[str, "SearchCategory"]) -> "SearchCategory":
        """
        Convertit une valeur de formulaire en SearchCategory.

        Raises:
            SearchValidationError: Si la categorie n'est pas reconnue
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise SearchValidationError(f"Unknown category: {value}") from None


@dataclass(frozen=True)
class SearchQuery:
    """
    Requete de recherche validee.

    Attributs:
        title: Titre recherche, sans espaces en debut/fin (jamais vide)
        category: Type de media recherche
    """

    title: str
    category: SearchCategory = SearchCategory.MOVIE

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise SearchValidationError(EMPTY_SEARCH_TERM_MESSAGE)

    @classmethod
    def create(
        cls,
        title: str,
        category: Union[str, SearchCategory] = SearchCategory.MOVIE,
    ) -> "SearchQuery":
        """
        Construit une requete depuis les champs bruts du formulaire.

        Le titre est nettoye des espaces en debut et fin.

        Raises:
            SearchValidationError: Si le titre est vide ou la categorie inconnue
        """
        return cls(title=(title or "").strip(), category=SearchCategory.parse(category))
