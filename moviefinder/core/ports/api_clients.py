"""
Interfaces ports pour les clients API.

Interface abstraite (port) définissant le contrat de l'API de films externe.
L'implémentation concrète (OMDb) se trouve dans adapters/api/.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from moviefinder.core.value_objects.search import SearchQuery


@dataclass(frozen=True)
class MovieSummary:
    """
    Résultat abrégé renvoyé par l'endpoint de recherche.

    Attributs :
        id : Identifiant externe unique (ID IMDb, ex: "tt0372784")
        title : Titre
        year : Année (chaîne, peut être une plage pour les séries : "2008–2013")
        category : Type de média tel que renvoyé par l'API ("movie", "series"...)
        poster_url : URL du poster si fournie dans la liste de résultats
    """

    id: str
    title: str
    year: str = ""
    category: str = ""
    poster_url: Optional[str] = None

    @property
    def country(self) -> Optional[str]:
        """La liste de recherche ne fournit pas le pays."""
        return None


@dataclass(frozen=True)
class MovieDetail:
    """
    Informations complètes d'un titre, récupérées par identifiant.

    Sur-ensemble de MovieSummary pour l'affichage.

    Attributs :
        id : Identifiant externe unique
        title : Titre
        year : Année
        category : Type de média
        poster_url : URL complète du poster (None si absent)
        country : Pays de production (optionnel)
        imdb_rating : Note IMDb (optionnelle)
    """

    id: str
    title: str
    year: str = ""
    category: str = ""
    poster_url: Optional[str] = None
    country: Optional[str] = None
    imdb_rating: Optional[str] = None


class IMovieAPIClient(ABC):
    """
    Interface de base pour l'API de métadonnées films.

    Définit le contrat pour rechercher des titres puis récupérer leurs
    détails un par un.
    """

    @abstractmethod
    async def search(self, query: SearchQuery) -> list[MovieSummary]:
        """
        Recherche des titres.

        Args :
            query : Requête validée (titre + catégorie)

        Retourne :
            Liste des résultats dans l'ordre de l'API (vide si aucun)

        Lève :
            UpstreamError : Si l'API signale un échec logique
        """
        ...

    @abstractmethod
    async def get_details(self, movie_id: str) -> MovieDetail:
        """
        Récupère les informations détaillées d'un titre.

        Args :
            movie_id : Identifiant externe unique

        Lève :
            UpstreamError : Si l'API ne trouve pas l'identifiant
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'omdb')."""
        ...

    async def close(self) -> None:
        """Libère les ressources réseau (optionnel)."""
        return None
