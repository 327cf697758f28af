"""
Client OMDb pour la recherche et la recuperation des details de films.

Implemente l'interface IMovieAPIClient pour OMDb (Open Movie Database).
Aucun cache ni retry : chaque appel part sur le reseau, et les erreurs
de transport remontent a l'appelant sous forme de FetchError.

Usage:
    client = OMDbClient(api_key="your_key")
    results = await client.search(SearchQuery.create("Batman", "movie"))
    details = await client.get_details(results[0].id)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from moviefinder.core.exceptions import FetchError, UpstreamError
from moviefinder.core.ports.api_clients import IMovieAPIClient, MovieDetail, MovieSummary
from moviefinder.core.value_objects.search import SearchQuery
from moviefinder.utils.constants import OMDB_MISSING_VALUE, OMDB_SUCCESS_FLAG


def _optional(value: Optional[str]) -> Optional[str]:
    """Convertit le marqueur "N/A" d'OMDb (ou une chaine vide) en None."""
    if not value or value == OMDB_MISSING_VALUE:
        return None
    return value


class OMDbClient(IMovieAPIClient):
    """
    Client API OMDb.

    Implemente IMovieAPIClient avec:
    - Recherche par titre filtree par type (movie, series, episode)
    - Recuperation des details complets par ID IMDb

    Le succes est indique par le champ "Response" ("True" / "False") et
    l'echec par le champ "Error", y compris sur les reponses HTTP 401.

    Attributes:
        OMDB_BASE_URL: URL de base de l'API OMDb

    Example:
        client = OMDbClient(api_key="xxx")

        results = await client.search(SearchQuery.create("Inception"))
        if results:
            details = await client.get_details(results[0].id)
            print(f"{details.title} ({details.year}) - {details.country}")

        await client.close()
    """

    OMDB_BASE_URL = "https://www.omdbapi.com/"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = OMDB_BASE_URL,
        timeout: Optional[float] = 30.0,
    ) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb
            base_url: URL de l'API (surchargeable pour les tests)
            timeout: Timeout reseau en secondes (None = pas de timeout)
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        La cle API est passee en parametre de requete "apikey".
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params={"apikey": self._api_key or ""},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "omdb"

    async def _get(self, params: dict[str, str]) -> dict[str, Any]:
        """
        Execute un GET sur la racine de l'API et decode le JSON.

        Le corps est lu avant le statut HTTP : OMDb signale une cle invalide
        ou un quota depasse par un 401 accompagne de Response=False, dont le
        message doit etre affiche tel quel.

        Raises:
            UpstreamError: Reponse avec Response=False, quel que soit le statut
            FetchError: Erreur de transport, statut 4xx/5xx ou corps illisible
        """
        # URL journalisable : la cle API n'est portee que par le client HTTP
        url = httpx.URL(self._base_url, params=params)
        try:
            response = await self._get_client().get("", params=params)
        except httpx.RequestError as e:
            raise FetchError(f"{type(e).__name__} sur {url}") from None

        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and "Response" in data:
            if data["Response"] != OMDB_SUCCESS_FLAG:
                raise UpstreamError(data.get("Error") or "Unknown error")
            return data

        if response.is_error:
            raise FetchError(f"HTTP {response.status_code} sur {url}")
        raise FetchError(f"Reponse OMDb inattendue sur {url}")

    async def search(self, query: SearchQuery) -> list[MovieSummary]:
        """
        Recherche des titres par nom et type.

        Args:
            query: Requete validee (titre + categorie)

        Returns:
            Liste de MovieSummary dans l'ordre de l'API

        Raises:
            UpstreamError: Si OMDb repond Response=False (ex: "Movie not found!")
        """
        logger.debug("Recherche OMDb", title=query.title, type=query.category.value)
        data = await self._get({"s": query.title, "type": query.category.value})

        return [
            MovieSummary(
                id=item["imdbID"],
                title=item.get("Title", ""),
                year=item.get("Year", ""),
                category=item.get("Type", ""),
                poster_url=_optional(item.get("Poster")),
            )
            for item in data.get("Search") or []
        ]

    async def get_details(self, movie_id: str) -> MovieDetail:
        """
        Recupere les details complets d'un titre.

        Args:
            movie_id: ID IMDb (format ttXXXXXXX)

        Returns:
            MovieDetail avec poster et pays

        Raises:
            UpstreamError: Si l'identifiant est inconnu d'OMDb
        """
        logger.debug("Details OMDb", imdb_id=movie_id)
        data = await self._get({"i": movie_id})

        return MovieDetail(
            id=data.get("imdbID", movie_id),
            title=data.get("Title", ""),
            year=data.get("Year", ""),
            category=data.get("Type", ""),
            poster_url=_optional(data.get("Poster")),
            country=_optional(data.get("Country")),
            imdb_rating=_optional(data.get("imdbRating")),
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
