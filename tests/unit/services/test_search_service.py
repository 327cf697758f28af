"""
Tests pour MovieSearchService.

Verifie le flux complet recherche -> enrichissement et la conversion des
erreurs en message unique:
- Erreur de validation sans appel reseau
- Message de l'API affiche tel quel (Response=False, meme sur HTTP 401)
- Cle API absente des logs en cas d'erreur reseau
- Message generique pour toute erreur reseau ou d'enrichissement
"""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest
import respx
from loguru import logger

from moviefinder.adapters.api.omdb_client import OMDbClient
from moviefinder.config import AggregationPolicy
from moviefinder.core.entities import SearchSession, SearchStatus
from moviefinder.core.exceptions import UpstreamError
from moviefinder.core.ports.api_clients import MovieDetail, MovieSummary
from moviefinder.core.value_objects import SearchCategory
from moviefinder.services.enricher import DetailEnricherService
from moviefinder.services.search import MovieSearchService, SearchErrorKind
from tests.fixtures.omdb_responses import (
    OMDB_INVALID_KEY_RESPONSE,
    OMDB_SEARCH_RESPONSE,
    OMDB_THE_BATMAN_DETAILS,
)


@pytest.fixture
def service(mock_api_client: AsyncMock) -> MovieSearchService:
    """Service avec enrichissement FAIL_FAST."""
    return MovieSearchService(mock_api_client, DetailEnricherService(mock_api_client))


class TestSearch:
    """Tests pour MovieSearchService.search()."""

    @pytest.mark.asyncio
    async def test_batman_returns_two_enriched_results_in_order(self, service, mock_api_client):
        outcome = await service.search("batman", "movie")

        assert outcome.ok
        assert [m.id for m in outcome.results] == ["tt0372784", "tt1877830"]
        assert outcome.results[0].country == "United States, United Kingdom"
        query = mock_api_client.search.await_args.args[0]
        assert query.title == "batman"
        assert query.category is SearchCategory.MOVIE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   "])
    async def test_empty_title_makes_no_network_call(self, service, mock_api_client, title):
        outcome = await service.search(title, "movie")

        assert outcome.error == "Search term is required"
        assert outcome.error_kind is SearchErrorKind.VALIDATION
        mock_api_client.search.assert_not_called()
        mock_api_client.get_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_upstream_message_is_shown_verbatim(self, service, mock_api_client):
        mock_api_client.search.side_effect = UpstreamError("Movie not found!")

        outcome = await service.search("zzzzznonexistent", "movie")

        assert outcome.error == "Movie not found!"
        assert outcome.error_kind is SearchErrorKind.UPSTREAM
        assert outcome.results == ()

    @pytest.mark.asyncio
    async def test_network_error_gives_generic_message(self, service, mock_api_client):
        mock_api_client.search.side_effect = httpx.ConnectError("secret details")

        outcome = await service.search("batman", "movie")

        assert outcome.error == "Fetch data error."
        assert "secret" not in outcome.error
        assert outcome.error_kind is SearchErrorKind.FETCH

    @pytest.mark.asyncio
    async def test_parse_error_gives_generic_message(self, service, mock_api_client):
        mock_api_client.search.side_effect = KeyError("imdbID")

        outcome = await service.search("batman", "movie")

        assert outcome.error == "Fetch data error."

    @pytest.mark.asyncio
    async def test_empty_list_gives_no_results_message(self, service, mock_api_client):
        mock_api_client.search.return_value = []

        outcome = await service.search("batman", "movie")

        assert outcome.error == "No results found."
        mock_api_client.get_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_one_of_three_detail_failures_gives_zero_results(self, mock_api_client):
        mock_api_client.search.return_value = [
            MovieSummary(id=i, title=i) for i in ("tt1", "tt2", "tt3")
        ]

        async def details(movie_id: str) -> MovieDetail:
            if movie_id == "tt3":
                await asyncio.sleep(0.01)
                raise httpx.ReadTimeout("timeout")
            return MovieDetail(id=movie_id, title=movie_id)

        mock_api_client.get_details.side_effect = details
        service = MovieSearchService(mock_api_client, DetailEnricherService(mock_api_client))

        outcome = await service.search("batman", "movie")

        assert outcome.error == "Fetch data error."
        assert outcome.results == ()

    @pytest.mark.asyncio
    async def test_best_effort_keeps_successful_details(self, mock_api_client):
        mock_api_client.search.return_value = [
            MovieSummary(id=i, title=i) for i in ("tt1", "tt2", "tt3")
        ]

        async def details(movie_id: str) -> MovieDetail:
            if movie_id == "tt2":
                raise httpx.ReadTimeout("timeout")
            return MovieDetail(id=movie_id, title=movie_id)

        mock_api_client.get_details.side_effect = details
        enricher = DetailEnricherService(mock_api_client, AggregationPolicy.BEST_EFFORT)
        service = MovieSearchService(mock_api_client, enricher)

        outcome = await service.search("batman", "movie")

        assert [m.id for m in outcome.results] == ["tt1", "tt3"]

    @pytest.mark.asyncio
    async def test_best_effort_with_no_success_is_a_fetch_error(self, mock_api_client):
        mock_api_client.get_details.side_effect = httpx.ConnectError("down")
        enricher = DetailEnricherService(mock_api_client, AggregationPolicy.BEST_EFFORT)
        service = MovieSearchService(mock_api_client, enricher)

        outcome = await service.search("batman", "movie")

        assert outcome.error == "Fetch data error."

    @pytest.mark.asyncio
    async def test_without_enricher_returns_summaries(self, mock_api_client, summaries):
        service = MovieSearchService(mock_api_client)

        outcome = await service.search("batman", "movie")

        assert list(outcome.results) == summaries
        mock_api_client.get_details.assert_not_called()


class TestSubmit:
    """Tests pour MovieSearchService.submit() et l'etat de session."""

    @pytest.mark.asyncio
    async def test_submit_populates_session(self, service):
        session = SearchSession()

        await service.submit(session, "batman", "movie")

        assert session.status is SearchStatus.RESULTS
        assert len(session.results) == 2

    @pytest.mark.asyncio
    async def test_submit_empty_title_rejects(self, service, mock_api_client):
        session = SearchSession()

        await service.submit(session, "  ", "series")

        assert session.status is SearchStatus.ERROR
        assert session.error == "Search term is required"
        assert session.category is SearchCategory.SERIES
        mock_api_client.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_submit_unknown_category_rejects(self, service, mock_api_client):
        session = SearchSession()

        await service.submit(session, "batman", "game")

        assert session.status is SearchStatus.ERROR
        assert session.category is SearchCategory.MOVIE
        mock_api_client.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_submit_error_clears_previous_results(self, service, mock_api_client):
        session = SearchSession()
        await service.submit(session, "batman", "movie")

        mock_api_client.search.side_effect = UpstreamError("Movie not found!")
        await service.submit(session, "zzzzznonexistent", "movie")

        assert session.error == "Movie not found!"
        assert session.results == ()

    @pytest.mark.asyncio
    async def test_slow_first_search_does_not_overwrite_second(self, mock_api_client):
        """Deux recherches rapides : la plus recente l'emporte quel que soit l'ordre d'arrivee."""
        release_first = asyncio.Event()

        async def search(query):
            if query.title == "slow":
                await release_first.wait()
                return [MovieSummary(id="slow1", title="Slow")]
            return [MovieSummary(id="fast1", title="Fast")]

        mock_api_client.search.side_effect = search
        service = MovieSearchService(mock_api_client)
        session = SearchSession()

        slow = asyncio.create_task(service.submit(session, "slow", "movie"))
        await asyncio.sleep(0.01)
        assert session.is_loading
        await service.submit(session, "fast", "movie")
        release_first.set()
        await slow

        assert [m.id for m in session.results] == ["fast1"]
        assert session.title == "fast"


class TestSearchWithOMDbClient:
    """Flux complet avec le vrai client OMDb, reseau simule par respx."""

    OMDB_URL = "https://www.omdbapi.com/"
    API_KEY = "SECRETKEY123"

    @pytest.fixture
    def log_lines(self):
        lines: list[str] = []
        handler_id = logger.add(lines.append, level="DEBUG", format="{message}")
        yield lines
        logger.remove(handler_id)

    @pytest.fixture
    def omdb_service(self):
        client = OMDbClient(api_key=self.API_KEY)
        return MovieSearchService(client, DetailEnricherService(client))

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_key_message_is_shown_verbatim(self, omdb_service):
        respx.get(self.OMDB_URL).mock(
            return_value=httpx.Response(401, json=OMDB_INVALID_KEY_RESPONSE)
        )

        outcome = await omdb_service.search("batman", "movie")

        assert outcome.error == "Invalid API key!"
        assert outcome.error_kind is SearchErrorKind.UPSTREAM

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error_is_logged_without_api_key(self, omdb_service, log_lines):
        respx.get(self.OMDB_URL).mock(return_value=httpx.Response(500, text="Internal Error"))

        outcome = await omdb_service.search("batman", "movie")

        assert outcome.error == "Fetch data error."
        assert any("HTTP 500" in line for line in log_lines)
        assert not any(self.API_KEY in line for line in log_lines)

    @pytest.mark.asyncio
    @respx.mock
    async def test_detail_network_error_is_logged_without_api_key(self, omdb_service, log_lines):
        respx.get(self.OMDB_URL, params={"s": "batman"}).mock(
            return_value=httpx.Response(200, json=OMDB_SEARCH_RESPONSE)
        )
        respx.get(self.OMDB_URL, params={"i": "tt0372784"}).mock(
            side_effect=httpx.ConnectError("connexion refusee")
        )
        respx.get(self.OMDB_URL, params={"i": "tt1877830"}).mock(
            return_value=httpx.Response(200, json=OMDB_THE_BATMAN_DETAILS)
        )

        outcome = await omdb_service.search("batman", "movie")

        assert outcome.error == "Fetch data error."
        assert outcome.results == ()
        assert not any(self.API_KEY in line for line in log_lines)
