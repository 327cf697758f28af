"""
Fixtures pytest partagees pour les tests MovieFinder.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de l'interface IMovieAPIClient
- Resumes et details de films types
- Settings de test isoles de l'environnement
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from moviefinder.config import Settings
from moviefinder.core.exceptions import UpstreamError
from moviefinder.core.ports.api_clients import IMovieAPIClient, MovieDetail, MovieSummary


@pytest.fixture
def summaries() -> list[MovieSummary]:
    """Deux resumes renvoyes par une recherche "batman"."""
    return [
        MovieSummary(id="tt0372784", title="Batman Begins", year="2005", category="movie"),
        MovieSummary(id="tt1877830", title="The Batman", year="2022", category="movie"),
    ]


@pytest.fixture
def details_by_id() -> dict[str, MovieDetail]:
    """Details correspondant aux resumes de la fixture summaries."""
    return {
        "tt0372784": MovieDetail(
            id="tt0372784",
            title="Batman Begins",
            year="2005",
            category="movie",
            poster_url="https://example.org/batman_begins.jpg",
            country="United States, United Kingdom",
        ),
        "tt1877830": MovieDetail(
            id="tt1877830",
            title="The Batman",
            year="2022",
            category="movie",
            poster_url="https://example.org/the_batman.jpg",
            country="United States",
        ),
    }


@pytest.fixture
def mock_api_client(
    summaries: list[MovieSummary],
    details_by_id: dict[str, MovieDetail],
) -> AsyncMock:
    """
    Mock de IMovieAPIClient pour les tests.

    Par defaut, search() renvoie les deux resumes "batman" et get_details()
    renvoie le detail correspondant a l'identifiant demande.
    """
    mock = AsyncMock(spec=IMovieAPIClient)
    mock.search.return_value = summaries

    async def default_details(movie_id: str) -> MovieDetail:
        if movie_id not in details_by_id:
            raise UpstreamError("Incorrect IMDb ID.")
        return details_by_id[movie_id]

    mock.get_details.side_effect = default_details
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test independants du fichier .env.

    Le fichier de log est place dans le tmp_path de pytest.
    """
    return Settings(
        _env_file=None,
        omdb_api_key="test_api_key",
        log_file=tmp_path / "test.log",
    )
