"""
Fixtures pytest partagees pour les tests CineSearch.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (cle API factice, log dans tmp_path)
- Entites construites depuis les reponses TMDB de reference
- Mock de IMovieAPIClient
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from cinesearch.adapters.api.tmdb_schemas import (
    CreditsPayload,
    MovieDetailPayload,
    SearchPayload,
)
from cinesearch.config import Settings
from cinesearch.core.entities.movie import Credits, MovieDetail, MovieSummary
from cinesearch.core.ports.api_clients import IMovieAPIClient
from tests.fixtures.tmdb_responses import (
    TMDB_CREDITS_603_RESPONSE,
    TMDB_MOVIE_603_RESPONSE,
    TMDB_SEARCH_MATRIX_RESPONSE,
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec une cle API factice.

    Le fichier .env eventuel du poste de developpement est ignore.
    """
    return Settings(
        _env_file=None,
        tmdb_api_key="test_api_key",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def matrix_results() -> list[MovieSummary]:
    """Les deux resultats de la recherche "Matrix"."""
    return SearchPayload.model_validate(TMDB_SEARCH_MATRIX_RESPONSE).to_entities()


@pytest.fixture
def matrix_movie() -> MovieDetail:
    """Fiche de The Matrix (id=603)."""
    return MovieDetailPayload.model_validate(TMDB_MOVIE_603_RESPONSE).to_entity()


@pytest.fixture
def matrix_credits() -> Credits:
    """Distribution de The Matrix (id=603)."""
    return CreditsPayload.model_validate(TMDB_CREDITS_603_RESPONSE).to_entity()


@pytest.fixture
def mock_client(
    matrix_results: list[MovieSummary],
    matrix_movie: MovieDetail,
    matrix_credits: Credits,
) -> AsyncMock:
    """
    Mock de IMovieAPIClient pour les tests.

    Retourne par defaut les donnees de The Matrix.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    client = AsyncMock(spec=IMovieAPIClient)
    client.search_movies.return_value = matrix_results
    client.get_movie.return_value = matrix_movie
    client.get_credits.return_value = matrix_credits
    return client
