from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from genre_recommendation.app import app
from genre_recommendation.domain.models.movie import Movie
from genre_recommendation.domain.ports.services.logger import LoggerPort
from genre_recommendation.infrastructure.adapters.repositories.in_memory_movie_repository import (
    InMemoryMovieRepository,
)
from genre_recommendation.infrastructure.config.dependencies import get_movie_repository, get_settings
from genre_recommendation.infrastructure.config.settings import RecommenderSettings


@pytest.fixture
def sample_catalog():
    """Three-movie catalog with one partial and one disjoint genre overlap"""
    return [
        Movie(id=1, title="A", genres=["Action", "Drama"]),
        Movie(id=2, title="B", genres=["Action"]),
        Movie(id=3, title="C", genres=["Comedy"]),
    ]


@pytest.fixture
def tied_catalog():
    """Catalog where candidates 3 and 5 tie at 1.0 and candidates 2 and 4 tie at 0.0"""
    return [
        Movie(id=1, title="Liked", genres=["Action"]),
        Movie(id=2, title="Comedy One", genres=["Comedy"]),
        Movie(id=3, title="Action One", genres=["Action"]),
        Movie(id=4, title="Drama One", genres=["Drama"]),
        Movie(id=5, title="Action Two", genres=["Action"]),
    ]


@pytest.fixture
def settings():
    return RecommenderSettings(catalog_path="unused.json", default_top_k=3, max_top_k=100, strong_match_threshold=0.0)


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def override_catalog(settings):
    """Serve the given movies to the API instead of the configured catalog file"""

    def _override(movies):
        repository = InMemoryMovieRepository(movies)
        app.dependency_overrides[get_movie_repository] = lambda: repository
        app.dependency_overrides[get_settings] = lambda: settings
        return repository

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_catalog, sample_catalog):
    override_catalog(sample_catalog)
    return TestClient(app)
