from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from genre_recommendation.applications.services.recommendation_application_service import (
    RecommendationApplicationService,
)
from genre_recommendation.domain.ports.repositories.movie_repository import MovieRepository
from genre_recommendation.domain.ports.services.logger import LoggerPort
from genre_recommendation.domain.ports.services.recommendation_application_service_port import (
    RecommendationApplicationServicePort,
)
from genre_recommendation.infrastructure.adapters.repositories.file_movie_repository import FileMovieRepository
from genre_recommendation.infrastructure.config.settings import RecommenderSettings
from genre_recommendation.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("genre_recommendation")


@lru_cache
def get_settings() -> RecommenderSettings:
    return RecommenderSettings()


@lru_cache
def load_catalog(catalog_path: str) -> FileMovieRepository:
    """Each catalog path is read once per process"""
    return FileMovieRepository(catalog_path)


def get_movie_repository(settings: Annotated[RecommenderSettings, Depends(get_settings)]) -> MovieRepository:
    return load_catalog(settings.catalog_path)


def get_recommendation_service(
    settings: Annotated[RecommenderSettings, Depends(get_settings)],
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> RecommendationApplicationServicePort:
    return RecommendationApplicationService(
        settings=settings,
        movie_repository=movie_repository,
        logger=logger,
    )
