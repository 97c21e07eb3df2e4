import asyncio
from typing import Optional

from genre_recommendation.domain.models.recommendation import RecommendationResult
from genre_recommendation.domain.ports.repositories.movie_repository import MovieRepository
from genre_recommendation.domain.ports.services.logger import LoggerPort
from genre_recommendation.domain.ports.services.recommendation_application_service_port import (
    RecommendationApplicationServicePort,
)
from genre_recommendation.domain.services.recommendation_service import RecommendationService
from genre_recommendation.infrastructure.config.settings import RecommenderSettings


class RecommendationApplicationService(RecommendationApplicationServicePort):
    """Application service for genre-based recommendations"""

    def __init__(
        self,
        settings: RecommenderSettings,
        movie_repository: MovieRepository,
        logger: LoggerPort,
    ):
        self.settings = settings
        self.movie_repository = movie_repository
        self.logger = logger
        self._domain_service = RecommendationService(strong_match_threshold=settings.strong_match_threshold)

    def _resolve_top_k(self, top_k: Optional[int]) -> int:
        if top_k is None:
            return self.settings.default_top_k
        if top_k > self.settings.max_top_k:
            self.logger.warning(f"Requested top_k={top_k} capped to {self.settings.max_top_k}")
            return self.settings.max_top_k
        return top_k

    async def recommend(self, movie_id: int, top_k: Optional[int] = None) -> RecommendationResult:
        """Recommend movies for a liked movie, scoring off the event loop"""
        top_k = self._resolve_top_k(top_k)
        catalog = await self.movie_repository.get_all()
        self.logger.info(f"Generating recommendations for movie {movie_id} (top_k={top_k}, catalog={len(catalog)})")

        result = await asyncio.to_thread(self._domain_service.recommend, catalog, movie_id, top_k)

        self.logger.info(
            f"Recommended {result.recommendation_count} movies for '{result.liked_movie.title}' "
            f"(strong_match={result.has_strong_match})"
        )
        return result

    async def catalog_size(self) -> int:
        return len(await self.movie_repository.get_all())
