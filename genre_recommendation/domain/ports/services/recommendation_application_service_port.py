from abc import ABC, abstractmethod
from typing import Optional

from genre_recommendation.domain.models.recommendation import RecommendationResult


class RecommendationApplicationServicePort(ABC):
    """Port for recommendation generation operations"""

    @abstractmethod
    async def recommend(self, movie_id: int, top_k: Optional[int] = None) -> RecommendationResult:
        """Recommend movies whose genres overlap the liked movie's genres"""
        pass

    @abstractmethod
    async def catalog_size(self) -> int:
        """Number of movies available for recommendation"""
        pass
