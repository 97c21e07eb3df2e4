from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict

from genre_recommendation.applications.interfaces.dtos.movie import MoviePublic


class RecommendationStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class RecommendationResponse(BaseModel):
    """Response schema for a single recommended movie"""

    movie_id: int
    title: str
    genres: List[str]
    similarity_score: float
    similarity_percentage: float
    model_config = ConfigDict(from_attributes=True)


class RecommendationResultResponse(BaseModel):
    """Response schema for recommendation results"""

    liked_movie: MoviePublic
    recommendations: List[RecommendationResponse]
    recommendation_count: int
    has_strong_match: bool
    message: str
    status: RecommendationStatus


class RecommendationHealthResponse(BaseModel):
    status: str
    service: str
    catalog_size: int
    message: str
