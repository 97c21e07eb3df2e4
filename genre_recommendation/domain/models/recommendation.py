from typing import List

from pydantic import BaseModel, Field

from genre_recommendation.domain.models.movie import Movie


class Recommendation(BaseModel):
    """Domain model representing a scored candidate movie"""

    movie_id: int
    title: str
    genres: List[str]
    similarity_score: float = Field(ge=0.0, le=1.0)

    @classmethod
    def from_movie(cls, movie: Movie, score: float) -> "Recommendation":
        return cls(movie_id=movie.id, title=movie.title, genres=list(movie.genres), similarity_score=score)

    @property
    def similarity_percentage(self) -> float:
        """Get similarity as percentage"""
        return self.similarity_score * 100


class RecommendationResult(BaseModel):
    """Domain model for recommendation results"""

    liked_movie: Movie
    recommendations: List[Recommendation]
    has_strong_match: bool

    @property
    def recommendation_count(self) -> int:
        return len(self.recommendations)
