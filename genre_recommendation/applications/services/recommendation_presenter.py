from typing import Tuple

from genre_recommendation.applications.interfaces.dtos.movie import MoviePublic
from genre_recommendation.applications.interfaces.dtos.recommendation import (
    RecommendationResponse,
    RecommendationResultResponse,
    RecommendationStatus,
)
from genre_recommendation.domain.exceptions import EmptyCatalogError, InvalidInputError, NotFoundError
from genre_recommendation.domain.models.recommendation import RecommendationResult

NOT_FOUND_MESSAGE = "Error: Selected movie not found in database."
EMPTY_CATALOG_MESSAGE = "Not enough movies in the catalog to make recommendations."
INVALID_REQUEST_MESSAGE = "Invalid request for recommendations."
GENERIC_ERROR_MESSAGE = "An error occurred while calculating recommendations."


class RecommendationPresenter:
    """Turns recommendation results and failures into user-facing text"""

    @staticmethod
    def format_message(result: RecommendationResult) -> Tuple[str, RecommendationStatus]:
        liked_title = result.liked_movie.title
        if not result.recommendations or not result.has_strong_match:
            return f'Sorry, no strong recommendations found for "{liked_title}".', RecommendationStatus.ERROR

        titles = ", ".join(rec.title for rec in result.recommendations)
        return f'Because you liked "{liked_title}", we recommend: {titles}', RecommendationStatus.SUCCESS

    @staticmethod
    def format_error(error: Exception) -> str:
        if isinstance(error, NotFoundError):
            return NOT_FOUND_MESSAGE
        if isinstance(error, EmptyCatalogError):
            return EMPTY_CATALOG_MESSAGE
        if isinstance(error, InvalidInputError):
            return INVALID_REQUEST_MESSAGE
        return GENERIC_ERROR_MESSAGE

    @classmethod
    def to_response(cls, result: RecommendationResult) -> RecommendationResultResponse:
        message, status = cls.format_message(result)
        return RecommendationResultResponse(
            liked_movie=MoviePublic.model_validate(result.liked_movie),
            recommendations=[RecommendationResponse.model_validate(rec) for rec in result.recommendations],
            recommendation_count=result.recommendation_count,
            has_strong_match=result.has_strong_match,
            message=message,
            status=status,
        )
