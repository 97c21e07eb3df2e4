import pytest

from genre_recommendation.applications.interfaces.dtos.recommendation import RecommendationStatus
from genre_recommendation.applications.services.recommendation_presenter import (
    EMPTY_CATALOG_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    NOT_FOUND_MESSAGE,
    RecommendationPresenter,
)
from genre_recommendation.domain.exceptions import EmptyCatalogError, InvalidInputError, NotFoundError
from genre_recommendation.domain.models.movie import Movie
from genre_recommendation.domain.models.recommendation import Recommendation, RecommendationResult


@pytest.fixture
def liked_movie():
    return Movie(id=1, title="Heat (1995)", genres=["Action", "Crime"])


def make_result(liked_movie, scores, has_strong_match):
    recommendations = [
        Recommendation(movie_id=i + 2, title=f"Movie {i + 2}", genres=["Action"], similarity_score=score)
        for i, score in enumerate(scores)
    ]
    return RecommendationResult(liked_movie=liked_movie, recommendations=recommendations, has_strong_match=has_strong_match)


class TestFormatMessage:
    def test_strong_match_lists_titles_in_rank_order(self, liked_movie):
        result = make_result(liked_movie, [0.9, 0.5, 0.1], has_strong_match=True)

        message, status = RecommendationPresenter.format_message(result)

        assert message == 'Because you liked "Heat (1995)", we recommend: Movie 2, Movie 3, Movie 4'
        assert status == RecommendationStatus.SUCCESS

    def test_no_strong_match(self, liked_movie):
        result = make_result(liked_movie, [0.0, 0.0], has_strong_match=False)

        message, status = RecommendationPresenter.format_message(result)

        assert message == 'Sorry, no strong recommendations found for "Heat (1995)".'
        assert status == RecommendationStatus.ERROR

    def test_empty_result(self, liked_movie):
        result = make_result(liked_movie, [], has_strong_match=False)

        message, status = RecommendationPresenter.format_message(result)

        assert message.startswith("Sorry, no strong recommendations")
        assert status == RecommendationStatus.ERROR


class TestFormatError:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (NotFoundError("missing"), NOT_FOUND_MESSAGE),
            (EmptyCatalogError("too small"), EMPTY_CATALOG_MESSAGE),
            (InvalidInputError("bad top_k"), INVALID_REQUEST_MESSAGE),
            (KeyError("genres"), GENERIC_ERROR_MESSAGE),
        ],
    )
    def test_error_messages(self, error, expected):
        assert RecommendationPresenter.format_error(error) == expected

    def test_not_found_matches_ui_text(self):
        assert NOT_FOUND_MESSAGE == "Error: Selected movie not found in database."


class TestToResponse:
    def test_maps_all_fields(self, liked_movie):
        result = make_result(liked_movie, [0.5], has_strong_match=True)

        response = RecommendationPresenter.to_response(result)

        assert response.liked_movie.id == 1
        assert response.recommendation_count == 1
        assert response.recommendations[0].movie_id == 2
        assert response.recommendations[0].similarity_percentage == pytest.approx(50.0)
        assert response.has_strong_match is True
        assert response.status == RecommendationStatus.SUCCESS
        assert response.message.endswith("we recommend: Movie 2")
