from typing import List, Sequence

from genre_recommendation.domain.exceptions import EmptyCatalogError, InvalidInputError, NotFoundError
from genre_recommendation.domain.models.movie import Movie
from genre_recommendation.domain.models.recommendation import Recommendation, RecommendationResult
from genre_recommendation.domain.services.genre_vectorizer import GenreVectorizer
from genre_recommendation.domain.services.vector_math import cosine_similarity

DEFAULT_TOP_K = 3


class RecommendationService:
    """Domain service ranking catalog movies by genre overlap with a liked movie.

    Holds no per-request state; the genre vocabulary and vectors are rebuilt on every call.
    """

    def __init__(self, strong_match_threshold: float = 0.0):
        self.strong_match_threshold = strong_match_threshold

    def recommend(
        self, catalog: Sequence[Movie], liked_movie_id: int, top_k: int = DEFAULT_TOP_K
    ) -> RecommendationResult:
        if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 1:
            raise InvalidInputError(f"top_k must be a positive integer, got {top_k!r}")
        if len(catalog) < 2:
            raise EmptyCatalogError(f"Catalog needs at least 2 movies to recommend, got {len(catalog)}")

        liked_movie = self._find_movie(catalog, liked_movie_id)

        vocabulary = GenreVectorizer.build_vocabulary(catalog)
        liked_vector = GenreVectorizer.encode(liked_movie.genres, vocabulary)

        scored: List[Recommendation] = []
        for candidate in catalog:
            if candidate.id == liked_movie.id:
                continue
            candidate_vector = GenreVectorizer.encode(candidate.genres, vocabulary)
            score = cosine_similarity(liked_vector, candidate_vector)
            scored.append(Recommendation.from_movie(candidate, score))

        # sorted() is stable, so equal scores keep catalog order
        ranked = sorted(scored, key=lambda rec: rec.similarity_score, reverse=True)[:top_k]

        return RecommendationResult(
            liked_movie=liked_movie,
            recommendations=ranked,
            has_strong_match=self.is_strong_match(ranked),
        )

    def is_strong_match(self, ranked: Sequence[Recommendation]) -> bool:
        """A ranking is strong when its top score exceeds the threshold"""
        return bool(ranked) and ranked[0].similarity_score > self.strong_match_threshold

    @staticmethod
    def _find_movie(catalog: Sequence[Movie], movie_id: int) -> Movie:
        for movie in catalog:
            if movie.id == movie_id:
                return movie
        raise NotFoundError(f"Movie with id {movie_id} not found")
