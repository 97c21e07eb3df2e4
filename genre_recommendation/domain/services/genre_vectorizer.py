from typing import Iterable, List, Sequence

import numpy as np

from genre_recommendation.domain.models.movie import Movie


class GenreVectorizer:
    """Domain service for one-hot genre encoding - pure functions over the catalog"""

    @staticmethod
    def build_vocabulary(catalog: Iterable[Movie]) -> List[str]:
        """Distinct genres across the catalog, in first-occurrence order"""
        vocabulary = {}
        for movie in catalog:
            for genre in movie.genres:
                vocabulary.setdefault(genre, len(vocabulary))
        return list(vocabulary)

    @staticmethod
    def encode(movie_genres: Iterable[str], vocabulary: Sequence[str]) -> np.ndarray:
        """Binary vector with a 1 at each vocabulary position present in movie_genres"""
        present = set(movie_genres)
        return np.fromiter((1 if genre in present else 0 for genre in vocabulary), dtype=np.int8, count=len(vocabulary))
