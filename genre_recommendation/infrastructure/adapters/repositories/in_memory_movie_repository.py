from typing import Dict, Iterable, List, Optional

from genre_recommendation.domain.exceptions import CatalogLoadError
from genre_recommendation.domain.models.movie import Movie
from genre_recommendation.domain.ports.repositories.movie_repository import MovieRepository


class InMemoryMovieRepository(MovieRepository):
    """Serves a fixed catalog, preserving the order it was given in"""

    def __init__(self, movies: Iterable[Movie]):
        self._movies: List[Movie] = list(movies)
        self._by_id: Dict[int, Movie] = {}
        for movie in self._movies:
            if movie.id in self._by_id:
                raise CatalogLoadError(f"Duplicate movie id {movie.id} in catalog")
            self._by_id[movie.id] = movie

    async def get_all(self) -> List[Movie]:
        return list(self._movies)

    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        return self._by_id.get(movie_id)

    def __len__(self) -> int:
        return len(self._movies)
