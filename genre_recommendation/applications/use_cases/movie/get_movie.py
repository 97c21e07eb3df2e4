from genre_recommendation.applications.interfaces.dtos.movie import MoviePublic
from genre_recommendation.domain.exceptions import NotFoundError
from genre_recommendation.domain.ports.repositories.movie_repository import MovieRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> MoviePublic:
        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        return MoviePublic(id=movie.id, title=movie.title, genres=movie.genres)
