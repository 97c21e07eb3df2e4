from genre_recommendation.applications.interfaces.dtos.movie import MovieList, MoviePublic
from genre_recommendation.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    """List the catalog alphabetically, for populating a movie picker"""

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self) -> MovieList:
        movies = await self.movie_repository.get_all()
        ordered = sorted(movies, key=lambda movie: (movie.title.casefold(), movie.id))
        return MovieList(movies=[MoviePublic(id=movie.id, title=movie.title, genres=movie.genres) for movie in ordered])
