from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from genre_recommendation.applications.interfaces.dtos.movie import MovieList, MoviePublic
from genre_recommendation.applications.use_cases.movie.get_movie import GetMovieUseCase
from genre_recommendation.applications.use_cases.movie.get_movies import GetMoviesUseCase
from genre_recommendation.domain.exceptions import NotFoundError
from genre_recommendation.domain.ports.repositories.movie_repository import MovieRepository
from genre_recommendation.infrastructure.config.dependencies import get_movie_repository

router = APIRouter(prefix="/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]


@router.get("/", response_model=MovieList)
async def read_movies(movie_repository: MovieRepositoryDep):
    """All movies sorted by title"""
    use_case = GetMoviesUseCase(movie_repository)
    return await use_case.execute()


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: int, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
