from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.constant.route_constant import (
    MOVIE_CREATE,
    MOVIE_GET,
    MOVIE_LIST,
    MOVIE_SHOW_GET,
    MOVIE_SHOW_SEATS,
    MOVIE_SHOWS,
)
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.create_movie_use_case import CreateMovieUseCase
from src.service.cinema.app.query.get_movie_use_case import GetMovieUseCase
from src.service.cinema.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.cinema.driving_adapter.http_controller.schema.movie_schema import (
    AvailableSeatsResponse,
    MovieCreateRequest,
    MovieResponse,
    ShowCreateRequest,
    ShowResponse,
)


router = APIRouter(tags=['movie'])


@router.get(MOVIE_LIST)
@Logger.io
async def list_movies(
    genre: Optional[str] = None,
    q: Optional[str] = Query(default=None, description='Case-insensitive title search'),
    use_case: ListMoviesUseCase = Depends(ListMoviesUseCase.depends),
) -> List[MovieResponse]:
    movies = await use_case.list_movies(genre=genre, title=q)
    return [MovieResponse.from_entity(movie) for movie in movies]


@router.post(MOVIE_CREATE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_movie(
    request: MovieCreateRequest,
    use_case: CreateMovieUseCase = Depends(CreateMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.add_movie(
        title=request.title, genre=request.genre, duration=request.duration
    )
    return MovieResponse.from_entity(movie)


@router.get(MOVIE_GET)
@Logger.io
async def get_movie(
    movie_id: int,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.get_movie(movie_id=movie_id)
    return MovieResponse.from_entity(movie)


@router.get(MOVIE_SHOWS)
@Logger.io
async def list_shows(
    movie_id: int,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> List[ShowResponse]:
    shows = await use_case.list_shows(movie_id=movie_id)
    return [ShowResponse.from_entity(show) for show in shows]


@router.post(MOVIE_SHOWS, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_show(
    movie_id: int,
    request: ShowCreateRequest,
    use_case: CreateMovieUseCase = Depends(CreateMovieUseCase.depends),
) -> ShowResponse:
    show = await use_case.add_show(
        movie_id=movie_id, show_time=request.show_time, total_seats=request.total_seats
    )
    return ShowResponse.from_entity(show)


@router.get(MOVIE_SHOW_GET)
@Logger.io
async def get_show(
    movie_id: int,
    show_id: int,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> ShowResponse:
    show = await use_case.get_show(movie_id=movie_id, show_id=show_id)
    return ShowResponse.from_entity(show)


@router.get(MOVIE_SHOW_SEATS)
@Logger.io
async def list_available_seats(
    movie_id: int,
    show_id: int,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> AvailableSeatsResponse:
    show = await use_case.get_show(movie_id=movie_id, show_id=show_id)
    return AvailableSeatsResponse(
        movie_id=movie_id,
        show_id=show.id,
        show_time=show.show_time,
        total_seats=show.total_seats,
        available_seats=show.available_seats(),
    )
