from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.show_entity import Show


class GetMovieUseCase:
    def __init__(self, *, movie_store: IMovieStore) -> None:
        self.movie_store = movie_store

    @classmethod
    @inject
    def depends(
        cls,
        movie_store: IMovieStore = Depends(Provide[Container.movie_store]),
    ) -> Self:
        return cls(movie_store=movie_store)

    @Logger.io
    async def get_movie(self, *, movie_id: int) -> Movie:
        movie = await self.movie_store.get_by_id(movie_id=movie_id)
        if not movie:
            raise NotFoundError(f'Movie {movie_id} not found')
        return movie

    @Logger.io
    async def list_shows(self, *, movie_id: int) -> List[Show]:
        movie = await self.get_movie(movie_id=movie_id)
        return list(movie.shows)

    @Logger.io
    async def get_show(self, *, movie_id: int, show_id: int) -> Show:
        movie = await self.get_movie(movie_id=movie_id)
        show = movie.find_show_by_id(show_id)
        if not show:
            raise NotFoundError(f'Show {show_id} not found for movie {movie_id}')
        return show

    @Logger.io
    async def list_available_seats(self, *, movie_id: int, show_id: int) -> List[int]:
        show = await self.get_show(movie_id=movie_id, show_id=show_id)
        return show.available_seats()
