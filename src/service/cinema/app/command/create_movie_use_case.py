from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.domain.entity.movie_entity import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_GENRE,
    Movie,
)
from src.service.cinema.domain.entity.show_entity import Show


class CreateMovieUseCase:
    """Catalog management: add movies and attach shows to them."""

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
    async def add_movie(
        self,
        *,
        title: str,
        genre: str = DEFAULT_GENRE,
        duration: int = DEFAULT_DURATION_MINUTES,
    ) -> Movie:
        # Entity validators run before an id is consumed
        movie = Movie(id=0, title=title.strip() if title else title, genre=genre, duration=duration)
        movie.id = await self.movie_store.next_movie_id()
        await self.movie_store.save(movie=movie)

        Logger.base.info(f'🎬 [ADD-MOVIE] {movie.id}: {movie.title} ({movie.genre})')
        return movie

    @Logger.io
    async def add_show(self, *, movie_id: int, show_time: str, total_seats: int) -> Show:
        movie = await self.movie_store.get_by_id(movie_id=movie_id)
        if not movie:
            raise NotFoundError(f'Movie {movie_id} not found')

        show = Show(
            id=0,
            show_time=show_time.strip() if show_time else show_time,
            total_seats=total_seats,
        )
        show.id = await self.movie_store.next_show_id()
        movie.add_show(show)
        await self.movie_store.save(movie=movie)

        Logger.base.info(
            f'🕒 [ADD-SHOW] Show {show.id} for movie {movie_id}: {show.show_time}, '
            f'{show.total_seats} seats'
        )
        return show
