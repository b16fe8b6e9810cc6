from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.domain.entity.movie_entity import Movie


class ListMoviesUseCase:
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
    async def list_movies(
        self, *, genre: Optional[str] = None, title: Optional[str] = None
    ) -> List[Movie]:
        """
        All movies ordered by id.

        genre matches case-insensitively and exactly, title is a case-insensitive substring.
        """
        movies = await self.movie_store.list_all()

        if genre and genre.strip():
            wanted_genre = genre.strip().casefold()
            movies = [movie for movie in movies if movie.genre.casefold() == wanted_genre]

        if title and title.strip():
            needle = title.strip().casefold()
            movies = [movie for movie in movies if needle in movie.title.casefold()]

        return movies
