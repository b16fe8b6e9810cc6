"""In-memory movie catalog, process lifetime"""

from typing import Dict, List, Optional

from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.domain.entity.movie_entity import Movie


class InMemoryMovieStore(IMovieStore):
    def __init__(self) -> None:
        self._movies: Dict[int, Movie] = {}
        self._last_movie_id = 0
        self._last_show_id = 0

    async def get_by_id(self, *, movie_id: int) -> Optional[Movie]:
        return self._movies.get(movie_id)

    async def list_all(self) -> List[Movie]:
        return [self._movies[movie_id] for movie_id in sorted(self._movies)]

    async def save(self, *, movie: Movie) -> Movie:
        self._movies[movie.id] = movie
        # Keep the counters ahead of explicitly supplied ids
        self._last_movie_id = max(self._last_movie_id, movie.id)
        for show in movie.shows:
            self._last_show_id = max(self._last_show_id, show.id)
        return movie

    async def next_movie_id(self) -> int:
        self._last_movie_id += 1
        return self._last_movie_id

    async def next_show_id(self) -> int:
        self._last_show_id += 1
        return self._last_show_id

    async def clear(self) -> None:
        self._movies.clear()
        self._last_movie_id = 0
        self._last_show_id = 0

    async def count(self) -> int:
        return len(self._movies)
