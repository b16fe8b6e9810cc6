from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema.domain.entity.movie_entity import Movie


class IMovieStore(ABC):
    """Movie catalog storage. Also hands out movie and show ids."""

    @abstractmethod
    async def get_by_id(self, *, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Movie]:
        """All movies ordered by id"""
        pass

    @abstractmethod
    async def save(self, *, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def next_movie_id(self) -> int:
        pass

    @abstractmethod
    async def next_show_id(self) -> int:
        """Show ids are unique across all movies"""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Drop every movie and reset both id counters"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
