from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.app.interface.i_show_lock_registry import IShowLockRegistry
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.show_entity import Show
from src.service.cinema.domain.sample_catalog import SAMPLE_CATALOG, MovieSeed


class ResetSampleDataUseCase:
    """
    Clear catalog and ledger, reset id counters, then load the sample catalog.

    Runs under hold_all(), so no booking or cancellation straddles the swap.
    Used at startup (LOAD_SAMPLE_DATA), by the console and by POST /api/system/init-data.
    """

    def __init__(
        self,
        *,
        movie_store: IMovieStore,
        booking_store: IBookingStore,
        show_lock_registry: IShowLockRegistry,
        catalog: List[MovieSeed] = SAMPLE_CATALOG,
    ) -> None:
        self.movie_store = movie_store
        self.booking_store = booking_store
        self.show_lock_registry = show_lock_registry
        self.catalog = catalog

    @classmethod
    @inject
    def depends(
        cls,
        movie_store: IMovieStore = Depends(Provide[Container.movie_store]),
        booking_store: IBookingStore = Depends(Provide[Container.booking_store]),
        show_lock_registry: IShowLockRegistry = Depends(Provide[Container.show_lock_registry]),
    ) -> Self:
        return cls(
            movie_store=movie_store,
            booking_store=booking_store,
            show_lock_registry=show_lock_registry,
        )

    @Logger.io
    async def execute(self) -> List[Movie]:
        async with self.show_lock_registry.hold_all():
            await self.booking_store.clear()
            await self.movie_store.clear()

            movies: List[Movie] = []
            for seed in self.catalog:
                movies.append(await self._load_seed(seed))

        Logger.base.info(f'🌱 [RESET] Loaded {len(movies)} sample movies')
        return movies

    async def _load_seed(self, seed: MovieSeed) -> Movie:
        movie = Movie(
            id=await self.movie_store.next_movie_id(),
            title=seed.title,
            genre=seed.genre,
            duration=seed.duration,
        )
        for show_seed in seed.shows:
            movie.add_show(
                Show(
                    id=await self.movie_store.next_show_id(),
                    show_time=show_seed.show_time,
                    total_seats=show_seed.total_seats,
                )
            )
        await self.movie_store.save(movie=movie)
        return movie
