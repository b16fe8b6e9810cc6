"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.cinema.domain.value_object.coupon import CouponBook
from src.service.cinema.driven_adapter.repo.in_memory_booking_store import InMemoryBookingStore
from src.service.cinema.driven_adapter.repo.in_memory_movie_store import InMemoryMovieStore
from src.service.cinema.driven_adapter.state.show_lock_registry_impl import ShowLockRegistryImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Pricing rules derived from configuration
    coupon_book = providers.Singleton(
        CouponBook.from_mapping,
        codes=config_service.provided.COUPON_CODES,
    )

    # Stores (process-lifetime state, reset_singletons() gives a clean slate)
    movie_store = providers.Singleton(InMemoryMovieStore)
    booking_store = providers.Singleton(InMemoryBookingStore)

    # Per-show locks guarding check -> book -> store
    show_lock_registry = providers.Singleton(ShowLockRegistryImpl)


container = Container()


def setup() -> None:
    container.config_service()
    container.coupon_book()


def cleanup() -> None:
    container.reset_singletons()
