"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules are imported
- A fresh FastAPI TestClient per test (container singletons reset, sample catalog reloaded)
- Shared in-memory stores for unit tests

Architecture:
- Unit tests (test/**/unit/): build use cases directly on in-memory stores or AsyncMock ports
- Integration tests: go through the FastAPI app with TestClient
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['LOAD_SAMPLE_DATA'] = 'true'
    os.environ.setdefault('PRICE_PER_SEAT', '10.0')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.cinema.domain.entity.movie_entity import Movie  # noqa: E402
from src.service.cinema.domain.entity.show_entity import Show  # noqa: E402
from src.service.cinema.driven_adapter.repo.in_memory_booking_store import (  # noqa: E402
    InMemoryBookingStore,
)
from src.service.cinema.driven_adapter.repo.in_memory_movie_store import (  # noqa: E402
    InMemoryMovieStore,
)
from src.service.cinema.driven_adapter.state.show_lock_registry_impl import (  # noqa: E402
    ShowLockRegistryImpl,
)


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from src.main import app

    # Fresh stores, locks and settings for every test; lifespan reloads the sample catalog
    container.reset_singletons()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    container.reset_singletons()


# =============================================================================
# Unit Test Fixtures
# =============================================================================
@pytest.fixture
def movie_store() -> InMemoryMovieStore:
    return InMemoryMovieStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def show_lock_registry() -> ShowLockRegistryImpl:
    return ShowLockRegistryImpl()


@pytest.fixture
async def small_show_movie(movie_store: InMemoryMovieStore) -> Movie:
    """Movie 1 with a single 3-seat show (show id 1)"""
    movie = Movie(id=1, title='Small Screen', genre='Drama', duration=90)
    movie.add_show(Show(id=1, show_time='6:00 PM', total_seats=3))
    await movie_store.save(movie=movie)
    return movie


@pytest.fixture
def create_small_show(client: TestClient) -> Any:
    """Create a movie with one show of the given size via the API, return (movie_id, show_id)"""

    def _create(total_seats: int = 3, title: str = 'Small Screen') -> tuple[int, int]:
        movie = client.post('/api/movies', json={'title': title, 'genre': 'Drama', 'duration': 90})
        assert movie.status_code == 201, movie.text
        movie_id = movie.json()['id']

        show = client.post(
            f'/api/movies/{movie_id}/shows',
            json={'show_time': '6:00 PM', 'total_seats': total_seats},
        )
        assert show.status_code == 201, show.text
        return movie_id, show.json()['id']

    return _create
