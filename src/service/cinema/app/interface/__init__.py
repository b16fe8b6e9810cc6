"""Application layer interfaces (Ports)"""

from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.app.interface.i_show_lock_registry import IShowLockRegistry

__all__ = [
    'IBookingStore',
    'IMovieStore',
    'IShowLockRegistry',
]
