"""Fixed catalog loaded at startup and on reset."""

from typing import List, Tuple

import attrs


@attrs.define(frozen=True)
class ShowSeed:
    show_time: str
    total_seats: int


@attrs.define(frozen=True)
class MovieSeed:
    title: str
    genre: str
    duration: int
    shows: Tuple[ShowSeed, ...]


SAMPLE_CATALOG: List[MovieSeed] = [
    MovieSeed(
        title='The Matrix Resurrections',
        genre='Sci-Fi',
        duration=148,
        shows=(
            ShowSeed(show_time='2:00 PM', total_seats=15),
            ShowSeed(show_time='5:00 PM', total_seats=15),
            ShowSeed(show_time='8:00 PM', total_seats=15),
        ),
    ),
    MovieSeed(
        title='Inception',
        genre='Thriller',
        duration=148,
        shows=(
            ShowSeed(show_time='3:00 PM', total_seats=20),
            ShowSeed(show_time='6:00 PM', total_seats=20),
        ),
    ),
    MovieSeed(
        title='Avengers Endgame',
        genre='Action',
        duration=181,
        shows=(
            ShowSeed(show_time='1:00 PM', total_seats=25),
            ShowSeed(show_time='7:00 PM', total_seats=25),
        ),
    ),
]
