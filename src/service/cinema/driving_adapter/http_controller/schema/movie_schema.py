from typing import List

from pydantic import BaseModel, ConfigDict, Field

from src.service.cinema.domain.entity.movie_entity import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_GENRE,
    Movie,
)
from src.service.cinema.domain.entity.show_entity import Show


class MovieCreateRequest(BaseModel):
    title: str
    genre: str = DEFAULT_GENRE
    duration: int = DEFAULT_DURATION_MINUTES

    model_config = ConfigDict(
        json_schema_extra={'example': {'title': 'Dune', 'genre': 'Sci-Fi', 'duration': 155}}
    )


class ShowCreateRequest(BaseModel):
    show_time: str
    total_seats: int

    model_config = ConfigDict(
        json_schema_extra={'example': {'show_time': '9:30 PM', 'total_seats': 30}}
    )


class ShowResponse(BaseModel):
    id: int
    show_time: str
    total_seats: int
    booked_seats: List[int]
    available_seat_count: int
    occupancy_percentage: float

    @classmethod
    def from_entity(cls, show: Show) -> 'ShowResponse':
        return cls(
            id=show.id,
            show_time=show.show_time,
            total_seats=show.total_seats,
            booked_seats=sorted(show.booked_seats),
            available_seat_count=show.available_seat_count,
            occupancy_percentage=round(show.occupancy_percentage(), 2),
        )


class MovieResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'title': 'The Matrix Resurrections',
                'genre': 'Sci-Fi',
                'duration': 148,
                'shows': [
                    {
                        'id': 1,
                        'show_time': '2:00 PM',
                        'total_seats': 15,
                        'booked_seats': [1, 2],
                        'available_seat_count': 13,
                        'occupancy_percentage': 13.33,
                    }
                ],
            }
        }
    )

    id: int
    title: str
    genre: str
    duration: int
    shows: List[ShowResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, movie: Movie) -> 'MovieResponse':
        return cls(
            id=movie.id,
            title=movie.title,
            genre=movie.genre,
            duration=movie.duration,
            shows=[ShowResponse.from_entity(show) for show in movie.shows],
        )


class AvailableSeatsResponse(BaseModel):
    movie_id: int
    show_id: int
    show_time: str
    total_seats: int
    available_seats: List[int]
