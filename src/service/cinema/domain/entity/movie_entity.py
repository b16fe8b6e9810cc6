from typing import List, Optional

import attrs

from src.platform.exception.exceptions import InvalidInputError
from src.service.cinema.domain.entity.show_entity import Show


DEFAULT_GENRE = 'General'
DEFAULT_DURATION_MINUTES = 120


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise InvalidInputError(f'Movie {attribute.name} cannot be empty')


def _validate_duration(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise InvalidInputError('Movie duration must be positive')


@attrs.define
class Movie:
    id: int
    title: str = attrs.field(validator=_validate_non_empty_string)
    genre: str = attrs.field(default=DEFAULT_GENRE, validator=_validate_non_empty_string)
    duration: int = attrs.field(default=DEFAULT_DURATION_MINUTES, validator=_validate_duration)
    shows: List[Show] = attrs.field(factory=list)

    def add_show(self, show: Show) -> Show:
        self.shows.append(show)
        return show

    def find_show_by_id(self, show_id: int) -> Optional[Show]:
        for show in self.shows:
            if show.id == show_id:
                return show
        return None
