from typing import List

from src.platform.exception.exceptions import InvalidInputError


def parse_seat_numbers(raw: str) -> List[int]:
    """
    Parse comma separated seat numbers, e.g. "1, 2,3" -> [1, 2, 3].

    Blank entries are skipped. Range, emptiness and duplicate checks are left to the
    booking workflow.
    """
    seat_numbers: List[int] = []
    for token in (raw or '').split(','):
        token = token.strip()
        if not token:
            continue
        try:
            seat_numbers.append(int(token))
        except ValueError:
            raise InvalidInputError(f'Invalid seat number: {token!r}') from None
    return seat_numbers
