class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class InvalidInputError(DomainError):
    """Blank customer name, malformed seat list, bad catalog input."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatUnavailableError(ConflictError):
    def __init__(self, message: str, *, seat_numbers: list[int] | None = None) -> None:
        self.seat_numbers = seat_numbers or []
        super().__init__(message)
