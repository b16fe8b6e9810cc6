from datetime import datetime

from pydantic import BaseModel


class SystemStatusResponse(BaseModel):
    status: str
    total_movies: int
    total_bookings: int
    price_per_seat: float
    timestamp: datetime


class SystemHealthResponse(BaseModel):
    status: str
    service: str


class SystemInfoResponse(BaseModel):
    name: str
    version: str
    description: str
    features: list[str]


class InitDataResponse(BaseModel):
    message: str
    movies_loaded: int
