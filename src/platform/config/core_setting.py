from pathlib import Path
from typing import Dict, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Movie Ticket Booking System'
    VERSION: str = '1.0.0'
    DEBUG: bool = False  # Enables DEBUG level and file logging

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Pricing
    PRICE_PER_SEAT: float = 10.0
    COUPON_CODES: Dict[str, float] = {
        'SAVE10': 10.0,
        'SAVE20': 20.0,
        'STUDENT15': 15.0,
    }  # code -> discount percent, matched case-insensitively

    @field_validator('PRICE_PER_SEAT')
    @classmethod
    def validate_price_per_seat(cls, v: float) -> float:
        if v < 0:
            raise ValueError('PRICE_PER_SEAT cannot be negative')
        return v

    @field_validator('COUPON_CODES')
    @classmethod
    def validate_coupon_codes(cls, v: Dict[str, float]) -> Dict[str, float]:
        for code, percent in v.items():
            if not 0 < percent <= 100:
                raise ValueError(f'Coupon {code} must discount between 0 and 100 percent')
        return v

    # Seed the sample catalog when the app or console starts
    LOAD_SAMPLE_DATA: bool = True


settings = Settings()  # type: ignore
