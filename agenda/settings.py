from typing import Literal

import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    root_path: str = ""

    debug: bool = False
    reload: bool = False

    timezone: str = "America/Sao_Paulo"
    horizon_days: int = Field(30, ge=1, le=366)

    sentry_dsn: str | None = None
    sentry_environment: str = "test"

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        if value not in pytz.all_timezones_set:
            raise ValueError(f"unknown timezone: {value}")
        return value


settings = Settings()
