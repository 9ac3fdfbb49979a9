"""Application configuration via environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Literal, Optional

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: LogLevel = "info"

    # Form catalog
    FORMS_DIR: Optional[str] = None  # Extra definitions, merged over the bundled ones

    # Validator defaults when a field leaves out min_length
    DEFAULT_PASSWORD_MIN_LENGTH: int = 6
    DEFAULT_CODE_LENGTH: int = 4

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _lowercase_level(cls, value):
        # Accept INFO / Info from the environment
        return value.lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
