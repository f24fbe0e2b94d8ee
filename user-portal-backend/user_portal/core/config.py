# File: user_portal/core/config.py

import os
from functools import lru_cache

from pydantic import BaseModel, field_validator


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "User Portal"
    VERSION: str = "0.1.0"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./user_portal.db")
    database_echo: bool = _env_flag("DATABASE_ECHO")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Password hashing cost (PBKDF2 rounds)
    password_iterations: int = int(os.getenv("PASSWORD_ITERATIONS", "100000"))

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
