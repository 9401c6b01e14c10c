"""Service settings read from ``EXTREMA_*`` environment variables."""
from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    max_values: int = Field(default=100_000, ge=1)  # Largest accepted input sequence

    @classmethod
    def load(cls) -> "Settings":
        env = {
            "log_level": os.environ.get("EXTREMA_LOG_LEVEL"),
            "host": os.environ.get("EXTREMA_HOST"),
            "port": os.environ.get("EXTREMA_PORT"),
            "max_values": os.environ.get("EXTREMA_MAX_VALUES"),
        }
        return cls(**{k: v for k, v in env.items() if v is not None})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.load()
