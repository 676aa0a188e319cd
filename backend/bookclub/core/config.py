from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"), extra="ignore"
    )

    app_name: str = Field(default="bookclub_awards")
    app_env: str = Field(default="dev")
    log_level: str = Field(default="INFO")
    version: str = Field(default="0.1.0")
    # As-of date for tenure; the anniversary ceremony day.
    reference_date: date = Field(default=date(2025, 11, 21))
    club_start_date: date = Field(default=date(2019, 11, 16))
    # None -> packaged data/meetings.json
    roster_path: Optional[Path] = Field(default=None)
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://frontend:5173",
        ]
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
