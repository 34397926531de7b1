# greeter/common/settings.py
from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    # -------- App --------
    app_name: str = "greeter"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="GREETER_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        s = str(v).strip().upper()
        if s not in _LEVELS:
            raise ValueError(f"unknown log level: {v!r}")
        return s

    @computed_field  # type: ignore[misc]
    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached):
        from greeter.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()
