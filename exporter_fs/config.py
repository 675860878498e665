"""Settings for exporter-fs mocks, read from EXPORTER_FS_MOCK_* variables."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MockSettings(BaseSettings):
    """Mock behaviour settings."""

    strict: bool = Field(default=True, description="Unexpected calls also fail verification")
    log_level: str = Field(default="WARNING", description="Level of the mock logger")
    report_width: int = Field(default=120, ge=40, description="Width of rendered reports")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(env_prefix="EXPORTER_FS_MOCK_")
