from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class PathsConfig(BaseModel):
    """Filesystem layout for quiz content and the player preference file."""

    content_file: Path = Field(Path("data/categories.yaml"))
    preferences_file: Path = Field(Path("data/preferences/player.json"))


class LoggingConfig(BaseModel):
    """Controls for logging output and format."""

    level: str = Field("INFO")
    use_json: bool = False

    @field_validator("level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        """Upper-case the level name and reject names the logging module does not know."""
        normalized = value.upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return normalized


class Settings(BaseModel):
    """Top-level project configuration aggregating all sub-settings."""

    project_name: str = Field("Quizdeck")
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
