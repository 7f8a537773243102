"""Pydantic models for ef80escape configuration validation."""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class PayloadConfig(BaseModel):
    """How encoded text is wrapped when written as JSON.

    Example in config.json:
        "payload": {
            "field": "body",
            "ensure_ascii": true
        }
    """

    model_config = ConfigDict(extra="forbid")

    field: str = Field(default="data", min_length=1)
    """Name of the JSON field that carries the encoded text."""

    ensure_ascii: bool = False
    """Escape all non-ASCII characters (including U+EF00..U+EFFF) as \\uXXXX."""

    indent: int | None = Field(default=None, ge=0)
    """Indentation for JSON output. None = compact single line."""


class LoggingConfig(BaseModel):
    """Configuration for CLI logging."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "WARNING"
    """Minimum level written to stderr (and the log file, if set)."""

    file: str | None = None
    """Optional log file path. ~ is expanded."""

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("file")
    @classmethod
    def expand_file(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return os.path.abspath(os.path.expanduser(v))


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    payload: PayloadConfig = Field(default_factory=PayloadConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
