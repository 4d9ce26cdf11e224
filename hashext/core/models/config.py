"""
Configuration models.

Provides Pydantic models for hashext configuration with validation.
"""

from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from ...hashing import HashType, lookup

# Type aliases
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML/env types
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        revalidate_instances="never",
    )


class HashConfig(ConfigBaseModel):
    """Hash configuration section."""

    default_algorithm: str = "SHA256"
    encoding: str = "utf-8"

    @field_validator("default_algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Accept only canonical names, matched exactly as lookup() does."""
        if lookup(v) is HashType.INVALID:
            raise ValueError(f"Unknown hash algorithm: {v}")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v
