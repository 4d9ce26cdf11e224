"""Pydantic models for hashext configuration."""

from .config import (
    ConfigBaseModel,
    HashConfig,
    LoggingConfig,
)

__all__ = [
    "ConfigBaseModel",
    "HashConfig",
    "LoggingConfig",
]
