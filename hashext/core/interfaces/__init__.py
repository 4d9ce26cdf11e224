"""Abstract interfaces for hashext services."""

from .logger import ILogger

__all__ = ["ILogger"]
