"""Runtime services shared by the hashext core and CLI."""

from .logging import HashextLogger, NullLogger, configure_logging, get_logger, set_logger

__all__ = [
    "HashextLogger",
    "NullLogger",
    "configure_logging",
    "get_logger",
    "set_logger",
]
