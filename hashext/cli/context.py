"""
Click context extension for hashext CLI.

Provides HashextContext dataclass that holds settings passed through the
Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.settings import HashextSettings, load_settings
from ..services.logging import configure_logging


@dataclass
class HashextContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Loaded settings (defaults, config file, environment)
    """

    cwd: Path
    settings: HashextSettings

    @classmethod
    def create(cls, cwd: Path | None = None) -> HashextContext:
        """Load settings for cwd and install the configured logger."""
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        logger = configure_logging(settings)
        if settings.config_error:
            logger.warning("%s", settings.config_error)
        elif settings.config_file:
            logger.debug("Loaded config from %s", settings.config_file)

        return cls(cwd=cwd, settings=settings)

    @property
    def default_algorithm(self) -> str:
        return self.settings.hash.default_algorithm

    @property
    def encoding(self) -> str:
        return self.settings.hash.encoding
