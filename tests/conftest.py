"""
Shared pytest fixtures for hashext tests.
"""

import os

import pytest

from hashext.services.logging import set_logger


@pytest.fixture(autouse=True)
def isolate_hashext(monkeypatch: pytest.MonkeyPatch):
    """Clear HASHEXT_* environment variables and reset the process logger."""
    for key in list(os.environ):
        if key.upper().startswith("HASHEXT_"):
            monkeypatch.delenv(key)
    set_logger(None)
    yield
    set_logger(None)
