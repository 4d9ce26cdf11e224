"""
Custom exception hierarchy for hashext.

Registry lookups never raise; these exceptions are raised by the hashing
entry points and by configuration loading.
"""

from __future__ import annotations

from typing import Any


class HashextException(Exception):
    """
    Base exception for all hashext errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm, encoding, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether the caller can recover by changing its input
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(HashextException):
    """Base class for configuration-related errors."""

    pass


class ConfigValidationError(ConfigError, ValueError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: Any = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Hashing Errors
# =============================================================================


class InvalidHashTypeError(HashextException, ValueError):
    """
    Hashing was requested with the INVALID sentinel or an unknown algorithm.

    This is a caller contract violation. Metadata queries on the registry
    (digest_length, primitive) return 0/None instead of raising this.
    """

    exit_code: int = 2

    def __init__(
        self,
        message: str,
        *,
        hash_type: Any = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if hash_type is not None:
            ctx["hash_type"] = hash_type
        super().__init__(message, context=ctx, cause=cause)
        self.hash_type = hash_type


class EncodingFailureError(HashextException, ValueError):
    """
    Text could not be converted to bytes in the requested encoding.

    Raised for characters the codec cannot represent and for unknown
    codec names. Replacement bytes are never substituted.
    """

    def __init__(
        self,
        message: str,
        *,
        encoding: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if encoding:
            ctx["encoding"] = encoding
        super().__init__(message, context=ctx, cause=cause)
        self.encoding = encoding


class HexDecodeError(HashextException, ValueError):
    """Text is not a valid hex encoding (odd length or non-hex characters)."""

    pass


class DigestLengthError(HashextException):
    """
    A primitive returned a digest whose size differs from the registry.

    Indicates a broken primitive library, not bad input.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        if expected is not None:
            ctx["expected"] = expected
        if actual is not None:
            ctx["actual"] = actual
        super().__init__(message, context=ctx, cause=cause)
