"""
Digest facade.

Hashes byte buffers and text with any registered HashType and renders
digests as lowercase hex. Every function here is pure: inputs are only
read, and each call returns a freshly allocated result.

Hashing with HashType.INVALID (or an unknown name) raises
InvalidHashTypeError. The registry's metadata queries stay total.
"""

from __future__ import annotations

import binascii
import hmac
from typing import Union

from .core.exceptions import (
    DigestLengthError,
    EncodingFailureError,
    HexDecodeError,
    InvalidHashTypeError,
)
from .hashing import HashStrategy, HashType, default_registry
from .services.logging import get_logger

BytesLike = Union[bytes, bytearray, memoryview]
HashTypeLike = Union[HashType, str]

DEFAULT_ENCODING = "utf-8"


def _resolve(hash_type: HashTypeLike) -> tuple[HashType, HashStrategy]:
    """Map a HashType or canonical name to its strategy, rejecting INVALID."""
    resolved = default_registry.lookup(hash_type) if isinstance(hash_type, str) else hash_type
    strategy = default_registry.get(resolved)
    if strategy is None:
        get_logger().warning("Rejected hash request for invalid hash type %r", hash_type)
        raise InvalidHashTypeError(
            "Cannot hash with an invalid hash type", hash_type=hash_type
        )
    return resolved, strategy


def _check_bytes(data: object) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")


def hash_bytes(data: BytesLike, hash_type: HashTypeLike) -> bytes:
    """
    Compute the digest of data.

    Args:
        data: Bytes to hash; never modified
        hash_type: HashType member or canonical name ('SHA256', ...)

    Returns:
        Digest of exactly digest_length(hash_type) bytes

    Raises:
        InvalidHashTypeError: hash_type is INVALID or not a known algorithm
        TypeError: data is not bytes-like
    """
    _check_bytes(data)
    resolved, strategy = _resolve(hash_type)
    if isinstance(data, memoryview):
        # Primitives must see every byte, not len(data) items
        data = data.tobytes()

    get_logger().debug("Hashing %d bytes with %s", len(data), resolved.value)
    digest = strategy.compute(data)

    expected = default_registry.digest_length(resolved)
    if len(digest) != expected:
        get_logger().error(
            "%s primitive returned %d bytes, expected %d", resolved.value, len(digest), expected
        )
        raise DigestLengthError(
            "Digest length does not match registry",
            algorithm=resolved.value,
            expected=expected,
            actual=len(digest),
        )
    return digest


def hash_text(text: str, hash_type: HashTypeLike, encoding: str = DEFAULT_ENCODING) -> bytes:
    """
    Encode text and compute its digest.

    Raises:
        EncodingFailureError: text is not representable in encoding, or the
            codec is unknown
        InvalidHashTypeError: hash_type is INVALID or not a known algorithm
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    try:
        data = text.encode(encoding, errors="strict")
    except UnicodeError as e:
        position = getattr(e, "start", None)
        raise EncodingFailureError(
            f"Text is not representable in {encoding}",
            encoding=encoding,
            context={"position": position} if position is not None else None,
            cause=e,
        ) from e
    except LookupError as e:
        raise EncodingFailureError(
            f"Unknown text encoding: {encoding}", encoding=encoding, cause=e
        ) from e
    return hash_bytes(data, hash_type)


def hex_string(data: BytesLike) -> str:
    """Lowercase hex, two characters per byte, no prefix or separators."""
    _check_bytes(data)
    return bytes(data).hex()


def from_hex(text: str) -> bytes:
    """
    Decode a hex string produced by hex_string (either case accepted).

    Raises:
        HexDecodeError: odd length, whitespace or non-hex characters
    """
    try:
        return binascii.unhexlify(text)
    except (ValueError, TypeError) as e:
        raise HexDecodeError("Invalid hex string", cause=e) from e


def hash_hex(data: BytesLike, hash_type: HashTypeLike) -> str:
    return hex_string(hash_bytes(data, hash_type))


def hash_text_hex(text: str, hash_type: HashTypeLike, encoding: str = DEFAULT_ENCODING) -> str:
    return hex_string(hash_text(text, hash_type, encoding))


def verify_checksum(data: BytesLike, method: HashTypeLike, expected: str) -> bool:
    """
    Check data against a declared hex checksum.

    Args:
        data: Content to check
        method: Algorithm as HashType or canonical name
        expected: Declared hex digest, either case

    Returns:
        True if the digest matches

    Raises:
        InvalidHashTypeError: method is not a known algorithm
    """
    actual = hash_hex(data, method)
    candidate = expected.strip().lower()
    if not candidate.isascii():
        return False
    return hmac.compare_digest(actual, candidate)
