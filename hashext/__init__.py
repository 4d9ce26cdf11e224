"""
hashext - MD/SHA digests over bytes and text, rendered as lowercase hex.

A single HashType selector drives dispatch to the right primitive and the
right digest length. Primitives come from hashlib and pycryptodome.

Example:
    from hashext import HashType, hash_text, hex_string

    hex_string(hash_text("abc", HashType.MD5))
    # '900150983cd24fb0d6963f7d28e17f72'
"""

from .core.exceptions import (
    ConfigError,
    ConfigValidationError,
    DigestLengthError,
    EncodingFailureError,
    HashextException,
    HexDecodeError,
    InvalidHashTypeError,
)
from .digest import (
    DEFAULT_ENCODING,
    from_hex,
    hash_bytes,
    hash_hex,
    hash_text,
    hash_text_hex,
    hex_string,
    verify_checksum,
)
from .hashing import (
    CANONICAL_NAMES,
    HashAlgorithmRegistry,
    HashStrategy,
    HashType,
    digest_length,
    lookup,
    primitive,
)

__version__ = "0.1.0"

__all__ = [
    "CANONICAL_NAMES",
    "DEFAULT_ENCODING",
    "ConfigError",
    "ConfigValidationError",
    "DigestLengthError",
    "EncodingFailureError",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "HashType",
    "HashextException",
    "HexDecodeError",
    "InvalidHashTypeError",
    "digest_length",
    "from_hex",
    "hash_bytes",
    "hash_hex",
    "hash_text",
    "hash_text_hex",
    "hex_string",
    "lookup",
    "primitive",
    "verify_checksum",
]
