"""
Hash type registry and algorithm strategies.

HashType is the closed selector; the registry maps each member to its
digest length and to the strategy that computes it.
"""

from .registry import (
    HashAlgorithmRegistry,
    default_registry,
    digest_length,
    lookup,
    primitive,
)
from .strategies import (
    HashStrategy,
    MD2Strategy,
    MD4Strategy,
    MD5Strategy,
    SHA1Strategy,
    SHA224Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)
from .types import CANONICAL_NAMES, HashType

__all__ = [
    "CANONICAL_NAMES",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "HashType",
    "MD2Strategy",
    "MD4Strategy",
    "MD5Strategy",
    "SHA1Strategy",
    "SHA224Strategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "default_registry",
    "digest_length",
    "lookup",
    "primitive",
]
