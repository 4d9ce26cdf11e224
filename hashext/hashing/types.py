"""
The closed set of supported hash algorithms.
"""

from __future__ import annotations

from enum import Enum


class HashType(Enum):
    """
    Hash algorithm selector.

    Member values are the canonical algorithm names. Consumers that persist
    or transmit a HashType by name must use exactly these strings.
    INVALID is the sentinel returned by failed name lookups and is never
    accepted by the hashing functions.
    """

    MD2 = "MD2"
    MD4 = "MD4"
    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    INVALID = "Invalid"

    @property
    def is_valid(self) -> bool:
        return self is not HashType.INVALID

    def __str__(self) -> str:
        return self.value


CANONICAL_NAMES: tuple[str, ...] = tuple(t.value for t in HashType if t.is_valid)
