"""
Hash algorithm registry.

Single source of truth mapping a HashType to its canonical name, digest
length and primitive. The metadata queries here are total: they never
raise, returning INVALID / 0 / None for anything they do not recognise.
"""

from __future__ import annotations

from typing import Any

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
from .types import HashType


class HashAlgorithmRegistry:
    """
    Registry of hash algorithm strategies keyed by HashType.

    The table is filled once in the constructor and only read afterwards,
    so a single instance can be shared between threads.

    Example:
        registry = HashAlgorithmRegistry()
        registry.digest_length(HashType.SHA1)      # 20
        registry.get(HashType.MD5).compute(b"abc")
    """

    def __init__(self) -> None:
        self._strategies: dict[HashType, HashStrategy] = {}
        self._by_name: dict[str, HashType] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        self._register(HashType.MD2, MD2Strategy())
        self._register(HashType.MD4, MD4Strategy())
        self._register(HashType.MD5, MD5Strategy())
        self._register(HashType.SHA1, SHA1Strategy())
        self._register(HashType.SHA224, SHA224Strategy())
        self._register(HashType.SHA256, SHA256Strategy())
        self._register(HashType.SHA384, SHA384Strategy())
        self._register(HashType.SHA512, SHA512Strategy())

    def _register(self, hash_type: HashType, strategy: HashStrategy) -> None:
        if strategy.algorithm_name != hash_type.value:
            raise ValueError(
                f"Strategy {strategy!r} does not implement {hash_type.value}"
            )
        self._strategies[hash_type] = strategy
        self._by_name[hash_type.value] = hash_type

    def lookup(self, name: Any) -> HashType:
        """
        Resolve a canonical algorithm name to its HashType.

        Matching is exact and case-sensitive ("md5" is not "MD5").

        Args:
            name: Canonical name such as 'SHA256'

        Returns:
            The matching HashType, or HashType.INVALID
        """
        if not isinstance(name, str):
            return HashType.INVALID
        return self._by_name.get(name, HashType.INVALID)

    def get(self, hash_type: Any) -> HashStrategy | None:
        """
        Get the strategy for a HashType.

        Returns:
            HashStrategy, or None for INVALID and unrecognised values
        """
        if not isinstance(hash_type, HashType):
            return None
        return self._strategies.get(hash_type)

    def digest_length(self, hash_type: Any) -> int:
        """Digest size in bytes, or 0 for INVALID and unrecognised values."""
        strategy = self.get(hash_type)
        if strategy is None:
            return 0
        return strategy.digest_size

    @property
    def available_algorithms(self) -> list[HashType]:
        """Registered hash types in declaration order."""
        return list(self._strategies.keys())

    def __contains__(self, hash_type: object) -> bool:
        return isinstance(hash_type, HashType) and hash_type in self._strategies


default_registry = HashAlgorithmRegistry()


def lookup(name: Any) -> HashType:
    """Resolve a canonical name through the default registry."""
    return default_registry.lookup(name)


def digest_length(hash_type: Any) -> int:
    """Digest length in bytes from the default registry; 0 if unknown."""
    return default_registry.digest_length(hash_type)


def primitive(hash_type: Any) -> HashStrategy | None:
    """Algorithm handle from the default registry; None if unknown."""
    return default_registry.get(hash_type)
