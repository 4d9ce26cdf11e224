"""
Hash algorithm strategy implementations.

Each strategy wraps one digest primitive from an external library behind a
single compute(bytes) -> bytes operation. MD5 and the SHA family come from
hashlib; MD2 and MD4 come from pycryptodome because OpenSSL 3 builds of
hashlib no longer ship them.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

from Crypto.Hash import MD2, MD4


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Canonical algorithm name (e.g., 'SHA256')
    - digest_size: Digest length in bytes
    - create_hasher(): Factory method for a fresh hasher object
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return canonical algorithm name."""
        pass

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Return digest length in bytes."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        pass

    def compute(self, data: bytes) -> bytes:
        """Hash the full byte range of data and return the digest."""
        hasher = self.create_hasher()
        hasher.update(data)
        return hasher.digest()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MD2Strategy(HashStrategy):
    """MD2 hashing strategy - legacy, backed by pycryptodome."""

    @property
    def algorithm_name(self) -> str:
        return "MD2"

    @property
    def digest_size(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        return MD2.new()


class MD4Strategy(HashStrategy):
    """MD4 hashing strategy - legacy, backed by pycryptodome."""

    @property
    def algorithm_name(self) -> str:
        return "MD4"

    @property
    def digest_size(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        return MD4.new()


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm_name(self) -> str:
        return "MD5"

    @property
    def digest_size(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        return hashlib.md5(usedforsecurity=False)


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy."""

    @property
    def algorithm_name(self) -> str:
        return "SHA1"

    @property
    def digest_size(self) -> int:
        return 20

    def create_hasher(self) -> Any:
        return hashlib.sha1(usedforsecurity=False)


class SHA224Strategy(HashStrategy):
    """SHA-224 hashing strategy - truncated SHA-256."""

    @property
    def algorithm_name(self) -> str:
        return "SHA224"

    @property
    def digest_size(self) -> int:
        return 28

    def create_hasher(self) -> Any:
        return hashlib.sha224()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm_name(self) -> str:
        return "SHA256"

    @property
    def digest_size(self) -> int:
        return 32

    def create_hasher(self) -> Any:
        return hashlib.sha256()


class SHA384Strategy(HashStrategy):
    """SHA-384 hashing strategy - truncated SHA-512."""

    @property
    def algorithm_name(self) -> str:
        return "SHA384"

    @property
    def digest_size(self) -> int:
        return 48

    def create_hasher(self) -> Any:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm_name(self) -> str:
        return "SHA512"

    @property
    def digest_size(self) -> int:
        return 64

    def create_hasher(self) -> Any:
        return hashlib.sha512()
