"""Hierarchical Deterministic key derivation for brainkey (hardened only)."""

import logging
from dataclasses import dataclass

from ..constants import SECP256K1, BIP32_SEED_KEY, HARDENED_OFFSET
from ..exceptions import ArithmeticFailure, InvalidInputError
from ..utils.encoding import hmac_sha512
from .keys import PrivateKey

__all__ = ["ExtendedKey", "parse_path"]

logger = logging.getLogger(__name__)

N = SECP256K1.n


def parse_path(path: str) -> list[int]:
    """
    Parse a derivation path like ``m/48'/0'/1'/0'/0'`` into child indexes.

    Only hardened components (``'`` or ``h`` suffix) are accepted; the
    returned indexes are the un-hardened numbers.

    Raises:
        InvalidInputError: If the path is malformed or has a non-hardened step
    """
    if not path or path in ("m", "M"):
        return []

    if path.startswith("m/") or path.startswith("M/"):
        path = path[2:]

    indexes = []
    for component in path.split("/"):
        if not component:
            continue

        if not (component.endswith("'") or component.endswith("h")):
            raise InvalidInputError(f"Only hardened derivation is supported: {component!r}")

        try:
            index = int(component[:-1])
        except ValueError as e:
            raise InvalidInputError(f"Invalid path component: {component!r}") from e

        if not 0 <= index < HARDENED_OFFSET:
            raise InvalidInputError(f"Path index out of range: {index}")

        indexes.append(index)

    return indexes


@dataclass(frozen=True)
class ExtendedKey:
    """BIP-32 style private node: 32-byte key and 32-byte chain code."""

    key: bytes
    chain_code: bytes

    def __post_init__(self) -> None:
        if len(self.key) != 32 or len(self.chain_code) != 32:
            raise InvalidInputError("Extended key needs a 32-byte key and a 32-byte chain code")

    @classmethod
    def from_seed(cls, seed: bytes) -> "ExtendedKey":
        """Create master node: ``HMAC-SHA512("Bitcoin seed", seed)``."""
        if len(seed) < 16 or len(seed) > 64:
            raise InvalidInputError("Seed must be between 16 and 64 bytes")

        h = hmac_sha512(BIP32_SEED_KEY, seed)
        return cls(key=h[:32], chain_code=h[32:])

    @classmethod
    def from_bytes(cls, data: bytes) -> "ExtendedKey":
        """Parse the 64-byte key || chain code serialization."""
        if len(data) != 64:
            raise InvalidInputError(f"Extended key must be 64 bytes, got {len(data)}")
        return cls(key=bytes(data[:32]), chain_code=bytes(data[32:]))

    def derive_hardened(self, index: int) -> "ExtendedKey":
        """
        Derive hardened child ``index'``.

        An invalid child (``IL >= N`` or a zero key) is an error. Moving on
        to ``index + 1`` would silently change the keys of affected seeds.

        Raises:
            ArithmeticFailure: If the derived scalar is invalid
        """
        if not 0 <= index < HARDENED_OFFSET:
            raise InvalidInputError(f"Child index out of range: {index}")

        data = b"\x00" + self.key + (index | HARDENED_OFFSET).to_bytes(4, "big")
        h = hmac_sha512(self.chain_code, data)

        il = int.from_bytes(h[:32], "big")
        if il >= N:
            raise ArithmeticFailure(f"Child key derivation invalid at index {index}")

        child = (il + int.from_bytes(self.key, "big")) % N
        if child == 0:
            raise ArithmeticFailure(f"Child key is zero at index {index}")

        return ExtendedKey(key=child.to_bytes(32, "big"), chain_code=h[32:])

    def derive_path(self, path: str) -> "ExtendedKey":
        """Derive using a hardened path like ``m/48'/0'/0'/0'/0'``."""
        logger.debug(f"Deriving path {path}")
        node = self
        for index in parse_path(path):
            node = node.derive_hardened(index)
        return node

    def private_key(self) -> PrivateKey:
        """Get private key object."""
        return PrivateKey(self.key)

    def __bytes__(self) -> bytes:
        return self.key + self.chain_code

    def __repr__(self) -> str:
        return f"ExtendedKey(chain_code={self.chain_code.hex()[:8]}...)"
