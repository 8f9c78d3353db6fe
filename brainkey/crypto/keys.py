"""Key management for brainkey."""

import secrets
from typing import Union

from ..constants import PUBLIC_KEY_PREFIX
from ..exceptions import InvalidInputError
from ..types.common import PrivateKeyBytes, PublicKeyBytes, WIF, PublicKeyText
from ..utils.encoding import (
    sha256,
    private_key_to_wif,
    wif_to_private_key,
    public_key_to_text,
    text_to_public_key,
)
from ..utils.validation import validate_private_key, validate_public_key
from .curve import Point, G, compress, decompress

__all__ = ["PrivateKey", "PublicKey"]


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Handles public key derivation and the WIF / hex export formats.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            InvalidInputError: If key format is invalid or out of range
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            return

        self._secret = PrivateKeyBytes(validate_private_key(key))

    @classmethod
    def create(cls) -> "PrivateKey":
        """
        Create new random private key.

        Returns:
            New PrivateKey instance
        """
        while True:
            key_bytes = secrets.token_bytes(32)
            try:
                return cls(key_bytes)
            except InvalidInputError:
                # Zero or >= N, astronomically rare
                continue

    @classmethod
    def from_digest(cls, digest: bytes) -> "PrivateKey":
        """
        Wrap a 32-byte digest as a private scalar without a range check.

        Used by the legacy password scheme, which has always taken the
        SHA-256 output as-is. Existing accounts depend on that.
        """
        if len(digest) != 32:
            raise InvalidInputError(f"Digest must be 32 bytes, got {len(digest)}")
        key = cls.__new__(cls)
        key._secret = PrivateKeyBytes(bytes(digest))
        return key

    @classmethod
    def from_seed(cls, seed: Union[str, bytes]) -> "PrivateKey":
        """
        Create private key from seed text, ``SHA-256(seed)`` taken as the scalar.

        Args:
            seed: Seed text or bytes (any length)

        Returns:
            New PrivateKey instance
        """
        return cls.from_digest(sha256(seed))

    @classmethod
    def from_wif(cls, wif: str) -> "PrivateKey":
        """
        Import private key from WIF.

        Raises:
            InvalidInputError: If WIF is invalid
        """
        return cls.from_digest(wif_to_private_key(wif))

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    @property
    def scalar(self) -> int:
        """Get private key as integer."""
        return int.from_bytes(self._secret, "big")

    def hex(self) -> str:
        """Get private key as hex string."""
        return self._secret.hex()

    def wif(self) -> WIF:
        """Export private key in Wallet Import Format."""
        return private_key_to_wif(self._secret)

    def public_key(self) -> "PublicKey":
        """Get corresponding compressed public key."""
        return PublicKey.from_point(G.multiply(self.scalar))

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)

    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars of hex for security
        hex_str = self.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey:
    """Compressed secp256k1 public key wrapper."""

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: 33-byte compressed key, its hex string, or another PublicKey

        Raises:
            InvalidInputError: If key format is invalid
            CurveViolation: If the key is not a point on the curve
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            self._bytes = key._bytes
            return

        key_bytes = validate_public_key(key)
        self._point = decompress(key_bytes)
        self._bytes = PublicKeyBytes(key_bytes)

    @classmethod
    def from_point(cls, point: Point) -> "PublicKey":
        """Create public key from a curve point."""
        key = cls.__new__(cls)
        key._bytes = PublicKeyBytes(compress(point))
        key._point = point
        return key

    @classmethod
    def from_text(cls, text: str, prefix: str = PUBLIC_KEY_PREFIX) -> "PublicKey":
        """Create public key from its prefixed Base58 text form."""
        return cls(text_to_public_key(text, prefix=prefix))

    @property
    def point(self) -> Point:
        """Get public key as curve point."""
        return self._point

    def to_bytes(self) -> PublicKeyBytes:
        """Get 33-byte compressed encoding."""
        return self._bytes

    def hex(self) -> str:
        """Get public key as hex string."""
        return self._bytes.hex()

    def to_text(self, prefix: str = PUBLIC_KEY_PREFIX) -> PublicKeyText:
        """Get prefixed Base58 text form, e.g. ``BTS6M...``."""
        return public_key_to_text(self._bytes, prefix=prefix)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def __str__(self) -> str:
        return self.to_text()

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.to_text()})"
