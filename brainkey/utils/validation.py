"""Validation utilities for brainkey."""

import re
from typing import Union

from ..constants import SECP256K1, PUBLIC_KEY_PREFIX, COMPACT_HEADER_RANGE
from ..exceptions import BrainkeyError, InvalidInputError
from ..utils.encoding import text_to_public_key, wif_to_private_key

__all__ = [
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "validate_message_hash",
    "validate_compact_signature",
    "is_valid_wif",
    "is_valid_public_key_text",
]

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


def _coerce_bytes(key: Union[str, bytes, bytearray], what: str) -> bytes:
    if isinstance(key, str):
        if key.startswith("0x"):
            key = key[2:]
        if not HEX_PATTERN.match(key):
            raise InvalidInputError(f"{what} must be hexadecimal")
        try:
            return bytes.fromhex(key)
        except ValueError as e:
            raise InvalidInputError(f"Invalid hex {what.lower()}: {e}") from e
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise InvalidInputError(f"{what} must be bytes or hex string, got {type(key).__name__}")


def is_valid_private_key(key: Union[str, bytes]) -> bool:
    """
    Check if private key format is valid.

    Args:
        key: Private key as hex string or bytes

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_private_key(key)
        return True
    except InvalidInputError:
        return False


def validate_private_key(key: Union[str, bytes]) -> bytes:
    """
    Validate private key and return as bytes.

    Args:
        key: Private key as hex string or bytes

    Returns:
        Private key as 32 bytes

    Raises:
        InvalidInputError: If private key is invalid
    """
    key = _coerce_bytes(key, "Private key")

    if len(key) != 32:
        raise InvalidInputError(f"Private key must be 32 bytes, got {len(key)}")

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise InvalidInputError("Private key cannot be zero")
    if key_int >= SECP256K1.n:
        raise InvalidInputError("Private key exceeds curve order")

    return key


def is_valid_public_key(key: Union[str, bytes]) -> bool:
    """Check if compressed public key format is valid."""
    try:
        validate_public_key(key)
        return True
    except InvalidInputError:
        return False


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate compressed public key and return as bytes.

    Only the format is checked here; whether the point lies on the curve
    is decided when it is decompressed.

    Args:
        key: Public key as hex string or bytes

    Returns:
        33-byte compressed public key

    Raises:
        InvalidInputError: If public key is invalid
    """
    key = _coerce_bytes(key, "Public key")

    if len(key) != 33:
        raise InvalidInputError(f"Public key must be 33 bytes, got {len(key)}")
    if key[0] not in (0x02, 0x03):
        raise InvalidInputError("Compressed public key must start with 0x02 or 0x03")

    return key


def validate_message_hash(message_hash: Union[str, bytes]) -> bytes:
    """Validate a 32-byte digest to sign or recover against."""
    message_hash = _coerce_bytes(message_hash, "Message hash")
    if len(message_hash) != 32:
        raise InvalidInputError(f"Message hash must be 32 bytes, got {len(message_hash)}")
    return message_hash


def validate_compact_signature(signature: Union[str, bytes]) -> bytes:
    """Validate length and header of a 65-byte compact signature."""
    signature = _coerce_bytes(signature, "Signature")
    if len(signature) != 65:
        raise InvalidInputError(f"Compact signature must be 65 bytes, got {len(signature)}")
    if signature[0] not in COMPACT_HEADER_RANGE:
        raise InvalidInputError(f"Invalid compact signature header: {signature[0]}")
    return signature


def is_valid_wif(wif: str) -> bool:
    """Check that a WIF string decodes with a valid checksum and version."""
    try:
        wif_to_private_key(wif)
        return True
    except BrainkeyError:
        return False


def is_valid_public_key_text(text: str, prefix: str = PUBLIC_KEY_PREFIX) -> bool:
    """Check that a prefixed public key string decodes with a valid checksum."""
    try:
        text_to_public_key(text, prefix=prefix)
        return True
    except BrainkeyError:
        return False
