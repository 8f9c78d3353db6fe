"""Encoding and decoding utilities for brainkey."""

import hashlib
import hmac
from typing import Union

from ..constants import PUBLIC_KEY_PREFIX, WIF_VERSION, WIF_COMPRESSED_FLAG
from ..crypto.ripemd160 import ripemd160
from ..exceptions import InvalidInputError, ChecksumMismatchError
from ..types.common import HexStr, WIF, PublicKeyText

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "bytes_to_int",
    "sha256",
    "double_sha256",
    "sha512",
    "hmac_sha512",
    "ripemd160",
    "encode_base58",
    "decode_base58",
    "private_key_to_wif",
    "wif_to_private_key",
    "public_key_to_text",
    "text_to_public_key",
]

# Constants
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        InvalidInputError: If hex string is invalid
    """
    try:
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """Convert bytes to hex string, optionally with 0x prefix."""
    hex_str = bytes(data).hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def bytes_to_int(
    data: bytes,
    byteorder: str = "big",
    signed: bool = False
) -> int:
    """Convert bytes to integer."""
    return int.from_bytes(data, byteorder=byteorder, signed=signed)


def sha256(data: bytes) -> bytes:
    """Single SHA-256. ``str`` input is UTF-8 encoded."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).digest()


def double_sha256(data: bytes) -> bytes:
    """Perform double SHA256 hash."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def sha512(data: bytes) -> bytes:
    """Single SHA-512."""
    return hashlib.sha512(data).digest()


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    """HMAC-SHA512 of ``data`` under ``key``."""
    return hmac.new(key, data, hashlib.sha512).digest()


def encode_base58(data: bytes) -> str:
    """
    Encode bytes as Base58 string.

    Every leading zero byte becomes one leading ``"1"``, so all-zero input
    round-trips exactly and ``b""`` encodes to ``""``.

    Args:
        data: Bytes to encode

    Returns:
        Base58 encoded string
    """
    n = bytes_to_int(data, byteorder="big")

    encoded = ""
    while n:
        n, remainder = divmod(n, 58)
        encoded = BASE58_ALPHABET[remainder] + encoded

    leading_zeros = len(data) - len(bytes(data).lstrip(b"\x00"))
    return BASE58_ALPHABET[0] * leading_zeros + encoded


def decode_base58(string: str) -> bytes:
    """
    Decode Base58 string to bytes.

    Args:
        string: Base58 string

    Returns:
        Decoded bytes

    Raises:
        InvalidInputError: If string contains invalid characters
    """
    n = 0
    for char in string:
        try:
            n = n * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise InvalidInputError(f"Invalid Base58 character: {char!r}") from None

    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    leading_zeros = len(string) - len(string.lstrip(BASE58_ALPHABET[0]))
    return b"\x00" * leading_zeros + body


def private_key_to_wif(private_key: bytes) -> WIF:
    """
    Export a raw private key in uncompressed Wallet Import Format.

    Layout: ``0x80 || key(32) || first4(sha256d(0x80 || key))``.

    Raises:
        InvalidInputError: If the key is not 32 bytes
    """
    if len(private_key) != 32:
        raise InvalidInputError(f"Private key must be 32 bytes, got {len(private_key)}")

    payload = bytes([WIF_VERSION]) + bytes(private_key)
    checksum = double_sha256(payload)[:4]
    return WIF(encode_base58(payload + checksum))


def wif_to_private_key(wif: str) -> bytes:
    """
    Import a private key from WIF.

    Both the uncompressed (37 decoded bytes) and compressed (38 decoded
    bytes, ``0x01`` flag before the checksum) layouts are accepted.

    Args:
        wif: Wallet Import Format string

    Returns:
        32-byte private key

    Raises:
        InvalidInputError: If length, version byte or flag is wrong
        ChecksumMismatchError: If the checksum does not match
    """
    if not isinstance(wif, str):
        raise InvalidInputError(f"WIF must be a string, got {type(wif).__name__}")
    if not 51 <= len(wif) <= 52:
        raise InvalidInputError(f"Invalid WIF string length: {len(wif)}, expected 51-52 characters")

    data = decode_base58(wif)
    if len(data) not in (37, 38):
        raise InvalidInputError(f"Invalid WIF decoded length: {len(data)}, expected 37 or 38")

    payload, checksum = data[:-4], data[-4:]
    if not hmac.compare_digest(double_sha256(payload)[:4], checksum):
        raise ChecksumMismatchError("Invalid WIF checksum")

    if payload[0] != WIF_VERSION:
        raise InvalidInputError(f"Invalid WIF version byte: {payload[0]:#x}")
    if len(payload) == 34 and payload[33] != WIF_COMPRESSED_FLAG:
        raise InvalidInputError(f"Invalid compression flag: {payload[33]:#x}")

    return payload[1:33]


def public_key_to_text(public_key: bytes, prefix: str = PUBLIC_KEY_PREFIX) -> PublicKeyText:
    """
    Encode a compressed public key in the chain's text format.

    Layout: ``prefix + Base58(pubkey(33) || first4(RIPEMD160(pubkey)))``.

    Raises:
        InvalidInputError: If the key is not 33 bytes
    """
    if len(public_key) != 33:
        raise InvalidInputError(f"Public key must be 33 bytes, got {len(public_key)}")

    public_key = bytes(public_key)
    checksum = ripemd160(public_key)[:4]
    return PublicKeyText(prefix + encode_base58(public_key + checksum))


def text_to_public_key(text: str, prefix: str = PUBLIC_KEY_PREFIX) -> bytes:
    """
    Decode a prefixed public key string to 33 compressed bytes.

    Raises:
        InvalidInputError: If prefix or length is wrong
        ChecksumMismatchError: If the RIPEMD-160 checksum does not match
    """
    if not isinstance(text, str) or not text.startswith(prefix):
        raise InvalidInputError(f"Public key must start with {prefix!r}")

    data = decode_base58(text[len(prefix):])
    if len(data) != 37:
        raise InvalidInputError(f"Invalid public key length: {len(data)}, expected 37")

    public_key, checksum = data[:33], data[33:]
    if not hmac.compare_digest(ripemd160(public_key)[:4], checksum):
        raise ChecksumMismatchError("Invalid public key checksum")

    return public_key
