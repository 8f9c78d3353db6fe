"""Common type definitions for brainkey."""

from typing import NewType

__all__ = [
    "HexStr",
    "WIF",
    "PublicKeyText",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Brainkey",
]

# Text encodings
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

WIF = NewType("WIF", str)
"""Base58 Wallet Import Format private key."""

PublicKeyText = NewType("PublicKeyText", str)
"""Prefixed Base58 public key, e.g. ``BTS6M...``."""

Brainkey = NewType("Brainkey", str)
"""Upper-case, single-space separated seed phrase."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33-byte compressed public key."""
