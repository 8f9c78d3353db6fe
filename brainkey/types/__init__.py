"""Type definitions for brainkey."""

# Common types
from ..types.common import (
    HexStr,
    WIF,
    PublicKeyText,
    Brainkey,
    PrivateKeyBytes,
    PublicKeyBytes,
)

# Value types
from ..types.keys import (
    KeyPair,
    AccountKeys,
    CompactSignature,
    Memo,
)

__all__ = [
    # Common
    "HexStr",
    "WIF",
    "PublicKeyText",
    "Brainkey",
    "PrivateKeyBytes",
    "PublicKeyBytes",

    # Values
    "KeyPair",
    "AccountKeys",
    "CompactSignature",
    "Memo",
]
