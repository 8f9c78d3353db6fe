"""
brainkey

Pure Python key derivation, compact signing and memo encryption for
Graphene (BitShares) wallets.
"""

from .crypto import (
    PrivateKey,
    PublicKey,
    ExtendedKey,
    generate_brainkey,
    normalize_brainkey,
    sign_hash,
    recover_public_key,
    verify_signature,
    encrypt_memo,
    decrypt_memo,
)
from .constants import Role, PUBLIC_KEY_PREFIX
from .exceptions import (
    BrainkeyError,
    InvalidInputError,
    ChecksumMismatchError,
    CryptoError,
    ArithmeticFailure,
    CurveViolation,
    RecoveryFailureError,
    SigningExhaustedError,
)
from .types import KeyPair, AccountKeys, CompactSignature, Memo
from .utils.encoding import (
    private_key_to_wif,
    wif_to_private_key,
    public_key_to_text,
    text_to_public_key,
)
from .wallet import (
    derive_keys_from_brainkey,
    derive_keys_from_password,
    wif_to_keys,
)

__version__ = "1.0.0"

__all__ = [
    # Key derivation
    "generate_brainkey",
    "normalize_brainkey",
    "derive_keys_from_brainkey",
    "derive_keys_from_password",
    "wif_to_keys",

    # Signatures
    "sign_hash",
    "recover_public_key",
    "verify_signature",

    # Memos
    "encrypt_memo",
    "decrypt_memo",

    # Codecs
    "private_key_to_wif",
    "wif_to_private_key",
    "public_key_to_text",
    "text_to_public_key",

    # Keys
    "PrivateKey",
    "PublicKey",
    "ExtendedKey",
    "Role",
    "PUBLIC_KEY_PREFIX",

    # Types
    "KeyPair",
    "AccountKeys",
    "CompactSignature",
    "Memo",

    # Exceptions
    "BrainkeyError",
    "InvalidInputError",
    "ChecksumMismatchError",
    "CryptoError",
    "ArithmeticFailure",
    "CurveViolation",
    "RecoveryFailureError",
    "SigningExhaustedError",
]
