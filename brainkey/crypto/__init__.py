"""Cryptographic primitives for brainkey."""

from ..crypto.arith import mod, mod_inverse, mod_pow
from ..crypto.curve import Point, INFINITY, G, compress, decompress, lift_x, scalar_base_mult
from ..crypto.ripemd160 import RIPEMD160, ripemd160
from ..crypto.keys import PrivateKey, PublicKey
from ..crypto.hd import ExtendedKey, parse_path
from ..crypto.bip39 import generate_brainkey, normalize_brainkey, brainkey_to_seed
from ..crypto.signature import (
    sign_hash,
    recover_public_key,
    verify_signature,
    is_canonical,
    sign_message,
    verify_message,
)
from ..crypto.memo import encrypt_memo, decrypt_memo, shared_secret

__all__ = [
    # Arithmetic
    "mod",
    "mod_inverse",
    "mod_pow",

    # Curve
    "Point",
    "INFINITY",
    "G",
    "compress",
    "decompress",
    "lift_x",
    "scalar_base_mult",

    # Digest
    "RIPEMD160",
    "ripemd160",

    # Keys
    "PrivateKey",
    "PublicKey",
    "ExtendedKey",
    "parse_path",
    "generate_brainkey",
    "normalize_brainkey",
    "brainkey_to_seed",

    # Signatures
    "sign_hash",
    "recover_public_key",
    "verify_signature",
    "is_canonical",
    "sign_message",
    "verify_message",

    # Memos
    "encrypt_memo",
    "decrypt_memo",
    "shared_secret",
]
