"""Constants and chain configuration for brainkey."""

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "CurveParams",
    "SECP256K1",
    "Role",
    "ROLE_PATH_TEMPLATE",
    "PUBLIC_KEY_PREFIX",
    "WIF_VERSION",
    "WIF_COMPRESSED_FLAG",
    "BIP32_SEED_KEY",
    "HARDENED_OFFSET",
    "PBKDF2_ITERATIONS",
    "SEED_LENGTH",
    "BRAINKEY_WORD_COUNT",
    "MAX_SIGNING_ATTEMPTS",
    "COMPACT_HEADER_BASE",
    "COMPACT_HEADER_RANGE",
]


@dataclass(frozen=True)
class CurveParams:
    """Short Weierstrass curve y^2 = x^3 + a*x + b over F_p."""

    p: int
    n: int
    a: int
    b: int
    gx: int
    gy: int

    @property
    def half_n(self) -> int:
        """Upper bound for low-S signature values."""
        return self.n // 2


SECP256K1 = CurveParams(
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    a=0,
    b=7,
    gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)


class Role(IntEnum):
    """Account authority roles and their SLIP-48 role index."""

    OWNER = 0
    ACTIVE = 1
    MEMO = 3

    @property
    def label(self) -> str:
        return self.name.lower()


# m / purpose' / network' / role' / account' / key'
ROLE_PATH_TEMPLATE = "m/48'/0'/{role}'/0'/0'"

# Chain identity
PUBLIC_KEY_PREFIX = "BTS"
WIF_VERSION = 0x80
WIF_COMPRESSED_FLAG = 0x01

# Key derivation
BIP32_SEED_KEY = b"Bitcoin seed"
HARDENED_OFFSET = 0x80000000
PBKDF2_ITERATIONS = 2048
SEED_LENGTH = 64
BRAINKEY_WORD_COUNT = 24

# Signing
MAX_SIGNING_ATTEMPTS = 100
COMPACT_HEADER_BASE = 27 + 4  # compressed-key compact signature
COMPACT_HEADER_RANGE = range(27, 35)
