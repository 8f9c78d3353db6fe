"""Brainkey generation and BIP-39 seed derivation."""

import hashlib
import logging
import secrets
import unicodedata
from functools import lru_cache
from typing import Optional, Sequence

from mnemonic import Mnemonic

from ..constants import BRAINKEY_WORD_COUNT, PBKDF2_ITERATIONS, SEED_LENGTH
from ..exceptions import InvalidInputError
from ..types.common import Brainkey

__all__ = ["default_wordlist", "generate_brainkey", "normalize_brainkey", "brainkey_to_seed"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_wordlist() -> tuple[str, ...]:
    """BIP-39 English word list (2048 words)."""
    return tuple(Mnemonic("english").wordlist)


def generate_brainkey(
    word_count: int = BRAINKEY_WORD_COUNT,
    wordlist: Optional[Sequence[str]] = None
) -> Brainkey:
    """
    Generate a random upper-case brainkey.

    Each word is picked independently as ``randbits(32) % len(wordlist)``.
    The modulo bias this leaves is negligible for a 2048-word list and is
    kept for compatibility with existing wallets.
    """
    if word_count < 1:
        raise InvalidInputError("Brainkey needs at least one word")

    if wordlist is None:
        wordlist = default_wordlist()
    if not wordlist:
        raise InvalidInputError("Word list is empty")

    words = [wordlist[secrets.randbits(32) % len(wordlist)].upper() for _ in range(word_count)]
    logger.debug(f"Generated {word_count}-word brainkey")
    return Brainkey(" ".join(words))


def normalize_brainkey(brainkey: str) -> Brainkey:
    """Trim, collapse whitespace and upper-case every word."""
    return Brainkey(" ".join(word.upper() for word in brainkey.split()))


def brainkey_to_seed(brainkey: str, passphrase: str = "") -> bytes:
    """
    Convert brainkey to a 64-byte seed using PBKDF2-HMAC-SHA512.

    The phrase is normalized and lower-cased so it matches the BIP-39
    word list casing, then NFKD-normalized along with the salt.
    """
    mnemonic = unicodedata.normalize("NFKD", normalize_brainkey(brainkey).lower())
    salt = unicodedata.normalize("NFKD", "mnemonic" + passphrase)

    return hashlib.pbkdf2_hmac(
        "sha512",
        mnemonic.encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
        dklen=SEED_LENGTH
    )
