"""Account key pair derivation for brainkey."""

import logging
from typing import Union

from .constants import Role, ROLE_PATH_TEMPLATE, PUBLIC_KEY_PREFIX
from .crypto.bip39 import brainkey_to_seed
from .crypto.hd import ExtendedKey
from .crypto.keys import PrivateKey
from .types.keys import KeyPair, AccountKeys
from .utils.encoding import sha256

__all__ = [
    "role_path",
    "key_pair_from_private_key",
    "key_pair_from_seed",
    "wif_to_keys",
    "derive_keys_from_brainkey",
    "derive_keys_from_password",
]

logger = logging.getLogger(__name__)


def role_path(role: Role) -> str:
    """Derivation path of ``role``, e.g. ``m/48'/0'/1'/0'/0'`` for active."""
    return ROLE_PATH_TEMPLATE.format(role=int(role))


def key_pair_from_private_key(
    private_key: Union[bytes, PrivateKey],
    prefix: str = PUBLIC_KEY_PREFIX
) -> KeyPair:
    """Convert a raw private key to its WIF and public key text."""
    if not isinstance(private_key, PrivateKey):
        private_key = PrivateKey.from_digest(private_key)
    return KeyPair(
        private_key=private_key.wif(),
        public_key=private_key.public_key().to_text(prefix=prefix),
    )


def key_pair_from_seed(seed: str, prefix: str = PUBLIC_KEY_PREFIX) -> KeyPair:
    """
    Legacy key generation: ``SHA-256(seed)`` is the private scalar.

    The digest is not range-checked against the curve order. Keys created
    this way are already on chain, so the scheme stays as it is.
    """
    return key_pair_from_private_key(PrivateKey.from_digest(sha256(seed)), prefix=prefix)


def wif_to_keys(wif: str, prefix: str = PUBLIC_KEY_PREFIX) -> KeyPair:
    """Pair a WIF private key with its public key text."""
    return key_pair_from_private_key(PrivateKey.from_wif(wif), prefix=prefix)


def derive_keys_from_brainkey(
    brainkey: str,
    passphrase: str = "",
    prefix: str = PUBLIC_KEY_PREFIX
) -> AccountKeys:
    """
    Derive owner, active and memo keys from a brainkey.

    Path per role: ``m / 48' / 0' / role' / 0' / 0'`` with owner 0,
    active 1 and memo 3.

    Args:
        brainkey: Seed phrase in any casing and spacing
        passphrase: Optional BIP-39 passphrase
        prefix: Public key text prefix

    Returns:
        AccountKeys for the three roles

    Raises:
        ArithmeticFailure: If a derivation step yields an invalid scalar
    """
    master = ExtendedKey.from_seed(brainkey_to_seed(brainkey, passphrase))

    pairs = {}
    for role in Role:
        node = master.derive_path(role_path(role))
        pairs[role.label] = key_pair_from_private_key(node.private_key(), prefix=prefix)
        logger.debug(f"Derived {role.label} key")

    return AccountKeys(**pairs)


def derive_keys_from_password(
    account_name: str,
    password: str,
    prefix: str = PUBLIC_KEY_PREFIX
) -> AccountKeys:
    """
    Derive owner, active and memo keys from account name and password.

    Each role key is ``SHA-256(account_name + role + password)``.
    """
    pairs = {
        role.label: key_pair_from_seed(account_name + role.label + password, prefix=prefix)
        for role in Role
    }
    logger.debug(f"Derived password keys for account {account_name}")
    return AccountKeys(**pairs)
