"""
Deterministic, canonical, recoverable ECDSA over secp256k1.

Signatures use the 65-byte compact layout ``header || r || s`` expected
by Graphene chains. The signer keeps trying nonces until it finds a
low-S signature whose r and s both serialize without the high bit set,
and whose recovery id reproduces the signer's public key.
"""

import logging
from typing import Union

from ..constants import SECP256K1, MAX_SIGNING_ATTEMPTS, COMPACT_HEADER_BASE, PUBLIC_KEY_PREFIX
from ..exceptions import (
    BrainkeyError,
    InvalidInputError,
    RecoveryFailureError,
    SigningExhaustedError,
)
from ..types.keys import CompactSignature
from ..utils.encoding import sha256
from ..utils.validation import validate_message_hash, validate_compact_signature
from .arith import mod, mod_inverse
from .curve import G, lift_x
from .keys import PrivateKey, PublicKey

__all__ = [
    "generate_k",
    "sign_hash",
    "recover_public_key",
    "verify_signature",
    "is_canonical",
    "sign_message",
    "verify_message",
]

logger = logging.getLogger(__name__)

N = SECP256K1.n
P = SECP256K1.p

PrivateKeyLike = Union[str, bytes, PrivateKey]
PublicKeyLike = Union[str, bytes, PublicKey]
SignatureLike = Union[str, bytes, CompactSignature]


def generate_k(message_hash: bytes, private_key: bytes, attempt: int = 0) -> int:
    """
    Derive the signing nonce for one attempt.

    ``k = (SHA-256(key(32) || hash(32) || be32(attempt)) mod (N - 1)) + 1``,
    which always lands in ``[1, N - 1]``.
    """
    digest = sha256(bytes(private_key) + bytes(message_hash) + attempt.to_bytes(4, "big"))
    return mod(int.from_bytes(digest, "big"), N - 1) + 1


def _as_private_key(key: PrivateKeyLike) -> PrivateKey:
    if isinstance(key, PrivateKey):
        return key
    if isinstance(key, str):
        return PrivateKey.from_wif(key)
    return PrivateKey(key)


def _as_public_key(key: PublicKeyLike, prefix: str = PUBLIC_KEY_PREFIX) -> PublicKey:
    if isinstance(key, PublicKey):
        return key
    if isinstance(key, str) and key.startswith(prefix):
        return PublicKey.from_text(key, prefix=prefix)
    return PublicKey(key)


def _as_compact(signature: SignatureLike) -> CompactSignature:
    if isinstance(signature, CompactSignature):
        return signature
    return CompactSignature.from_bytes(validate_compact_signature(signature))


def sign_hash(message_hash: bytes, private_key: PrivateKeyLike) -> CompactSignature:
    """
    Sign a 32-byte hash.

    Args:
        message_hash: Digest to sign
        private_key: WIF string, raw 32 bytes or PrivateKey

    Returns:
        Canonical compact signature

    Raises:
        InvalidInputError: If the hash or key is malformed
        SigningExhaustedError: If no acceptable signature was found within
            ``MAX_SIGNING_ATTEMPTS`` nonces
    """
    message_hash = validate_message_hash(message_hash)
    key = _as_private_key(private_key)

    d = key.scalar
    z = int.from_bytes(message_hash, "big")
    expected = key.public_key().to_bytes()

    for attempt in range(MAX_SIGNING_ATTEMPTS):
        k = generate_k(message_hash, key.secret, attempt)

        r = mod(G.multiply(k).x, N)
        if r == 0:
            logger.debug(f"Attempt {attempt}: r is zero, retrying")
            continue

        s = mod(mod_inverse(k, N) * (z + r * d), N)
        if s == 0:
            logger.debug(f"Attempt {attempt}: s is zero, retrying")
            continue

        if s > SECP256K1.half_n:
            s = N - s

        r_bytes = r.to_bytes(32, "big")
        s_bytes = s.to_bytes(32, "big")
        if r_bytes[0] >= 0x80 or s_bytes[0] >= 0x80:
            logger.debug(f"Attempt {attempt}: signature not canonical, retrying")
            continue

        for recovery_id in range(4):
            candidate = CompactSignature(COMPACT_HEADER_BASE + recovery_id, r_bytes, s_bytes)
            try:
                recovered = recover_public_key(message_hash, candidate)
            except BrainkeyError:
                continue
            if recovered.to_bytes() == expected:
                logger.debug(f"Signed after {attempt + 1} attempt(s), recovery id {recovery_id}")
                return candidate

        logger.debug(f"Attempt {attempt}: no recovery id matches, retrying")

    raise SigningExhaustedError(MAX_SIGNING_ATTEMPTS)


def recover_public_key(message_hash: bytes, signature: SignatureLike) -> PublicKey:
    """
    Recover the signer's public key from a compact signature.

    ``Q = r^-1 * (s*R - e*G)`` where R is rebuilt from r and the recovery id.

    Raises:
        InvalidInputError: If r or s is outside ``[1, N)``
        CurveViolation: If the recovery id points past the field or off the curve
        RecoveryFailureError: If the recovered point is infinity
    """
    message_hash = validate_message_hash(message_hash)
    signature = _as_compact(signature)

    recovery_id = signature.recovery_id
    r = signature.r_int
    s = signature.s_int
    e = int.from_bytes(message_hash, "big")

    if not 1 <= r < N:
        raise InvalidInputError("Invalid r value")
    if not 1 <= s < N:
        raise InvalidInputError("Invalid s value")

    rx = r + N if recovery_id & 2 else r
    R = lift_x(rx, odd=bool(recovery_id & 1))

    Q = (R.multiply(s) - G.multiply(mod(e, N))).multiply(mod_inverse(r, N))
    if Q.is_infinity:
        raise RecoveryFailureError("Recovered point is at infinity")

    return PublicKey.from_point(Q)


def verify_signature(
    message_hash: bytes,
    signature: SignatureLike,
    public_key: PublicKeyLike,
    prefix: str = PUBLIC_KEY_PREFIX
) -> bool:
    """
    Check that ``signature`` over ``message_hash`` recovers to ``public_key``.

    Args:
        message_hash: 32-byte digest
        signature: Compact signature as bytes, hex string or object
        public_key: PublicKey, 33 raw bytes, hex, or prefixed text

    Returns:
        True if the recovered key matches byte for byte; never raises
    """
    try:
        expected = _as_public_key(public_key, prefix=prefix)
        recovered = recover_public_key(message_hash, signature)
    except BrainkeyError as e:
        logger.debug(f"Signature verification failed: {e}")
        return False

    return recovered.to_bytes() == expected.to_bytes()


def is_canonical(signature: SignatureLike) -> bool:
    """
    Strict Graphene canonical check.

    r and s must not have the high bit set in their first byte, and must
    not start with a zero byte unless the following byte has the high bit
    set (no superfluous padding in the DER form the chain derives).
    """
    try:
        signature = _as_compact(signature)
    except BrainkeyError:
        return False

    for value in (signature.r, signature.s):
        if not any(value):
            return False
        if value[0] & 0x80:
            return False
        if value[0] == 0 and not value[1] & 0x80:
            return False

    return True


def sign_message(message: Union[str, bytes], private_key: PrivateKeyLike) -> CompactSignature:
    """Sign ``SHA-256(message)``; ``str`` messages are UTF-8 encoded."""
    return sign_hash(sha256(message), private_key)


def verify_message(
    message: Union[str, bytes],
    signature: SignatureLike,
    public_key: PublicKeyLike,
    prefix: str = PUBLIC_KEY_PREFIX
) -> bool:
    """Verify a signature made by ``sign_message``."""
    return verify_signature(sha256(message), signature, public_key, prefix=prefix)
