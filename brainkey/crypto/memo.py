"""
Memo encryption compatible with Graphene transfer memos.

Sender and recipient derive the same point by ECDH
(``priv_a * pub_b == priv_b * pub_a``). ``SHA-512(be64(nonce) || x)``
then yields the AES-256-CBC key (first 32 bytes) and IV (next 16). The
ciphertext is prefixed with the first four bytes of ``SHA-256(plaintext)``.
"""

import hmac
import logging
import secrets
from typing import Any, Dict, Optional, Tuple, Union

from ..constants import PUBLIC_KEY_PREFIX
from ..exceptions import ChecksumMismatchError, InvalidInputError
from ..types.common import HexStr
from ..types.keys import Memo
from ..utils.encoding import sha256, sha512, hex_to_bytes, bytes_to_hex
from .cipher import aes256_cbc_encrypt, aes256_cbc_decrypt
from .keys import PrivateKey, PublicKey

__all__ = ["shared_secret", "encrypt_memo", "decrypt_memo"]

logger = logging.getLogger(__name__)

MAX_NONCE = 1 << 64


def shared_secret(private_key: PrivateKey, public_key: PublicKey) -> bytes:
    """x-coordinate of ``private_key * public_key`` as 32 bytes."""
    point = public_key.point.multiply(private_key.scalar)
    if point.is_infinity:
        raise InvalidInputError("Shared point is at infinity")
    return point.x.to_bytes(32, "big")


def _key_and_iv(nonce: int, secret: bytes) -> Tuple[bytes, bytes]:
    digest = sha512(nonce.to_bytes(8, "big") + secret)
    return digest[:32], digest[32:48]


def _check_nonce(nonce: int) -> int:
    try:
        nonce = int(nonce)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid memo nonce: {nonce!r}") from e
    if not 0 <= nonce < MAX_NONCE:
        raise InvalidInputError(f"Memo nonce must fit in 64 bits: {nonce}")
    return nonce


def encrypt_memo(
    message: str,
    sender_private_key: Union[str, PrivateKey],
    recipient_public_key: Union[str, PublicKey],
    nonce: Optional[int] = None,
    prefix: str = PUBLIC_KEY_PREFIX
) -> Memo:
    """
    Encrypt a memo from sender to recipient.

    Args:
        message: Plaintext memo
        sender_private_key: Sender's memo key as WIF or PrivateKey
        recipient_public_key: Recipient's memo key as text or PublicKey
        nonce: 64-bit nonce; random when omitted
        prefix: Public key text prefix

    Returns:
        Memo ready to be put on chain
    """
    if isinstance(sender_private_key, str):
        sender_private_key = PrivateKey.from_wif(sender_private_key)
    if isinstance(recipient_public_key, str):
        recipient_public_key = PublicKey.from_text(recipient_public_key, prefix=prefix)

    if nonce is None:
        nonce = secrets.randbits(64)
        logger.debug("Generated random memo nonce")
    nonce = _check_nonce(nonce)

    key, iv = _key_and_iv(nonce, shared_secret(sender_private_key, recipient_public_key))

    plaintext = message.encode("utf-8")
    checksum = sha256(plaintext)[:4]
    ciphertext = checksum + aes256_cbc_encrypt(plaintext, key, iv)

    return Memo(
        sender=sender_private_key.public_key().to_text(prefix=prefix),
        recipient=recipient_public_key.to_text(prefix=prefix),
        nonce=nonce,
        message=bytes_to_hex(ciphertext),
    )


def decrypt_memo(
    memo: Union[Memo, Dict[str, Any]],
    private_key: Union[str, PrivateKey],
    prefix: str = PUBLIC_KEY_PREFIX
) -> str:
    """
    Decrypt a memo as either its sender or its recipient.

    Args:
        memo: Memo or its chain dict form
        private_key: Own memo key as WIF or PrivateKey
        prefix: Public key text prefix

    Returns:
        Plaintext memo

    Raises:
        InvalidInputError: If the key belongs to neither party
        ChecksumMismatchError: If decryption or the checksum fails
    """
    if not isinstance(memo, Memo):
        memo = Memo.from_dict(memo)
    if isinstance(private_key, str):
        private_key = PrivateKey.from_wif(private_key)

    own = private_key.public_key().to_text(prefix=prefix)
    if own == memo.sender:
        other = memo.recipient
    elif own == memo.recipient:
        other = memo.sender
    else:
        raise InvalidInputError("Private key does not match memo sender or recipient")

    secret = shared_secret(private_key, PublicKey.from_text(other, prefix=prefix))
    key, iv = _key_and_iv(_check_nonce(memo.nonce), secret)

    data = hex_to_bytes(HexStr(memo.message))
    if len(data) < 4:
        raise InvalidInputError("Memo message is too short")

    checksum, ciphertext = data[:4], data[4:]
    plaintext = aes256_cbc_decrypt(ciphertext, key, iv)
    if not hmac.compare_digest(sha256(plaintext)[:4], checksum):
        raise ChecksumMismatchError("Memo checksum verification failed")

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ChecksumMismatchError("Memo plaintext is not valid UTF-8") from e
