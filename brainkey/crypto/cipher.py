"""AES-256-CBC with PKCS#7 padding, backed by ``cryptography``."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..exceptions import ChecksumMismatchError, InvalidInputError

__all__ = ["aes256_cbc_encrypt", "aes256_cbc_decrypt"]


def _check_key_iv(key: bytes, iv: bytes) -> None:
    if len(key) != 32:
        raise InvalidInputError(f"AES-256 key must be 32 bytes, got {len(key)}")
    if len(iv) != 16:
        raise InvalidInputError(f"AES IV must be 16 bytes, got {len(iv)}")


def aes256_cbc_encrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Pad ``data`` with PKCS#7 and encrypt it."""
    _check_key_iv(key, iv)

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(data) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes256_cbc_decrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """
    Decrypt and strip PKCS#7 padding.

    Raises:
        ChecksumMismatchError: If the ciphertext length or padding is invalid,
            which is what a wrong key produces
    """
    _check_key_iv(key, iv)
    if not data or len(data) % 16:
        raise ChecksumMismatchError(f"Ciphertext length {len(data)} is not a multiple of 16")

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(data) + decryptor.finalize()

    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise ChecksumMismatchError("Invalid padding in decrypted memo") from e
