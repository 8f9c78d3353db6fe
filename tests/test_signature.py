import os

from coincurve import PrivateKey as ReferenceKey, PublicKey as ReferencePublicKey
import pytest

from brainkey.constants import SECP256K1, MAX_SIGNING_ATTEMPTS
from brainkey.crypto import signature as signature_module
from brainkey.crypto.keys import PrivateKey
from brainkey.crypto.signature import (
    generate_k, sign_hash, recover_public_key, verify_signature,
    is_canonical, sign_message, verify_message,
)
from brainkey.exceptions import InvalidInputError, SigningExhaustedError, RecoveryFailureError
from brainkey.types.keys import CompactSignature
from brainkey.utils.encoding import sha256

N = SECP256K1.n


def test_sign_and_verify():
    key = PrivateKey.create()
    digest = sha256(b"transfer 1 BTS")
    sig = sign_hash(digest, key)

    assert len(bytes(sig)) == 65
    assert 31 <= sig.header <= 34
    assert recover_public_key(digest, sig) == key.public_key()
    assert verify_signature(digest, sig, key.public_key())
    assert verify_signature(digest, bytes(sig), key.public_key().to_text())
    assert verify_signature(digest, sig, key.public_key().hex())


def test_signatures_are_low_s_and_canonical():
    key = PrivateKey.create()
    for i in range(20):
        sig = sign_hash(sha256(f"message {i}"), key)
        assert sig.r[0] < 0x80
        assert sig.s[0] < 0x80
        assert 1 <= sig.s_int <= SECP256K1.half_n
        assert 1 <= sig.r_int < N


def test_signing_is_deterministic():
    key = PrivateKey.from_seed(b"deterministic")
    digest = sha256(b"payload")
    assert sign_hash(digest, key) == sign_hash(digest, key)
    assert sign_hash(digest, key.wif()) == sign_hash(digest, key)
    assert sign_hash(digest, key.secret) == sign_hash(digest, key)


def test_generate_k_range_and_attempts():
    key = PrivateKey.from_seed(b"nonce").secret
    digest = sha256(b"x")
    values = {generate_k(digest, key, attempt) for attempt in range(10)}
    assert len(values) == 10
    assert all(1 <= k < N for k in values)


def test_reference_library_recovers_our_signature():
    key = PrivateKey.create()
    digest = os.urandom(32)
    sig = sign_hash(digest, key)

    recovered = ReferencePublicKey.from_signature_and_message(
        sig.r + sig.s + bytes([sig.recovery_id]), digest, hasher=None
    )
    assert recovered.format(compressed=True) == key.public_key().to_bytes()


def test_recover_reference_library_signature():
    reference = ReferenceKey()
    digest = os.urandom(32)
    raw = reference.sign_recoverable(digest, hasher=None)
    sig = CompactSignature.from_bytes(bytes([31 + raw[64]]) + raw[:64])

    recovered = recover_public_key(digest, sig)
    assert recovered.to_bytes() == reference.public_key.format(compressed=True)


def test_verify_rejects_wrong_key_and_message():
    key = PrivateKey.create()
    other = PrivateKey.create()
    digest = sha256(b"hello")
    sig = sign_hash(digest, key)

    assert not verify_signature(digest, sig, other.public_key())
    assert not verify_signature(sha256(b"hullo"), sig, key.public_key())
    assert not verify_signature(digest, b"\x00" * 65, key.public_key())
    assert not verify_signature(digest, b"\x1f" * 10, key.public_key())
    assert not verify_signature(digest, sig, "BTSnotakey")


def test_recover_rejects_out_of_range_values():
    digest = sha256(b"hello")
    zero_r = CompactSignature(31, b"\x00" * 32, b"\x01" * 32)
    big_s = CompactSignature(31, b"\x01" * 32, N.to_bytes(32, "big"))
    with pytest.raises(InvalidInputError):
        recover_public_key(digest, zero_r)
    with pytest.raises(InvalidInputError):
        recover_public_key(digest, big_s)
    with pytest.raises(InvalidInputError):
        recover_public_key(b"\x00" * 31, bytes([31]) + b"\x01" * 64)


def test_signing_gives_up_after_attempt_cap(monkeypatch):
    calls = []

    def never_recovers(message_hash, signature):
        calls.append(signature)
        raise RecoveryFailureError("forced")

    monkeypatch.setattr(signature_module, "recover_public_key", never_recovers)

    with pytest.raises(SigningExhaustedError) as exc_info:
        sign_hash(sha256(b"doomed"), PrivateKey.from_seed(b"doomed"))

    assert exc_info.value.attempts == MAX_SIGNING_ATTEMPTS
    assert 0 < len(calls) <= 4 * MAX_SIGNING_ATTEMPTS


def test_sign_rejects_bad_input():
    with pytest.raises(InvalidInputError):
        sign_hash(b"\x00" * 31, PrivateKey.create())
    with pytest.raises(InvalidInputError):
        sign_hash(b"\x00" * 32, b"\x00" * 32)


def test_is_canonical():
    one = b"\x01" * 32
    assert is_canonical(CompactSignature(31, one, one))
    assert is_canonical(CompactSignature(31, b"\x00\x80" + b"\x01" * 30, one))
    assert not is_canonical(CompactSignature(31, b"\x80" + b"\x01" * 31, one))
    assert not is_canonical(CompactSignature(31, one, b"\xff" * 32))
    assert not is_canonical(CompactSignature(31, b"\x00\x01" + b"\x01" * 30, one))
    assert not is_canonical(CompactSignature(31, b"\x00" * 32, one))
    assert not is_canonical(b"\x1f" * 64)


def test_sign_and_verify_message():
    key = PrivateKey.create()
    sig = sign_message("hello world", key)
    assert sig == sign_hash(sha256(b"hello world"), key)
    assert verify_message("hello world", sig, key.public_key())
    assert not verify_message("hello there", sig, key.public_key())


def test_verify_accepts_hex_and_never_raises():
    key = PrivateKey.create()
    digest = sha256(b"hex form")
    sig = sign_hash(digest, key)

    assert verify_signature(digest, sig.hex(), key.public_key())
    assert not verify_signature(digest, "zz" * 65, key.public_key())
    assert not verify_signature(digest, None, key.public_key())
    assert not verify_signature(digest, 12345, key.public_key())
    assert not verify_signature(None, sig, key.public_key())
    assert not verify_signature(digest, sig, None)


def test_is_canonical_accepts_hex_and_rejects_garbage():
    one = b"\x01" * 32
    assert is_canonical(CompactSignature(31, one, one).hex())
    assert not is_canonical(None)
    assert not is_canonical("not hex")


def test_header_range_matches_validator():
    one = b"\x01" * 32
    for header in (27, 31, 34):
        assert CompactSignature(header, one, one).header == header
    for header in (0, 26, 35, 255):
        with pytest.raises(InvalidInputError):
            CompactSignature(header, one, one)
        with pytest.raises(InvalidInputError):
            CompactSignature.from_bytes(bytes([header]) + one + one)
