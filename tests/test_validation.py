from brainkey.constants import SECP256K1
from brainkey.exceptions import InvalidInputError
from brainkey.utils.encoding import private_key_to_wif
from brainkey.utils.validation import (
    is_valid_private_key, validate_private_key,
    is_valid_public_key, validate_public_key,
    validate_message_hash, validate_compact_signature,
    is_valid_wif, is_valid_public_key_text,
)
import pytest


def test_private_key_validation():
    valid = "01" * 32
    assert is_valid_private_key(valid)
    assert validate_private_key("0x" + valid) == bytes.fromhex(valid)
    assert not is_valid_private_key("00" * 32)
    assert not is_valid_private_key(SECP256K1.n.to_bytes(32, "big"))
    assert not is_valid_private_key("zz")
    assert not is_valid_private_key("abc")
    assert not is_valid_private_key(12345)


def test_public_key_validation():
    valid = "02" + "11" * 32
    assert is_valid_public_key(valid)
    assert validate_public_key(bytes.fromhex(valid)) == bytes.fromhex(valid)
    assert not is_valid_public_key("04" + "11" * 32)
    assert not is_valid_public_key("02" + "11" * 31)


def test_message_hash_validation():
    assert validate_message_hash(b"\x00" * 32) == b"\x00" * 32
    with pytest.raises(InvalidInputError):
        validate_message_hash(b"\x00" * 31)


def test_compact_signature_validation():
    sig = bytes([31]) + b"\x01" * 64
    assert validate_compact_signature(sig) == sig
    with pytest.raises(InvalidInputError):
        validate_compact_signature(bytes([26]) + b"\x01" * 64)
    with pytest.raises(InvalidInputError):
        validate_compact_signature(sig[:-1])


def test_wif_and_public_key_text_validation():
    assert is_valid_wif(private_key_to_wif(b"\x01" * 32))
    assert not is_valid_wif("5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTK")
    assert not is_valid_wif("not a wif")

    assert is_valid_public_key_text("GPH1111111111111111111111111111111114T1Anm", prefix="GPH")
    assert not is_valid_public_key_text("GPH1111111111111111111111111111111114T1Anm")
    assert not is_valid_public_key_text("BTS1111111111111111111111111111111114T1Ann")
