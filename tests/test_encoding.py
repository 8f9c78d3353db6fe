import os

import pytest
from brainkey.exceptions import InvalidInputError, ChecksumMismatchError
from brainkey.utils.encoding import (
    hex_to_bytes, bytes_to_hex, sha256,
    encode_base58, decode_base58,
    private_key_to_wif, wif_to_private_key,
    public_key_to_text, text_to_public_key,
)


def test_hex_bytes_roundtrip():
    data = b"\x00\x01deadbeef"
    hex_str = bytes_to_hex(data, prefix=True)
    assert hex_str.startswith("0x")
    assert hex_to_bytes(hex_str) == data
    with pytest.raises(InvalidInputError):
        hex_to_bytes("zzzz")


def test_sha256_accepts_text():
    assert sha256("abc") == sha256(b"abc")
    assert sha256(b"").hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.mark.parametrize("raw,encoded", [
    ("", ""),
    ("61", "2g"),
    ("626262", "a3gV"),
    ("636363", "aPEr"),
    ("516b6fcd0f", "ABnLTmg"),
    ("00000000000000000000", "1111111111"),
    ("00eb15231dfceb60925886b67d065299925915aeb172c06647", "1NS17iag9jJgTHD1VXjvLCEnZuQ3rJDE9L"),
])
def test_base58_vectors(raw, encoded):
    assert encode_base58(bytes.fromhex(raw)) == encoded
    assert decode_base58(encoded) == bytes.fromhex(raw)


def test_base58_text():
    assert encode_base58(b"hello world") == "StV1DL6CwTryKyV"


def test_base58_invalid_character():
    for bad in ("0", "O", "I", "l", "abc!"):
        with pytest.raises(InvalidInputError):
            decode_base58(bad)


def test_wif_known_vector():
    key = bytes.fromhex("0C28FCA386C7A227600B2FE50B7CAE11EC86D3BF1FBE471BE89827E19D72AA1D")
    wif = "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
    assert private_key_to_wif(key) == wif
    assert wif_to_private_key(wif) == key


def test_wif_compressed_form_is_accepted():
    key = bytes.fromhex("0C28FCA386C7A227600B2FE50B7CAE11EC86D3BF1FBE471BE89827E19D72AA1D")
    assert wif_to_private_key("KwdMAjGmerYanjeui5SHS7JkmpZvVipYvB2LJGU1ZxJwYvP98617") == key


def test_wif_of_key_one():
    key = (1).to_bytes(32, "big")
    assert private_key_to_wif(key) == "5HpHagT65TZzG1PH3CSu63k8DbpvD8s5ip4nEB3kEsreAnchuDf"


def test_wif_random_roundtrip():
    for _ in range(1000):
        key = os.urandom(32)
        wif = private_key_to_wif(key)
        assert wif.startswith("5")
        assert wif_to_private_key(wif) == key


def test_wif_rejects_bad_input():
    wif = "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
    with pytest.raises(ChecksumMismatchError):
        wif_to_private_key(wif[:-1] + ("K" if wif[-1] != "K" else "L"))
    with pytest.raises(InvalidInputError):
        wif_to_private_key(wif[:-3])
    with pytest.raises(InvalidInputError):
        wif_to_private_key(b"5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ")
    with pytest.raises(InvalidInputError):
        private_key_to_wif(b"\x01" * 31)


def test_null_public_key_text():
    assert public_key_to_text(b"\x00" * 33, prefix="GPH") == "GPH1111111111111111111111111111111114T1Anm"
    assert text_to_public_key("GPH1111111111111111111111111111111114T1Anm", prefix="GPH") == b"\x00" * 33


def test_public_key_text_roundtrip():
    pub = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
    text = public_key_to_text(pub)
    assert text.startswith("BTS")
    assert text_to_public_key(text) == pub

    other = public_key_to_text(pub, prefix="TEST")
    assert other[4:] == text[3:]
    assert text_to_public_key(other, prefix="TEST") == pub


def test_public_key_text_errors():
    pub = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
    text = public_key_to_text(pub)

    with pytest.raises(InvalidInputError):
        text_to_public_key("GPH" + text[3:])
    with pytest.raises(InvalidInputError):
        text_to_public_key(text[:-5])

    # Flip one character of the payload
    body = text[3:]
    flipped = ("2" if body[10] != "2" else "3")
    with pytest.raises(ChecksumMismatchError):
        text_to_public_key("BTS" + body[:10] + flipped + body[11:])

    with pytest.raises(InvalidInputError):
        public_key_to_text(pub[:32])
