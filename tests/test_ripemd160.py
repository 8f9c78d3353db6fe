import pytest
from brainkey.crypto.ripemd160 import RIPEMD160, ripemd160


@pytest.mark.parametrize("message,digest", [
    (b"", "9c1185a5c5e9fc54612808977ee8f548b2258d31"),
    (b"a", "0bdc9d2d256b3ee9daae347be6f4dc835a467ffe"),
    (b"abc", "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"),
    (b"message digest", "5d0689ef49d2fae572b881b123a85ffa21595f36"),
    (b"abcdefghijklmnopqrstuvwxyz", "f71c27109c692c1b56bbdceb5b9d2865b3708dbc"),
    (
        b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
        "12a053384a9c0c88e405a06c27dcf49ada62eb2b",
    ),
    (
        b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        "b0e20b6e3116640286ed3a87a5713079b21f5189",
    ),
    (b"1234567890" * 8, "9b752e45573d4b39f4dbd3323cab82bf63326bfb"),
])
def test_known_digests(message, digest):
    assert ripemd160(message).hex() == digest


def test_million_a():
    assert ripemd160(b"a" * 1_000_000).hex() == "52783243c1697bdbe16d37f97f68f08325dc1528"


def test_incremental_update_matches_one_shot():
    data = bytes(range(256)) * 3
    h = RIPEMD160()
    for i in range(0, len(data), 37):
        h.update(data[i:i + 37])
    assert h.digest() == ripemd160(data)
    assert h.hexdigest() == ripemd160(data).hex()


def test_copy_is_independent():
    h = RIPEMD160(b"message ")
    other = h.copy()
    other.update(b"digest")
    assert other.hexdigest() == "5d0689ef49d2fae572b881b123a85ffa21595f36"
    assert h.digest() == ripemd160(b"message ")


def test_digest_lengths_around_padding_boundary():
    for length in (54, 55, 56, 63, 64, 65):
        assert len(ripemd160(b"x" * length)) == 20
