import random

import pytest
from brainkey.constants import SECP256K1
from brainkey.crypto.arith import mod, mod_inverse, mod_pow
from brainkey.exceptions import ArithmeticFailure

P = SECP256K1.p
N = SECP256K1.n


def test_mod_handles_negative_values():
    assert mod(-1, 7) == 6
    assert mod(-14, 7) == 0
    assert mod(P + 5, P) == 5


def test_mod_inverse():
    assert mod_inverse(3, 11) == 4
    assert mod_inverse(-3, 11) == 7
    rng = random.Random(7)
    for modulus in (P, N):
        for _ in range(50):
            a = rng.randrange(1, modulus)
            assert a * mod_inverse(a, modulus) % modulus == 1
            assert mod_inverse(a, modulus) == pow(a, -1, modulus)


def test_mod_inverse_failures():
    with pytest.raises(ArithmeticFailure):
        mod_inverse(0, P)
    with pytest.raises(ArithmeticFailure):
        mod_inverse(N, N)
    with pytest.raises(ArithmeticFailure):
        mod_inverse(4, 8)


def test_mod_pow():
    assert mod_pow(2, 10, 1000) == 24
    assert mod_pow(5, 0, 7) == 1
    assert mod_pow(5, 3, 1) == 0
    rng = random.Random(11)
    for _ in range(20):
        base = rng.randrange(P)
        exponent = rng.randrange(1 << 256)
        assert mod_pow(base, exponent, P) == pow(base, exponent, P)


def test_mod_pow_fermat():
    assert mod_pow(123456789, P - 1, P) == 1
    with pytest.raises(ArithmeticFailure):
        mod_pow(2, -1, P)
