"""
Pure Python RIPEMD-160.

OpenSSL 3 moved RIPEMD-160 to the legacy provider, so
``hashlib.new("ripemd160")`` is not available everywhere. Public key
checksums depend on it, so the digest is implemented here.
"""

import struct
from typing import List

__all__ = ["RIPEMD160", "ripemd160"]

# Message word selection, left and right lines
_RL = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
_RR = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)

# Left rotation amounts
_SL = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
_SR = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)

# floor(2^30 * sqrt(n)) for n = 2, 3, 5, 7 on the left line and
# floor(2^30 * cbrt(n)) on the right line, one constant per 16-step round
_KL = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_KR = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64


def _f(j: int, x: int, y: int, z: int) -> int:
    """Non-linear function for round ``j // 16``."""
    if j < 16:
        return x ^ y ^ z
    if j < 32:
        return (x & y) | (~x & z)
    if j < 48:
        return ((x | ~y) & _MASK) ^ z
    if j < 64:
        return (x & z) | (y & ~z)
    return x ^ ((y | ~z) & _MASK)


def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _compress(state: List[int], block: bytes) -> None:
    """Process one 64-byte block, updating ``state`` in place."""
    x = struct.unpack("<16I", block)

    al = ar = state[0]
    bl = br = state[1]
    cl = cr = state[2]
    dl = dr = state[3]
    el = er = state[4]

    for j in range(80):
        rnd = j >> 4

        t = (al + (_f(j, bl, cl, dl) & _MASK) + x[_RL[j]] + _KL[rnd]) & _MASK
        t = (_rol(t, _SL[j]) + el) & _MASK
        al, el, dl, cl, bl = el, dl, _rol(cl, 10), bl, t

        # right line runs the functions in reverse order
        t = (ar + (_f(79 - j, br, cr, dr) & _MASK) + x[_RR[j]] + _KR[rnd]) & _MASK
        t = (_rol(t, _SR[j]) + er) & _MASK
        ar, er, dr, cr, br = er, dr, _rol(cr, 10), br, t

    t = (state[1] + cl + dr) & _MASK
    state[1] = (state[2] + dl + er) & _MASK
    state[2] = (state[3] + el + ar) & _MASK
    state[3] = (state[4] + al + br) & _MASK
    state[4] = (state[0] + bl + cr) & _MASK
    state[0] = t


class RIPEMD160:
    """
    Incremental RIPEMD-160 with a ``hashlib``-style interface.

    Example:
        >>> RIPEMD160(b"abc").hexdigest()
        '8eb208f7e05d987a9b044a8e98c6b087f15a0bfc'
    """

    name = "ripemd160"
    digest_size = 20
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = list(_INITIAL_STATE)
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the digest."""
        data = bytes(data)
        self._length += len(data)
        buffer = self._buffer + data

        offset = 0
        while len(buffer) - offset >= _BLOCK_SIZE:
            _compress(self._state, buffer[offset:offset + _BLOCK_SIZE])
            offset += _BLOCK_SIZE

        self._buffer = buffer[offset:]

    def copy(self) -> "RIPEMD160":
        clone = RIPEMD160()
        clone._state = list(self._state)
        clone._buffer = self._buffer
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 20-byte digest without altering the running state."""
        state = list(self._state)

        # 0x80, zeros up to 56 mod 64, then the 64-bit little-endian bit length
        padding_length = (55 - self._length) % _BLOCK_SIZE
        tail = (
            self._buffer
            + b"\x80"
            + b"\x00" * padding_length
            + struct.pack("<Q", (self._length * 8) & 0xFFFFFFFFFFFFFFFF)
        )
        for offset in range(0, len(tail), _BLOCK_SIZE):
            _compress(state, tail[offset:offset + _BLOCK_SIZE])

        return struct.pack("<5I", *state)

    def hexdigest(self) -> str:
        return self.digest().hex()


def ripemd160(data: bytes) -> bytes:
    """Compute the RIPEMD-160 digest of ``data``."""
    return RIPEMD160(data).digest()
