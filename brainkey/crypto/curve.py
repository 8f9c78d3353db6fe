"""secp256k1 point arithmetic in affine coordinates."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import SECP256K1, CurveParams
from ..exceptions import CurveViolation, InvalidInputError
from .arith import mod, mod_inverse, mod_pow

__all__ = [
    "Point",
    "INFINITY",
    "G",
    "scalar_base_mult",
    "lift_x",
    "compress",
    "decompress",
]


@dataclass(frozen=True)
class Point:
    """
    Point on a short Weierstrass curve.

    The point at infinity is represented by ``x`` and ``y`` both ``None``.
    Instances are never mutated; every operation returns a new point.
    """

    x: Optional[int]
    y: Optional[int]
    curve: CurveParams = SECP256K1

    @property
    def is_infinity(self) -> bool:
        return self.x is None and self.y is None

    def is_on_curve(self) -> bool:
        """Check ``y^2 == x^3 + a*x + b (mod p)``."""
        if self.is_infinity:
            return True
        p = self.curve.p
        return mod(self.y * self.y - (self.x * self.x * self.x + self.curve.a * self.x + self.curve.b), p) == 0

    def __neg__(self) -> "Point":
        if self.is_infinity:
            return self
        return Point(self.x, mod(-self.y, self.curve.p), self.curve)

    def add(self, other: "Point") -> "Point":
        """Group law addition."""
        if self.is_infinity:
            return other
        if other.is_infinity:
            return self

        p = self.curve.p
        if self.x == other.x:
            if mod(self.y + other.y, p) == 0:
                return Point(None, None, self.curve)
            return self.double()

        slope = mod((other.y - self.y) * mod_inverse(other.x - self.x, p), p)
        x3 = mod(slope * slope - self.x - other.x, p)
        y3 = mod(slope * (self.x - x3) - self.y, p)
        return Point(x3, y3, self.curve)

    def double(self) -> "Point":
        if self.is_infinity:
            return self

        p = self.curve.p
        if self.y == 0:
            return Point(None, None, self.curve)

        slope = mod((3 * self.x * self.x + self.curve.a) * mod_inverse(2 * self.y, p), p)
        x3 = mod(slope * slope - 2 * self.x, p)
        y3 = mod(slope * (self.x - x3) - self.y, p)
        return Point(x3, y3, self.curve)

    def multiply(self, k: int) -> "Point":
        """
        Scalar multiplication by double-and-add.

        The ladder runs in Jacobian coordinates so that only the final
        conversion back to affine needs a modular inverse.
        """
        if k < 0:
            return (-self).multiply(-k)
        if self.is_infinity or k == 0:
            return Point(None, None, self.curve)

        p = self.curve.p
        a = self.curve.a
        base = (self.x, self.y, 1)
        acc = _JACOBIAN_INFINITY
        for bit in bin(k)[2:]:
            acc = _jacobian_double(acc, a, p)
            if bit == "1":
                acc = _jacobian_add(acc, base, a, p)

        return _from_jacobian(acc, self.curve)

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.add(-other)

    def __mul__(self, k: int) -> "Point":
        return self.multiply(k)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        if self.is_infinity:
            return "Point(infinity)"
        return f"Point({self.x:#066x}, {self.y:#066x})"


INFINITY = Point(None, None)
G = Point(SECP256K1.gx, SECP256K1.gy)

# Jacobian (X, Y, Z) represents affine (X / Z^2, Y / Z^3); Z == 0 is infinity
Jacobian = Tuple[int, int, int]
_JACOBIAN_INFINITY: Jacobian = (1, 1, 0)


def _jacobian_double(pt: Jacobian, a: int, p: int) -> Jacobian:
    x, y, z = pt
    if z == 0 or y == 0:
        return _JACOBIAN_INFINITY

    y2 = y * y % p
    s = 4 * x * y2 % p
    m = (3 * x * x + a * pow(z, 4, p)) % p
    x3 = (m * m - 2 * s) % p
    y3 = (m * (s - x3) - 8 * y2 * y2) % p
    z3 = 2 * y * z % p
    return x3, y3, z3


def _jacobian_add(p1: Jacobian, p2: Jacobian, a: int, p: int) -> Jacobian:
    x1, y1, z1 = p1
    x2, y2, z2 = p2
    if z1 == 0:
        return p2
    if z2 == 0:
        return p1

    z1z1 = z1 * z1 % p
    z2z2 = z2 * z2 % p
    u1 = x1 * z2z2 % p
    u2 = x2 * z1z1 % p
    s1 = y1 * z2 * z2z2 % p
    s2 = y2 * z1 * z1z1 % p

    if u1 == u2:
        if s1 != s2:
            return _JACOBIAN_INFINITY
        return _jacobian_double(p1, a, p)

    h = (u2 - u1) % p
    r = (s2 - s1) % p
    h2 = h * h % p
    h3 = h * h2 % p
    u1h2 = u1 * h2 % p

    x3 = (r * r - h3 - 2 * u1h2) % p
    y3 = (r * (u1h2 - x3) - s1 * h3) % p
    z3 = h * z1 * z2 % p
    return x3, y3, z3


def _from_jacobian(pt: Jacobian, curve: CurveParams) -> Point:
    x, y, z = pt
    if z == 0:
        return Point(None, None, curve)

    p = curve.p
    z_inv = mod_inverse(z, p)
    z_inv2 = z_inv * z_inv % p
    return Point(x * z_inv2 % p, y * z_inv2 * z_inv % p, curve)


def scalar_base_mult(k: int) -> Point:
    """Compute ``k * G``."""
    return G.multiply(k)


def lift_x(x: int, odd: bool, curve: CurveParams = SECP256K1) -> Point:
    """
    Return the curve point with x-coordinate ``x`` and the requested y parity.

    The square root is ``(x^3 + b)^((p + 1) / 4)``, valid because
    ``p == 3 (mod 4)``.

    Raises:
        CurveViolation: If ``x >= p`` or no point with this x exists
    """
    p = curve.p
    if not 0 <= x < p:
        raise CurveViolation("x-coordinate is not a field element")

    y_squared = mod(mod_pow(x, 3, p) + curve.a * x + curve.b, p)
    y = mod_pow(y_squared, (p + 1) // 4, p)
    if mod(y * y, p) != y_squared:
        raise CurveViolation("Point not on curve")

    if (y & 1) != int(odd):
        y = p - y

    return Point(x, y, curve)


def compress(point: Point) -> bytes:
    """Serialize a point as 33 bytes: parity prefix followed by x."""
    if point.is_infinity:
        raise CurveViolation("Cannot serialize the point at infinity")
    prefix = b"\x03" if point.y & 1 else b"\x02"
    return prefix + point.x.to_bytes(32, "big")


def decompress(data: bytes, curve: CurveParams = SECP256K1) -> Point:
    """
    Parse a 33-byte compressed point.

    Raises:
        InvalidInputError: If length or prefix byte is wrong
        CurveViolation: If the encoded x has no point on the curve
    """
    if len(data) != 33:
        raise InvalidInputError(f"Compressed point must be 33 bytes, got {len(data)}")
    prefix = data[0]
    if prefix not in (0x02, 0x03):
        raise InvalidInputError(f"Invalid compressed point prefix: {prefix:#04x}")

    x = int.from_bytes(data[1:], "big")
    return lift_x(x, odd=prefix == 0x03, curve=curve)
