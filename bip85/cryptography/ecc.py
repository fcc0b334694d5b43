"""
The secp256k1 group, restricted to what BIP32 needs: adding points and multiplying the generator
"""
from dataclasses import dataclass
from typing import Optional, Tuple

__all__ = ["EllipticCurve", "Point", "SECP256K1"]


@dataclass(frozen=True)
class Point:
    """Affine point. The point at infinity is Point() = (None, None)"""
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self):
        if (self.x is None) != (self.y is None):
            raise ValueError("Point at infinity must have both coordinates as None")

    def __bool__(self) -> bool:
        return self.x is not None

    def __iter__(self):
        return iter((self.x, self.y))


class EllipticCurve:
    """
    Short Weierstrass curve y^2 = x^3 + ax + b (mod p) with a cyclic group of the given order
    """

    def __init__(self, a: int, b: int, p: int, order: int, generator: Tuple[int, int] | Point,
                 curve: Optional[str] = None):
        if (4 * pow(a, 3) + 27 * pow(b, 2)) % p == 0:
            raise ValueError("Cannot use Singular curve in ECC")

        self.a = a
        self.b = b
        self.p = p
        self.order = order
        self.generator = Point(*generator) if isinstance(generator, tuple) else generator
        self.curve = curve

        # G, 2G, 4G, ... for generator multiplication
        self._generator_doubles = self._precompute_doubles(self.generator)

    def __repr__(self):
        return f"EllipticCurve(curve={self.curve!r}, p={hex(self.p)}, order={hex(self.order)})"

    def _precompute_doubles(self, point: Point) -> list[Point]:
        doubles = []
        current = point
        for _ in range(self.order.bit_length()):
            doubles.append(current)
            current = self.double_point(current)
        return doubles

    def is_point_on_curve(self, point: Point) -> bool:
        """Returns true if the given point is on the curve"""
        if not point:
            return True
        x, y = point
        return (y * y - (pow(x, 3, self.p) + self.a * x + self.b)) % self.p == 0

    def double_point(self, point: Point) -> Point:
        if not point or point.y == 0:
            return Point()

        x, y = point
        m = ((3 * x * x + self.a) * pow(2 * y, -1, self.p)) % self.p
        x3 = (m * m - 2 * x) % self.p
        y3 = (m * (x - x3) - y) % self.p
        return Point(x3, y3)

    def add_points(self, point1: Point, point2: Point) -> Point:
        if not point1:
            return point2
        if not point2:
            return point1

        x1, y1 = point1
        x2, y2 = point2
        if x1 == x2:
            # Either the same point or inverses
            return self.double_point(point1) if y1 == y2 else Point()

        m = ((y2 - y1) * pow(x2 - x1, -1, self.p)) % self.p
        x3 = (m * m - x1 - x2) % self.p
        y3 = (m * (x1 - x3) - y1) % self.p
        return Point(x3, y3)

    def scalar_multiplication(self, n: int, point: Point) -> Point:
        """
        Double-and-add. The generator uses its precomputed doubles
        """
        n %= self.order
        if point == self.generator:
            return self.multiply_generator(n)

        result = Point()
        addend = point
        while n:
            if n & 1:
                result = self.add_points(result, addend)
            addend = self.double_point(addend)
            n >>= 1
        return result

    def multiply_generator(self, n: int) -> Point:
        n %= self.order
        result = Point()
        for bit, double in enumerate(self._generator_doubles):
            if n >> bit == 0:
                break
            if (n >> bit) & 1:
                result = self.add_points(result, double)
        return result


# --- SINGLETON INSTANCE --- #
SECP256K1 = EllipticCurve(
    a=0,
    b=7,
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    order=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    generator=(0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798,
               0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8),
    curve="secp256k1"
)
