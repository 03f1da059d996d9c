# core/tuple.py
import math
from core.errors import TupleKindError

EPSILON = 0.00001


def float_equal(a: float, b: float) -> bool:
    # Infinite bounds compare equal to themselves.
    if a == b:
        return True
    return abs(a - b) < EPSILON


class Tuple:
    """
    A homogeneous 4-component tuple. Points carry w=1, vectors w=0.
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: "Tuple") -> "Tuple":
        w = self.w + other.w
        if w > 1.0:
            raise TupleKindError("cannot add two points")
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> "Tuple":
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> "Tuple":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Tuple":
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (float_equal(self.x, other.x) and float_equal(self.y, other.y)
                and float_equal(self.z, other.z) and float_equal(self.w, other.w))

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Tuple":
        l = self.magnitude()
        if l == 0:
            return Tuple(0.0, 0.0, 0.0, self.w)
        return self / l

    def dot(self, other: "Tuple") -> float:
        if not (self.is_vector() and other.is_vector()):
            raise TupleKindError("dot product is only defined for vectors")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Tuple") -> "Tuple":
        if not (self.is_vector() and other.is_vector()):
            raise TupleKindError("cross product is only defined for vectors")
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def reflect(self, normal: "Tuple") -> "Tuple":
        """
        Reflects this vector about the given normal.
        """
        return self - normal * 2 * self.dot(normal)

    def __repr__(self) -> str:
        if self.is_point():
            return f"point({self.x}, {self.y}, {self.z})"
        if self.is_vector():
            return f"vector({self.x}, {self.y}, {self.z})"
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 0.0)
