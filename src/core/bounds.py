# core/bounds.py
import math
from typing import Iterable, List, Tuple as PyTuple
from core.matrix import Matrix
from core.tuple import EPSILON, Tuple, point

INFINITY = math.inf


def check_axis(origin: float, direction: float, minimum: float, maximum: float) -> PyTuple[float, float]:
    """
    Slab test for one axis: the t values where the ray enters and leaves
    the [minimum, maximum] slab, ordered so the first is the smaller.

    A ray parallel to the slab is inside it for every t when its origin lies
    within the slab (faces included), and never otherwise.
    """
    if abs(direction) < EPSILON:
        if minimum <= origin <= maximum:
            return -INFINITY, INFINITY
        return INFINITY, -INFINITY
    tmin = (minimum - origin) / direction
    tmax = (maximum - origin) / direction
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Bounds:
    """
    Axis-aligned bounding box. A box with any infinite extent is treated as
    unbounded: it never rejects a ray and stays unbounded when transformed.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Tuple, maximum: Tuple):
        self.minimum = minimum
        self.maximum = maximum

    @staticmethod
    def empty() -> "Bounds":
        return Bounds(point(INFINITY, INFINITY, INFINITY), point(-INFINITY, -INFINITY, -INFINITY))

    @staticmethod
    def infinite() -> "Bounds":
        return Bounds(point(-INFINITY, -INFINITY, -INFINITY), point(INFINITY, INFINITY, INFINITY))

    @staticmethod
    def from_points(points: Iterable[Tuple]) -> "Bounds":
        box = Bounds.empty()
        for p in points:
            box = box.add_point(p)
        return box

    def is_empty(self) -> bool:
        return (self.minimum.x > self.maximum.x or self.minimum.y > self.maximum.y
                or self.minimum.z > self.maximum.z)

    def is_bounded(self) -> bool:
        return all(math.isfinite(c) for c in (self.minimum.x, self.minimum.y, self.minimum.z,
                                              self.maximum.x, self.maximum.y, self.maximum.z))

    def add_point(self, p: Tuple) -> "Bounds":
        return Bounds(
            point(min(self.minimum.x, p.x), min(self.minimum.y, p.y), min(self.minimum.z, p.z)),
            point(max(self.maximum.x, p.x), max(self.maximum.y, p.y), max(self.maximum.z, p.z)),
        )

    def combine(self, other: "Bounds") -> "Bounds":
        """
        Smallest box enclosing both boxes.
        """
        if other.is_empty():
            return self
        if self.is_empty():
            return other
        return self.add_point(other.minimum).add_point(other.maximum)

    def corners(self) -> List[Tuple]:
        lo, hi = self.minimum, self.maximum
        return [
            point(x, y, z)
            for x in (lo.x, hi.x)
            for y in (lo.y, hi.y)
            for z in (lo.z, hi.z)
        ]

    def transform(self, matrix: Matrix) -> "Bounds":
        """
        Axis-aligned box around this box's eight corners after transformation.
        """
        if self.is_empty():
            return self
        if not self.is_bounded():
            # Corners at infinity would turn into NaN under rotation.
            return Bounds.infinite()
        return Bounds.from_points(matrix * corner for corner in self.corners())

    def intersects(self, ray) -> bool:
        if self.is_empty():
            return False
        if not self.is_bounded():
            return True
        xmin, xmax = check_axis(ray.origin.x, ray.direction.x, self.minimum.x, self.maximum.x)
        ymin, ymax = check_axis(ray.origin.y, ray.direction.y, self.minimum.y, self.maximum.y)
        zmin, zmax = check_axis(ray.origin.z, ray.direction.z, self.minimum.z, self.maximum.z)
        tmin = max(xmin, ymin, zmin)
        tmax = min(xmax, ymax, zmax)
        return tmin <= tmax

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    __hash__ = None

    def __repr__(self) -> str:
        return f"Bounds({self.minimum!r}, {self.maximum!r})"
