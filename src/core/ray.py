# core/ray.py
from core.errors import TupleKindError
from core.matrix import Matrix
from core.tuple import Tuple


class Ray:
    """
    Represents a ray in 3D space with an origin point and a direction vector.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Tuple, direction: Tuple):
        if not origin.is_point():
            raise TupleKindError(f"ray origin must be a point, got {origin!r}")
        if not direction.is_vector():
            raise TupleKindError(f"ray direction must be a vector, got {direction!r}")
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> "Ray":
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
