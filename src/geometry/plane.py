# geometry/plane.py
import math
from typing import List, Optional
from core.bounds import Bounds
from core.ray import Ray
from core.tuple import EPSILON, Tuple, point, vector
from geometry.hittable import Hittable
from geometry.intersection import Intersection


class Plane(Hittable):
    """
    The infinite xz plane at y=0.
    """
    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        # Parallel and coplanar rays never register a hit.
        if abs(ray.direction.y) < EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, shape_id)]

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        return vector(0, 1, 0)

    def bounds(self, world) -> Bounds:
        return Bounds(point(-math.inf, 0, -math.inf), point(math.inf, 0, math.inf))

    def __repr__(self) -> str:
        return "Plane()"
