# geometry/cylinder.py
import math
from typing import List, Optional
from core.bounds import Bounds
from core.ray import Ray
from core.tuple import EPSILON, Tuple, point, vector
from geometry.hittable import Hittable
from geometry.intersection import Intersection


class Cylinder(Hittable):
    """
    Unit-radius cylinder around the y axis, truncated to minimum < y < maximum.
    A closed cylinder also has flat caps at both ends.
    """
    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False):
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        xs: List[Intersection] = []
        o, d = ray.origin, ray.direction
        a = d.x * d.x + d.z * d.z

        # A ray parallel to the axis can only strike the caps.
        if abs(a) >= EPSILON:
            b = 2.0 * o.x * d.x + 2.0 * o.z * d.z
            c = o.x * o.x + o.z * o.z - 1.0
            discriminant = b * b - 4.0 * a * c
            if discriminant < 0:
                return []

            sqrt_disc = math.sqrt(discriminant)
            t0 = (-b - sqrt_disc) / (2.0 * a)
            t1 = (-b + sqrt_disc) / (2.0 * a)
            if t0 > t1:
                t0, t1 = t1, t0

            for t in (t0, t1):
                y = o.y + t * d.y
                if self.minimum < y < self.maximum:
                    xs.append(Intersection(t, shape_id))

        self._intersect_caps(ray, shape_id, xs)
        xs.sort(key=lambda i: i.t)
        return xs

    def _intersect_caps(self, ray: Ray, shape_id: int, xs: List[Intersection]):
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return
        for cap in (self.minimum, self.maximum):
            t = (cap - ray.origin.y) / ray.direction.y
            if _within_radius(ray, t, 1.0):
                xs.append(Intersection(t, shape_id))

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        dist = point.x * point.x + point.z * point.z
        if dist < 1.0 and point.y >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < 1.0 and point.y <= self.minimum + EPSILON:
            return vector(0, -1, 0)
        return vector(point.x, 0, point.z)

    def bounds(self, world) -> Bounds:
        return Bounds(point(-1, self.minimum, -1), point(1, self.maximum, 1))

    def __repr__(self) -> str:
        return f"Cylinder(minimum={self.minimum}, maximum={self.maximum}, closed={self.closed})"


def _within_radius(ray: Ray, t: float, radius: float) -> bool:
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius
