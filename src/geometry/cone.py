# geometry/cone.py
import math
from typing import List, Optional
from core.bounds import Bounds
from core.ray import Ray
from core.tuple import EPSILON, Tuple, point, vector
from geometry.cylinder import _within_radius
from geometry.hittable import Hittable
from geometry.intersection import Intersection


class Cone(Hittable):
    """
    Double-napped cone x^2 + z^2 = y^2 around the y axis, truncated to
    minimum < y < maximum. Cap radius equals the cap's |y|.
    """
    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False):
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        xs: List[Intersection] = []
        o, d = ray.origin, ray.direction
        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2.0 * o.x * d.x - 2.0 * o.y * d.y + 2.0 * o.z * d.z
        c = o.x * o.x - o.y * o.y + o.z * o.z

        if abs(a) < EPSILON:
            # Ray parallel to one of the halves: at most one wall hit.
            if abs(b) >= EPSILON:
                self._append_if_inside(ray, -c / (2.0 * b), shape_id, xs)
        else:
            discriminant = b * b - 4.0 * a * c
            if discriminant < 0:
                return []
            sqrt_disc = math.sqrt(discriminant)
            t0 = (-b - sqrt_disc) / (2.0 * a)
            t1 = (-b + sqrt_disc) / (2.0 * a)
            if t0 > t1:
                t0, t1 = t1, t0
            self._append_if_inside(ray, t0, shape_id, xs)
            self._append_if_inside(ray, t1, shape_id, xs)

        self._intersect_caps(ray, shape_id, xs)
        xs.sort(key=lambda i: i.t)
        return xs

    def _append_if_inside(self, ray: Ray, t: float, shape_id: int, xs: List[Intersection]):
        y = ray.origin.y + t * ray.direction.y
        if self.minimum < y < self.maximum:
            xs.append(Intersection(t, shape_id))

    def _intersect_caps(self, ray: Ray, shape_id: int, xs: List[Intersection]):
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return
        for cap in (self.minimum, self.maximum):
            t = (cap - ray.origin.y) / ray.direction.y
            if _within_radius(ray, t, abs(cap)):
                xs.append(Intersection(t, shape_id))

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        dist = point.x * point.x + point.z * point.z
        if point.y >= self.maximum - EPSILON and dist < self.maximum * self.maximum:
            return vector(0, 1, 0)
        if point.y <= self.minimum + EPSILON and dist < self.minimum * self.minimum:
            return vector(0, -1, 0)

        y = math.sqrt(dist)
        if point.y > 0:
            y = -y
        return vector(point.x, y, point.z)

    def bounds(self, world) -> Bounds:
        limit = max(abs(self.minimum), abs(self.maximum))
        return Bounds(point(-limit, self.minimum, -limit), point(limit, self.maximum, limit))

    def __repr__(self) -> str:
        return f"Cone(minimum={self.minimum}, maximum={self.maximum}, closed={self.closed})"
