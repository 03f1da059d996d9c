# geometry/sphere.py
import math
from typing import List, Optional
from core.bounds import Bounds
from core.ray import Ray
from core.tuple import Tuple, point
from geometry.hittable import Hittable
from geometry.intersection import Intersection

ORIGIN = point(0, 0, 0)


class Sphere(Hittable):
    """
    Unit sphere centred on the origin.
    """
    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []

        # A tangent ray yields the same t twice.
        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        return [Intersection(t1, shape_id), Intersection(t2, shape_id)]

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        return point - ORIGIN

    def bounds(self, world) -> Bounds:
        return Bounds(point(-1, -1, -1), point(1, 1, 1))

    def __repr__(self) -> str:
        return "Sphere()"
