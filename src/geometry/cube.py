# geometry/cube.py
from typing import List, Optional
from core.bounds import Bounds, check_axis
from core.ray import Ray
from core.tuple import Tuple, point, vector
from geometry.hittable import Hittable
from geometry.intersection import Intersection


class Cube(Hittable):
    """
    Axis-aligned cube spanning -1..1 on every axis.
    """
    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x, -1.0, 1.0)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y, -1.0, 1.0)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z, -1.0, 1.0)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax:
            return []
        return [Intersection(tmin, shape_id), Intersection(tmax, shape_id)]

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)
        if maxc == ax:
            return vector(point.x, 0, 0)
        if maxc == ay:
            return vector(0, point.y, 0)
        return vector(0, 0, point.z)

    def bounds(self, world) -> Bounds:
        return Bounds(point(-1, -1, -1), point(1, 1, 1))

    def __repr__(self) -> str:
        return "Cube()"
