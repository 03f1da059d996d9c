# geometry/triangle.py
from typing import List, Optional
from core.bounds import Bounds
from core.errors import SceneGraphError
from core.ray import Ray
from core.tuple import EPSILON, Tuple
from geometry.hittable import Hittable
from geometry.intersection import Intersection


class Triangle(Hittable):
    """
    Flat triangle. Edges and the face normal are derived once from the three
    corners and never change.
    """
    def __init__(self, p1: Tuple, p2: Tuple, p3: Tuple):
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        self.normal = self.e2.cross(self.e1).normalize()

    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        # Möller–Trumbore
        dir_cross_e2 = ray.direction.cross(self.e2)
        det = self.e1.dot(dir_cross_e2)
        if abs(det) < EPSILON:
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * p1_to_origin.dot(dir_cross_e2)
        if u < 0 or u > 1:
            return []

        origin_cross_e1 = p1_to_origin.cross(self.e1)
        v = f * ray.direction.dot(origin_cross_e1)
        if v < 0 or u + v > 1:
            return []

        t = f * self.e2.dot(origin_cross_e1)
        return [Intersection(t, shape_id, u, v)]

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        return self.normal

    def bounds(self, world) -> Bounds:
        return Bounds.from_points((self.p1, self.p2, self.p3))

    def __repr__(self) -> str:
        return f"Triangle({self.p1!r}, {self.p2!r}, {self.p3!r})"


class SmoothTriangle(Triangle):
    """
    Triangle with a normal per vertex. The surface normal is interpolated
    from the barycentric coordinates of the hit.
    """
    def __init__(self, p1: Tuple, p2: Tuple, p3: Tuple, n1: Tuple, n2: Tuple, n3: Tuple):
        super().__init__(p1, p2, p3)
        self.n1 = n1
        self.n2 = n2
        self.n3 = n3

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        if hit is None or hit.u is None or hit.v is None:
            raise SceneGraphError("smooth triangle normals need the hit's u and v")
        return self.n2 * hit.u + self.n3 * hit.v + self.n1 * (1.0 - hit.u - hit.v)

    def __repr__(self) -> str:
        return (f"SmoothTriangle({self.p1!r}, {self.p2!r}, {self.p3!r}, "
                f"{self.n1!r}, {self.n2!r}, {self.n3!r})")
