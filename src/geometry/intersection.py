# geometry/intersection.py
import math
from typing import List, Optional
from core.ray import Ray
from core.tuple import EPSILON, Tuple, float_equal


class Intersection:
    """
    Records where a ray crosses a shape: the ray parameter t, the id of the
    shape that was struck and, for triangles, the barycentric u and v.
    """
    __slots__ = ("t", "object_id", "u", "v")

    def __init__(self, t: float, object_id: int, u: Optional[float] = None, v: Optional[float] = None):
        self.t = t
        self.object_id = object_id
        self.u = u
        self.v = v

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return (float_equal(self.t, other.t) and self.object_id == other.object_id
                and _optional_equal(self.u, other.u) and _optional_equal(self.v, other.v))

    __hash__ = None

    def __repr__(self) -> str:
        if self.u is None:
            return f"Intersection(t={self.t}, object_id={self.object_id})"
        return f"Intersection(t={self.t}, object_id={self.object_id}, u={self.u}, v={self.v})"


def _optional_equal(a: Optional[float], b: Optional[float]) -> bool:
    if a is None or b is None:
        return a is b
    return float_equal(a, b)


def hit(xs: List[Intersection]) -> Optional[Intersection]:
    """
    Returns the visible intersection, the one with the smallest strictly
    positive t. None when everything is behind the ray origin.
    """
    for intersection in sorted(xs, key=lambda i: i.t):
        if intersection.t > 0:
            return intersection
    return None


class PreparedComputation:
    """
    Shading geometry derived from a single hit.
    """
    def __init__(self, t: float, object_id: int, point: Tuple, eye_vector: Tuple,
                 normal_vector: Tuple, inside: bool, n1: float = 1.0, n2: float = 1.0):
        self.t = t
        self.object_id = object_id
        self.point = point
        self.eye_vector = eye_vector
        self.normal_vector = normal_vector
        self.inside = inside
        self.n1 = n1
        self.n2 = n2
        self.reflection_vector = None
        # Secondary rays start just off the surface to avoid self-intersection.
        self.over_point = point + normal_vector * EPSILON
        self.under_point = point - normal_vector * EPSILON

    def schlick(self) -> float:
        """
        Schlick's approximation of the Fresnel reflectance at this hit.

        Returns:
            The fraction of light reflected, 1.0 on total internal reflection.
        """
        cos = self.eye_vector.dot(self.normal_vector)
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t >= 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)
        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def refractive_indices(intersection: Intersection, xs: List[Intersection], world):
    """
    Walks the sorted intersections keeping the stack of shapes the ray is
    currently inside, and returns (n1, n2) on either side of the given hit.
    """
    containers: List[int] = []
    for current in xs:
        is_hit = current == intersection
        if is_hit:
            n1 = _top_index(containers, world)

        if current.object_id in containers:
            containers.remove(current.object_id)
        else:
            containers.append(current.object_id)

        if is_hit:
            return n1, _top_index(containers, world)
    raise ValueError(f"{intersection!r} is not among the intersections")


def _top_index(containers: List[int], world) -> float:
    if not containers:
        return 1.0
    return world.get_shape(containers[-1]).material.refractive_index


def prepare_computations(intersection: Intersection, ray: Ray, world,
                         xs: Optional[List[Intersection]] = None) -> PreparedComputation:
    if xs is None:
        xs = [intersection]
    shape = world.get_shape(intersection.object_id)

    point = ray.position(intersection.t)
    eye_vector = -ray.direction
    normal_vector = shape.normal_at(world, point, intersection)
    inside = normal_vector.dot(eye_vector) < 0
    if inside:
        normal_vector = -normal_vector

    n1, n2 = refractive_indices(intersection, xs, world)
    comps = PreparedComputation(intersection.t, intersection.object_id, point, eye_vector,
                                normal_vector, inside, n1, n2)
    comps.reflection_vector = ray.direction.reflect(normal_vector)
    return comps
