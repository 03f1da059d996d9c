# geometry/csg.py
from enum import Enum
from typing import List, Optional
from core.bounds import Bounds
from core.errors import SceneGraphError
from core.ray import Ray
from core.tuple import Tuple
from geometry.hittable import Hittable
from geometry.intersection import Intersection


class CsgOperation(Enum):
    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"


def csg_allowed(operation: CsgOperation, lhit: bool, inside_left: bool, inside_right: bool) -> bool:
    """
    Decides whether a hit on one operand is part of the combined surface.

    Args:
        operation: The boolean operation being evaluated.
        lhit: True when the hit belongs to the left operand.
        inside_left: Whether the ray is currently inside the left operand.
        inside_right: Whether the ray is currently inside the right operand.
    """
    if operation is CsgOperation.UNION:
        return (lhit and not inside_right) or (not lhit and not inside_left)
    if operation is CsgOperation.INTERSECTION:
        return (lhit and inside_right) or (not lhit and inside_left)
    if operation is CsgOperation.DIFFERENCE:
        return (lhit and not inside_right) or (not lhit and inside_left)
    raise ValueError(f"Unknown CSG operation: {operation!r}")


def filter_intersections(world, csg_shape, xs: List[Intersection]) -> List[Intersection]:
    """
    Keeps the hits of a sorted intersection list that lie on the CSG surface.
    """
    operation = csg_shape.kind.operation
    left_id = csg_shape.kind.left
    inside_left = False
    inside_right = False
    result: List[Intersection] = []

    for intersection in xs:
        lhit = world.includes(left_id, intersection.object_id)
        if csg_allowed(operation, lhit, inside_left, inside_right):
            result.append(intersection)
        # Every crossing flips the inside state, kept or not.
        if lhit:
            inside_left = not inside_left
        else:
            inside_right = not inside_right
    return result


class CSG(Hittable):
    """
    Boolean combination of two shapes, referenced by id.
    """
    def __init__(self, operation: CsgOperation, left: int, right: int):
        self.operation = operation
        self.left = left
        self.right = right

    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        xs = world.get_shape(self.left).intersects(world, ray)
        xs.extend(world.get_shape(self.right).intersects(world, ray))
        xs.sort(key=lambda i: i.t)
        return filter_intersections(world, world.get_shape(shape_id), xs)

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        raise SceneGraphError("a CSG shape takes its normals from its operands")

    def bounds(self, world) -> Bounds:
        left = world.get_shape(self.left).parent_space_bounds(world)
        return left.combine(world.get_shape(self.right).parent_space_bounds(world))

    def __repr__(self) -> str:
        return f"CSG({self.operation.name}, left={self.left}, right={self.right})"
