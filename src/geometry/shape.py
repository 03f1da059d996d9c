# geometry/shape.py
import math
from typing import List, Optional
from core.bounds import Bounds
from core.matrix import Matrix
from core.ray import Ray
from core.tuple import Tuple, float_equal
from geometry.cone import Cone
from geometry.csg import CSG, CsgOperation
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.group import Group
from geometry.hittable import Hittable
from geometry.intersection import Intersection
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.triangle import SmoothTriangle, Triangle
from materials.material import Material


class Shape:
    """
    A shape in the scene: one geometric kind plus its transform, material and
    place in the scene graph.

    Shapes refer to their parent and children by world id, never by object
    reference. The id and parent are filled in by the World when the shape is
    registered or attached.
    """
    def __init__(self, kind: Hittable, transform: Optional[Matrix] = None,
                 material: Optional[Material] = None):
        self.id: Optional[int] = None
        self.parent: Optional[int] = None
        self.kind = kind
        self.material = material if material is not None else Material()
        self.set_transform(transform if transform is not None else Matrix.identity())

    # Factories

    @staticmethod
    def sphere() -> "Shape":
        return Shape(Sphere())

    @staticmethod
    def plane() -> "Shape":
        return Shape(Plane())

    @staticmethod
    def cube() -> "Shape":
        return Shape(Cube())

    @staticmethod
    def cylinder(minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False) -> "Shape":
        return Shape(Cylinder(minimum, maximum, closed))

    @staticmethod
    def cone(minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False) -> "Shape":
        return Shape(Cone(minimum, maximum, closed))

    @staticmethod
    def triangle(p1: Tuple, p2: Tuple, p3: Tuple) -> "Shape":
        return Shape(Triangle(p1, p2, p3))

    @staticmethod
    def smooth_triangle(p1: Tuple, p2: Tuple, p3: Tuple, n1: Tuple, n2: Tuple, n3: Tuple) -> "Shape":
        return Shape(SmoothTriangle(p1, p2, p3, n1, n2, n3))

    @staticmethod
    def group() -> "Shape":
        return Shape(Group())

    @staticmethod
    def csg(operation: CsgOperation, left: int, right: int) -> "Shape":
        return Shape(CSG(operation, left, right))

    # Builders

    def set_transform(self, transform: Matrix):
        self.transform = transform
        self.inverse_transform = transform.inverse()
        self.inverse_transpose = self.inverse_transform.transpose()

    def with_transform(self, transform: Matrix) -> "Shape":
        self.set_transform(transform)
        return self

    def with_material(self, material: Material) -> "Shape":
        self.material = material
        return self

    def is_group(self) -> bool:
        return isinstance(self.kind, Group)

    def is_csg(self) -> bool:
        return isinstance(self.kind, CSG)

    def is_opaque(self) -> bool:
        return float_equal(self.material.transparency, 0.0)

    # Geometry

    def intersects(self, world, ray: Ray) -> List[Intersection]:
        """
        Intersects a world-space ray with this shape.

        Args:
            world: The World the shape (and any children) are registered in.
            ray: Ray in the space of this shape's parent.

        Returns:
            Intersections ordered by t.
        """
        local_ray = ray.transform(self.inverse_transform)
        return self.kind.local_intersect(world, local_ray, self.id)

    def world_to_object(self, world, world_point: Tuple) -> Tuple:
        p = world_point
        if self.parent is not None:
            p = world.get_shape(self.parent).world_to_object(world, p)
        return self.inverse_transform * p

    def normal_to_world(self, world, normal: Tuple) -> Tuple:
        n = self.inverse_transpose * normal
        n = Tuple(n.x, n.y, n.z, 0.0).normalize()
        if self.parent is not None:
            n = world.get_shape(self.parent).normal_to_world(world, n)
        return n

    def normal_at(self, world, world_point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        local_point = self.world_to_object(world, world_point)
        local_normal = self.kind.local_normal_at(local_point, hit)
        return self.normal_to_world(world, local_normal)

    def bounds(self, world) -> Bounds:
        """
        Bounds in object space.
        """
        return self.kind.bounds(world)

    def parent_space_bounds(self, world) -> Bounds:
        return self.bounds(world).transform(self.transform)

    def __repr__(self) -> str:
        return f"Shape(id={self.id}, parent={self.parent}, kind={self.kind!r})"
