# geometry/world.py
import math
from typing import Iterable, List, Optional
from core.color import Color, black
from core.errors import SceneGraphError, UnknownShapeError
from core.matrix import scaling
from core.ray import Ray
from core.tuple import Tuple, float_equal
from geometry.csg import CsgOperation
from geometry.intersection import Intersection, PreparedComputation, hit, prepare_computations
from geometry.shape import Shape
from materials.light import PointLight
from materials.material import Material

DEFAULT_BOUNCES = 5


class World:
    """
    An append-only arena of shapes lit by a single point light.

    Shape ids are positions in the arena and are never reused. Shapes attached
    to a group or CSG are reachable only through their parent; everything else
    is top level. Build the scene first, then render: the arena must not change
    while rays are being traced.
    """
    def __init__(self, light: Optional[PointLight] = None):
        self.shapes: List[Shape] = []
        self.light = light if light is not None else PointLight.default()
        self._bounds_built = False

    @staticmethod
    def default_world() -> "World":
        """
        Two concentric spheres under the default light.
        """
        outer = Shape.sphere().with_material(
            Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Shape.sphere().with_transform(scaling(0.5, 0.5, 0.5))
        return World(PointLight.default()).with_objects([outer, inner])

    # Registry

    def add_shape(self, shape: Shape) -> int:
        if shape.id is not None:
            raise SceneGraphError(f"shape is already registered as id {shape.id}")
        shape.id = len(self.shapes)
        self.shapes.append(shape)
        self._invalidate_bounds()
        return shape.id

    def with_objects(self, shapes: Iterable[Shape]) -> "World":
        for shape in shapes:
            self.add_shape(shape)
        return self

    def get_shape(self, shape_id: int) -> Shape:
        if isinstance(shape_id, bool) or not isinstance(shape_id, int) \
                or not 0 <= shape_id < len(self.shapes):
            raise UnknownShapeError(f"no shape with id {shape_id!r}")
        return self.shapes[shape_id]

    def add_shape_to_group(self, group_id: int, shape_id: int) -> int:
        """
        Attaches a registered shape to a registered group.

        Returns:
            The child's id.
        """
        group = self.get_shape(group_id)
        child = self.get_shape(shape_id)
        if not group.is_group():
            raise SceneGraphError(f"shape {group_id} is not a group")
        self._check_attachable(group_id, shape_id)

        child.parent = group_id
        group.kind.children.append(shape_id)
        self._invalidate_bounds()
        return shape_id

    def create_csg(self, operation: CsgOperation, left_id: int, right_id: int) -> int:
        """
        Registers a CSG shape combining two registered, unparented shapes.

        Returns:
            The new CSG shape's id.
        """
        left = self.get_shape(left_id)
        right = self.get_shape(right_id)
        if left_id == right_id:
            raise SceneGraphError("a CSG needs two distinct operands")
        for operand in (left, right):
            if operand.parent is not None:
                raise SceneGraphError(f"shape {operand.id} already belongs to shape {operand.parent}")

        csg_id = self.add_shape(Shape.csg(operation, left_id, right_id))
        left.parent = csg_id
        right.parent = csg_id
        self._invalidate_bounds()
        return csg_id

    def _check_attachable(self, parent_id: int, child_id: int):
        if parent_id == child_id:
            raise SceneGraphError(f"shape {child_id} cannot contain itself")
        child = self.shapes[child_id]
        if child.parent is not None:
            raise SceneGraphError(f"shape {child_id} already belongs to shape {child.parent}")
        if self.includes(child_id, parent_id):
            raise SceneGraphError(f"attaching shape {child_id} to {parent_id} would create a cycle")

    def get_children(self, shape_id: int) -> List[int]:
        shape = self.get_shape(shape_id)
        if shape.is_group():
            return list(shape.kind.children)
        if shape.is_csg():
            return [shape.kind.left, shape.kind.right]
        return []

    def includes(self, container_id: int, shape_id: int) -> bool:
        """
        True when shape_id is container_id itself or one of its descendants.
        """
        self.get_shape(container_id)
        current = shape_id
        while current is not None:
            if current == container_id:
                return True
            current = self.get_shape(current).parent
        return False

    def top_level_shapes(self) -> List[Shape]:
        return [shape for shape in self.shapes if shape.parent is None]

    # Bounding boxes

    def build_bounds(self):
        """
        Computes and caches the bounding box of every group so that rays
        missing a group's box skip its children. Any later change to the
        scene graph drops the cache.
        """
        self._invalidate_bounds()
        for shape in self.top_level_shapes():
            self._build_bounds(shape)
        self._bounds_built = True

    def _build_bounds(self, shape: Shape):
        for child_id in self.get_children(shape.id):
            self._build_bounds(self.shapes[child_id])
        if shape.is_group():
            shape.kind.cached_bounds = shape.kind.bounds(self)

    def _invalidate_bounds(self):
        if not self._bounds_built:
            return
        for shape in self.shapes:
            if shape.is_group():
                shape.kind.cached_bounds = None
        self._bounds_built = False

    # Tracing

    def intersect_world(self, ray: Ray) -> List[Intersection]:
        xs: List[Intersection] = []
        for shape in self.top_level_shapes():
            xs.extend(shape.intersects(self, ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def is_shadowed(self, point: Tuple) -> bool:
        v = self.light.position - point
        distance = v.magnitude()
        shadow_ray = Ray(point, v.normalize())
        h = hit(self.intersect_world(shadow_ray))
        return h is not None and h.t < distance

    def shade_hit(self, comps: PreparedComputation, remaining: int = DEFAULT_BOUNCES) -> Color:
        shape = self.get_shape(comps.object_id)
        material = shape.material
        in_shadow = self.is_shadowed(comps.over_point)
        surface = material.lighting(shape, self.light, comps.over_point, comps.eye_vector,
                                    comps.normal_vector, in_shadow, self)

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: PreparedComputation, remaining: int = DEFAULT_BOUNCES) -> Color:
        material = self.get_shape(comps.object_id).material
        if remaining <= 0 or float_equal(material.reflective, 0.0):
            return black()
        reflect_ray = Ray(comps.over_point, comps.reflection_vector)
        return self.color_at(reflect_ray, remaining - 1) * material.reflective

    def refracted_color(self, comps: PreparedComputation, remaining: int = DEFAULT_BOUNCES) -> Color:
        shape = self.get_shape(comps.object_id)
        if remaining <= 0 or shape.is_opaque():
            return black()

        # Snell's law
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eye_vector.dot(comps.normal_vector)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            # Total internal reflection
            return black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normal_vector * (n_ratio * cos_i - cos_t) - comps.eye_vector * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * shape.material.transparency

    def color_at(self, ray: Ray, remaining: int = DEFAULT_BOUNCES) -> Color:
        xs = self.intersect_world(ray)
        h = hit(xs)
        if h is None:
            return black()
        return self.shade_hit(prepare_computations(h, ray, self, xs), remaining)

    def __len__(self) -> int:
        return len(self.shapes)

    def __repr__(self) -> str:
        return f"World(shapes={len(self.shapes)}, light={self.light!r})"
