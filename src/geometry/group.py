# geometry/group.py
from typing import List, Optional
from core.bounds import Bounds
from core.errors import SceneGraphError
from core.ray import Ray
from core.tuple import Tuple
from geometry.hittable import Hittable
from geometry.intersection import Intersection


class Group(Hittable):
    """
    An ordered collection of child shape ids sharing the group's transform.

    The bounding box is only used for ray rejection once World.build_bounds()
    has cached it; until then every child is tested.
    """
    def __init__(self, children: Optional[List[int]] = None):
        self.children: List[int] = list(children) if children else []
        self.cached_bounds: Optional[Bounds] = None

    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        if self.cached_bounds is not None and not self.cached_bounds.intersects(ray):
            return []

        xs: List[Intersection] = []
        for child_id in self.children:
            xs.extend(world.get_shape(child_id).intersects(world, ray))
        # list.sort is stable, so equal t keep child order.
        xs.sort(key=lambda i: i.t)
        return xs

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        raise SceneGraphError("a group has no surface normal of its own")

    def bounds(self, world) -> Bounds:
        """
        Box around every child, in the group's own space.
        """
        if self.cached_bounds is not None:
            return self.cached_bounds
        box = Bounds.empty()
        for child_id in self.children:
            box = box.combine(world.get_shape(child_id).parent_space_bounds(world))
        return box

    def __repr__(self) -> str:
        return f"Group(children={self.children})"
