# geometry/hittable.py
from typing import List, Optional
from core.bounds import Bounds
from core.ray import Ray
from core.tuple import Tuple
from geometry.intersection import Intersection


class Hittable:
    """
    Abstract geometry of one shape kind, expressed in the shape's own object
    space. A Shape owns exactly one Hittable and handles the transforms.
    """
    def local_intersect(self, world, ray: Ray, shape_id: int) -> List[Intersection]:
        """
        Intersects a ray that has already been mapped into object space.

        Returns:
            Intersections tagged with shape_id, ordered by t.
        """
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def bounds(self, world) -> Bounds:
        raise NotImplementedError("bounds() must be implemented by subclasses.")
