from geometry.csg import CsgOperation, csg_allowed, filter_intersections
from geometry.intersection import Intersection, PreparedComputation, hit, prepare_computations
from geometry.shape import Shape
from geometry.world import DEFAULT_BOUNCES, World

__all__ = [
    "CsgOperation",
    "csg_allowed",
    "filter_intersections",
    "Intersection",
    "PreparedComputation",
    "hit",
    "prepare_computations",
    "Shape",
    "World",
    "DEFAULT_BOUNCES",
]
