# materials/light.py
from core.color import Color, white
from core.errors import TupleKindError
from core.tuple import Tuple, point


class PointLight:
    """
    A light with no size, emitting the same intensity in every direction.
    """
    def __init__(self, position: Tuple, intensity: Color):
        if not position.is_point():
            raise TupleKindError(f"light position must be a point, got {position!r}")
        self.position = position
        self.intensity = intensity

    @staticmethod
    def default() -> "PointLight":
        """
        White light up and to the left, behind the camera of most test scenes.
        """
        return PointLight(point(-10, 10, -10), white())

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
