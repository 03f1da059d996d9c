# scenes/scene.py
import math
from dataclasses import dataclass
from camera.camera import Camera
from core.matrix import Matrix
from geometry.world import World


@dataclass
class Scene:
    """A built world plus the view it is meant to be seen from."""
    world: World
    view: Matrix
    field_of_view: float = math.pi / 3

    def camera(self, width: int, height: int) -> Camera:
        return Camera(width, height, self.field_of_view, self.view)
