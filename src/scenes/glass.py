# scenes/glass.py
import math
from core.color import Color, white
from core.matrix import Matrix, view_transform
from core.tuple import point, vector
from geometry.shape import Shape
from geometry.world import World
from materials.light import PointLight
from materials.material import Material
from materials.patterns import CheckersPattern
from materials.presets import MaterialPresets
from scenes.scene import Scene


def build() -> Scene:
    """
    A glass ball holding an air bubble, seen against a checkered wall.
    Exercises refraction through nested transparent solids.
    """
    wall = Shape.plane().with_material(Material(
        pattern=CheckersPattern(Color(0.15, 0.15, 0.15), Color(0.85, 0.85, 0.85))))
    wall.with_transform(Matrix.identity().rotate_x(math.pi / 2).translate(0.0, 0.0, 10.0))

    ball = Shape.sphere().with_material(MaterialPresets.glass())
    bubble = Shape.sphere().with_material(MaterialPresets.air())
    bubble.with_transform(Matrix.identity().scale(0.5, 0.5, 0.5))

    world = World(PointLight(point(2, 10, -5), white() * 0.9))
    world.with_objects([wall, ball, bubble])
    return Scene(world, view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)),
                 field_of_view=0.45)
