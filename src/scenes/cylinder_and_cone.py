# scenes/cylinder_and_cone.py
import math
from core.color import rgb, white
from core.matrix import Matrix, view_transform
from core.tuple import point, vector
from geometry.shape import Shape
from geometry.world import World
from materials.light import PointLight
from materials.material import Material
from materials.patterns import CheckersPattern, RingPattern
from materials.presets import MaterialPresets
from scenes.scene import Scene


def build() -> Scene:
    """Open and closed cylinders and a glass cone on a checkered floor."""
    shapes = [
        Shape.plane()
        .with_material(Material(pattern=RingPattern(rgb(107, 144, 149), rgb(185, 215, 233))))
        .with_transform(Matrix.identity().rotate_x(math.pi / 2).translate(0.0, 0.0, 10.0)),
        Shape.plane()
        .with_material(Material(pattern=CheckersPattern(white(), rgb(33, 149, 77)))),
        Shape.cylinder(0.0, 2.0, False)
        .with_material(MaterialPresets.glass())
        .with_transform(Matrix.identity().translate(1.0, 0.0, 3.0)),
        Shape.cone(-1.0, 0.0, True)
        .with_material(MaterialPresets.glass())
        .with_transform(Matrix.identity().translate(1.0, 3.0, 3.0)),
        Shape.cylinder(0.0, 1.0, True)
        .with_material(MaterialPresets.chrome())
        .with_transform(Matrix.identity().scale(0.8, 1.0, 0.8).translate(-3.0, 0.0, 3.0)),
        Shape.cylinder(0.0, 3.0, False)
        .with_material(MaterialPresets.pastel(rgb(179, 217, 170)))
        .with_transform(Matrix.identity()
                        .scale(0.4, 0.4, 0.4)
                        .rotate_x(math.pi / 2)
                        .translate(-1.5, 0.4, 0.0)),
        Shape.cylinder(0.0, 1.0, True)
        .with_material(MaterialPresets.pastel(rgb(149, 52, 47)))
        .with_transform(Matrix.identity()
                        .rotate_z(math.pi / 2)
                        .scale(3.0, 0.5, 0.5)
                        .rotate_y(-0.6)
                        .translate(1.0, 0.5, 6.0)),
    ]
    world = World(PointLight(point(-10, 10, -10), white())).with_objects(shapes)
    return Scene(world, view_transform(point(0, 2.5, -6), point(0, 1, 3), vector(0, 1, 0)))
