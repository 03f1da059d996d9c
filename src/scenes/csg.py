# scenes/csg.py
import math
from core.color import rgb
from core.matrix import Matrix, view_transform
from core.tuple import point, vector
from geometry.csg import CsgOperation
from geometry.shape import Shape
from geometry.world import World
from materials.light import PointLight
from materials.material import Material
from materials.patterns import CheckersPattern
from materials.presets import MaterialPresets
from scenes.scene import Scene

SIDE = 6.0


def build() -> Scene:
    """
    The classic CSG demo: a chrome sphere-cube intersection with three
    crossing cylinders carved out of it.
    """
    half = SIDE / 2.0
    quarter = SIDE / 4.0
    world = World(PointLight.default())

    checkers = CheckersPattern(rgb(237, 234, 203), rgb(42, 39, 31))
    world.add_shape(Shape.plane()
                    .with_material(Material(pattern=checkers))
                    .with_transform(Matrix.identity().translate(0.0, -half, 0.0)))
    world.add_shape(Shape.plane()
                    .with_material(Material(pattern=checkers))
                    .with_transform(Matrix.identity().rotate_x(math.pi / 2).translate(0.0, 0.0, 11.0)))

    cylinder_y = world.add_shape(Shape.cylinder(-half, half, True)
                                 .with_material(MaterialPresets.pastel(rgb(239, 17, 0))))
    cylinder_x = world.add_shape(Shape.cylinder(-half, half, True)
                                 .with_transform(Matrix.identity().rotate_z(math.pi / 2))
                                 .with_material(MaterialPresets.pastel(rgb(244, 121, 2))))
    cross = world.create_csg(CsgOperation.UNION, cylinder_y, cylinder_x)
    cylinder_z = world.add_shape(Shape.cylinder(-half, half, True)
                                 .with_transform(Matrix.identity().rotate_x(math.pi / 2))
                                 .with_material(MaterialPresets.pastel(rgb(227, 224, 8))))
    triple_cross = world.create_csg(CsgOperation.UNION, cross, cylinder_z)

    cube = world.add_shape(Shape.cube()
                           .with_transform(Matrix.identity().scale(quarter, quarter, quarter))
                           .with_material(MaterialPresets.chrome()))
    sphere = world.add_shape(Shape.sphere()
                             .with_transform(Matrix.identity().scale(half / 1.5, half / 1.5, half / 1.5))
                             .with_material(MaterialPresets.darker_chrome()))
    rounded_cube = world.create_csg(CsgOperation.INTERSECTION, sphere, cube)

    world.create_csg(CsgOperation.DIFFERENCE, rounded_cube, triple_cross)

    view = view_transform(point(5, 4, -7), point(0, 0, 0), vector(0, 1, 0))
    return Scene(world, view)
