# scenes/first_demo.py
import math
from core.color import Color, black, rgb, white
from core.matrix import Matrix, view_transform
from core.tuple import point, vector
from geometry.shape import Shape
from geometry.world import World
from materials.light import PointLight
from materials.material import Material
from materials.patterns import CheckersPattern, GradientPattern, RingPattern, StripePattern
from scenes.scene import Scene


def build() -> Scene:
    """
    Patterned spheres on a reflective checkered floor in front of a noisy
    ringed wall.
    """
    floor = Shape.plane().with_material(Material(
        pattern=CheckersPattern(black(), white(), Matrix.identity().scale(0.8, 0.8, 0.8)),
        diffuse=0.9, specular=0.1, reflective=0.3))

    wall = Shape.plane().with_material(Material(
        pattern=RingPattern(Color(1.0, 0.2, 0.2), white(),
                            Matrix.identity().scale(0.5, 0.5, 0.5).translate(2.0, 1.0, 1.0),
                            noise=0.7),
        diffuse=0.9, specular=0.1))
    wall.with_transform(Matrix.identity()
                        .rotate_z(math.pi / 2)
                        .rotate_y(-math.pi / 8)
                        .translate(2.5, 0.0, 0.0))

    middle = Shape.sphere().with_material(Material(
        pattern=StripePattern(rgb(57, 128, 92), rgb(251, 221, 75),
                              Matrix.identity()
                              .rotate_z(math.pi / 4)
                              .rotate_x(math.pi / 4)
                              .rotate_y(math.pi / 3),
                              noise=6.0),
        diffuse=1.0, specular=0.5))
    middle.with_transform(Matrix.identity().translate(-0.5, 1.0, 0.5))

    right = Shape.sphere().with_material(Material(
        pattern=StripePattern(Color(0.5, 1.0, 0.1), rgb(0, 0, 139),
                              Matrix.identity()
                              .scale(0.2, 1.0, 1.0)
                              .rotate_z(math.pi / 3)
                              .rotate_x(math.pi / 3)),
        diffuse=0.8, specular=0.3, shininess=300.0))
    right.with_transform(Matrix.identity().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5))

    left = Shape.sphere().with_material(Material(
        pattern=GradientPattern(Color(1.0, 0.8, 0.1), rgb(64, 224, 208),
                                Matrix.identity()
                                .scale(2.0, 1.0, 1.0)
                                .translate(1.0, 0.0, 0.0)
                                .rotate_z(math.pi / 4)),
        diffuse=0.8, specular=0.3))
    left.with_transform(Matrix.identity().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75))

    metal = Shape.sphere().with_material(Material(
        color=black(), diffuse=0.8, specular=0.3, shininess=300.0, reflective=1.0))
    metal.with_transform(Matrix.identity().scale(0.45, 0.45, 0.45).translate(-2.5, 0.45, 0.75))

    world = World(PointLight(point(-10, 10, -10), white()))
    world.with_objects([floor, wall, middle, metal, right, left])
    return Scene(world, view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)))
