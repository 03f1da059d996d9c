# scenes/hexagon.py
import math
from core.color import rgb, white
from core.matrix import Matrix, view_transform
from core.tuple import point, vector
from geometry.shape import Shape
from geometry.world import World
from materials.light import PointLight
from materials.presets import MaterialPresets
from scenes.scene import Scene


def _add_side(world: World, hexagon_id: int, index: int):
    side = world.add_shape(Shape.group().with_transform(
        Matrix.identity().rotate_y(index * math.pi / 3)))
    world.add_shape_to_group(hexagon_id, side)

    corner = world.add_shape(Shape.sphere().with_transform(
        Matrix.identity().scale(0.25, 0.25, 0.25).translate(0.0, 0.0, -1.0)))
    edge = world.add_shape(Shape.cylinder(0.0, 1.0, False).with_transform(
        Matrix.identity()
        .scale(0.25, 1.0, 0.25)
        .rotate_z(-math.pi / 2)
        .rotate_y(-math.pi / 6)
        .translate(0.0, 0.0, -1.0)))
    world.add_shape_to_group(side, corner)
    world.add_shape_to_group(side, edge)


def add_hexagon(world: World, transform: Matrix) -> int:
    """
    Adds a ring of six spheres joined by cylinders, built from nested groups.

    Returns:
        The id of the outer group.
    """
    hexagon = world.add_shape(Shape.group().with_transform(transform))
    for index in range(6):
        _add_side(world, hexagon, index)
    return hexagon


def build() -> Scene:
    world = World(PointLight(point(-10, 10, -10), white()))
    world.add_shape(Shape.plane()
                    .with_material(MaterialPresets.pastel(rgb(185, 215, 233)))
                    .with_transform(Matrix.identity().translate(0.0, -1.0, 0.0)))
    hexagon = add_hexagon(world, Matrix.identity().rotate_x(-math.pi / 6))
    # Every shape in the hexagon shares one chrome-like finish.
    for shape_id in _descendants(world, hexagon):
        world.get_shape(shape_id).with_material(MaterialPresets.darker_chrome())
    return Scene(world, view_transform(point(0, 1.5, -4), point(0, 0, 0), vector(0, 1, 0)))


def _descendants(world: World, shape_id: int):
    for child in world.get_children(shape_id):
        yield child
        yield from _descendants(world, child)
