"""Unit tests for axis-aligned bounding boxes.

Tests cover:
- The per-axis slab test
- Empty, infinite and point-built boxes
- Combining and transforming boxes
- Ray/box rejection, including unbounded boxes
- Object-space bounds of every primitive
"""

import math

import pytest

from core.bounds import Bounds, check_axis
from core.matrix import Matrix, rotation_x, rotation_y
from core.ray import Ray
from core.tuple import point, vector
from geometry.shape import Shape

INF = math.inf


class TestCheckAxis:
    """Tests for the single-axis slab helper."""

    def test_orders_entry_and_exit(self):
        assert check_axis(5.0, -1.0, -1.0, 1.0) == (4.0, 6.0)
        assert check_axis(-5.0, 1.0, -1.0, 1.0) == (4.0, 6.0)

    def test_parallel_inside_slab_is_unbounded(self):
        assert check_axis(0.0, 0.0, -1.0, 1.0) == (-INF, INF)

    @pytest.mark.parametrize("origin", [-2.0, 2.0])
    def test_parallel_outside_slab_never_overlaps(self, origin):
        tmin, tmax = check_axis(origin, 0.0, -1.0, 1.0)
        assert tmin > tmax

    @pytest.mark.parametrize("origin", [-1.0, 1.0])
    def test_parallel_on_either_face_is_inside(self, origin):
        assert check_axis(origin, 0.0, -1.0, 1.0) == (-INF, INF)


class TestBounds:
    """Tests for the Bounds value type."""

    def test_empty_box(self):
        box = Bounds.empty()
        assert box.is_empty()
        assert not box.intersects(Ray(point(0, 0, -5), vector(0, 0, 1)))

    def test_from_points(self):
        box = Bounds.from_points([point(-5, 2, 0), point(7, 0, -3)])
        assert box == Bounds(point(-5, 0, -3), point(7, 2, 0))
        assert box.is_bounded()

    def test_combine(self):
        a = Bounds(point(-5, -2, 0), point(7, 4, 4))
        b = Bounds(point(8, -7, -2), point(14, 2, 8))
        assert a.combine(b) == Bounds(point(-5, -7, -2), point(14, 4, 8))

    def test_combine_with_empty(self):
        a = Bounds(point(-1, -1, -1), point(1, 1, 1))
        assert a.combine(Bounds.empty()) == a
        assert Bounds.empty().combine(a) == a

    def test_corners(self):
        corners = Bounds(point(-1, -2, -3), point(1, 2, 3)).corners()
        assert len(corners) == 8
        assert point(-1, 2, -3) in corners
        assert point(1, -2, 3) in corners

    def test_transform(self):
        box = Bounds(point(-1, -1, -1), point(1, 1, 1))
        moved = box.transform(rotation_x(math.pi / 4) * rotation_y(math.pi / 4))
        assert tuple(moved.minimum)[:3] == pytest.approx((-1.41421, -1.70711, -1.70711), abs=1e-4)
        assert tuple(moved.maximum)[:3] == pytest.approx((1.41421, 1.70711, 1.70711), abs=1e-4)

    def test_transform_unbounded_stays_infinite(self):
        plane_box = Bounds(point(-INF, 0, -INF), point(INF, 0, INF))
        moved = plane_box.transform(Matrix.identity().rotate_x(math.pi / 3))
        assert moved == Bounds.infinite()
        assert not any(math.isnan(c) for c in tuple(moved.minimum) + tuple(moved.maximum))

    @pytest.mark.parametrize("origin,direction,expected", [
        (point(5, 0.5, 0), vector(-1, 0, 0), True),
        (point(-5, 0.5, 0), vector(1, 0, 0), True),
        (point(0.5, 5, 0), vector(0, -1, 0), True),
        (point(0.5, 0, -5), vector(0, 0, 1), True),
        (point(0, 0.5, 0), vector(0, 0, 1), True),
        (point(0, -1, -5), vector(0, 0, 1), True),
        (point(0, 1, -5), vector(0, 0, 1), True),
        (point(-1, 0, -5), vector(0, 0, 1), True),
        (point(-2, 0, 0), vector(2, 4, 6), False),
        (point(2, 0, 2), vector(0, 0, -1), False),
        (point(2, 2, 0), vector(-1, 0, 0), False),
    ])
    def test_intersects(self, origin, direction, expected):
        box = Bounds(point(-1, -1, -1), point(1, 1, 1))
        assert box.intersects(Ray(origin, direction.normalize())) is expected

    @pytest.mark.parametrize("y", [-1, 1])
    def test_cube_hits_rays_grazing_bottom_and_top(self, world, y):
        cube = Shape.cube()
        world.add_shape(cube)
        xs = cube.intersects(world, Ray(point(0, y, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == [4.0, 6.0]

    def test_unbounded_box_never_rejects(self):
        box = Bounds(point(-INF, 0, -INF), point(INF, 0, INF))
        assert box.intersects(Ray(point(0, 5, 0), vector(1, 0, 0)))


class TestPrimitiveBounds:
    """Tests for the object-space bounds of each shape kind."""

    @pytest.mark.parametrize("shape,expected", [
        (Shape.sphere(), Bounds(point(-1, -1, -1), point(1, 1, 1))),
        (Shape.cube(), Bounds(point(-1, -1, -1), point(1, 1, 1))),
        (Shape.plane(), Bounds(point(-INF, 0, -INF), point(INF, 0, INF))),
        (Shape.cylinder(-5, 3), Bounds(point(-1, -5, -1), point(1, 3, 1))),
        (Shape.cylinder(), Bounds(point(-1, -INF, -1), point(1, INF, 1))),
        (Shape.cone(-5, 3), Bounds(point(-5, -5, -5), point(5, 3, 5))),
        (Shape.triangle(point(-3, 7, 2), point(6, 2, -4), point(2, -1, -1)),
         Bounds(point(-3, -1, -4), point(6, 7, 2))),
    ])
    def test_local_bounds(self, world, shape, expected):
        world.add_shape(shape)
        assert shape.bounds(world) == expected

    def test_infinite_cone_is_unbounded(self, world):
        cone = Shape.cone()
        world.add_shape(cone)
        assert not cone.bounds(world).is_bounded()

    def test_parent_space_bounds(self, world):
        sphere = Shape.sphere().with_transform(
            Matrix.identity().scale(0.5, 2, 4).translate(1, -3, 5))
        world.add_shape(sphere)
        assert sphere.parent_space_bounds(world) == Bounds(point(0.5, -5, 1), point(1.5, -1, 9))
