"""Unit tests for intersections and prepared shading computations.

Tests cover:
- Intersection records and hit selection
- Hit geometry: point, eye and normal vectors, inside detection
- Reflection vectors and the over/under offset points
- Refractive indices from the stack of containing shapes
- Schlick's Fresnel approximation, including total internal reflection
"""

import math

import pytest

from core.matrix import scaling, translation
from core.ray import Ray
from core.tuple import EPSILON, point, vector
from geometry import Intersection, PreparedComputation, Shape, hit, prepare_computations
from geometry.intersection import refractive_indices
from materials.material import Material

HALF_SQRT2 = math.sqrt(2) / 2


def glass_sphere():
    return Shape.sphere().with_material(Material(transparency=1.0, refractive_index=1.5))


class TestIntersection:
    """Tests for intersection records."""

    def test_fields(self):
        i = Intersection(3.5, 7)
        assert i.t == 3.5
        assert i.object_id == 7
        assert i.u is None and i.v is None

    def test_equality(self):
        assert Intersection(1.0, 2) == Intersection(1.0 + EPSILON / 10, 2)
        assert Intersection(1.0, 2) != Intersection(1.0, 3)
        assert Intersection(1.0, 2, 0.2, 0.4) == Intersection(1.0, 2, 0.2, 0.4)
        assert Intersection(1.0, 2, 0.2, 0.4) != Intersection(1.0, 2)


class TestHit:
    """Tests for choosing the visible intersection."""

    def test_all_positive(self):
        i1, i2 = Intersection(1, 0), Intersection(2, 0)
        assert hit([i2, i1]) is i1

    def test_some_negative(self):
        i1, i2 = Intersection(-1, 0), Intersection(1, 0)
        assert hit([i2, i1]) is i2

    def test_all_negative(self):
        assert hit([Intersection(-2, 0), Intersection(-1, 0)]) is None

    def test_empty(self):
        assert hit([]) is None

    def test_lowest_nonnegative(self):
        xs = [Intersection(5, 0), Intersection(7, 0), Intersection(-3, 0), Intersection(2, 0)]
        assert hit(xs) is xs[3]

    def test_zero_is_not_a_hit(self):
        assert hit([Intersection(0, 0)]) is None


class TestPrepareComputations:
    """Tests for precomputing shading geometry."""

    def test_outside_hit(self, world):
        s = world.add_shape(Shape.sphere())
        comps = prepare_computations(Intersection(4, s), Ray(point(0, 0, -5), vector(0, 0, 1)), world)
        assert isinstance(comps, PreparedComputation)
        assert comps.t == 4
        assert comps.object_id == s
        assert comps.point == point(0, 0, -1)
        assert comps.eye_vector == vector(0, 0, -1)
        assert comps.normal_vector == vector(0, 0, -1)
        assert not comps.inside

    def test_inside_hit_flips_normal(self, world):
        s = world.add_shape(Shape.sphere())
        comps = prepare_computations(Intersection(1, s), Ray(point(0, 0, 0), vector(0, 0, 1)), world)
        assert comps.point == point(0, 0, 1)
        assert comps.eye_vector == vector(0, 0, -1)
        assert comps.inside
        assert comps.normal_vector == vector(0, 0, -1)

    def test_reflection_vector(self, world):
        plane = world.add_shape(Shape.plane())
        ray = Ray(point(0, 1, -1), vector(0, -HALF_SQRT2, HALF_SQRT2))
        comps = prepare_computations(Intersection(math.sqrt(2), plane), ray, world)
        assert comps.reflection_vector == vector(0, HALF_SQRT2, HALF_SQRT2)

    def test_over_point(self, world):
        s = world.add_shape(Shape.sphere().with_transform(translation(0, 0, 1)))
        comps = prepare_computations(Intersection(5, s), Ray(point(0, 0, -5), vector(0, 0, 1)), world)
        assert comps.over_point.z < -EPSILON / 2
        assert comps.point.z > comps.over_point.z

    def test_under_point(self, world):
        s = world.add_shape(glass_sphere().with_transform(translation(0, 0, 1)))
        i = Intersection(5, s)
        comps = prepare_computations(i, Ray(point(0, 0, -5), vector(0, 0, 1)), world, [i])
        assert comps.under_point.z > EPSILON / 2
        assert comps.point.z < comps.under_point.z

    def test_defaults_to_single_intersection(self, world):
        s = world.add_shape(glass_sphere())
        comps = prepare_computations(Intersection(4, s), Ray(point(0, 0, -5), vector(0, 0, 1)), world)
        assert (comps.n1, comps.n2) == (1.0, 1.5)


class TestRefractiveIndices:
    """Tests for n1/n2 across nested transparent shapes."""

    @pytest.fixture
    def nested_spheres(self, world):
        a = world.add_shape(glass_sphere().with_transform(scaling(2, 2, 2)))
        b = world.add_shape(glass_sphere().with_transform(translation(0, 0, -0.25)))
        c = world.add_shape(glass_sphere().with_transform(translation(0, 0, 0.25)))
        world.get_shape(b).material.refractive_index = 2.0
        world.get_shape(c).material.refractive_index = 2.5
        return [Intersection(2, a), Intersection(2.75, b), Intersection(3.25, c),
                Intersection(4.75, b), Intersection(5.25, c), Intersection(6, a)]

    @pytest.mark.parametrize("index,n1,n2", [
        (0, 1.0, 1.5),
        (1, 1.5, 2.0),
        (2, 2.0, 2.5),
        (3, 2.5, 2.5),
        (4, 2.5, 1.5),
        (5, 1.5, 1.0),
    ])
    def test_n1_n2(self, world, nested_spheres, index, n1, n2):
        ray = Ray(point(0, 0, -4), vector(0, 0, 1))
        comps = prepare_computations(nested_spheres[index], ray, world, nested_spheres)
        assert comps.n1 == n1
        assert comps.n2 == n2

    def test_hit_must_be_listed(self, world, nested_spheres):
        with pytest.raises(ValueError):
            refractive_indices(Intersection(99, 0), nested_spheres, world)


class TestSchlick:
    """Tests for the Fresnel reflectance approximation."""

    def test_total_internal_reflection(self, world):
        s = world.add_shape(glass_sphere())
        ray = Ray(point(0, 0, HALF_SQRT2), vector(0, 1, 0))
        xs = [Intersection(-HALF_SQRT2, s), Intersection(HALF_SQRT2, s)]
        comps = prepare_computations(xs[1], ray, world, xs)
        assert comps.schlick() == 1.0

    def test_perpendicular_viewing_angle(self, world):
        s = world.add_shape(glass_sphere())
        ray = Ray(point(0, 0, 0), vector(0, 1, 0))
        xs = [Intersection(-1, s), Intersection(1, s)]
        comps = prepare_computations(xs[1], ray, world, xs)
        assert comps.schlick() == pytest.approx(0.04)

    def test_small_angle_with_n2_greater(self, world):
        s = world.add_shape(glass_sphere())
        ray = Ray(point(0, 0.99, -2), vector(0, 0, 1))
        xs = [Intersection(1.8589, s)]
        comps = prepare_computations(xs[0], ray, world, xs)
        assert comps.schlick() == pytest.approx(0.48873, abs=1e-4)
