# materials/patterns.py
import math
from typing import Optional
from core.color import Color
from core.matrix import Matrix
from core.tuple import Tuple, point
from materials.noise import perlin


class Pattern:
    """
    Base class for procedural patterns: a function from a point in pattern
    space to a color.

    A pattern has its own transform relative to the shape it decorates, and
    an optional noise amount that jitters the lookup point for a hand-drawn
    look.
    """
    def __init__(self, transform: Optional[Matrix] = None, noise: float = 0.0):
        self.noise = noise
        self.set_transform(transform if transform is not None else Matrix.identity())

    def set_transform(self, transform: Matrix):
        self.transform = transform
        self.inverse_transform = transform.inverse()

    def with_transform(self, transform: Matrix) -> "Pattern":
        self.set_transform(transform)
        return self

    def with_noise(self, noise: float) -> "Pattern":
        self.noise = noise
        return self

    def pattern_at(self, p: Tuple) -> Color:
        raise NotImplementedError("pattern_at() must be implemented by pattern subclasses.")

    def pattern_at_shape(self, world, shape, world_point: Tuple) -> Color:
        """
        Evaluates the pattern for a point on a shape.

        Args:
            world: The World the shape is registered in, for parent lookups.
            shape: The decorated shape.
            world_point: The point in world space.
        """
        object_point = shape.world_to_object(world, world_point)
        pattern_point = self.inverse_transform * object_point
        if self.noise != 0.0:
            jitter = self.noise * perlin(pattern_point.x, pattern_point.y, pattern_point.z)
            pattern_point = point(pattern_point.x + jitter, pattern_point.y + jitter,
                                  pattern_point.z + jitter)
        return self.pattern_at(pattern_point)


class StripePattern(Pattern):
    """Alternates between two colors along x."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None, noise: float = 0.0):
        super().__init__(transform, noise)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        return self.a if math.floor(p.x) % 2 == 0 else self.b


class GradientPattern(Pattern):
    """Linear blend from a to b, repeating every unit along x."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None, noise: float = 0.0):
        super().__init__(transform, noise)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        fraction = p.x - math.floor(p.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(Pattern):
    """Concentric rings around the y axis."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None, noise: float = 0.0):
        super().__init__(transform, noise)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        distance = math.sqrt(p.x * p.x + p.z * p.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckersPattern(Pattern):
    """3D checkerboard of unit cubes."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None, noise: float = 0.0):
        super().__init__(transform, noise)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        total = math.floor(p.x) + math.floor(p.y) + math.floor(p.z)
        return self.a if total % 2 == 0 else self.b


class TestPattern(Pattern):
    """Returns the pattern-space point itself as a color."""
    # Keep pytest from collecting this as a test class.
    __test__ = False

    def pattern_at(self, p: Tuple) -> Color:
        return Color(p.x, p.y, p.z)
