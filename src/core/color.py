# core/color.py
from core.tuple import float_equal


class Color:
    """
    Linear RGB color. Components are unbounded floats; clamping happens only
    when the color is written out.
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Color * Color is the Hadamard product; Color * float scales.
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> "Color":
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (float_equal(self.red, other.red) and float_equal(self.green, other.green)
                and float_equal(self.blue, other.blue))

    __hash__ = None

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def clamped_bytes(self):
        """
        Returns the color as three ints in 0..255.
        """
        return tuple(_to_byte(c) for c in self)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


def _to_byte(component: float) -> int:
    return int(round(min(max(component, 0.0), 1.0) * 255))


def black() -> Color:
    return Color(0.0, 0.0, 0.0)


def white() -> Color:
    return Color(1.0, 1.0, 1.0)


def rgb(r: int, g: int, b: int) -> Color:
    """
    Builds a color from 0-255 channel values.
    """
    return Color(r / 255.0, g / 255.0, b / 255.0)
