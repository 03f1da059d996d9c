# core/matrix.py
import math
import numpy as np
from core.tuple import EPSILON, Tuple

AFFINE_ROW = np.array([0.0, 0.0, 0.0, 1.0])


class Matrix:
    """
    A 4x4 affine matrix backed by a float64 numpy array.

    Multiplying by a Tuple transforms it; multiplying by another Matrix
    composes the two. The fluent helpers (translate, scale, rotate_x, ...)
    apply the new transformation after the existing one, so a chain reads
    in the order the transformations happen.
    """
    __slots__ = ("data", "_rows")

    def __init__(self, data):
        self.data = np.asarray(data, dtype=np.float64)
        if self.data.shape != (4, 4):
            raise ValueError(f"Matrix must be 4x4, got shape {self.data.shape}")
        # Plain floats for the per-ray tuple products.
        self._rows = self.data.tolist()

    @staticmethod
    def identity() -> "Matrix":
        return Matrix(np.identity(4))

    def __getitem__(self, index):
        return float(self.data[index])

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return Matrix(self.data @ other.data)
        if isinstance(other, Tuple):
            r0, r1, r2, r3 = self._rows
            x, y, z, w = other.x, other.y, other.z, other.w
            return Tuple(
                r0[0] * x + r0[1] * y + r0[2] * z + r0[3] * w,
                r1[0] * x + r1[1] * y + r1[2] * z + r1[3] * w,
                r2[0] * x + r2[1] * y + r2[2] * z + r2[3] * w,
                r3[0] * x + r3[1] * y + r3[2] * z + r3[3] * w,
            )
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None

    def transpose(self) -> "Matrix":
        return Matrix(self.data.T)

    def determinant(self) -> float:
        return float(np.linalg.det(self.data))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) > EPSILON * EPSILON

    def inverse(self) -> "Matrix":
        if not self.is_invertible():
            raise ValueError("Matrix is not invertible")
        inverted = np.linalg.inv(self.data)
        if np.array_equal(self.data[3], AFFINE_ROW):
            # Keep w exact so transformed points stay points.
            inverted[3] = AFFINE_ROW
        return Matrix(inverted)

    # Fluent helpers

    def translate(self, x: float, y: float, z: float) -> "Matrix":
        return translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> "Matrix":
        return scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> "Matrix":
        return rotation_x(radians) * self

    def rotate_y(self, radians: float) -> "Matrix":
        return rotation_y(radians) * self

    def rotate_z(self, radians: float) -> "Matrix":
        return rotation_z(radians) * self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Matrix":
        return shearing(xy, xz, yx, yz, zx, zy) * self

    def __repr__(self) -> str:
        rows = ", ".join(str(list(row)) for row in self.data)
        return f"Matrix([{rows}])"


def translation(x: float, y: float, z: float) -> Matrix:
    m = np.identity(4)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return Matrix(m)


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(np.diag([x, y, z, 1.0]))


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """
    Orients the world relative to an eye at from_point looking at to_point.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
