# geometry/mesh.py
import logging
from typing import List, Optional, Tuple as PyTuple
from core.errors import ObjParseError
from core.tuple import Tuple, point, vector
from geometry.shape import Shape
from materials.material import Material

logger = logging.getLogger(__name__)

DEFAULT_GROUP_NAME = "default"


class ObjGroup:
    """Triangles collected under one `g` statement."""
    def __init__(self, name: str):
        self.name = name
        self.triangles: List[Shape] = []

    def __repr__(self) -> str:
        return f"ObjGroup({self.name!r}, triangles={len(self.triangles)})"


class ParsedObj:
    """
    Result of parsing a Wavefront OBJ document. Vertices and normals keep the
    file's 1-based numbering through vertex() and normal().
    """
    def __init__(self):
        self.vertices: List[Tuple] = []
        self.normals: List[Tuple] = []
        self.groups: List[ObjGroup] = []
        self.ignored_lines = 0

    def vertex(self, index: int) -> Tuple:
        return self.vertices[index - 1]

    def normal(self, index: int) -> Tuple:
        return self.normals[index - 1]

    def triangle_count(self) -> int:
        return sum(len(group.triangles) for group in self.groups)


def _resolve_index(raw: str, count: int, kind: str, line_number: int) -> int:
    """Turns a 1-based (or negative, relative) OBJ index into a list index."""
    try:
        index = int(raw)
    except ValueError:
        raise ObjParseError(f"invalid {kind} index {raw!r}", line_number) from None
    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = count + index
    else:
        raise ObjParseError(f"{kind} indices start at 1", line_number)
    if not 0 <= resolved < count:
        raise ObjParseError(f"{kind} index {index} out of range (have {count})", line_number)
    return resolved


def _parse_floats(values: List[str], line_number: int) -> PyTuple[float, float, float]:
    if len(values) < 3:
        raise ObjParseError(f"expected 3 coordinates, got {len(values)}", line_number)
    try:
        return float(values[0]), float(values[1]), float(values[2])
    except ValueError:
        raise ObjParseError(f"invalid coordinates {' '.join(values[:3])!r}", line_number) from None


def _parse_face_vertex(token: str, parsed: ParsedObj, line_number: int) -> PyTuple[int, Optional[int]]:
    # Accepted forms: v, v/t, v//n and v/t/n. Texture indices are ignored.
    parts = token.split("/")
    v_idx = _resolve_index(parts[0], len(parsed.vertices), "vertex", line_number)
    n_idx = None
    if len(parts) > 2 and parts[2]:
        n_idx = _resolve_index(parts[2], len(parsed.normals), "normal", line_number)
    return v_idx, n_idx


def parse_obj(text: str) -> ParsedObj:
    """
    Parses OBJ text into vertices, normals and groups of triangles.

    Polygons are fan-triangulated around their first vertex. Faces whose
    vertices all carry normals become smooth triangles. Statements other than
    v, vn, f and g are counted in ignored_lines and otherwise skipped.

    Raises:
        ObjParseError: on malformed numbers or out-of-range indices.
    """
    parsed = ParsedObj()
    current: Optional[ObjGroup] = None

    for line_number, line in enumerate(text.splitlines(), 1):
        values = line.split()
        if not values or values[0].startswith("#"):
            continue

        keyword = values[0]
        if keyword == "v":
            parsed.vertices.append(point(*_parse_floats(values[1:], line_number)))
        elif keyword == "vn":
            parsed.normals.append(vector(*_parse_floats(values[1:], line_number)))
        elif keyword == "g":
            current = ObjGroup(" ".join(values[1:]) or DEFAULT_GROUP_NAME)
            parsed.groups.append(current)
        elif keyword == "f":
            if len(values) < 4:
                raise ObjParseError(f"a face needs at least 3 vertices, got {len(values) - 1}", line_number)
            corners = [_parse_face_vertex(token, parsed, line_number) for token in values[1:]]
            if current is None:
                current = ObjGroup(DEFAULT_GROUP_NAME)
                parsed.groups.append(current)
            smooth = all(n_idx is not None for _, n_idx in corners)
            # Fan triangulation
            for i in range(1, len(corners) - 1):
                (v1, n1), (v2, n2), (v3, n3) = corners[0], corners[i], corners[i + 1]
                p1, p2, p3 = parsed.vertices[v1], parsed.vertices[v2], parsed.vertices[v3]
                if smooth:
                    triangle = Shape.smooth_triangle(p1, p2, p3, parsed.normals[n1],
                                                     parsed.normals[n2], parsed.normals[n3])
                else:
                    triangle = Shape.triangle(p1, p2, p3)
                current.triangles.append(triangle)
        else:
            parsed.ignored_lines += 1

    parsed.groups = [group for group in parsed.groups if group.triangles]
    return parsed


def add_obj_to_world(world, text: str, material: Optional[Material] = None) -> int:
    """
    Parses OBJ text and registers it in the world as one root group holding a
    subgroup per OBJ group.

    Returns:
        The id of the root group.
    """
    parsed = parse_obj(text)
    root_id = world.add_shape(Shape.group())
    for group in parsed.groups:
        group_id = world.add_shape(Shape.group())
        world.add_shape_to_group(root_id, group_id)
        for triangle in group.triangles:
            if material is not None:
                triangle.with_material(material)
            world.add_shape_to_group(group_id, world.add_shape(triangle))

    logger.info("Loaded %d vertices, %d normals, %d triangles in %d groups (%d lines ignored)",
                len(parsed.vertices), len(parsed.normals), parsed.triangle_count(),
                len(parsed.groups), parsed.ignored_lines)
    return root_id


def load_obj(world, filename: str, material: Optional[Material] = None) -> int:
    """Reads an OBJ file and adds it to the world; see add_obj_to_world."""
    logger.info("Opening file: %s", filename)
    with open(filename, "r") as f:
        text = f.read()
    return add_obj_to_world(world, text, material)
