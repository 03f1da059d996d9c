# core/errors.py


class RayTracerError(Exception):
    """
    Base class for errors raised by the ray tracer.
    """


class TupleKindError(RayTracerError, ValueError):
    """
    A point was used where a vector is required, or the other way round.
    """


class SceneGraphError(RayTracerError, ValueError):
    """
    The shape graph was built or queried in a way it does not support.
    """


class UnknownShapeError(RayTracerError, LookupError):
    """
    A shape id was looked up that the world never registered.
    """


class ObjParseError(RayTracerError, ValueError):
    """
    An OBJ document could not be turned into triangles.
    """
    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
