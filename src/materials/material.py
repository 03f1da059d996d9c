# materials/material.py
from typing import Optional
from core.color import Color, black, white
from core.tuple import Tuple
from materials.light import PointLight
from materials.patterns import Pattern


class Material:
    """
    Surface description for Phong shading plus the three coefficients the
    tracer reads directly: reflective, transparency and refractive_index.
    """
    def __init__(self, color: Optional[Color] = None, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0, reflective: float = 0.0,
                 transparency: float = 0.0, refractive_index: float = 1.0,
                 pattern: Optional[Pattern] = None):
        self.color = color if color is not None else white()
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern

    def lighting(self, shape, light: PointLight, point: Tuple, eye_vector: Tuple,
                 normal_vector: Tuple, in_shadow: bool, world) -> Color:
        """
        Phong reflection model for a single point light.

        Args:
            shape: The shape being lit; patterns are evaluated in its space.
            light: The light source.
            point: World-space point being shaded.
            eye_vector: Unit vector from the point toward the eye.
            normal_vector: Unit surface normal at the point.
            in_shadow: When True only the ambient term contributes.
            world: The World the shape lives in.

        Returns:
            Color: ambient + diffuse + specular.
        """
        if self.pattern is not None:
            color = self.pattern.pattern_at_shape(world, shape, point)
        else:
            color = self.color

        effective_color = color * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        light_vector = (light.position - point).normalize()
        light_dot_normal = light_vector.dot(normal_vector)
        if light_dot_normal < 0:
            # Light is on the other side of the surface.
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflect_vector = (-light_vector).reflect(normal_vector)
        reflect_dot_eye = reflect_vector.dot(eye_vector)
        if reflect_dot_eye <= 0:
            specular = black()
        else:
            factor = reflect_dot_eye ** self.shininess
            specular = light.intensity * (self.specular * factor)

        return ambient + diffuse + specular

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color and self.ambient == other.ambient
                and self.diffuse == other.diffuse and self.specular == other.specular
                and self.shininess == other.shininess and self.reflective == other.reflective
                and self.transparency == other.transparency
                and self.refractive_index == other.refractive_index
                and self.pattern is other.pattern)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, "
                f"reflective={self.reflective}, transparency={self.transparency}, "
                f"refractive_index={self.refractive_index})")
