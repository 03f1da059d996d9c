# materials/presets.py
from core.color import Color, rgb, white
from materials.material import Material


class MaterialPresets:
    """Predefined materials for the demo scenes."""

    @staticmethod
    def glass() -> Material:
        return Material(color=white(), ambient=0.0, diffuse=0.0, specular=0.9, shininess=300.0,
                        reflective=1.0, transparency=1.0, refractive_index=1.5)

    @staticmethod
    def chrome() -> Material:
        return Material(color=white(), ambient=0.0, diffuse=0.0, specular=1.0, shininess=400.0,
                        reflective=1.0)

    @staticmethod
    def darker_chrome() -> Material:
        return Material(color=rgb(169, 169, 169), ambient=0.0, diffuse=0.0, specular=1.0,
                        shininess=400.0, reflective=0.3)

    @staticmethod
    def air() -> Material:
        """Nearly invisible; used for bubbles inside glass."""
        return Material(color=white(), ambient=0.0, diffuse=0.0, specular=0.9, shininess=300.0,
                        reflective=0.9, transparency=0.9, refractive_index=1.0000034)

    @staticmethod
    def mirror() -> Material:
        return Material(color=Color(0.1, 0.1, 0.1), ambient=0.0, diffuse=0.1, specular=1.0,
                        shininess=300.0, reflective=1.0)

    @staticmethod
    def pastel(color: Color) -> Material:
        """Flat, bright, with no highlight."""
        return Material(color=color, ambient=0.3, specular=0.0, shininess=1.0)


class ColorPresets:
    """Common colors for the demo scenes."""

    RED = rgb(230, 51, 51)
    ORANGE = rgb(230, 153, 26)
    YELLOW = rgb(230, 230, 26)
    BLUE = rgb(51, 77, 230)
    GREEN = rgb(51, 204, 51)
    PURPLE = rgb(153, 51, 204)
    GRAY = rgb(128, 128, 128)
