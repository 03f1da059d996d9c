# renderer/settings.py
import math
from dataclasses import dataclass, replace
from geometry.world import DEFAULT_BOUNCES

# Quality levels; scale multiplies the base resolution.
QUALITY_PRESETS = {
    "preview": {"scale": 0.25, "bounces": 2},
    "balanced": {"scale": 0.5, "bounces": 4},
    "high_quality": {"scale": 1.0, "bounces": DEFAULT_BOUNCES},
}

BASE_WIDTH = 800
BASE_HEIGHT = 400


@dataclass
class RenderSettings:
    width: int = BASE_WIDTH
    height: int = BASE_HEIGHT
    field_of_view: float = math.pi / 3
    max_bounces: int = DEFAULT_BOUNCES
    tone_map: str = "clamp"

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "RenderSettings":
        """
        Settings for a named quality level, with any field overridden by
        keyword. Overrides of None are ignored so CLI defaults pass through.
        """
        if name not in QUALITY_PRESETS:
            raise ValueError(f"Unknown quality preset {name!r}; expected one of {sorted(QUALITY_PRESETS)}")
        quality = QUALITY_PRESETS[name]
        settings = cls(
            width=max(1, int(BASE_WIDTH * quality["scale"])),
            height=max(1, int(BASE_HEIGHT * quality["scale"])),
            max_bounces=quality["bounces"],
        )
        return replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Resolution must be positive, got {self.width}x{self.height}")
        if self.max_bounces < 0:
            raise ValueError(f"max_bounces must be >= 0, got {self.max_bounces}")
