# scenes/catalog.py
from typing import Callable, Dict
from scenes import csg, cylinder_and_cone, first_demo, glass, hexagon
from scenes.scene import Scene

SCENES: Dict[str, Callable[[], Scene]] = {
    "first_demo": first_demo.build,
    "glass": glass.build,
    "csg": csg.build,
    "cylinder_and_cone": cylinder_and_cone.build,
    "hexagon": hexagon.build,
}


def build_scene(name: str) -> Scene:
    if name not in SCENES:
        raise ValueError(f"Unknown scene {name!r}; expected one of {sorted(SCENES)}")
    return SCENES[name]()
