"""
User-facing controls for the ink tree.

The controls file is the single source of truth for shape, color and wind
settings. Missing entries keep their defaults and are reported, so a partial
file never stops the renderer.
"""

from dataclasses import dataclass, fields, asdict
from typing import Tuple
from pathlib import Path
import json
import math


# Controls that change the parameter table; everything else only affects
# the render pass.
GENERATION_CONTROLS = frozenset({'depth', 'randomness'})

RANDOMNESS_SCALE = 10.0


@dataclass
class ControlsConfig:
    # ==================== SHAPE ====================
    depth: int = 8
    initial_length: float = 120.0
    branch_angle: float = 25.0  # degrees
    branch_thickness: float = 12.0
    randomness: float = 5.0  # 0..10, mapped to 0..1

    # ==================== ANIMATION ====================
    growth_speed: float = 5.0
    wind_strength: float = 0.0
    wind_speed: float = 5.0

    # ==================== APPEARANCE ====================
    leaf_color: Tuple[int, int, int] = (34, 139, 34)
    ink_color: Tuple[int, int, int] = (0, 0, 0)
    leaf_char: str = '林'

    def __post_init__(self):
        self.leaf_color = tuple(self.leaf_color)
        self.ink_color = tuple(self.ink_color)

    @property
    def randomness_factor(self) -> float:
        return self.randomness / RANDOMNESS_SCALE

    @property
    def branch_angle_radians(self) -> float:
        return math.radians(self.branch_angle)

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def validate(self):
        """Raise ValueError for values the generator cannot work with."""
        if int(self.depth) != self.depth or self.depth < 0:
            raise ValueError(f"depth must be a non-negative integer, got {self.depth}")
        if not 0 <= self.randomness <= RANDOMNESS_SCALE:
            raise ValueError(f"randomness must be in [0, {RANDOMNESS_SCALE:g}], got {self.randomness}")
        if self.initial_length <= 0:
            raise ValueError(f"initial_length must be positive, got {self.initial_length}")
        if self.branch_thickness < 0:
            raise ValueError(f"branch_thickness must be non-negative, got {self.branch_thickness}")
        for name in ('leaf_color', 'ink_color'):
            color = getattr(self, name)
            if len(color) != 3 or any(not 0 <= c <= 255 for c in color):
                raise ValueError(f"{name} must be three values in [0, 255], got {color}")
        for name in ('growth_speed', 'wind_strength', 'wind_speed'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if len(self.leaf_char) != 1:
            raise ValueError(f"leaf_char must be a single character, got {self.leaf_char!r}")


def load_config(path: str = 'config/controls.json') -> ControlsConfig:
    """Load controls from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return ControlsConfig()

    with open(config_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    known = set(ControlsConfig.names())
    for key in sorted(set(data) - known):
        print(f"Warning: unknown control '{key}' in {config_path}, ignoring")
    for key in ControlsConfig.names():
        if key not in data:
            print(f"Warning: control '{key}' not found in {config_path}, using default")

    config = ControlsConfig(**{k: v for k, v in data.items() if k in known})
    config.validate()
    return config


def save_config(config: ControlsConfig, path: str = 'config/controls.json'):
    """Save controls to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(config)
    data['leaf_color'] = list(config.leaf_color)
    data['ink_color'] = list(config.ink_color)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    print(f"Saved controls to {config_path}")
