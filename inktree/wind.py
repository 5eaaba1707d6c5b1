"""
Wind sway: a per-depth angular offset and the clock that drives it.
"""

import math

from config.tree_config import WindConfig


def wind_offset(
    depth: int,
    time: float,
    max_depth: int,
    strength: float,
    speed: float,
    config: WindConfig = WindConfig()
) -> float:
    """
    Angular offset (radians) added to a branch at `depth` before its geometry
    is computed. The taper (1 - depth / max_depth) is 0 at the trunk and 1 at
    the tips; a tree with max_depth 0 is all trunk and does not sway.
    """
    if max_depth <= 0:
        return 0.0
    amplitude = strength * config.angle_factor
    frequency = config.base_frequency * speed
    phase = depth * config.depth_phase
    taper = 1 - depth / max_depth
    return math.sin(time * frequency + phase) * amplitude * taper


class WindClock:
    """Wind phase; runs at double rate while the tree is not growing."""

    def __init__(self, config: WindConfig = WindConfig(), time: float = 0.0):
        self.config = config
        self.time = time

    def advance(self, is_growing: bool) -> float:
        rate = 1.0 if is_growing else self.config.idle_multiplier
        self.time += self.config.time_scale * rate
        return self.time

    def __repr__(self) -> str:
        return f"WindClock(time={self.time:.4f})"
