"""
Growth animation state and the staggered progress formulas.

A subtree only starts growing once its parent's local progress passes
`child_delay`, then grows `child_scale` times faster, so growth travels down
each path as a wave instead of scaling the whole tree at once.
"""

from config.tree_config import GrowthConfig


def child_progress(progress: float, config: GrowthConfig = GrowthConfig()) -> float:
    return (progress - config.child_delay) * config.child_scale


def leaf_progress(progress: float, threshold: float, config: GrowthConfig = GrowthConfig()) -> float:
    return (progress - threshold) * config.child_scale


def growth_scale(progress: float) -> float:
    """Length/width multiplier for a branch at this local progress."""
    return min(1.0, progress)


class GrowthState:
    def __init__(self, config: GrowthConfig = GrowthConfig()):
        self.config = config
        self.progress = 0.0
        self.is_growing = False

    def start(self):
        self.progress = 0.0
        self.is_growing = True

    def reset(self):
        self.is_growing = False
        self.progress = 0.0

    def complete(self):
        self.is_growing = False
        self.progress = 1.0

    def advance(self, growth_speed: float) -> float:
        """Step progress by one frame; frozen unless growing."""
        if not self.is_growing:
            return self.progress
        step = self.config.speed_factor * max(0.0, growth_speed)
        self.progress = min(1.0, self.progress + step)
        if self.progress >= 1.0:
            self.is_growing = False
        return self.progress

    def __repr__(self) -> str:
        return f"GrowthState(progress={self.progress:.3f}, growing={self.is_growing})"
