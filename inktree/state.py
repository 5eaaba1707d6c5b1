"""
Simulation state: the single owner of controls, per-tree tables, growth and
wind. Created once at startup; tables inside it are replaced wholesale on
regeneration and only read by the render pass.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

from config.controls import ControlsConfig, GENERATION_CONTROLS
from config.tree_config import InkTreeConfig
from rendering.growth_renderer import GrowthRenderer, TreeStyle
from rendering.primitives import Primitive
from .growth import GrowthState
from .params import ParameterTable, generate
from .random_source import RandomSource
from .wind import WindClock


@dataclass(frozen=True)
class TreeInstance:
    """
    One tree on the canvas with its own seed, table, derived shape and growth.
    The instance is replaced on regeneration; its GrowthState is carried over.
    """
    seed: int
    table: ParameterTable
    position_x: float = 0.5  # fraction of canvas width
    depth_scale: float = 1.0
    height_offset: float = 0.0  # pixels above the ground line
    initial_length: float = 120.0
    max_depth: int = 8
    branch_angle: float = math.radians(25.0)
    growth: GrowthState = field(default_factory=GrowthState, compare=False, repr=False)

    @property
    def growth_progress(self) -> float:
        return self.growth.progress

    @classmethod
    def plant(
        cls,
        controls: ControlsConfig,
        seed: int,
        config: InkTreeConfig,
        position_x: float = 0.5,
        depth_scale: float = 1.0,
        height_offset: float = 0.0,
        vary_shape: bool = False,
        growth: Optional[GrowthState] = None
    ) -> 'TreeInstance':
        """
        Derive a tree from the controls. With `vary_shape` the trunk length,
        depth and split angle are perturbed from a source seeded by the tree
        seed, so every tree in a scene differs but stays reproducible.
        """
        initial_length = controls.initial_length
        max_depth = int(controls.depth)
        branch_angle = controls.branch_angle_radians

        if vary_shape:
            shape_rng = RandomSource(seed + config.canvas.max_seed)
            initial_length *= shape_rng.uniform(0.8, 1.2)
            max_depth = max(0, max_depth - shape_rng.uniform_int(0, 2))
            branch_angle *= shape_rng.uniform(0.85, 1.15)

        table = generate(seed, max_depth, controls.randomness_factor, config)
        return cls(
            seed=seed,
            table=table,
            position_x=position_x,
            depth_scale=depth_scale,
            height_offset=height_offset,
            initial_length=initial_length,
            max_depth=max_depth,
            branch_angle=branch_angle,
            growth=growth or GrowthState(config.growth),
        )

    def regenerate(self, controls: ControlsConfig, config: InkTreeConfig,
                   seed: Optional[int] = None, vary_shape: bool = False) -> 'TreeInstance':
        return TreeInstance.plant(
            controls,
            self.seed if seed is None else seed,
            config,
            position_x=self.position_x,
            depth_scale=self.depth_scale,
            height_offset=self.height_offset,
            vary_shape=vary_shape,
            growth=self.growth,
        )


class SimulationState:
    def __init__(
        self,
        controls: Optional[ControlsConfig] = None,
        config: Optional[InkTreeConfig] = None,
        seed: Optional[int] = None,
        jitter: Optional[RandomSource] = None
    ):
        self.controls = controls or ControlsConfig()
        self.controls.validate()
        self.config = config or InkTreeConfig()
        self.jitter = jitter or RandomSource()
        self.renderer = GrowthRenderer(self.config, self.jitter)
        self.wind = WindClock(self.config.wind)
        self.vary_shape = False
        self.needs_redraw = True

        if seed is None:
            seed = self._fresh_seed()
        self.trees: List[TreeInstance] = [TreeInstance.plant(self.controls, seed, self.config)]

    @property
    def seed(self) -> int:
        return self.trees[0].seed

    def _fresh_seed(self) -> int:
        return self.jitter.uniform_int(0, self.config.canvas.max_seed)

    @property
    def is_growing(self) -> bool:
        return any(tree.growth.is_growing for tree in self.trees)

    def complete_growth(self):
        """Show every tree fully grown without animating."""
        for tree in self.trees:
            tree.growth.complete()
        self.needs_redraw = True

    def set_trees(self, placements: List[dict], vary_shape: bool = True):
        """
        Replace the trees with one per placement dict (position_x, depth_scale,
        height_offset), each with its own fresh seed.
        """
        self.vary_shape = vary_shape
        self.trees = [
            TreeInstance.plant(self.controls, self._fresh_seed(), self.config,
                               vary_shape=vary_shape, **placement)
            for placement in placements
        ]
        self.needs_redraw = True

    def regenerate(self, reseed: bool = False):
        self.trees = [
            tree.regenerate(self.controls, self.config,
                            seed=self._fresh_seed() if reseed else None,
                            vary_shape=self.vary_shape)
            for tree in self.trees
        ]
        self.needs_redraw = True

    def start_growth(self, seed: Optional[int] = None):
        """
        New tables, progress back to 0 and animating. Each tree gets a fresh
        seed, or `seed + i` for the i-th tree when a seed is given.
        """
        if seed is None:
            self.regenerate(reseed=True)
        else:
            self.trees = [
                tree.regenerate(self.controls, self.config, seed=seed + i, vary_shape=self.vary_shape)
                for i, tree in enumerate(self.trees)
            ]
        self.needs_redraw = True
        for tree in self.trees:
            tree.growth.start()

    def reset(self):
        for tree in self.trees:
            tree.growth.reset()
        self.needs_redraw = True

    def start_tree_growth(self, index: int):
        """Regrow one tree from 0, leaving the others where they are."""
        self.trees[index].growth.start()
        self.needs_redraw = True

    def apply_control(self, name: str, value: Any) -> bool:
        """
        Apply one control change. Returns True when the parameter tables were
        regenerated, False when only a redraw is needed or the control is unknown.
        """
        if name not in ControlsConfig.names():
            print(f"Warning: control '{name}' not found, ignoring")
            return False

        updated = replace(self.controls, **{name: value})
        updated.validate()
        self.controls = updated
        self.needs_redraw = True

        if name in GENERATION_CONTROLS or (self.vary_shape and name in ('initial_length', 'branch_angle')):
            self.regenerate()
            return True
        if name in ('initial_length', 'branch_angle'):
            self.trees = [
                replace(tree, initial_length=self.controls.initial_length,
                        branch_angle=self.controls.branch_angle_radians)
                for tree in self.trees
            ]
        return False

    def tick(self) -> bool:
        """Advance one frame. Returns True when the frame must be redrawn."""
        growing = self.is_growing
        self.wind.advance(growing)
        for tree in self.trees:
            tree.growth.advance(self.controls.growth_speed)

        redraw = growing or self.controls.wind_strength > 0 or self.needs_redraw
        self.needs_redraw = False
        return redraw

    def frame_primitives(self, width: float, height: float) -> List[Primitive]:
        """Ground texture followed by every tree, back to front."""
        style = TreeStyle.from_controls(self.controls)
        ground_y = height * self.config.ground.height_ratio

        primitives = self.renderer.ground(width, height, style.ink_color)
        for tree in sorted(self.trees, key=lambda t: t.depth_scale):
            tree_style = replace(style, branch_angle=tree.branch_angle)
            primitives.extend(self.renderer.render(
                tree.table,
                root_x=width * tree.position_x,
                root_y=ground_y - tree.height_offset,
                root_length=tree.initial_length * tree.depth_scale,
                max_depth=tree.max_depth,
                root_width=self.controls.branch_thickness * tree.depth_scale,
                growth_progress=tree.growth_progress,
                wind_time=self.wind.time,
                style=tree_style,
            ))
        return primitives
