"""
Growth renderer: walks the implicit binary branch tree of a parameter table
and emits ink strokes, splats and leaf glyphs for one frame.

The table is never modified. The only randomness drawn here is the cosmetic
stroke jitter and ground texture, taken from an unseeded source so it cannot
disturb the seeded table.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from config.controls import ControlsConfig
from config.tree_config import InkTreeConfig
from inktree.growth import child_progress, leaf_progress, growth_scale
from inktree.params import ParameterTable, BranchParams
from inktree.random_source import RandomSource
from inktree.vector import Vector2D
from inktree.wind import wind_offset
from .primitives import (
    Primitive,
    CurvePrimitive,
    PointPrimitive,
    LinePrimitive,
    GlyphPrimitive,
    Color
)


@dataclass(frozen=True)
class TreeStyle:
    """Render-time settings; changing any of these never needs a new table."""
    branch_angle: float  # radians
    wind_strength: float
    wind_speed: float
    ink_color: Color
    leaf_color: Color
    leaf_char: str

    @classmethod
    def from_controls(cls, controls: ControlsConfig) -> 'TreeStyle':
        return cls(
            branch_angle=controls.branch_angle_radians,
            wind_strength=controls.wind_strength,
            wind_speed=controls.wind_speed,
            ink_color=tuple(controls.ink_color),
            leaf_color=tuple(controls.leaf_color),
            leaf_char=controls.leaf_char,
        )


@dataclass(frozen=True)
class _Pass:
    table: ParameterTable
    max_depth: int
    root_width: float
    wind_time: float
    style: TreeStyle
    out: List[Primitive]


class GrowthRenderer:
    def __init__(self, config: Optional[InkTreeConfig] = None, jitter: Optional[RandomSource] = None):
        self.config = config or InkTreeConfig()
        self.jitter = jitter or RandomSource()

    def render(
        self,
        table: ParameterTable,
        root_x: float,
        root_y: float,
        root_length: float,
        max_depth: int,
        root_width: float,
        growth_progress: float,
        wind_time: float,
        style: TreeStyle,
        root_angle: float = math.pi / 2
    ) -> List[Primitive]:
        """
        Emit the primitives for one tree at the given growth progress and wind time.

        Args:
            table: Parameter table for this tree
            root_x, root_y: Trunk base in canvas coordinates
            root_length: Trunk length before growth scaling
            max_depth: Depth of the trunk; recursion counts down to 0
            root_width: Trunk stroke width; deeper levels decay geometrically
            growth_progress: Global growth progress in [0, 1]
            wind_time: Current wind phase
            style: Render-time settings
            root_angle: Trunk direction, pi/2 is straight up
        """
        walk = _Pass(table, max_depth, root_width, wind_time, style, [])
        self._draw_branch(walk, Vector2D(root_x, root_y), root_length, root_angle,
                          max_depth, growth_progress, 0)
        return walk.out

    def wind_angle(self, depth: int, max_depth: int, wind_time: float, style: TreeStyle) -> float:
        return wind_offset(depth, wind_time, max_depth, style.wind_strength,
                           style.wind_speed, self.config.wind)

    def _draw_branch(self, walk: _Pass, origin: Vector2D, length: float, angle: float,
                     depth: int, progress: float, branch_index: int):
        scale = growth_scale(progress)
        length = length * scale

        wind = self.wind_angle(depth, walk.max_depth, walk.wind_time, walk.style)
        angle += wind

        params = walk.table.get(depth, branch_index) if depth > 0 else None
        if params is None:
            self._draw_leaf(walk, origin, angle, wind, depth, progress, branch_index)
            return

        width = walk.root_width * self.config.branch.width_decay ** (walk.max_depth - depth) * scale
        self._draw_strokes(walk, params, origin, length, angle, width, depth, branch_index)

        growth = self.config.growth
        if progress <= growth.child_delay:
            return
        next_progress = child_progress(progress, growth)
        if next_progress <= 0:
            return

        tip = origin + Vector2D.from_angle(angle, length)
        next_length = length * params.length_ratio
        left_angle = angle + walk.style.branch_angle + params.left_angle_offset
        right_angle = angle - walk.style.branch_angle + params.right_angle_offset

        self._draw_branch(walk, tip, next_length, left_angle, depth - 1, next_progress, branch_index * 2)
        self._draw_branch(walk, tip, next_length, right_angle, depth - 1, next_progress, branch_index * 2 + 1)

    def _draw_strokes(self, walk: _Pass, params: BranchParams, origin: Vector2D, length: float,
                      angle: float, width: float, depth: int, branch_index: int):
        color = walk.style.ink_color
        direction = Vector2D.from_angle(angle, length)
        # Control points sit in the translated frame only; they are not rotated
        # with the branch.
        for curve in params.curves:
            end = origin + direction + Vector2D(width * curve.end_x, width * curve.end_y)
            ctrl1 = origin + Vector2D(length * curve.ctrl1_x, width * curve.ctrl1_y)
            ctrl2 = origin + Vector2D(length * curve.ctrl2_x, width * curve.ctrl2_y)
            walk.out.append(CurvePrimitive(
                start=origin.to_tuple(),
                ctrl1=ctrl1.to_tuple(),
                ctrl2=ctrl2.to_tuple(),
                end=end.to_tuple(),
                width=width * self.jitter.uniform(*self.config.branch.stroke_jitter),
                color=color,
                alpha=curve.alpha,
                depth=depth,
                branch_index=branch_index,
            ))

        for splat in params.splats:
            position = origin + Vector2D(length * splat.x, width * splat.y)
            walk.out.append(PointPrimitive(
                position=position.to_tuple(),
                width=self.jitter.uniform(*self.config.splatter.stroke_range),
                color=color,
                alpha=splat.alpha,
            ))

    def _draw_leaf(self, walk: _Pass, origin: Vector2D, angle: float, wind: float,
                   depth: int, progress: float, branch_index: int):
        leaf = self.config.leaf
        if progress <= leaf.show_threshold:
            return
        amount = leaf_progress(progress, leaf.show_threshold, self.config.growth)
        if amount <= 0:
            return

        rotation = -angle + wind * leaf.wind_damping
        size = leaf.size * min(1.0, amount * 2)
        style = walk.style
        for offset, alpha in ((leaf.shadow_offset, leaf.shadow_alpha),
                              ((0.0, 0.0), leaf.main_alpha)):
            walk.out.append(GlyphPrimitive(
                position=origin.to_tuple(),
                rotation=rotation,
                offset=offset,
                text=style.leaf_char,
                size=size,
                color=style.leaf_color,
                alpha=alpha * amount,
                depth=depth,
                branch_index=branch_index,
            ))

    def ground(self, width: float, height: float, ink_color: Color) -> List[Primitive]:
        """Loose ink strokes along the ground line, redrawn differently each frame."""
        ground = self.config.ground
        rng = self.jitter
        base_y = height * ground.height_ratio
        lines = []
        for x in range(0, int(width), ground.line_spacing):
            y = base_y + rng.uniform(-ground.variation, ground.variation)
            stroke = rng.uniform(*ground.stroke_range)
            end_x = x + rng.uniform(*ground.line_length_range)
            end_y = y + rng.uniform(-ground.variation, ground.variation)
            lines.append(LinePrimitive(
                start=(float(x), y),
                end=(end_x, end_y),
                width=stroke,
                color=ink_color,
                alpha=ground.alpha,
            ))
        return lines
