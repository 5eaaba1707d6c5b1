"""
Per-branch parameter table.

Every stochastic value the renderer needs is drawn here, once, from a source
reseeded with the tree seed. The table is indexed by (depth, branch_index)
where depth counts down from the trunk (max_depth) to the tips (0), and each
depth holds 2**(depth + 2) entries so child indices 2*i and 2*i + 1 stay in
range along any path from the root.

Draw order per branch (changing it changes every tree for a given seed):
    length, left angle, right angle,
    3 x (end_x, end_y, ctrl1_x, ctrl1_y, ctrl2_x, ctrl2_y, alpha),
    [splat count, count x (x, y, alpha)]   only when depth > min_depth_for_splats
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from config.tree_config import InkTreeConfig
from .random_source import RandomSource


@dataclass(frozen=True)
class CurveSpec:
    end_x: float
    end_y: float
    ctrl1_x: float
    ctrl1_y: float
    ctrl2_x: float
    ctrl2_y: float
    alpha: float


@dataclass(frozen=True)
class SplatSpec:
    x: float
    y: float
    alpha: float


@dataclass(frozen=True)
class BranchParams:
    length_ratio: float
    width_ratio: float
    left_angle_offset: float
    right_angle_offset: float
    curves: Tuple[CurveSpec, ...]
    splats: Tuple[SplatSpec, ...]


@dataclass(frozen=True)
class ParameterTable:
    seed: int
    max_depth: int
    randomness: float
    levels: Dict[int, Tuple[BranchParams, ...]]

    def __len__(self) -> int:
        return len(self.levels)

    def level_size(self, depth: int) -> int:
        return len(self.levels.get(depth, ()))

    def get(self, depth: int, branch_index: int) -> Optional[BranchParams]:
        """Return the entry at (depth, branch_index), or None when there is none."""
        level = self.levels.get(depth)
        if level is None or not 0 <= branch_index < len(level):
            return None
        return level[branch_index]


def branches_at_depth(depth: int) -> int:
    return 2 ** (depth + 2)


def _draw_curve(rng: RandomSource, config: InkTreeConfig) -> CurveSpec:
    branch = config.branch
    return CurveSpec(
        end_x=rng.uniform(-1, 1),
        end_y=rng.uniform(-1, 1),
        ctrl1_x=rng.uniform(*branch.ctrl1_range),
        ctrl1_y=rng.uniform(-1, 1),
        ctrl2_x=rng.uniform(*branch.ctrl2_range),
        ctrl2_y=rng.uniform(-1, 1),
        alpha=rng.uniform(*branch.curve_alpha_range),
    )


def _draw_splat(rng: RandomSource, config: InkTreeConfig) -> SplatSpec:
    return SplatSpec(
        x=rng.uniform(0, 1),
        y=rng.uniform(-1, 1),
        alpha=rng.uniform(*config.splatter.alpha_range),
    )


def generate_branch_params(
    rng: RandomSource,
    depth: int,
    randomness: float,
    config: InkTreeConfig
) -> BranchParams:
    """Draw one branch's parameters. Statement order is the draw order."""
    branch = config.branch

    length_ratio = rng.uniform(*branch.length_range)
    left_angle = rng.uniform(*branch.angle_variation) * randomness
    right_angle = rng.uniform(*branch.angle_variation) * randomness

    curves = []
    for _ in range(branch.curves_count):
        curves.append(_draw_curve(rng, config))

    splats = []
    if depth > branch.min_depth_for_splats:
        count = rng.uniform_int(*config.splatter.count_range)
        for _ in range(count):
            splats.append(_draw_splat(rng, config))

    return BranchParams(
        length_ratio=length_ratio,
        width_ratio=branch.width_scale,
        left_angle_offset=left_angle,
        right_angle_offset=right_angle,
        curves=tuple(curves),
        splats=tuple(splats),
    )


def generate(
    seed: int,
    max_depth: int,
    randomness: float,
    config: Optional[InkTreeConfig] = None,
    rng: Optional[RandomSource] = None
) -> ParameterTable:
    """
    Build the full parameter table for one tree.

    Args:
        seed: Tree seed; the source is reseeded with it before any draw
        max_depth: Trunk depth; levels 0..max_depth are generated
        randomness: Angle perturbation factor in [0, 1]
        config: Constant tables (defaults to InkTreeConfig())
        rng: Source to reseed and draw from (a fresh one if omitted)
    """
    config = config or InkTreeConfig()
    rng = rng or RandomSource()
    rng.reseed(seed)

    levels: Dict[int, Tuple[BranchParams, ...]] = {}
    for depth in range(max_depth + 1):
        levels[depth] = tuple(
            generate_branch_params(rng, depth, randomness, config)
            for _ in range(branches_at_depth(depth))
        )

    return ParameterTable(seed=seed, max_depth=max_depth, randomness=randomness, levels=levels)
