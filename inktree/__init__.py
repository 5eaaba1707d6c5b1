"""
Procedural ink-painting trees.

A seeded parameter table describes every branch of a tree; growth progress and
wind are applied at render time. The simulation state that ties them to the
renderer lives in `inktree.state`.
"""

from .random_source import RandomSource
from .vector import Vector2D
from .params import (
    CurveSpec,
    SplatSpec,
    BranchParams,
    ParameterTable,
    branches_at_depth,
    generate
)
from .growth import GrowthState, child_progress, leaf_progress, growth_scale
from .wind import WindClock, wind_offset

__all__ = [
    'RandomSource',
    'Vector2D',
    'CurveSpec',
    'SplatSpec',
    'BranchParams',
    'ParameterTable',
    'branches_at_depth',
    'generate',
    'GrowthState',
    'child_progress',
    'leaf_progress',
    'growth_scale',
    'WindClock',
    'wind_offset'
]
