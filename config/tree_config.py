"""
Constant tables for the ink tree generator and renderer.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class LeafConfig:
    show_threshold: float = 0.1
    size: float = 16.0
    shadow_alpha: float = 50.0
    main_alpha: float = 200.0
    shadow_offset: Tuple[float, float] = (1.0, 1.0)
    wind_damping: float = 0.5


@dataclass(frozen=True)
class BranchConfig:
    length_range: Tuple[float, float] = (0.65, 0.75)
    width_scale: float = 0.7
    angle_variation: Tuple[float, float] = (-0.5, 0.5)
    ctrl1_range: Tuple[float, float] = (0.2, 0.4)
    ctrl2_range: Tuple[float, float] = (0.6, 0.8)
    curve_alpha_range: Tuple[float, float] = (100.0, 255.0)
    curves_count: int = 3
    min_depth_for_splats: int = 2
    width_decay: float = 0.7
    stroke_jitter: Tuple[float, float] = (0.8, 1.2)


@dataclass(frozen=True)
class SplatterConfig:
    count_range: Tuple[int, int] = (3, 6)
    alpha_range: Tuple[float, float] = (50.0, 150.0)
    stroke_range: Tuple[float, float] = (1.0, 2.0)


@dataclass(frozen=True)
class GrowthConfig:
    speed_factor: float = 0.001
    child_delay: float = 0.1
    child_scale: float = 1.2


@dataclass(frozen=True)
class WindConfig:
    angle_factor: float = 0.02
    time_scale: float = 0.001
    base_frequency: float = 0.5
    depth_phase: float = 0.5
    idle_multiplier: float = 2.0


@dataclass(frozen=True)
class GroundConfig:
    line_spacing: int = 20
    height_ratio: float = 0.8
    variation: float = 5.0
    line_length_range: Tuple[float, float] = (10.0, 30.0)
    stroke_range: Tuple[float, float] = (0.5, 2.0)
    alpha: float = 30.0


@dataclass(frozen=True)
class CanvasConfig:
    frame_rate: int = 60
    max_seed: int = 10000


@dataclass(frozen=True)
class InkTreeConfig:
    leaf: LeafConfig = field(default_factory=LeafConfig)
    branch: BranchConfig = field(default_factory=BranchConfig)
    splatter: SplatterConfig = field(default_factory=SplatterConfig)
    growth: GrowthConfig = field(default_factory=GrowthConfig)
    wind: WindConfig = field(default_factory=WindConfig)
    ground: GroundConfig = field(default_factory=GroundConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
