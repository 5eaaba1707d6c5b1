"""
Draw primitives emitted by the growth renderer.

Points are in canvas coordinates (y down). Colors are RGB in 0..255 and alpha
is in 0..255, matching the ranges stored in the parameter table.
"""

from dataclasses import dataclass
from typing import Tuple, Union

Point = Tuple[float, float]
Color = Tuple[int, int, int]


@dataclass(frozen=True)
class CurvePrimitive:
    start: Point
    ctrl1: Point
    ctrl2: Point
    end: Point
    width: float
    color: Color
    alpha: float
    depth: int
    branch_index: int


@dataclass(frozen=True)
class PointPrimitive:
    position: Point
    width: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class LinePrimitive:
    start: Point
    end: Point
    width: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class GlyphPrimitive:
    """Text drawn at `offset` after translating to `position` and rotating by `rotation`."""
    position: Point
    rotation: float
    offset: Point
    text: str
    size: float
    color: Color
    alpha: float
    depth: int
    branch_index: int


Primitive = Union[CurvePrimitive, PointPrimitive, LinePrimitive, GlyphPrimitive]
