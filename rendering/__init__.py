"""
Rendering module for ink trees.
The growth renderer turns a parameter table into draw primitives; the Cairo
renderer rasterizes them.
"""

from config.render_config import InkRenderConfig
from .primitives import (
    Primitive,
    CurvePrimitive,
    PointPrimitive,
    LinePrimitive,
    GlyphPrimitive
)
from .surface import DrawingSurface, draw_primitives
from .growth_renderer import GrowthRenderer, TreeStyle
from .ink_renderer import InkRenderer, CairoSurface
