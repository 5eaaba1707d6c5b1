"""
Abstract 2D drawing surface and the primitive dispatcher.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Tuple

from .primitives import (
    Primitive,
    CurvePrimitive,
    PointPrimitive,
    LinePrimitive,
    GlyphPrimitive,
    Point,
    Color
)


class DrawingSurface(ABC):
    @abstractmethod
    def clear(self, color: Tuple[float, float, float, float]):
        pass

    @abstractmethod
    def stroke_curve(self, start: Point, ctrl1: Point, ctrl2: Point, end: Point,
                     width: float, color: Color, alpha: float):
        pass

    @abstractmethod
    def stroke_line(self, start: Point, end: Point, width: float, color: Color, alpha: float):
        pass

    @abstractmethod
    def draw_point(self, position: Point, width: float, color: Color, alpha: float):
        pass

    @abstractmethod
    def draw_text(self, text: str, position: Point, size: float, color: Color, alpha: float):
        pass

    @abstractmethod
    def push(self):
        pass

    @abstractmethod
    def pop(self):
        pass

    @abstractmethod
    def translate(self, dx: float, dy: float):
        pass

    @abstractmethod
    def rotate(self, angle: float):
        pass


def draw_primitives(surface: DrawingSurface, primitives: Iterable[Primitive]) -> int:
    """Replay primitives onto a surface in order. Returns the number drawn."""
    count = 0
    for prim in primitives:
        if isinstance(prim, CurvePrimitive):
            surface.stroke_curve(prim.start, prim.ctrl1, prim.ctrl2, prim.end,
                                 prim.width, prim.color, prim.alpha)
        elif isinstance(prim, PointPrimitive):
            surface.draw_point(prim.position, prim.width, prim.color, prim.alpha)
        elif isinstance(prim, LinePrimitive):
            surface.stroke_line(prim.start, prim.end, prim.width, prim.color, prim.alpha)
        elif isinstance(prim, GlyphPrimitive):
            surface.push()
            surface.translate(*prim.position)
            surface.rotate(prim.rotation)
            surface.draw_text(prim.text, prim.offset, prim.size, prim.color, prim.alpha)
            surface.pop()
        else:
            raise TypeError(f"Unknown primitive: {type(prim).__name__}")
        count += 1
    return count
