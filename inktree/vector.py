"""
Simple 2D Vector class for branch geometry in screen coordinates (y down).
"""

import numpy as np


class Vector2D:
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)

    def __repr__(self) -> str:
        return f"Vector2D({self.x:.2f}, {self.y:.2f})"

    def __eq__(self, other: 'Vector2D') -> bool:
        return bool(np.isclose(self.x, other.x) and np.isclose(self.y, other.y))

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    @classmethod
    def from_angle(cls, angle: float, length: float) -> 'Vector2D':
        """
        Offset of `length` along `angle` measured counter-clockwise from +x,
        with y pointing down the canvas (angle pi/2 points up).
        """
        return cls(length * np.cos(-angle), length * np.sin(-angle))
