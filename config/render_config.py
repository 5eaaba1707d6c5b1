"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class InkRenderConfig:
    output_width: int = 800
    output_height: int = 600
    background_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)

    font_face: str = "Noto Sans SC"
    line_cap_round: bool = True

    antialiasing: bool = True
