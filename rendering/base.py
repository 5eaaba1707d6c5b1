"""
Base renderer class defining the interface for all renderers.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.render_config import InkRenderConfig


class Renderer(ABC):
    def __init__(self, config: InkRenderConfig):
        self.config = config

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.config.output_width,
            self.config.output_height
        )
        ctx = cairo.Context(surface)

        if self.config.antialiasing:
            ctx.set_antialias(cairo.ANTIALIAS_BEST)

        return surface, ctx

    def _surface_to_numpy(self, surface: cairo.ImageSurface) -> np.ndarray:
        surface.flush()
        buf = surface.get_data()
        arr = np.ndarray(
            shape=(self.config.output_height, surface.get_stride() // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self.config.output_width]
        # Cairo stores premultiplied BGRA on little-endian machines
        arr_rgba = np.empty_like(arr)
        arr_rgba[:, :, 0] = arr[:, :, 2]
        arr_rgba[:, :, 1] = arr[:, :, 1]
        arr_rgba[:, :, 2] = arr[:, :, 0]
        arr_rgba[:, :, 3] = arr[:, :, 3]
        return arr_rgba

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass

    @abstractmethod
    def render_animation(self, *args, **kwargs):
        pass
