"""
Ink tree renderer using Cairo.
Replays growth-renderer primitives onto an image surface and writes frames
and animations.
"""

import math
import cairo
import imageio
import numpy as np
from tqdm import tqdm
from typing import Iterable, List, Optional, Tuple
from pathlib import Path

from config.render_config import InkRenderConfig
from .base import Renderer
from .primitives import Primitive, Point, Color
from .surface import DrawingSurface, draw_primitives


def _rgba(color: Color, alpha: float) -> Tuple[float, float, float, float]:
    r, g, b = color
    a = min(255.0, max(0.0, alpha))
    return r / 255.0, g / 255.0, b / 255.0, a / 255.0


class CairoSurface(DrawingSurface):
    def __init__(self, ctx: cairo.Context, font_face: str = "Noto Sans SC"):
        self.ctx = ctx
        self.ctx.select_font_face(font_face, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)

    def clear(self, color: Tuple[float, float, float, float]):
        self.ctx.set_source_rgba(*color)
        self.ctx.paint()

    def stroke_curve(self, start: Point, ctrl1: Point, ctrl2: Point, end: Point,
                     width: float, color: Color, alpha: float):
        ctx = self.ctx
        ctx.set_source_rgba(*_rgba(color, alpha))
        ctx.set_line_width(max(0.0, width))
        ctx.move_to(*start)
        ctx.curve_to(*ctrl1, *ctrl2, *end)
        ctx.stroke()

    def stroke_line(self, start: Point, end: Point, width: float, color: Color, alpha: float):
        ctx = self.ctx
        ctx.set_source_rgba(*_rgba(color, alpha))
        ctx.set_line_width(max(0.0, width))
        ctx.move_to(*start)
        ctx.line_to(*end)
        ctx.stroke()

    def draw_point(self, position: Point, width: float, color: Color, alpha: float):
        ctx = self.ctx
        ctx.set_source_rgba(*_rgba(color, alpha))
        ctx.arc(position[0], position[1], max(0.0, width) / 2, 0, 2 * math.pi)
        ctx.fill()

    def draw_text(self, text: str, position: Point, size: float, color: Color, alpha: float):
        if size <= 0 or not text:
            return
        ctx = self.ctx
        ctx.set_source_rgba(*_rgba(color, alpha))
        ctx.set_font_size(size)
        x_bearing, y_bearing, width, height, _, _ = ctx.text_extents(text)
        # Centered on the anchor both ways
        ctx.move_to(position[0] - (x_bearing + width / 2),
                    position[1] - (y_bearing + height / 2))
        ctx.show_text(text)
        ctx.new_path()

    def push(self):
        self.ctx.save()

    def pop(self):
        self.ctx.restore()

    def translate(self, dx: float, dy: float):
        self.ctx.translate(dx, dy)

    def rotate(self, angle: float):
        self.ctx.rotate(angle)


class InkRenderer(Renderer):
    def __init__(self, config: Optional[InkRenderConfig] = None):
        super().__init__(config or InkRenderConfig())

    def render_frame(self, primitives: Iterable[Primitive]) -> np.ndarray:
        surface, ctx = self._create_surface()
        if self.config.line_cap_round:
            ctx.set_line_cap(cairo.LINE_CAP_ROUND)
            ctx.set_line_join(cairo.LINE_JOIN_ROUND)

        canvas = CairoSurface(ctx, self.config.font_face)
        canvas.clear(self.config.background_color)
        draw_primitives(canvas, primitives)

        return self._surface_to_numpy(surface)

    def render_state(self, state) -> np.ndarray:
        """Render the current frame of a SimulationState."""
        primitives = state.frame_primitives(self.config.output_width, self.config.output_height)
        return self.render_frame(primitives)

    def save_frame(self, state, output_path: str):
        frame = self.render_state(state)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)

    def render_animation(self, state, output_path: str, num_frames: int, fps: int = 60,
                         frame_skip: int = 1) -> int:
        """
        Run the frame loop for `num_frames` ticks and write every `frame_skip`-th
        frame. Frames depend on the previous tick, so they are rendered in order.
        Returns the number of frames written.
        """
        if frame_skip < 1:
            raise ValueError(f"frame_skip must be at least 1, got {frame_skip}")
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        frames: List[np.ndarray] = []
        last = None
        for i in tqdm(range(num_frames), desc="Rendering ink tree frames"):
            if state.tick() or last is None:
                last = self.render_state(state)
            if i % frame_skip == 0:
                frames.append(last)

        out_fps = max(1, fps // frame_skip)
        if Path(output_path).suffix.lower() == '.gif':
            imageio.mimsave(output_path, frames, duration=1000 / out_fps, loop=0)
        else:
            imageio.mimsave(output_path, frames, fps=out_fps)
        print(f"  Saved animation: {output_path}")
        return len(frames)
