"""
Tests for the Cairo ink renderer.
"""

import imageio
import numpy as np
import pytest

from config.controls import ControlsConfig
from config.render_config import InkRenderConfig
from inktree.random_source import RandomSource
from inktree.state import SimulationState
from rendering.ink_renderer import InkRenderer
from rendering.primitives import CurvePrimitive, GlyphPrimitive, LinePrimitive, PointPrimitive


def small_renderer(width: int = 100, height: int = 80) -> InkRenderer:
    return InkRenderer(InkRenderConfig(output_width=width, output_height=height))


class TestRenderFrame:
    """Rasterizing primitives."""

    def test_blank_frame_is_background(self) -> None:
        """No primitives gives a plain white RGBA frame."""
        frame = small_renderer().render_frame([])
        assert frame.shape == (80, 100, 4)
        assert frame.dtype == np.uint8
        assert np.all(frame == 255)

    def test_curve_darkens_pixels(self) -> None:
        """An opaque black stroke across the middle shows up."""
        curve = CurvePrimitive(
            start=(0.0, 40.0), ctrl1=(30.0, 40.0), ctrl2=(70.0, 40.0), end=(100.0, 40.0),
            width=6.0, color=(0, 0, 0), alpha=255, depth=1, branch_index=0,
        )
        frame = small_renderer().render_frame([curve])
        assert frame[40, 50, 0] < 50
        assert frame[5, 50, 0] == 255

    def test_alpha_above_range_is_clamped(self) -> None:
        """Alpha values past 255 draw as fully opaque."""
        dot = PointPrimitive(position=(50.0, 40.0), width=10.0, color=(0, 0, 0), alpha=400)
        frame = small_renderer().render_frame([dot])
        assert frame[40, 50, 0] == 0

    def test_ground_line_and_glyph(self) -> None:
        """Lines and text glyphs render without error."""
        prims = [
            LinePrimitive(start=(0.0, 60.0), end=(90.0, 62.0), width=2.0, color=(0, 0, 0), alpha=30),
            GlyphPrimitive(position=(50.0, 30.0), rotation=-1.2, offset=(1.0, 1.0), text='林',
                           size=16.0, color=(34, 139, 34), alpha=50, depth=0, branch_index=0),
            GlyphPrimitive(position=(50.0, 30.0), rotation=-1.2, offset=(0.0, 0.0), text='林',
                           size=16.0, color=(34, 139, 34), alpha=200, depth=0, branch_index=0),
        ]
        frame = small_renderer().render_frame(prims)
        assert frame.shape == (80, 100, 4)
        assert frame[61, 45, 0] < 255


class TestRenderState:
    """Rendering a whole simulation frame."""

    def test_grown_tree_has_ink(self) -> None:
        """A fully grown tree leaves ink on the canvas."""
        state = SimulationState(ControlsConfig(depth=4), seed=42, jitter=RandomSource(0))
        state.complete_growth()
        frame = small_renderer(200, 160).render_state(state)
        assert (frame[:, :, 0] < 200).sum() > 50

    def test_save_frame_writes_png(self, tmp_path) -> None:
        """save_frame writes a readable image of the configured size."""
        state = SimulationState(ControlsConfig(depth=3), seed=1, jitter=RandomSource(0))
        state.complete_growth()
        path = tmp_path / "out" / "tree.png"
        small_renderer(120, 90).save_frame(state, str(path))
        image = imageio.imread(str(path))
        assert image.shape[:2] == (90, 120)

    def test_render_animation_frame_count(self, tmp_path) -> None:
        """Every frame_skip-th tick is written."""
        state = SimulationState(ControlsConfig(depth=2, growth_speed=100), seed=3,
                                jitter=RandomSource(0))
        state.start_growth(seed=3)
        path = tmp_path / "growth.gif"
        written = small_renderer(60, 40).render_animation(state, str(path), num_frames=10,
                                                          fps=10, frame_skip=2)
        assert written == 5
        assert path.exists()

    def test_render_animation_rejects_zero_skip(self, tmp_path) -> None:
        """A frame skip below 1 is refused before any frame is rendered."""
        state = SimulationState(ControlsConfig(depth=2), seed=3, jitter=RandomSource(0))
        with pytest.raises(ValueError):
            small_renderer(60, 40).render_animation(state, str(tmp_path / "x.gif"),
                                                    num_frames=4, frame_skip=0)
