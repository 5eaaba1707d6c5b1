"""
Tests for the wind offset and the wind clock.
"""

import math

import pytest

from config.tree_config import WindConfig
from inktree.wind import WindClock, wind_offset


class TestWindOffset:
    """Depth taper and phase of the sway."""

    @pytest.mark.parametrize("time", [0.0, 0.37, 5.0, 123.4])
    @pytest.mark.parametrize("strength", [0.0, 3.0, 50.0])
    def test_trunk_never_sways(self, time: float, strength: float) -> None:
        """At depth == max_depth the taper is 0."""
        assert wind_offset(6, time, 6, strength, 5.0) == 0.0

    def test_tip_full_strength(self) -> None:
        """At depth 0 the taper is 1."""
        config = WindConfig()
        time, strength, speed = 0.8, 4.0, 5.0
        expected = math.sin(time * config.base_frequency * speed) * strength * config.angle_factor
        assert wind_offset(0, time, 6, strength, speed) == pytest.approx(expected)

    def test_midway_taper(self) -> None:
        """Taper is 1 - depth / max_depth, phase is depth * 0.5."""
        time, strength, speed = 1.3, 10.0, 2.0
        expected = math.sin(time * 0.5 * speed + 2 * 0.5) * strength * 0.02 * (1 - 2 / 4)
        assert wind_offset(2, time, 4, strength, speed) == pytest.approx(expected)

    def test_zero_strength(self) -> None:
        """No strength, no sway."""
        for depth in range(5):
            assert wind_offset(depth, 2.0, 4, 0.0, 5.0) == 0.0

    def test_zero_max_depth(self) -> None:
        """A single-level tree is all trunk."""
        assert wind_offset(0, 1.0, 0, 10.0, 5.0) == 0.0


class TestWindClock:
    """Wind time accumulation per frame."""

    def test_growing_rate(self) -> None:
        """Advances by time_scale per frame while growing."""
        clock = WindClock()
        clock.advance(is_growing=True)
        assert clock.time == pytest.approx(0.001)

    def test_idle_rate_is_double(self) -> None:
        """Advances twice as fast while idle."""
        clock = WindClock()
        clock.advance(is_growing=False)
        assert clock.time == pytest.approx(0.002)

    def test_monotonic(self) -> None:
        """Time only increases, whatever the growth state."""
        clock = WindClock()
        previous = clock.time
        for i in range(50):
            current = clock.advance(is_growing=i % 3 == 0)
            assert current > previous
            previous = current
