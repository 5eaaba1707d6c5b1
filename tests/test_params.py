"""
Tests for the seeded branch parameter table.

The table is the only reproducible part of a tree, so these tests pin down
its size, value ranges, splat gating and seed behavior.
"""

import pytest

from config.tree_config import InkTreeConfig
from inktree.params import branches_at_depth, generate, generate_branch_params
from inktree.random_source import RandomSource


class TestDeterminism:
    """Same seed and parameters give the same table."""

    def test_same_seed_identical_tables(self) -> None:
        """Two generations from one seed compare equal value for value."""
        first = generate(1234, 5, 0.5)
        second = generate(1234, 5, 0.5)
        assert first == second

    def test_different_seed_differs(self) -> None:
        """Changing only the seed changes the table."""
        first = generate(1, 3, 0.5)
        second = generate(2, 3, 0.5)
        assert first.levels != second.levels

    def test_reused_source_is_reseeded(self) -> None:
        """A source that already produced draws is reset by the seed."""
        rng = RandomSource(99)
        rng.uniform(0, 1)
        rng.uniform(0, 1)
        assert generate(7, 3, 0.3, rng=rng) == generate(7, 3, 0.3)

    def test_unseeded_draws_do_not_leak_in(self) -> None:
        """Draws from another source between generations have no effect."""
        first = generate(5, 3, 0.5)
        RandomSource().uniform(0, 1)
        assert generate(5, 3, 0.5) == first


class TestTableSizing:
    """Depth levels and entries per level."""

    @pytest.mark.parametrize("max_depth", [0, 1, 4, 6])
    def test_level_count(self, max_depth: int) -> None:
        """A table for max depth D has D + 1 levels."""
        table = generate(3, max_depth, 0.5)
        assert len(table) == max_depth + 1
        assert sorted(table.levels) == list(range(max_depth + 1))

    def test_entries_per_level(self) -> None:
        """Depth d holds 2**(d + 2) entries."""
        table = generate(3, 5, 0.5)
        for depth in range(6):
            assert table.level_size(depth) == 2 ** (depth + 2)
            assert branches_at_depth(depth) == 2 ** (depth + 2)

    def test_seed_42_scenario(self) -> None:
        """seed=42, depth 3 gives levels sized 4, 8, 16, 32."""
        table = generate(42, 3, 0.5)
        assert [table.level_size(d) for d in range(4)] == [4, 8, 16, 32]
        assert table.seed == 42
        assert table.max_depth == 3

    def test_get_out_of_range_is_none(self) -> None:
        """Lookups past the end or at a missing depth return None."""
        table = generate(3, 2, 0.5)
        assert table.get(2, 16) is None
        assert table.get(2, -1) is None
        assert table.get(5, 0) is None
        assert table.get(2, 15) is not None


class TestValueRanges:
    """Every drawn value stays in its documented range."""

    @pytest.fixture
    def table(self):
        return generate(2024, 4, 1.0)

    def test_branch_values(self, table) -> None:
        """Length ratio, width ratio and angle offsets."""
        for level in table.levels.values():
            for params in level:
                assert 0.65 <= params.length_ratio <= 0.75
                assert params.width_ratio == 0.7
                assert -0.5 <= params.left_angle_offset <= 0.5
                assert -0.5 <= params.right_angle_offset <= 0.5

    def test_curve_values(self, table) -> None:
        """Exactly three curves with values in range."""
        for level in table.levels.values():
            for params in level:
                assert len(params.curves) == 3
                for curve in params.curves:
                    assert -1 <= curve.end_x <= 1
                    assert -1 <= curve.end_y <= 1
                    assert 0.2 <= curve.ctrl1_x <= 0.4
                    assert -1 <= curve.ctrl1_y <= 1
                    assert 0.6 <= curve.ctrl2_x <= 0.8
                    assert -1 <= curve.ctrl2_y <= 1
                    assert 100 <= curve.alpha <= 255

    def test_zero_randomness_gives_zero_offsets(self) -> None:
        """Randomness 0 removes the angle perturbation."""
        table = generate(8, 3, 0.0)
        for level in table.levels.values():
            for params in level:
                assert params.left_angle_offset == 0.0
                assert params.right_angle_offset == 0.0

    def test_randomness_scales_offsets(self) -> None:
        """Offsets scale linearly with the randomness factor."""
        full = generate(8, 2, 1.0)
        half = generate(8, 2, 0.5)
        for depth in full.levels:
            for a, b in zip(full.levels[depth], half.levels[depth]):
                assert b.left_angle_offset == pytest.approx(a.left_angle_offset * 0.5)
                assert b.right_angle_offset == pytest.approx(a.right_angle_offset * 0.5)


class TestSplatGating:
    """Splats only on branches deeper than the threshold."""

    def test_no_splats_at_or_below_threshold(self) -> None:
        """Depths 0, 1 and 2 never carry splats."""
        table = generate(11, 5, 0.5)
        for depth in (0, 1, 2):
            assert all(p.splats == () for p in table.levels[depth])

    def test_splat_count_above_threshold(self) -> None:
        """Depths above 2 carry between 3 and 6 splats."""
        table = generate(11, 5, 0.5)
        for depth in (3, 4, 5):
            for params in table.levels[depth]:
                assert 3 <= len(params.splats) <= 6
                for splat in params.splats:
                    assert 0 <= splat.x <= 1
                    assert -1 <= splat.y <= 1
                    assert 50 <= splat.alpha <= 150


class TestDrawOrder:
    """The number of draws per branch is fixed by depth."""

    def test_shallow_branch_uses_24_draws(self) -> None:
        """length + 2 angles + 3 curves x 7 values, no splat draws."""
        config = InkTreeConfig()
        rng = RandomSource(17)
        generate_branch_params(rng, 1, 0.5, config)
        after_branch = rng.uniform(0, 1)

        reference = RandomSource(17)
        for _ in range(24):
            reference.uniform(0, 1)
        assert after_branch == reference.uniform(0, 1)

    def test_deep_branch_draws_count_then_triples(self) -> None:
        """A splatted branch uses 24 + 1 + 3 * count draws."""
        config = InkTreeConfig()
        rng = RandomSource(17)
        params = generate_branch_params(rng, 4, 0.5, config)
        after_branch = rng.uniform(0, 1)

        reference = RandomSource(17)
        for _ in range(24 + 1 + 3 * len(params.splats)):
            reference.uniform(0, 1)
        assert after_branch == reference.uniform(0, 1)
