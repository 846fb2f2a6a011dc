"""
Tests for IntervalSet and condition rendering.

Tests cover:
- Union of disjoint, overlapping, contained and multi-range sets
- Intersection of the same shapes
- Construction helpers
- render_condition formatting
"""

import pytest

from digitsum.core.ranges import IntervalSet, NoValidValue, render_condition


class TestUnion:
    """Test IntervalSet.union."""

    def test_disjoint_union(self) -> None:
        r1, r2 = IntervalSet.of(1, 3), IntervalSet.of(4, 6)

        assert r1.union(r2).ranges == [(1, 3), (4, 6)]
        assert r2.union(r1).ranges == [(1, 3), (4, 6)]

    def test_overlapping_union(self) -> None:
        r1, r2 = IntervalSet.of(1, 4), IntervalSet.of(3, 6)

        assert r1.union(r2).ranges == [(1, 6)]
        assert r2.union(r1).ranges == [(1, 6)]

    def test_contained_union(self) -> None:
        r1, r2 = IntervalSet.of(1, 6), IntervalSet.of(3, 4)

        assert r1.union(r2).ranges == [(1, 6)]
        assert r2.union(r1).ranges == [(1, 6)]

    def test_complex_union(self) -> None:
        r1 = IntervalSet.of(1, 4).union(IntervalSet.of(5, 7))
        r2 = IntervalSet.of(3, 6).union(IntervalSet.of(7, 8))

        assert r1.union(r2).ranges == [(1, 8)]
        assert r2.union(r1).ranges == [(1, 8)]

    def test_union_with_empty(self) -> None:
        assert IntervalSet.empty().union(IntervalSet.of(2, 3)).ranges == [(2, 3)]


class TestIntersect:
    """Test IntervalSet.intersect."""

    def test_disjoint_intersect(self) -> None:
        r1, r2 = IntervalSet.of(1, 3), IntervalSet.of(4, 6)

        assert r1.intersect(r2).ranges == []
        assert r2.intersect(r1).ranges == []

    def test_overlapping_intersect(self) -> None:
        r1, r2 = IntervalSet.of(1, 4), IntervalSet.of(3, 6)

        assert r1.intersect(r2).ranges == [(3, 4)]
        assert r2.intersect(r1).ranges == [(3, 4)]

    def test_contained_intersect(self) -> None:
        r1, r2 = IntervalSet.of(1, 6), IntervalSet.of(3, 4)

        assert r1.intersect(r2).ranges == [(3, 4)]
        assert r2.intersect(r1).ranges == [(3, 4)]

    def test_complex_intersect(self) -> None:
        r1 = IntervalSet.of(1, 4).union(IntervalSet.of(5, 7))
        r2 = IntervalSet.of(3, 6).union(IntervalSet.of(7, 8))

        assert r1.intersect(r2).ranges == [(3, 4), (5, 6), (7, 7)]
        assert r2.intersect(r1).ranges == [(3, 4), (5, 6), (7, 7)]

    def test_intersect_with_empty_is_empty(self) -> None:
        """Intersecting with nothing leaves nothing."""
        assert IntervalSet.of(1, 5).intersect(IntervalSet.empty()).is_empty()
        assert IntervalSet.empty().intersect(IntervalSet.of(1, 5)).is_empty()


class TestConstruction:
    """Test constructors and queries."""

    def test_inverted_bounds_are_empty(self) -> None:
        assert IntervalSet.of(5, 1).is_empty()

    def test_from_values_builds_runs(self) -> None:
        """Consecutive integers collapse into one range."""
        assert IntervalSet.from_values([5, 3, 4, 9, 11, 10, 3]).ranges == [(3, 5), (9, 11)]

    def test_contains_and_bounds(self) -> None:
        s = IntervalSet.of(1, 3).union(IntervalSet.of(10, 12))

        assert s.contains(2)
        assert not s.contains(5)
        assert s.bounds() == (1, 12)
        assert IntervalSet.empty().bounds() is None

    def test_equality(self) -> None:
        assert IntervalSet.of(1, 2) == IntervalSet([(1, 2)])
        assert IntervalSet.point(4) != IntervalSet.of(4, 5)


class TestRenderCondition:
    """Test render_condition formatting."""

    def test_empty_raises(self) -> None:
        with pytest.raises(NoValidValue, match="No valid value for 'x'"):
            render_condition("x", IntervalSet.empty(), 0, 255)

    def test_full_domain_is_blank(self) -> None:
        assert render_condition("x", IntervalSet.of(0, 255), 0, 255) == ""

    def test_lower_bound_only(self) -> None:
        assert render_condition("x", IntervalSet.of(43, 255), 0, 255) == "('x' >= 43)"

    def test_upper_bound_only(self) -> None:
        assert render_condition("x", IntervalSet.of(0, 42), 0, 255) == "('x' <= 42)"

    def test_multiple_ranges(self) -> None:
        ranges = IntervalSet([(1, 44), (46, 255)])

        assert render_condition("x", ranges, 0, 255) == "('x' >= 1 && 'x' <= 44) || ('x' >= 46)"
