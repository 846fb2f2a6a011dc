"""
Integer interval sets.

An IntervalSet is a sorted list of disjoint, inclusive (lower, upper) pairs.
Used to express path conditions over a byte or a digit sum, and to collect
the sums actually observed during exploration.
"""

from typing import Iterable, List, Optional, Tuple

Interval = Tuple[int, int]


class NoValidValue(ValueError):
    """A path condition admits no value for a variable."""

    def __init__(self, name: str):
        super().__init__(f"No valid value for '{name}'")
        self.name = name


class IntervalSet:
    """Union of inclusive integer ranges."""

    def __init__(self, ranges: Optional[Iterable[Interval]] = None):
        self.ranges: List[Interval] = sorted(
            (int(a), int(b)) for a, b in (ranges or []) if a <= b
        )

    @classmethod
    def of(cls, lower: int, upper: int) -> "IntervalSet":
        """Single range; empty when lower > upper."""
        if lower <= upper:
            return cls([(lower, upper)])
        return cls()

    @classmethod
    def empty(cls) -> "IntervalSet":
        return cls()

    @classmethod
    def point(cls, value: int) -> "IntervalSet":
        return cls([(value, value)])

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "IntervalSet":
        """Collapse a collection of integers into runs of consecutive values."""
        ranges: List[Interval] = []
        for v in sorted(set(int(v) for v in values)):
            if ranges and ranges[-1][1] + 1 == v:
                ranges[-1] = (ranges[-1][0], v)
            else:
                ranges.append((v, v))
        return cls(ranges)

    def simplify(self) -> "IntervalSet":
        """Merge overlapping ranges. Adjacent ranges are kept apart."""
        if len(self.ranges) <= 1:
            return IntervalSet(self.ranges)
        merged: List[Interval] = []
        a, b = self.ranges[0]
        for c, d in self.ranges[1:]:
            if b < c:
                merged.append((a, b))
                a, b = c, d
            else:
                b = max(b, d)
        merged.append((a, b))
        return IntervalSet(merged)

    def union(self, other: "IntervalSet") -> "IntervalSet":
        return IntervalSet(self.ranges + other.ranges).simplify()

    def intersect(self, other: "IntervalSet") -> "IntervalSet":
        result: List[Interval] = []
        i = j = 0
        while i < len(self.ranges) and j < len(other.ranges):
            a, b = self.ranges[i]
            c, d = other.ranges[j]
            lo, hi = max(a, c), min(b, d)
            if lo <= hi:
                result.append((lo, hi))
            if b < d:
                i += 1
            else:
                j += 1
        return IntervalSet(result)

    def contains(self, value: int) -> bool:
        return any(a <= value <= b for a, b in self.ranges)

    def is_empty(self) -> bool:
        return not self.ranges

    def bounds(self) -> Optional[Interval]:
        """Smallest and largest member, or None when empty."""
        if not self.ranges:
            return None
        return self.ranges[0][0], self.ranges[-1][1]

    def to_list(self) -> List[List[int]]:
        return [[a, b] for a, b in self.ranges]

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self.ranges == other.ranges

    def __repr__(self) -> str:
        return f"IntervalSet({self.ranges})"


def render_condition(name: str, ranges: IntervalSet, lower: int, upper: int) -> str:
    """
    Render a condition on a variable whose domain is [lower, upper].

    Bounds that coincide with the domain are left out, and a set covering
    the whole domain renders as the empty string.

    Raises:
        NoValidValue: If the set is empty
    """
    if ranges.is_empty():
        raise NoValidValue(name)
    if ranges.ranges == [(lower, upper)]:
        return ""

    conditions = []
    for lo, hi in ranges.ranges:
        parts = []
        if lo > lower:
            parts.append(f"'{name}' >= {lo}")
        if hi < upper:
            parts.append(f"'{name}' <= {hi}")
        conditions.append("(" + " && ".join(parts) + ")")
    return " || ".join(conditions)
