"""
Path-condition summaries.

Describes, for every classifier path, the constraints an input must meet to
take it: a range condition on the first buffer byte and, for the two
digit-sum paths, on the accumulated sum.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..core.buffer import MAX_CONTENT_LENGTH, TERMINATOR
from ..core.classifier import SIGN_MARKER, THRESHOLD, ZERO, PathKind
from ..core.ranges import IntervalSet, render_condition

FIRST_BYTE = "a[0]"
DIGIT_SUM = "sum"


def byte_domain(signed: bool = False) -> Tuple[int, int]:
    return (-128, 127) if signed else (0, 255)


def sum_domain(signed: bool = False) -> Tuple[int, int]:
    """Smallest and largest digit sum any 1..10 byte content can reach."""
    lo, hi = byte_domain(signed)
    low_char = lo if lo != TERMINATOR else 1
    return (
        MAX_CONTENT_LENGTH * (low_char - ZERO),
        MAX_CONTENT_LENGTH * (hi - ZERO),
    )


def _exclude(values: IntervalSet, value: int) -> IntervalSet:
    lo, hi = values.bounds()
    return values.intersect(IntervalSet.of(lo, value - 1).union(IntervalSet.of(value + 1, hi)))


@dataclass
class PathCondition:
    """Constraints selecting one classifier path."""

    path: PathKind
    result: bool
    constraints: Dict[str, IntervalSet]
    domains: Dict[str, Tuple[int, int]] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        return int(self.result)

    def render(self) -> str:
        """Conjunction of the non-trivial variable conditions."""
        parts = []
        for name, ranges in self.constraints.items():
            lower, upper = self.domains[name]
            condition = render_condition(name, ranges, lower, upper)
            if condition:
                parts.append(condition if " || " not in condition else f"({condition})")
        return " && ".join(parts) if parts else "true"

    def to_dict(self) -> Dict:
        return {
            "path": self.path.value,
            "result": self.result,
            "exit_code": self.exit_code,
            "constraints": {k: v.to_list() for k, v in self.constraints.items()},
            "condition": self.render(),
        }


def describe_paths(signed: bool = False) -> List[PathCondition]:
    """
    Path conditions for every classifier path.

    Args:
        signed: Read bytes as signed chars

    Returns:
        One PathCondition per PathKind, in PathKind order
    """
    byte_lo, byte_hi = byte_domain(signed)
    sum_lo, sum_hi = sum_domain(signed)
    domains = {FIRST_BYTE: (byte_lo, byte_hi), DIGIT_SUM: (sum_lo, sum_hi)}

    leading = _exclude(_exclude(IntervalSet.of(byte_lo, byte_hi), TERMINATOR), SIGN_MARKER)

    return [
        PathCondition(
            PathKind.EMPTY,
            False,
            {FIRST_BYTE: IntervalSet.point(TERMINATOR)},
            domains,
        ),
        PathCondition(
            PathKind.NEGATIVE,
            False,
            {FIRST_BYTE: IntervalSet.point(SIGN_MARKER)},
            domains,
        ),
        PathCondition(
            PathKind.ABOVE_THRESHOLD,
            True,
            {FIRST_BYTE: leading, DIGIT_SUM: IntervalSet.of(THRESHOLD + 1, sum_hi)},
            domains,
        ),
        PathCondition(
            PathKind.AT_OR_BELOW_THRESHOLD,
            False,
            {FIRST_BYTE: leading, DIGIT_SUM: IntervalSet.of(sum_lo, THRESHOLD)},
            domains,
        ),
    ]
