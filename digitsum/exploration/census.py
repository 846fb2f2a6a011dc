"""
Exact outcome census over the full input space.

Counts how many of the 256**n assignments of the free buffer slots take
each classifier path, without enumerating them. Digit-sum distributions are
built one position at a time by sliding-window convolution over Python
integers, so the counts are exact at any length.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple
import logging

from ..core.buffer import MAX_CONTENT_LENGTH
from ..core.classifier import SIGN_MARKER, THRESHOLD, ZERO, PathKind, char_value

logger = logging.getLogger(__name__)

BYTE_VALUES = 256


@dataclass
class LengthCensus:
    """Counts for inputs whose content is exactly `length` bytes long."""

    length: int
    above: int
    at_or_below: int

    def to_dict(self) -> Dict:
        return {"length": self.length, "above": self.above, "at_or_below": self.at_or_below}


@dataclass
class CensusResult:
    """Number of assignments per path for a buffer with `max_length` free slots."""

    max_length: int
    signed: bool
    counts: Dict[PathKind, int]
    by_length: List[LengthCensus] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def flagged(self) -> int:
        """Assignments for which the entry point exits with 0."""
        return self.total - self.counts[PathKind.ABOVE_THRESHOLD]

    @property
    def fraction_above(self) -> float:
        return self.counts[PathKind.ABOVE_THRESHOLD] / self.total

    def to_dict(self) -> Dict:
        return {
            "max_length": self.max_length,
            "signed": self.signed,
            "total": self.total,
            "flagged": self.flagged,
            "fraction_above": self.fraction_above,
            "counts": {k.value: v for k, v in self.counts.items()},
            "by_length": [c.to_dict() for c in self.by_length],
        }


def _kernel(signed: bool, exclude: Sequence[int] = ()) -> Tuple[int, int, List[int]]:
    """
    Contributions (char - '0') of every non-terminator byte.

    Returns:
        (lowest, highest, holes): the contributions form the integer range
        [lowest, highest] minus the values listed in holes
    """
    present = {
        char_value(b, signed) - ZERO
        for b in range(1, BYTE_VALUES)
        if b not in exclude
    }
    lo, hi = min(present), max(present)
    holes = [v for v in range(lo, hi + 1) if v not in present]
    return lo, hi, holes


def _convolve(dist: List[int], offset: int, kernel: Tuple[int, int, List[int]]) -> Tuple[List[int], int]:
    """Distribution of (previous sum + one more byte)."""
    lo, hi, holes = kernel
    width = hi - lo
    n = len(dist)

    prefix = [0] * (n + 1)
    for i, count in enumerate(dist):
        prefix[i + 1] = prefix[i] + count

    new = [0] * (n + width)
    for k in range(n + width):
        new[k] = prefix[min(k, n - 1) + 1] - prefix[max(k - width, 0)]
        for h in holes:
            j = k + lo - h
            if 0 <= j < n:
                new[k] -= dist[j]
    return new, offset + lo


def _split(dist: List[int], offset: int) -> Tuple[int, int]:
    above = sum(c for k, c in enumerate(dist) if offset + k > THRESHOLD)
    return above, sum(dist) - above


def census(max_length: int = MAX_CONTENT_LENGTH, signed: bool = False) -> CensusResult:
    """
    Exact per-path counts over all assignments of `max_length` free slots.

    The slot after the free region always holds the terminator, matching
    the entry point's clamp of the last buffer slot.

    Args:
        max_length: Number of free slots (0..10)
        signed: Read bytes as signed chars

    Returns:
        CensusResult whose counts add up to 256 ** max_length
    """
    if not 0 <= max_length <= MAX_CONTENT_LENGTH:
        raise ValueError(f"max_length must be in [0, {MAX_CONTENT_LENGTH}], got {max_length}")

    counts = {kind: 0 for kind in PathKind}
    if max_length == 0:
        counts[PathKind.EMPTY] = 1
        return CensusResult(max_length, signed, counts)

    tail = BYTE_VALUES ** (max_length - 1)
    counts[PathKind.EMPTY] = tail
    counts[PathKind.NEGATIVE] = tail

    first = _kernel(signed, exclude=(SIGN_MARKER,))
    rest = _kernel(signed)

    by_length = []
    dist, offset = _convolve([1], 0, first)
    for length in range(1, max_length + 1):
        if length > 1:
            dist, offset = _convolve(dist, offset, rest)
        # a terminator follows, then free bytes up to the clamped slot
        multiplier = BYTE_VALUES ** (max_length - length - 1) if length < max_length else 1
        above, below = _split(dist, offset)
        by_length.append(LengthCensus(length, above * multiplier, below * multiplier))
        counts[PathKind.ABOVE_THRESHOLD] += above * multiplier
        counts[PathKind.AT_OR_BELOW_THRESHOLD] += below * multiplier

    result = CensusResult(max_length, signed, counts, by_length)
    logger.debug(f"Census for max_length={max_length}, signed={signed}: {result.to_dict()['counts']}")
    return result
