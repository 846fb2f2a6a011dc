"""
Tests for the exact outcome census.

Tests cover:
- Hand-computed counts for a single free slot
- Agreement with brute-force enumeration for two free slots
- Totals over the full 10-slot space
"""

import numpy as np
import pytest

from digitsum.core.batch import PATH_CODES, path_batch
from digitsum.core.classifier import PathKind
from digitsum.exploration.census import census


def brute_force(max_length: int, signed: bool):
    """Per-path counts by classifying every assignment."""
    grids = np.meshgrid(*[np.arange(256, dtype=np.uint8)] * max_length, indexing="ij")
    matrix = np.stack([g.ravel() for g in grids], axis=1)
    matrix = np.hstack([matrix, np.zeros((matrix.shape[0], 1), dtype=np.uint8)])
    codes = path_batch(matrix, signed=signed)
    return {PATH_CODES[c]: int((codes == c).sum()) for c in range(len(PATH_CODES))}


class TestSingleSlot:
    """One free slot: each byte value is its own case."""

    def test_unsigned_counts(self) -> None:
        """Bytes 91..255 exceed 42 after subtracting '0'."""
        result = census(max_length=1)

        assert result.counts == {
            PathKind.EMPTY: 1,
            PathKind.NEGATIVE: 1,
            PathKind.ABOVE_THRESHOLD: 165,
            PathKind.AT_OR_BELOW_THRESHOLD: 89,
        }
        assert result.total == 256

    def test_signed_counts(self) -> None:
        """Only bytes 91..127 exceed 42 when read signed."""
        result = census(max_length=1, signed=True)

        assert result.counts[PathKind.ABOVE_THRESHOLD] == 37
        assert result.counts[PathKind.AT_OR_BELOW_THRESHOLD] == 217


@pytest.mark.parametrize("signed", [False, True])
def test_two_slots_match_brute_force(signed):
    """Census agrees with classifying all 65536 assignments."""
    assert census(max_length=2, signed=signed).counts == brute_force(2, signed)


def test_zero_slots():
    """No free slots leaves only the empty buffer."""
    result = census(max_length=0)

    assert result.total == 1
    assert result.counts[PathKind.EMPTY] == 1


@pytest.mark.parametrize("signed", [False, True])
def test_full_space_total(signed):
    """Counts over 10 free slots add up to 256**10."""
    result = census(max_length=10, signed=signed)

    assert result.total == 256 ** 10
    assert result.counts[PathKind.EMPTY] == 256 ** 9
    assert result.counts[PathKind.NEGATIVE] == 256 ** 9
    assert result.flagged == result.total - result.counts[PathKind.ABOVE_THRESHOLD]


def test_by_length_sums_to_digit_paths():
    result = census(max_length=4)

    assert sum(c.above for c in result.by_length) == result.counts[PathKind.ABOVE_THRESHOLD]
    assert sum(c.at_or_below for c in result.by_length) == result.counts[PathKind.AT_OR_BELOW_THRESHOLD]
    assert [c.length for c in result.by_length] == [1, 2, 3, 4]


def test_fraction_above_in_unit_interval():
    assert 0.0 < census(max_length=3).fraction_above < 1.0


def test_invalid_length_raises():
    with pytest.raises(ValueError, match="max_length"):
        census(max_length=11)


def test_to_dict_uses_path_names():
    data = census(max_length=1).to_dict()

    assert data["total"] == 256
    assert data["counts"]["above_threshold"] == 165
