"""
Digit-sum classifier.

Decides whether the digit characters of a null-terminated buffer add up to
more than 42. The sum is not place-value parsing: every byte before the
terminator contributes ``byte - ord('0')``, digit or not.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .buffer import TERMINATOR, Buffer, BytesLike

THRESHOLD = 42
SIGN_MARKER = ord("-")
ZERO = ord("0")


class PathKind(Enum):
    """Execution paths through the classifier."""

    EMPTY = "empty"
    NEGATIVE = "negative"
    ABOVE_THRESHOLD = "above_threshold"
    AT_OR_BELOW_THRESHOLD = "at_or_below_threshold"


@dataclass(frozen=True)
class Classification:
    """Outcome of one classifier call, with the path that produced it."""

    result: bool
    path: PathKind
    total: Optional[int]  # None when the sum was never computed
    length: int  # bytes before the terminator

    def to_dict(self) -> dict:
        return {
            "result": self.result,
            "path": self.path.value,
            "total": self.total,
            "length": self.length,
        }


def char_value(byte: int, signed: bool = False) -> int:
    """Value of a byte as a C char; 0..255, or -128..127 when signed."""
    if signed and byte > 127:
        return byte - 256
    return byte


def _view(buffer: Union[Buffer, BytesLike]):
    if isinstance(buffer, Buffer):
        return buffer.data
    if isinstance(buffer, str):
        raise TypeError("classifier expects bytes, not str; encode the text first")
    return buffer


def classify(buffer: Union[Buffer, BytesLike], signed: bool = False) -> Classification:
    """
    Classify a buffer and report which branch decided it.

    The end of the sequence acts as a terminator when no 0 byte is present.

    Args:
        buffer: Bytes-like object or Buffer; never modified
        signed: Read bytes as signed chars (-128..127) instead of 0..255

    Returns:
        Classification for this buffer
    """
    data = _view(buffer)

    if len(data) == 0 or data[0] == TERMINATOR:
        return Classification(False, PathKind.EMPTY, None, 0)

    if data[0] == SIGN_MARKER:
        # negative number
        return Classification(False, PathKind.NEGATIVE, None, _length(data))

    total = 0
    length = 0
    for byte in data:
        if byte == TERMINATOR:
            break
        total += char_value(byte, signed) - ZERO
        length += 1

    if total > THRESHOLD:
        return Classification(True, PathKind.ABOVE_THRESHOLD, total, length)
    return Classification(False, PathKind.AT_OR_BELOW_THRESHOLD, total, length)


def is_greater_than_42(buffer: Union[Buffer, BytesLike], signed: bool = False) -> bool:
    """Return True iff the digit sum of the buffer is strictly greater than 42."""
    return classify(buffer, signed=signed).result


def _length(data) -> int:
    length = 0
    for byte in data:
        if byte == TERMINATOR:
            break
        length += 1
    return length
