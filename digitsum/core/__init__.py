"""
Core decision logic: the buffer, the digit-sum classifier and its
vectorized reference model.
"""

from .buffer import Buffer, BUFFER_SIZE, TERMINATOR, TERMINATOR_INDEX, MAX_CONTENT_LENGTH
from .classifier import (
    THRESHOLD,
    SIGN_MARKER,
    PathKind,
    Classification,
    classify,
    is_greater_than_42,
    char_value,
)
from .batch import classify_batch, path_batch, digit_sums, PATH_CODES
from .ranges import IntervalSet, NoValidValue, render_condition

__all__ = [
    "Buffer",
    "BUFFER_SIZE",
    "TERMINATOR",
    "TERMINATOR_INDEX",
    "MAX_CONTENT_LENGTH",
    "THRESHOLD",
    "SIGN_MARKER",
    "PathKind",
    "Classification",
    "classify",
    "is_greater_than_42",
    "char_value",
    "classify_batch",
    "path_batch",
    "digit_sums",
    "PATH_CODES",
    "IntervalSet",
    "NoValidValue",
    "render_condition",
]
