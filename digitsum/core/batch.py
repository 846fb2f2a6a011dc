"""
Vectorized reference model of the classifier.

Classifies many buffers at once with numpy. The explorer uses it as the
expected classification for every input it drives through the entry point.
"""

from typing import Sequence, Union

import numpy as np

from .classifier import SIGN_MARKER, THRESHOLD, ZERO, PathKind

# Integer codes for path_batch(); index into PATH_CODES to get the PathKind
PATH_CODES = (
    PathKind.EMPTY,
    PathKind.NEGATIVE,
    PathKind.ABOVE_THRESHOLD,
    PathKind.AT_OR_BELOW_THRESHOLD,
)


def as_matrix(buffers: Union[np.ndarray, Sequence[bytes]]) -> np.ndarray:
    """
    Convert buffers to a 2-D uint8 array.

    Shorter rows are padded with zeros, which the classifier reads as
    terminators, so padding never changes a classification.
    """
    if isinstance(buffers, np.ndarray):
        matrix = np.asarray(buffers, dtype=np.uint8)
        if matrix.ndim == 1:
            matrix = matrix[np.newaxis, :]
        if matrix.ndim != 2:
            raise ValueError(f"Expected a 2-D array of buffers, got shape {matrix.shape}")
        return matrix

    rows = [bytes(b) for b in buffers]
    width = max((len(r) for r in rows), default=0)
    matrix = np.zeros((len(rows), max(width, 1)), dtype=np.uint8)
    for i, row in enumerate(rows):
        matrix[i, : len(row)] = np.frombuffer(row, dtype=np.uint8)
    return matrix


def digit_sums(matrix: np.ndarray, signed: bool = False) -> np.ndarray:
    """Sum of (char - '0') over each row's bytes before its first terminator."""
    values = matrix.view(np.int8) if signed else matrix
    values = values.astype(np.int64) - ZERO
    # A byte counts only while no terminator has been seen in its row
    live = np.cumprod(matrix != 0, axis=1).astype(bool)
    return np.where(live, values, 0).sum(axis=1)


def path_batch(buffers, signed: bool = False) -> np.ndarray:
    """
    Path code for every buffer (see PATH_CODES).

    Args:
        buffers: (N, W) uint8 array or sequence of bytes-like rows
        signed: Read bytes as signed chars

    Returns:
        int8 array of length N
    """
    matrix = as_matrix(buffers)
    if matrix.shape[0] == 0:
        return np.zeros(0, dtype=np.int8)

    first = matrix[:, 0]
    sums = digit_sums(matrix, signed=signed)

    codes = np.where(sums > THRESHOLD, 2, 3).astype(np.int8)
    codes[first == SIGN_MARKER] = 1
    codes[first == 0] = 0
    return codes


def classify_batch(buffers, signed: bool = False) -> np.ndarray:
    """Boolean classification for every buffer; True iff sum > 42."""
    return path_batch(buffers, signed=signed) == 2
