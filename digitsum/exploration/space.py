"""
Input space enumeration.

Only the bytes before the first terminator are observable by the
classifier, so the systematic strategies enumerate prefixes over an
alphabet and pad each one into a full 11-byte assignment. Bytes after the
terminator (and the last slot, which the entry point clamps) get a filler
value so the explorer also exercises the parts of the buffer that must not
matter.
"""

from itertools import islice, product
from typing import Iterable, Iterator, List

import numpy as np

from ..core.buffer import BUFFER_SIZE, MAX_CONTENT_LENGTH
from .config import ExplorationConfig


def to_assignment(prefix: bytes, tail_fill: int = 0xFF) -> bytes:
    """
    Pad a prefix into a full buffer assignment.

    A terminator follows the prefix when there is room for one before the
    last slot; every remaining slot holds tail_fill.
    """
    if len(prefix) > MAX_CONTENT_LENGTH:
        raise ValueError(f"Prefix longer than {MAX_CONTENT_LENGTH} bytes: {prefix!r}")
    filler = bytes([tail_fill])
    if len(prefix) == MAX_CONTENT_LENGTH:
        return prefix + filler
    return prefix + b"\x00" + filler * (BUFFER_SIZE - len(prefix) - 1)


def prefixes_dfs(alphabet: bytes, max_length: int) -> Iterator[bytes]:
    """Prefixes in depth-first, lexicographic (pre-order) order."""
    stack = [b""]
    while stack:
        prefix = stack.pop()
        yield prefix
        if len(prefix) < max_length:
            # reversed so the smallest byte is expanded first
            for byte in reversed(alphabet):
                stack.append(prefix + bytes([byte]))


def prefixes_bfs(alphabet: bytes, max_length: int) -> Iterator[bytes]:
    """Prefixes by increasing length."""
    for length in range(max_length + 1):
        for combo in product(alphabet, repeat=length):
            yield bytes(combo)


def random_assignments(seed: int, count: int, batch_size: int = 4096) -> Iterator[bytes]:
    """Fully unconstrained assignments drawn from a seeded generator."""
    rng = np.random.default_rng(seed)
    remaining = count
    while remaining > 0:
        n = min(batch_size, remaining)
        block = rng.integers(0, 256, size=(n, BUFFER_SIZE), dtype=np.uint8)
        for row in block:
            yield row.tobytes()
        remaining -= n


def space_size(config: ExplorationConfig) -> int:
    """Number of assignments the strategy would produce without a budget."""
    if config.strategy == "random":
        return config.max_inputs
    k = len(config.alphabet)
    return sum(k ** length for length in range(config.max_length + 1))


def enumerate_assignments(config: ExplorationConfig) -> Iterator[bytes]:
    """
    Assignments for the configured strategy, capped at max_inputs.

    Args:
        config: Exploration configuration

    Returns:
        Iterator of BUFFER_SIZE-byte assignments
    """
    if config.strategy == "random":
        return random_assignments(config.seed, config.max_inputs, config.batch_size)

    if config.strategy == "bfs":
        prefixes = prefixes_bfs(config.alphabet, config.max_length)
    else:
        prefixes = prefixes_dfs(config.alphabet, config.max_length)

    assignments = (to_assignment(p, config.tail_fill) for p in prefixes)
    if config.max_inputs is not None:
        assignments = islice(assignments, config.max_inputs)
    return assignments


def batched(assignments: Iterable[bytes], size: int) -> Iterator[List[bytes]]:
    """Group assignments into lists of at most `size` items."""
    it = iter(assignments)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk
