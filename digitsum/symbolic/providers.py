"""
Concrete input providers.

Each provider fills the unconstrained region with actual bytes:
a fixed assignment, seeded random bytes, or the next item of a sequence.
"""

from typing import Iterable, Iterator, List, Optional, Union

import numpy as np

from ..core.buffer import Buffer
from .factory import register_provider
from .protocol import ProviderExhausted


def _fit(assignment: bytes, size: int) -> bytes:
    """Truncate or zero-pad an assignment to exactly `size` bytes."""
    return assignment[:size].ljust(size, b"\x00")


class _RecordingProvider:
    """Shared label bookkeeping."""

    provider_name = "base"

    def __init__(self):
        self._labels: List[str] = []

    @property
    def name(self) -> str:
        return self.provider_name

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def _write(self, buffer: Buffer, size: int, label: str, data: bytes) -> None:
        if size > len(buffer):
            raise ValueError(f"Region of {size} bytes exceeds buffer of {len(buffer)}")
        self._labels.append(label)
        buffer[0:size] = _fit(data, size)


@register_provider("concrete")
class ConcreteInputProvider(_RecordingProvider):
    """Writes the same fixed assignment every time."""

    provider_name = "concrete"

    def __init__(self, assignment: Union[bytes, bytearray, str] = b""):
        super().__init__()
        if isinstance(assignment, str):
            assignment = assignment.encode("latin-1")
        self.assignment = bytes(assignment)

    def mark_unconstrained(self, buffer: Buffer, size: int, label: str) -> None:
        self._write(buffer, size, label, self.assignment)


@register_provider("random")
class RandomInputProvider(_RecordingProvider):
    """Fills the region with independent uniform bytes from a seeded generator."""

    provider_name = "random"

    def __init__(self, seed: Optional[int] = 42):
        super().__init__()
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def mark_unconstrained(self, buffer: Buffer, size: int, label: str) -> None:
        data = self._rng.integers(0, 256, size=size, dtype=np.uint8).tobytes()
        self._write(buffer, size, label, data)


@register_provider("sequence")
class SequenceInputProvider(_RecordingProvider):
    """Hands out the next assignment of an iterable on every call."""

    provider_name = "sequence"

    def __init__(self, assignments: Iterable[bytes] = ()):
        super().__init__()
        self._assignments: Iterator[bytes] = iter(assignments)
        self.consumed = 0

    def mark_unconstrained(self, buffer: Buffer, size: int, label: str) -> None:
        try:
            data = next(self._assignments)
        except StopIteration:
            raise ProviderExhausted(
                f"Sequence provider exhausted after {self.consumed} assignments"
            ) from None
        self.consumed += 1
        self._write(buffer, size, label, bytes(data))
