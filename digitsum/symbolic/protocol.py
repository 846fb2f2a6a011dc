"""
Input Provider Protocol - The capability the entry point consumes.

A provider is told which region of a buffer is unconstrained and decides
what bytes land there. A symbolic engine would treat each byte as a free
variable; the providers in this package write concrete candidates.
"""

from typing import List, Protocol

from ..core.buffer import Buffer


class InputProvider(Protocol):
    """
    Protocol all input providers implement.

    The label is a diagnostic tag only; it never affects what is written.
    """

    @property
    def name(self) -> str:
        """Provider name (e.g., 'concrete', 'random')."""
        ...

    @property
    def labels(self) -> List[str]:
        """Labels of every region marked so far, in call order."""
        ...

    def mark_unconstrained(self, buffer: Buffer, size: int, label: str) -> None:
        """
        Mark the first `size` bytes of `buffer` as unconstrained.

        Args:
            buffer: Buffer to write into (shared, not copied)
            size: Number of bytes in the region
            label: Opaque diagnostic tag
        """
        ...


class ProviderExhausted(RuntimeError):
    """A provider was asked for more assignments than it holds."""
