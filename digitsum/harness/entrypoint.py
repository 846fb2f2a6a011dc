"""
Entry point / oracle.

Acquires a buffer, lets the input provider fill it, re-establishes the
terminator in the last slot and reports the classification as an
exit code: the run is flagged (exit 0) when the classifier returns False,
and exits with 1 when the input is greater than 42.
"""

from dataclasses import dataclass

from ..core.buffer import BUFFER_SIZE, Buffer
from ..core.classifier import Classification, classify
from ..symbolic.protocol import InputProvider

SYMBOLIC_LABEL = "a"


@dataclass(frozen=True)
class HarnessRun:
    """One execution of the entry point."""

    buffer: bytes  # contents after clamping
    classification: Classification
    exit_code: int

    @property
    def flagged(self) -> bool:
        """True when the oracle condition held (exit code 0)."""
        return self.exit_code == 0


def run_traced(provider: InputProvider, signed: bool = False) -> HarnessRun:
    """Run the entry point once and keep the buffer and classifier trace."""
    buffer = Buffer.acquire()
    provider.mark_unconstrained(buffer, BUFFER_SIZE, SYMBOLIC_LABEL)
    buffer.clamp_terminator()

    classification = classify(buffer, signed=signed)
    return HarnessRun(
        buffer=bytes(buffer),
        classification=classification,
        exit_code=int(classification.result),
    )


def main(provider: InputProvider, signed: bool = False) -> int:
    """Run the entry point once and return its exit code."""
    return run_traced(provider, signed=signed).exit_code
