"""Entry point that the exploration engine drives."""

from .entrypoint import HarnessRun, run_traced, main, SYMBOLIC_LABEL

__all__ = ["HarnessRun", "run_traced", "main", "SYMBOLIC_LABEL"]
