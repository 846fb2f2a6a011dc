"""
digitsum - Digit-sum classifier with an exhaustive-input harness.

Usage:
    from digitsum import is_greater_than_42, create_provider, main

    is_greater_than_42(b"99999999")                # True
    main(create_provider("concrete", assignment=b"5"))  # 0, oracle condition holds
"""

from .core import (
    Buffer,
    BUFFER_SIZE,
    THRESHOLD,
    PathKind,
    Classification,
    classify,
    is_greater_than_42,
    classify_batch,
    IntervalSet,
)
from .symbolic import InputProvider, create_provider
from .harness import HarnessRun, run_traced, main

__all__ = [
    "Buffer",
    "BUFFER_SIZE",
    "THRESHOLD",
    "PathKind",
    "Classification",
    "classify",
    "is_greater_than_42",
    "classify_batch",
    "IntervalSet",
    "InputProvider",
    "create_provider",
    "HarnessRun",
    "run_traced",
    "main",
]

__version__ = "0.1.0"
