"""
Explorer - Drives the entry point over an input space.

Every assignment is fed through the entry point with a sequence provider.
The resulting exit code and path are checked against the vectorized
reference model, and per-path statistics are collected for reporting.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Set
import logging
import time

import numpy as np

from ..core.batch import PATH_CODES, path_batch
from ..core.buffer import BUFFER_SIZE
from ..core.classifier import PathKind
from ..core.ranges import IntervalSet
from ..harness.entrypoint import HarnessRun, run_traced
from ..infrastructure.reproducibility import get_reproducibility_info, hash_config
from ..symbolic.providers import SequenceInputProvider
from .config import ExplorationConfig
from .space import batched, enumerate_assignments, space_size

logger = logging.getLogger(__name__)


def describe_buffer(buffer: bytes) -> str:
    """Printable form of the bytes before the terminator."""
    end = buffer.find(b"\x00")
    content = buffer if end < 0 else buffer[:end]
    return repr(content)[2:-1]


@dataclass
class PathStats:
    """Aggregated observations for one classifier path."""

    path: PathKind
    count: int = 0
    flagged: int = 0
    witness: Optional[bytes] = None  # first buffer seen on this path
    observed_sums: IntervalSet = field(default_factory=IntervalSet)
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    def to_dict(self) -> Dict:
        return {
            "path": self.path.value,
            "count": self.count,
            "flagged": self.flagged,
            "witness_hex": self.witness.hex() if self.witness is not None else None,
            "witness": describe_buffer(self.witness) if self.witness is not None else None,
            "observed_sums": self.observed_sums.to_list(),
            "min_length": self.min_length,
            "max_length": self.max_length,
        }


@dataclass
class Discrepancy:
    """An input where the entry point disagreed with the reference model."""

    buffer: bytes
    exit_code: int
    expected_exit_code: int
    path: PathKind
    expected_path: PathKind

    def to_dict(self) -> Dict:
        return {
            "buffer_hex": self.buffer.hex(),
            "buffer": describe_buffer(self.buffer),
            "exit_code": self.exit_code,
            "expected_exit_code": self.expected_exit_code,
            "path": self.path.value,
            "expected_path": self.expected_path.value,
        }


@dataclass
class ExplorationResult:
    """Complete outcome of one exploration run."""

    config: ExplorationConfig
    config_hash: str
    timestamp: str
    space_size: int
    inputs_explored: int
    flagged: int
    paths: Dict[PathKind, PathStats]
    elapsed_seconds: float
    truncated: bool = False
    truncation_reason: Optional[str] = None
    discrepancies: List[Discrepancy] = field(default_factory=list)
    environment: Dict = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        """True when every explored input matched the reference model."""
        return not self.discrepancies

    @property
    def covered_paths(self) -> List[PathKind]:
        return [kind for kind in PathKind if self.paths[kind].count > 0]

    @property
    def missed_paths(self) -> List[PathKind]:
        return [kind for kind in PathKind if self.paths[kind].count == 0]

    def to_dict(self) -> Dict:
        return {
            "timestamp": self.timestamp,
            "config": self.config.to_dict(),
            "config_hash": self.config_hash,
            "space_size": self.space_size,
            "inputs_explored": self.inputs_explored,
            "flagged": self.flagged,
            "passed": self.passed,
            "truncated": self.truncated,
            "truncation_reason": self.truncation_reason,
            "elapsed_seconds": self.elapsed_seconds,
            "covered_paths": [k.value for k in self.covered_paths],
            "missed_paths": [k.value for k in self.missed_paths],
            "paths": {k.value: s.to_dict() for k, s in self.paths.items()},
            "discrepancies": [d.to_dict() for d in self.discrepancies],
            "environment": self.environment,
        }


class Explorer:
    """
    Runs the entry point over every assignment of the configured space.

    Args:
        config: Exploration configuration (defaults used if None)
        max_discrepancies: Stop recording discrepancies past this many
    """

    def __init__(
        self,
        config: Optional[ExplorationConfig] = None,
        max_discrepancies: int = 100,
    ):
        self.config = config or ExplorationConfig()
        self.max_discrepancies = max_discrepancies

    def explore(self) -> ExplorationResult:
        config = self.config
        total_space = space_size(config)
        logger.info(
            f"Exploring {total_space} assignments "
            f"(strategy={config.strategy}, max_length={config.max_length}, "
            f"budget={config.max_inputs})"
        )

        paths = {kind: PathStats(kind) for kind in PathKind}
        sums: Dict[PathKind, Set[int]] = {kind: set() for kind in PathKind}
        discrepancies: List[Discrepancy] = []
        explored = 0
        flagged = 0
        truncation_reason = None

        start = time.monotonic()
        for chunk in batched(enumerate_assignments(config), config.batch_size):
            provider = SequenceInputProvider(chunk)
            runs = [run_traced(provider, signed=config.signed) for _ in chunk]
            expected_codes = self._expected_paths(runs)

            for run, code in zip(runs, expected_codes):
                self._record(run, paths[run.classification.path], sums)
                expected_path = PATH_CODES[code]
                expected_exit = int(expected_path is PathKind.ABOVE_THRESHOLD)
                if run.exit_code != expected_exit or run.classification.path is not expected_path:
                    self._report_discrepancy(discrepancies, run, expected_exit, expected_path)

            explored += len(runs)
            flagged += sum(1 for run in runs if run.flagged)
            logger.debug(f"Explored {explored}/{total_space} assignments")

            if config.timeout_seconds is not None and time.monotonic() - start > config.timeout_seconds:
                truncation_reason = "timeout"
                logger.warning(
                    f"Exploration timed out after {config.timeout_seconds}s "
                    f"({explored}/{total_space} assignments)"
                )
                break

        elapsed = time.monotonic() - start
        if truncation_reason is None and explored < total_space:
            truncation_reason = "budget"
            logger.warning(f"Budget of {config.max_inputs} inputs reached before the space was exhausted")

        for kind, values in sums.items():
            paths[kind].observed_sums = IntervalSet.from_values(values)

        result = ExplorationResult(
            config=config,
            config_hash=hash_config(config),
            timestamp=datetime.now().isoformat(),
            space_size=total_space,
            inputs_explored=explored,
            flagged=flagged,
            paths=paths,
            elapsed_seconds=elapsed,
            truncated=truncation_reason is not None,
            truncation_reason=truncation_reason,
            discrepancies=discrepancies,
            environment=get_reproducibility_info(),
        )

        logger.info(
            f"Explored {explored} inputs in {elapsed:.2f}s: {flagged} flagged, "
            f"{len(discrepancies)} discrepancies, "
            f"paths covered: {[k.value for k in result.covered_paths]}"
        )
        return result

    def _expected_paths(self, runs: List[HarnessRun]) -> np.ndarray:
        matrix = np.frombuffer(b"".join(run.buffer for run in runs), dtype=np.uint8)
        return path_batch(matrix.reshape(-1, BUFFER_SIZE), signed=self.config.signed)

    @staticmethod
    def _record(run: HarnessRun, stats: PathStats, sums: Dict[PathKind, Set[int]]) -> None:
        trace = run.classification
        stats.count += 1
        if run.flagged:
            stats.flagged += 1
        if stats.witness is None:
            stats.witness = run.buffer
        if trace.total is not None:
            sums[trace.path].add(trace.total)
        if stats.min_length is None or trace.length < stats.min_length:
            stats.min_length = trace.length
        if stats.max_length is None or trace.length > stats.max_length:
            stats.max_length = trace.length

    def _report_discrepancy(
        self,
        discrepancies: List[Discrepancy],
        run: HarnessRun,
        expected_exit: int,
        expected_path: PathKind,
    ) -> None:
        logger.error(
            f"Entry point disagreed with reference model on {run.buffer.hex()}: "
            f"exit {run.exit_code} via {run.classification.path.value}, "
            f"expected exit {expected_exit} via {expected_path.value}"
        )
        if len(discrepancies) < self.max_discrepancies:
            discrepancies.append(
                Discrepancy(
                    buffer=run.buffer,
                    exit_code=run.exit_code,
                    expected_exit_code=expected_exit,
                    path=run.classification.path,
                    expected_path=expected_path,
                )
            )


def explore(config: Optional[ExplorationConfig] = None) -> ExplorationResult:
    """Convenience wrapper around Explorer(config).explore()."""
    return Explorer(config).explore()
