"""
Exploration configuration.

Loaded from a YAML or JSON file, or from an inline JSON string passed on
the command line.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging

import yaml

from ..core.buffer import MAX_CONTENT_LENGTH, TERMINATOR

logger = logging.getLogger(__name__)

STRATEGIES = ("dfs", "bfs", "random")
DEFAULT_ALPHABET = b"0123456789-A"


@dataclass
class ExplorationConfig:
    """Options for one exploration run."""

    strategy: str = "dfs"  # "dfs", "bfs" or "random"
    alphabet: bytes = DEFAULT_ALPHABET  # bytes placed before the terminator
    max_length: int = 3  # longest prefix enumerated, at most 10
    max_inputs: Optional[int] = 100_000  # None for no budget
    timeout_seconds: Optional[float] = 60.0
    tail_fill: int = 0xFF  # written after the terminator and into the last slot
    signed: bool = False
    seed: int = 42
    batch_size: int = 4096

    def __post_init__(self):
        """Normalize and validate configuration."""
        self._check_types()
        if isinstance(self.alphabet, str):
            self.alphabet = self.alphabet.encode("latin-1")
        self.alphabet = bytes(self.alphabet)
        self.strategy = self.strategy.lower()

        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Invalid strategy: {self.strategy}. Must be one of {list(STRATEGIES)}"
            )
        if self.strategy != "random":
            if not self.alphabet:
                raise ValueError("alphabet must contain at least one byte")
            if TERMINATOR in self.alphabet:
                raise ValueError("alphabet must not contain the terminator byte")
            if len(set(self.alphabet)) != len(self.alphabet):
                raise ValueError(f"alphabet contains duplicate bytes: {self.alphabet!r}")
        if not 0 <= self.max_length <= MAX_CONTENT_LENGTH:
            raise ValueError(
                f"max_length must be in [0, {MAX_CONTENT_LENGTH}], got {self.max_length}"
            )
        if self.max_inputs is not None and self.max_inputs <= 0:
            raise ValueError(f"max_inputs must be positive, got {self.max_inputs}")
        if self.strategy == "random" and self.max_inputs is None:
            raise ValueError("random strategy requires max_inputs")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if not 0 <= self.tail_fill <= 255:
            raise ValueError(f"tail_fill must be a byte value, got {self.tail_fill}")
        if self.batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")

    def _check_types(self) -> None:
        # bool is an int subclass; True is not a length
        def is_int(value) -> bool:
            return isinstance(value, int) and not isinstance(value, bool)

        if not isinstance(self.strategy, str):
            raise ValueError(f"strategy must be a string, got {self.strategy!r}")
        if not isinstance(self.alphabet, (str, bytes, bytearray, memoryview)):
            raise ValueError(f"alphabet must be a string or bytes, got {self.alphabet!r}")
        for name in ("max_length", "tail_fill", "seed", "batch_size"):
            value = getattr(self, name)
            if not is_int(value):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.max_inputs is not None and not is_int(self.max_inputs):
            raise ValueError(f"max_inputs must be an integer or null, got {self.max_inputs!r}")
        timeout = self.timeout_seconds
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))):
            raise ValueError(f"timeout_seconds must be a number or null, got {timeout!r}")
        if not isinstance(self.signed, bool):
            raise ValueError(f"signed must be true or false, got {self.signed!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExplorationConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "alphabet": self.alphabet.decode("latin-1"),
            "max_length": self.max_length,
            "max_inputs": self.max_inputs,
            "timeout_seconds": self.timeout_seconds,
            "tail_fill": self.tail_fill,
            "signed": self.signed,
            "seed": self.seed,
            "batch_size": self.batch_size,
        }


def load_config(source: Union[str, Path]) -> ExplorationConfig:
    """
    Load configuration from a file path or an inline JSON string.

    Args:
        source: Path ending in .yaml, .yml or .json, or a JSON object literal

    Returns:
        Validated ExplorationConfig

    Raises:
        ValueError: If the content is malformed or fails validation
    """
    text = str(source)
    suffix = Path(text).suffix.lower()

    if suffix in (".yaml", ".yml", ".json"):
        path = Path(text)
        logger.info(f"Loading exploration config from {path}")
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Unable to parse configuration {path}: {e}") from e
            else:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Unable to parse configuration {path}: {e}") from e
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Unable to parse configuration {text}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")
    return ExplorationConfig.from_dict(data)
