"""
Exploration engine.

Enumerates buffer assignments, drives the entry point over each of them and
checks every outcome against the reference model. Also computes exact
outcome counts and path conditions for the whole input space.
"""

from .config import ExplorationConfig, load_config, STRATEGIES, DEFAULT_ALPHABET
from .space import enumerate_assignments, space_size, to_assignment
from .engine import Explorer, ExplorationResult, PathStats, Discrepancy, explore
from .census import census, CensusResult, LengthCensus
from .summary import describe_paths, PathCondition
from .reporting import ReportGenerator, format_summary

__all__ = [
    "ExplorationConfig",
    "load_config",
    "STRATEGIES",
    "DEFAULT_ALPHABET",
    "enumerate_assignments",
    "space_size",
    "to_assignment",
    "Explorer",
    "ExplorationResult",
    "PathStats",
    "Discrepancy",
    "explore",
    "census",
    "CensusResult",
    "LengthCensus",
    "describe_paths",
    "PathCondition",
    "ReportGenerator",
    "format_summary",
]
