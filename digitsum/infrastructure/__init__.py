"""
Infrastructure utilities.

Cross-cutting concerns: logging, reproducibility.
"""

from .logging import setup_logging, get_logger
from .reproducibility import hash_config, get_reproducibility_info

__all__ = ["setup_logging", "get_logger", "hash_config", "get_reproducibility_info"]
