"""
Reproducibility utilities.

Config hashing and environment capture so reports can be matched to the
configuration and interpreter that produced them. Random exploration draws
from its own seeded numpy Generator, so no global seed is set here.
"""

from dataclasses import asdict, is_dataclass
import hashlib
import json
import platform
import sys
from datetime import datetime
from typing import Any, Dict

import numpy as np


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return value.hex()
    return str(value)


def hash_config(config: Any) -> str:
    """
    SHA256 hash of a configuration (dict or dataclass).

    Returns:
        64-character hex string
    """
    if is_dataclass(config) and not isinstance(config, type):
        config_dict = asdict(config)
    elif isinstance(config, dict):
        config_dict = config
    else:
        config_dict = vars(config) if hasattr(config, "__dict__") else {"value": str(config)}

    json_str = json.dumps(config_dict, sort_keys=True, default=_json_default)
    return hashlib.sha256(json_str.encode()).hexdigest()


def get_reproducibility_info() -> Dict[str, Any]:
    """Environment information recorded alongside exploration reports."""
    return {
        "python_version": sys.version.split()[0],
        "numpy_version": np.__version__,
        "platform": platform.platform(),
        "timestamp": datetime.now().isoformat(),
    }
