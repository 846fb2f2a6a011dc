#!/usr/bin/env python3
"""
Exploration Script for the digit-sum classifier.

Runs the explorer over the configured input space and writes reports.
Equivalent to `digitsum explore ...`.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from digitsum.cli import main

if __name__ == "__main__":
    sys.exit(main(["explore", *sys.argv[1:]]))
