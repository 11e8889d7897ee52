#!/usr/bin/env python3
"""
tpsp CLI.

Launcher for running from a source checkout without installing.
Installed copies use the ``tpsp`` console script or ``python -m tpsp``.

Usage:
    python cli.py --help
    python cli.py
    python cli.py metro
    python cli.py cptm --json
"""

import sys
from pathlib import Path

# Ensure project root is in path for absolute imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from tpsp.cli.main import run

if __name__ == "__main__":
    run()
