#!/usr/bin/env python3
"""
pathexpr command-line shim.

Usage:
    python pathexpr_cli.py parse '"a" - "b" - "c"'
    python pathexpr_cli.py eval '"disk.*.used" / "disk.*.size" > 90%' --table metrics.yaml
    python pathexpr_cli.py match 'queues.*.spooled' 'queues.*.quota' --table metrics.yaml
"""

import os
import sys

# Run from a checkout without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pathexpr.cli.main import main

if __name__ == "__main__":
    main()
