"""
Command-line interface for pathexpr.

Modules:
- argparser.py: argparse setup for all subcommands
- subcommands.py: handle_* functions returning exit codes
- utils.py: rich console and display helpers
- main.py: entry point
"""

from .main import main

__all__ = ["main"]
