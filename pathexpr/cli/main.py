"""
pathexpr CLI entry point.

Parses arguments first, then configures logging from the verbosity flags
(falling back to PATHEXPR_LOG_LEVEL) and dispatches to a subcommand handler.
"""

import sys
from typing import List, Optional

from rich.markup import escape

from ..config.config import get_config
from ..utils.logger import setup_logger
from .argparser import setup_argparse
from .subcommands import (
    EXIT_ERROR,
    handle_config,
    handle_eval,
    handle_frame,
    handle_match,
    handle_parse,
)
from .utils import console

HANDLERS = {
    "parse": handle_parse,
    "eval": handle_eval,
    "match": handle_match,
    "frame": handle_frame,
    "config": handle_config,
}


def _log_level(args, default: str) -> str:
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    if args.quiet:
        return "ERROR"
    return default


def run(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    args = setup_argparse(argv)

    try:
        config = get_config()
    except ValueError as e:
        console.print(f"[bold red]Configuration error:[/] {escape(str(e))}")
        return EXIT_ERROR

    setup_logger(config.log.log_dir, _log_level(args, config.log.level))

    handler = HANDLERS.get(args.command)
    if handler is None:
        console.print("[yellow]Usage: pathexpr {parse|eval|match|frame|config} --help[/]")
        return EXIT_ERROR
    return handler(args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
