"""
Argument parser setup for the pathexpr CLI.

Defines all subcommands and their arguments:
- parse: Show the tree for an expression or predicate
- eval: Evaluate against a symbol table file
- match: Consistent glob matches over a symbol table's keys
- frame: Evaluate over a CSV of samples
- config: Show effective configuration
"""

import argparse
from typing import List, Optional

from ..expressions.types import TieBreak


def setup_argparse(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for pathexpr.

    Supports:
      parse EXPR               Print the parsed tree
      eval EXPR --table FILE   Evaluate against a YAML/JSON/CSV symbol table
      match GLOB... --table F  Print matches with identical wildcard values
      frame EXPR --csv FILE    Evaluate every row of a CSV of samples
      config                   Print effective configuration
    """
    parser = argparse.ArgumentParser(
        prog="pathexpr",
        description="pathexpr - wildcard path expressions over metric tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pathexpr parse '"a" - "b" - "c"'
  pathexpr eval '2 * "A.*.B" + "X.Y.*" / 4 >= "K.*.M"' --table metrics.yaml
  pathexpr match 'queues.*.spooled' 'queues.*.quota' --table metrics.yaml
  pathexpr frame '"disk.*.used" / "disk.*.size"' --csv samples.csv --index-col time
        """
    )

    # Verbosity: mutually exclusive group (-q / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: ERROR only"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO + evaluation outcome records"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: resolver and parser traces"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    _setup_parse_subcommand(subparsers)
    _setup_eval_subcommand(subparsers)
    _setup_match_subcommand(subparsers)
    _setup_frame_subcommand(subparsers)
    subparsers.add_parser("config", help="Show effective configuration")

    return parser.parse_args(argv)


def _add_form_arguments(sub) -> None:
    """--predicate / --expression force the grammar entry point."""
    form = sub.add_mutually_exclusive_group()
    form.add_argument("--predicate", action="store_const", const="predicate", dest="form", help="Require a comparison predicate")
    form.add_argument("--expression", action="store_const", const="expression", dest="form", help="Require a numeric expression")
    sub.set_defaults(form="auto")


def _add_tie_break_argument(sub) -> None:
    sub.add_argument(
        "--tie-break",
        choices=[m.value for m in TieBreak],
        default=None,
        help="Capture group to use when several qualify (default: PATHEXPR_TIE_BREAK or last)",
    )


def _setup_parse_subcommand(subparsers) -> None:
    parse_parser = subparsers.add_parser("parse", help="Parse and show the expression tree")
    parse_parser.add_argument("source", help="Expression or predicate text")
    _add_form_arguments(parse_parser)
    parse_parser.add_argument("--json", action="store_true", dest="json_output", help="Output the tree as JSON")


def _setup_eval_subcommand(subparsers) -> None:
    eval_parser = subparsers.add_parser("eval", help="Evaluate against a symbol table")
    eval_parser.add_argument("source", help="Expression or predicate text")
    eval_parser.add_argument("--table", required=True, help="Symbol table file (.yaml, .yml, .json, .csv)")
    _add_form_arguments(eval_parser)
    _add_tie_break_argument(eval_parser)
    eval_parser.add_argument("--json", action="store_true", dest="json_output", help="Output result as JSON")


def _setup_match_subcommand(subparsers) -> None:
    match_parser = subparsers.add_parser("match", help="Match globs with consistent wildcards")
    match_parser.add_argument("globs", nargs="+", help="Glob patterns (quotes optional)")
    match_parser.add_argument("--table", required=True, help="Symbol table file (.yaml, .yml, .json, .csv)")
    match_parser.add_argument("--json", action="store_true", dest="json_output", help="Output matches as JSON")


def _setup_frame_subcommand(subparsers) -> None:
    frame_parser = subparsers.add_parser("frame", help="Evaluate every row of a CSV of samples")
    frame_parser.add_argument("source", help="Expression or predicate text")
    frame_parser.add_argument("--csv", required=True, dest="csv_path", help="CSV with one column per metric path")
    frame_parser.add_argument("--index-col", default=None, help="Column to use as the row index (e.g. timestamp)")
    _add_form_arguments(frame_parser)
    _add_tie_break_argument(frame_parser)
    frame_parser.add_argument("--json", action="store_true", dest="json_output", help="Output series as JSON")
