"""
Subcommand handlers for the pathexpr CLI.

All handle_* functions are module-level, accept an `args` namespace and
return a process exit code. They are dispatched from main().

Exit codes:
    0  Success (value defined / matches found)
    1  Syntax error or unusable input file
    2  Result undefined (no consistent resolution)
"""

from __future__ import annotations

import json
import math

import pandas as pd
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config.config import get_config
from ..expressions import (
    ExpressionSyntaxError,
    FrameError,
    PathMatcher,
    SymbolTableError,
    evaluate_frame,
    evaluate_node,
    explain_node,
    load_symbol_table,
    node_to_dict,
    to_text,
)
from ..utils.logger import get_logger
from .utils import (
    UNDEFINED,
    build_tree,
    console,
    err_console,
    format_value,
    parse_source,
    print_syntax_error,
)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNDEFINED = 2


# =============================================================================
# SHARED HELPERS
# =============================================================================

def _tie_break(args):
    """CLI flag wins over PATHEXPR_TIE_BREAK."""
    if getattr(args, "tie_break", None):
        return args.tie_break
    return get_config().resolver.tie_break


def _load_table(path: str) -> dict[str, float] | None:
    try:
        return load_symbol_table(path)
    except SymbolTableError as e:
        err_console.print(f"[bold red]ERROR:[/] {escape(str(e))}")
        return None


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2, default=str, allow_nan=False))


def _json_scalar(value):
    """
    Result value as strict JSON.

    numpy scalars become Python values; inf, -inf and nan become the
    strings "inf", "-inf" and "nan" (bare NaN/Infinity tokens are not JSON).
    """
    if value is None:
        return None
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


# =============================================================================
# PARSE
# =============================================================================

def handle_parse(args) -> int:
    """Handle `parse` subcommand."""
    try:
        node = parse_source(args.source, args.form)
    except ExpressionSyntaxError as e:
        if args.json_output:
            _print_json({
                "status": "error",
                "message": e.reason,
                "position": e.position,
                "expected": e.expected,
                "found": e.found,
            })
        else:
            print_syntax_error(e)
        return EXIT_ERROR

    if args.json_output:
        _print_json({"status": "ok", "text": to_text(node), "tree": node_to_dict(node)})
        return EXIT_OK

    console.print(Panel(escape(to_text(node)), title="Parsed", border_style="cyan"))
    console.print(build_tree(node))
    return EXIT_OK


# =============================================================================
# EVAL
# =============================================================================

def handle_eval(args) -> int:
    """Handle `eval` subcommand."""
    try:
        node = parse_source(args.source, args.form)
    except ExpressionSyntaxError as e:
        print_syntax_error(e)
        return EXIT_ERROR

    table = _load_table(args.table)
    if table is None:
        return EXIT_ERROR

    precision = get_config().display.precision
    resolution = explain_node(node, table, _tie_break(args))
    value = evaluate_node(node, resolution.bindings)
    rendered = format_value(value, precision)
    get_logger().result(
        "eval", to_text(node), rendered,
        reason=resolution.reason.name, symbols=len(table),
    )

    if args.json_output:
        _print_json({
            "status": "ok" if value is not None else UNDEFINED,
            "value": _json_scalar(value),
            "resolution": resolution.to_dict(),
        })
        return EXIT_OK if value is not None else EXIT_UNDEFINED

    if value is None:
        console.print(f"[bold yellow]{UNDEFINED}[/] [dim]({resolution.reason.name.lower()})[/]")
        for glob in resolution.unmatched:
            console.print(f"  [yellow]- no key matches \"{escape(glob)}\"[/]")
        return EXIT_UNDEFINED

    console.print(f"[bold green]{rendered}[/]")
    if resolution.keys:
        bindings = Table(title="Bindings", box=None)
        bindings.add_column("Glob", style="green")
        bindings.add_column("Key")
        bindings.add_column("Value", justify="right")
        for var, key in resolution.keys.items():
            bindings.add_row(escape(var.glob), escape(key), format_value(resolution.bindings[var], precision))
        console.print(bindings)
        if resolution.captures:
            console.print(f"[dim]wildcards: {escape(', '.join(resolution.captures))}[/]")
    return EXIT_OK


# =============================================================================
# MATCH
# =============================================================================

def handle_match(args) -> int:
    """Handle `match` subcommand."""
    table = _load_table(args.table)
    if table is None:
        return EXIT_ERROR

    matcher = PathMatcher(*args.globs)
    matches = matcher.match_all(table.keys())
    get_logger().result("match", " ".join(matcher.globs), str(len(matches)))

    if args.json_output:
        _print_json({
            "globs": matcher.globs,
            "matches": [
                {"glob": m.target, "key": m.key, "captures": list(m.groups), "value": _json_scalar(table[m.key])}
                for m in matches
            ],
        })
        return EXIT_OK if matches else EXIT_UNDEFINED

    if not matches:
        console.print("[yellow]No consistent matches[/]")
        return EXIT_UNDEFINED

    precision = get_config().display.precision
    result = Table(title=f"Matches for {len(matcher.globs)} glob(s)")
    result.add_column("Wildcards", style="dim")
    result.add_column("Glob", style="green")
    result.add_column("Key")
    result.add_column("Value", justify="right")
    for m in matches:
        result.add_row(
            escape(", ".join(m.groups)),
            escape(m.target),
            escape(m.key),
            format_value(table[m.key], precision),
        )
    console.print(result)
    return EXIT_OK


# =============================================================================
# FRAME
# =============================================================================

def handle_frame(args) -> int:
    """Handle `frame` subcommand."""
    try:
        node = parse_source(args.source, args.form)
    except ExpressionSyntaxError as e:
        print_syntax_error(e)
        return EXIT_ERROR

    try:
        frame = pd.read_csv(args.csv_path, index_col=args.index_col)
    except (OSError, ValueError) as e:
        err_console.print(f"[bold red]ERROR:[/] Cannot read '{escape(args.csv_path)}': {escape(str(e))}")
        return EXIT_ERROR

    try:
        series = evaluate_frame(node, frame, _tie_break(args))
    except FrameError as e:
        err_console.print(f"[bold red]ERROR:[/] {escape(str(e))}")
        return EXIT_ERROR

    get_logger().result(
        "frame", to_text(node),
        UNDEFINED if series is None else f"{len(series)} rows",
        columns=len(frame.columns),
    )

    if series is None:
        if args.json_output:
            _print_json({"status": UNDEFINED, "values": None})
        else:
            console.print(f"[bold yellow]{UNDEFINED}[/] [dim](columns do not resolve)[/]")
        return EXIT_UNDEFINED

    if args.json_output:
        _print_json({
            "status": "ok",
            "values": {str(idx): _json_scalar(v) for idx, v in series.items()},
        })
        return EXIT_OK

    precision = get_config().display.precision
    result = Table(title=escape(to_text(node)))
    result.add_column(str(series.index.name or "row"), style="dim")
    result.add_column("Value", justify="right")
    for idx, v in series.items():
        result.add_row(escape(str(idx)), format_value(v, precision))
    console.print(result)
    return EXIT_OK


# =============================================================================
# CONFIG
# =============================================================================

def handle_config(args) -> int:
    """Handle `config` subcommand."""
    for line in get_config().summary():
        console.print(line)
    return EXIT_OK
