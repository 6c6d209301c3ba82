"""
CLI utility functions for pathexpr.

Contains:
- The shared rich Console
- Value formatting (format_value)
- Display helpers (print_syntax_error, build_tree)
"""

import math
from typing import Any

import numpy as np
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ..expressions import (
    BinaryExpr,
    Comparison,
    Constant,
    ExpressionSyntaxError,
    Variable,
    parse_expression,
    parse_node,
    parse_predicate,
)
from ..expressions.nodes import ARITHMETIC_NAMES, COMPARISON_NAMES

# Global Console
console = Console()
err_console = Console(stderr=True, soft_wrap=True)

UNDEFINED = "undefined"

_PARSERS = {
    "auto": parse_node,
    "expression": parse_expression,
    "predicate": parse_predicate,
}


def parse_source(source: str, form: str = "auto"):
    """Parse with the grammar entry point selected by --predicate/--expression."""
    return _PARSERS[form](source)


def format_value(value: Any, precision: int = 6) -> str:
    """
    Render an evaluation result.

    Examples:
        format_value(None)        -> 'undefined'
        format_value(True)        -> 'true'
        format_value(0.1 + 0.2)   -> '0.3'
        format_value(float("inf")) -> 'inf'
    """
    if value is None:
        return UNDEFINED
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return str(value)
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def print_syntax_error(error: ExpressionSyntaxError) -> None:
    """Print a syntax error with its caret line."""
    err_console.print(f"[bold red]Syntax error:[/] {escape(error.reason)}", highlight=False)
    if error.position >= 0:
        err_console.print(f"  {error.text}", highlight=False, markup=False)
        err_console.print(f"  {' ' * error.position}[red]^[/]", highlight=False)
    if error.expected:
        err_console.print(f"  [dim]expected {escape(error.expected)}[/]", highlight=False)


def build_tree(node, tree: Tree | None = None) -> Tree:
    """Build a rich Tree mirroring the AST."""
    if isinstance(node, Constant):
        label = f"[cyan]Const[/] {node.value!r}"
    elif isinstance(node, Variable):
        label = f"[green]Var[/] \"{escape(node.glob)}\" [dim]({node.wildcards} wildcard(s))[/]"
    elif isinstance(node, BinaryExpr):
        label = f"[bold]{ARITHMETIC_NAMES[node.op]}[/] {node.op}"
    elif isinstance(node, Comparison):
        label = f"[bold magenta]{COMPARISON_NAMES[node.op]}[/] {node.op}"
    else:
        raise ValueError(f"Unknown node type: {type(node).__name__}")

    branch = Tree(label) if tree is None else tree.add(label)
    if isinstance(node, (BinaryExpr, Comparison)):
        build_tree(node.left, branch)
        build_tree(node.right, branch)
    return branch
