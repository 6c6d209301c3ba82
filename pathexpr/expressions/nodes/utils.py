"""
Utility functions for path expression nodes.

- get_referenced_globs: Distinct globs in source order
- to_text: Render a tree back to parseable source
- node_to_dict: JSON-friendly structural dump
"""

from __future__ import annotations

import math

from .arithmetic import BinaryExpr
from .base import Constant, Variable
from .constants import PRECEDENCE
from .predicate import Comparison
from .types import Node


# =============================================================================
# Variable Analysis
# =============================================================================

def get_referenced_globs(node: Node) -> list[str]:
    """
    Get the distinct glob strings referenced in a tree.

    Args:
        node: Expression or predicate to analyze.

    Returns:
        Globs in left-to-right order of first appearance.
    """
    seen: dict[str, None] = {}
    for var in node.collect_variables():
        seen.setdefault(var.glob, None)
    return list(seen)


# =============================================================================
# Rendering
# =============================================================================

def _format_number(value: float) -> str:
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _quote(glob: str) -> str:
    escaped = glob.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _operand_text(operand: Node, parent_prec: int, is_right: bool) -> str:
    text = to_text(operand)
    if isinstance(operand, BinaryExpr):
        prec = PRECEDENCE[operand.op]
        # Left-associative: an equal-precedence right operand needs parentheses
        if prec < parent_prec or (is_right and prec == parent_prec):
            return f"({text})"
    return text


def to_text(node: Node) -> str:
    """
    Render a node as source text.

    Uses the fewest parentheses that keep the tree shape, so parsing the
    result gives back an equal tree.

    Examples:
        to_text(Minus(Minus(a, b), c))  -> '"a" - "b" - "c"'
        to_text(Minus(a, Minus(b, c)))  -> '"a" - ("b" - "c")'
    """
    if isinstance(node, Constant):
        return _format_number(node.value)
    if isinstance(node, Variable):
        return _quote(node.glob)
    if isinstance(node, BinaryExpr):
        prec = PRECEDENCE[node.op]
        left = _operand_text(node.left, prec, is_right=False)
        right = _operand_text(node.right, prec, is_right=True)
        return f"{left} {node.op} {right}"
    if isinstance(node, Comparison):
        return f"{to_text(node.left)} {node.op} {to_text(node.right)}"
    raise ValueError(f"Unknown node type: {type(node).__name__}")


# =============================================================================
# Serialization
# =============================================================================

def node_to_dict(node: Node) -> dict:
    """
    Serialize a node to a nested dict.

    Format:
        {"type": "constant", "value": 2.0}
        {"type": "variable", "glob": "A.*.B", "wildcards": 1}
        {"type": "binary", "op": "+", "left": {...}, "right": {...}}
        {"type": "comparison", "op": ">=", "left": {...}, "right": {...}}
    """
    if isinstance(node, Constant):
        return {"type": "constant", "value": node.value}
    if isinstance(node, Variable):
        return {"type": "variable", "glob": node.glob, "wildcards": node.wildcards}
    if isinstance(node, BinaryExpr):
        return {
            "type": "binary",
            "op": node.op,
            "left": node_to_dict(node.left),
            "right": node_to_dict(node.right),
        }
    if isinstance(node, Comparison):
        return {
            "type": "comparison",
            "op": node.op,
            "left": node_to_dict(node.left),
            "right": node_to_dict(node.right),
        }
    raise ValueError(f"Unknown node type: {type(node).__name__}")


__all__ = [
    "get_referenced_globs",
    "to_text",
    "node_to_dict",
]
