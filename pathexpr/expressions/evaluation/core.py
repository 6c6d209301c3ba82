"""
Expression evaluator for path expressions.

Walks a tree bottom-up with resolved bindings. Any unbound variable makes
its whole enclosing subtree None; there is no partial or error value.

Usage:
    bindings = node.resolve(symbol_table)
    result = evaluate_node(node, bindings)   # float, bool or None
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..nodes import BinaryExpr, Comparison, Constant, Variable
from .ops import apply_arithmetic, apply_comparison

if TYPE_CHECKING:
    from ..nodes import Node
    from ..types import Bindings


def evaluate_node(node: "Node", bindings: "Bindings | None") -> Any:
    """
    Evaluate a node against resolved bindings.

    Args:
        node: Expression or predicate.
        bindings: Variable -> value, or None when resolution failed.

    Returns:
        float for expressions, bool for predicates, None when any variable
        in the subtree is unbound.
    """
    if isinstance(node, Constant):
        return node.value
    elif isinstance(node, Variable):
        if bindings is None:
            return None
        return bindings.get(node)
    elif isinstance(node, BinaryExpr):
        left = evaluate_node(node.left, bindings)
        if left is None:
            return None
        right = evaluate_node(node.right, bindings)
        if right is None:
            return None
        return apply_arithmetic(node.op, left, right)
    elif isinstance(node, Comparison):
        left = evaluate_node(node.left, bindings)
        if left is None:
            return None
        right = evaluate_node(node.right, bindings)
        if right is None:
            return None
        return apply_comparison(node.op, left, right)
    else:
        raise ValueError(f"Unknown node type: {type(node).__name__}")


__all__ = [
    "evaluate_node",
]
