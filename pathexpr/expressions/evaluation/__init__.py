"""
Expression evaluation package.

- core.py: evaluate_node() dispatch over node types
- ops.py: Arithmetic/comparison operator tables (IEEE-754 division)
- resolve.py: Tree-level resolution against a symbol table

Usage:
    from pathexpr.expressions.evaluation import evaluate_node, resolve_node

    bindings = resolve_node(expr, symbol_table)
    result = evaluate_node(expr, bindings)
"""

from .core import evaluate_node
from .ops import apply_arithmetic, apply_comparison, divide
from .resolve import explain_node, resolve_node

__all__ = [
    "evaluate_node",
    "apply_arithmetic",
    "apply_comparison",
    "divide",
    "explain_node",
    "resolve_node",
]
