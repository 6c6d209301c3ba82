"""
AST node types for the path expression language.

Nodes are frozen dataclasses, so trees are immutable, hashable and safe to
share between threads and across evaluations.

Node Categories:
- Leaf nodes: Constant, Variable
- Arithmetic node: BinaryExpr (+, -, *, /)
- Predicate node: Comparison (<, <=, ==, >=, >)

Type Hierarchy:
    Expression = Constant | Variable | BinaryExpr
    Predicate  = Comparison
    Node       = Expression | Predicate

Usage:
    # 2 * "A.*.B" >= "K.*.M"
    pred = GTE(
        Multiply(Constant(2.0), Variable("A.*.B")),
        Variable("K.*.M"),
    )
    pred.value({"A.foo.B": 4.0, "K.foo.M": 7.0})   # True
"""

# Constants
from .constants import (
    ARITHMETIC_OPERATORS,
    ARITHMETIC_NAMES,
    PRECEDENCE,
    COMPARISON_OPERATORS,
    COMPARISON_NAMES,
    UNIT_MULTIPLIERS,
)

# Leaf nodes
from .base import NodeOps, Constant, Variable

# Arithmetic node
from .arithmetic import BinaryExpr, Plus, Minus, Multiply, Divide

# Predicate node
from .predicate import Comparison, LT, LTE, EQ, GTE, GT

# Type aliases
from .types import Expression, Predicate, Node, EXPRESSION_TYPES

# Utility functions
from .utils import get_referenced_globs, to_text, node_to_dict


__all__ = [
    # Constants
    "ARITHMETIC_OPERATORS",
    "ARITHMETIC_NAMES",
    "PRECEDENCE",
    "COMPARISON_OPERATORS",
    "COMPARISON_NAMES",
    "UNIT_MULTIPLIERS",
    # Leaf nodes
    "NodeOps",
    "Constant",
    "Variable",
    # Arithmetic
    "BinaryExpr",
    "Plus",
    "Minus",
    "Multiply",
    "Divide",
    # Predicates
    "Comparison",
    "LT",
    "LTE",
    "EQ",
    "GTE",
    "GT",
    # Type aliases
    "Expression",
    "Predicate",
    "Node",
    "EXPRESSION_TYPES",
    # Utility functions
    "get_referenced_globs",
    "to_text",
    "node_to_dict",
]
