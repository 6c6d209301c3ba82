"""
Type aliases for the path expression language.

Placed in a separate module to avoid circular imports.
"""

from __future__ import annotations

from typing import Union

from .base import Constant, Variable
from .arithmetic import EXPRESSION_TYPES, BinaryExpr, Expression
from .predicate import Comparison, Predicate

# Every node that can be the root of a parsed tree
Node = Union[Constant, Variable, BinaryExpr, Comparison]


__all__ = [
    "Expression",
    "Predicate",
    "Node",
    "EXPRESSION_TYPES",
]
