"""
pathexpr - wildcard path expressions

Arithmetic expressions and comparison predicates over glob-style metric
paths, resolved against a flat symbol table so that every wildcard binds
to the same substring.
"""

__version__ = "1.0.0"
__author__ = "pathexpr"

from .config import get_config
from .expressions import (
    ExpressionSyntaxError,
    PathMatcher,
    TieBreak,
    evaluate_frame,
    load_symbol_table,
    parse_expression,
    parse_node,
    parse_predicate,
)

__all__ = [
    "__version__",
    "get_config",
    "ExpressionSyntaxError",
    "PathMatcher",
    "TieBreak",
    "evaluate_frame",
    "load_symbol_table",
    "parse_expression",
    "parse_node",
    "parse_predicate",
]
