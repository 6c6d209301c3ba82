"""
Constants for the path expression language.

This module defines the operator tables and unit suffixes shared by the
node types, the parser and the evaluator.
"""

from __future__ import annotations

# =============================================================================
# Arithmetic Operators
# =============================================================================

ARITHMETIC_OPERATORS = frozenset({
    "+",            # Plus: l + r
    "-",            # Minus: l - r
    "*",            # Multiply: l * r
    "/",            # Divide: l / r (x/0 -> inf, 0/0 -> nan)
})

# Binding strength; higher binds tighter
PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

ARITHMETIC_NAMES = {
    "+": "Plus",
    "-": "Minus",
    "*": "Multiply",
    "/": "Divide",
}

# =============================================================================
# Comparison Operators
# =============================================================================
# Two-character forms must be tried before their one-character prefixes.

COMPARISON_OPERATORS = frozenset({
    "<",            # LT
    "<=",           # LTE
    "==",           # EQ (exact float equality, no tolerance)
    ">=",           # GTE
    ">",            # GT
})

COMPARISON_NAMES = {
    "<": "LT",
    "<=": "LTE",
    "==": "EQ",
    ">=": "GTE",
    ">": "GT",
}

# =============================================================================
# Unit Suffixes
# =============================================================================
# Keys are lower case; the parser folds case before lookup.

UNIT_MULTIPLIERS = {
    "k": 1000.0,
    "kb": 1000.0,
    "m": 1000.0 * 1000.0,
    "mb": 1000.0 * 1000.0,
    "g": 1000.0 * 1000.0 * 1000.0,
    "gb": 1000.0 * 1000.0 * 1000.0,
    "%": 0.01,
}


__all__ = [
    "ARITHMETIC_OPERATORS",
    "ARITHMETIC_NAMES",
    "PRECEDENCE",
    "COMPARISON_OPERATORS",
    "COMPARISON_NAMES",
    "UNIT_MULTIPLIERS",
]
