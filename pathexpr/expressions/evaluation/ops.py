"""
Operator dispatch for arithmetic and comparison nodes.

Float semantics are kept literal:
- Division follows IEEE-754 (x/0 -> +/-inf, 0/0 -> nan) instead of raising
- == is exact equality with no tolerance
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

import numpy as np

COMPARISON_FUNCS: dict[str, Callable[[Any, Any], Any]] = {
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    ">=": operator.ge,
    ">": operator.gt,
}


def divide(left: Any, right: Any) -> Any:
    """
    Divide with IEEE-754 semantics.

    Works for floats and for pandas/numpy arrays alike.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.true_divide(left, right)
    if isinstance(result, np.generic):
        return float(result)
    return result


ARITHMETIC_FUNCS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
}


def apply_arithmetic(op: str, left: Any, right: Any) -> Any:
    """Apply an arithmetic operator."""
    try:
        func = ARITHMETIC_FUNCS[op]
    except KeyError:
        raise ValueError(f"Unknown arithmetic operator: {op}") from None
    return func(left, right)


def apply_comparison(op: str, left: Any, right: Any) -> Any:
    """Apply a comparison operator."""
    try:
        func = COMPARISON_FUNCS[op]
    except KeyError:
        raise ValueError(f"Unknown comparison operator: {op}") from None
    return func(left, right)


__all__ = [
    "ARITHMETIC_FUNCS",
    "COMPARISON_FUNCS",
    "divide",
    "apply_arithmetic",
    "apply_comparison",
]
