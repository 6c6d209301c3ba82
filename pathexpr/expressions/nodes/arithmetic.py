"""
Arithmetic node for the path expression language.

A single tagged node, BinaryExpr, covers Plus, Minus, Multiply and Divide.
The constructor helpers below give the familiar names:

    Minus(Minus(Var("a"), Var("b")), Var("c"))   # "a" - "b" - "c"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .base import Constant, NodeOps, Variable
from .constants import ARITHMETIC_NAMES, ARITHMETIC_OPERATORS


@dataclass(frozen=True)
class BinaryExpr(NodeOps):
    """
    A binary arithmetic operation.

    Attributes:
        op: Arithmetic operator (+, -, *, /)
        left: Left operand (any Expression)
        right: Right operand (any Expression)

    Semantics:
        - Present only when both operands are present
        - Division follows IEEE-754: x/0 -> +/-inf, 0/0 -> nan

    Examples:
        # 2 * "A.*.B"
        BinaryExpr("*", Constant(2.0), Variable("A.*.B"))

        # ("X.Y.*" / 4) - "K.*.M"
        BinaryExpr(
            "-",
            BinaryExpr("/", Variable("X.Y.*"), Constant(4.0)),
            Variable("K.*.M"),
        )
    """
    op: str
    left: "Expression"
    right: "Expression"

    def __post_init__(self):
        if self.op not in ARITHMETIC_OPERATORS:
            raise ValueError(
                f"BinaryExpr: unknown operator '{self.op}'. "
                f"Valid operators: {sorted(ARITHMETIC_OPERATORS)}"
            )
        for side in ("left", "right"):
            operand = getattr(self, side)
            if not isinstance(operand, EXPRESSION_TYPES):
                raise ValueError(
                    f"BinaryExpr: {side} operand must be an expression, "
                    f"got {type(operand).__name__}"
                )

    def collect_variables(self) -> tuple[Variable, ...]:
        return self.left.collect_variables() + self.right.collect_variables()

    def __repr__(self) -> str:
        return f"{ARITHMETIC_NAMES[self.op]}({self.left!r}, {self.right!r})"


# Numeric-valued node types
Expression = Union[Constant, Variable, BinaryExpr]

EXPRESSION_TYPES = (Constant, Variable, BinaryExpr)


def Plus(left: Expression, right: Expression) -> BinaryExpr:
    return BinaryExpr("+", left, right)


def Minus(left: Expression, right: Expression) -> BinaryExpr:
    return BinaryExpr("-", left, right)


def Multiply(left: Expression, right: Expression) -> BinaryExpr:
    return BinaryExpr("*", left, right)


def Divide(left: Expression, right: Expression) -> BinaryExpr:
    return BinaryExpr("/", left, right)


__all__ = [
    "BinaryExpr",
    "Expression",
    "EXPRESSION_TYPES",
    "Plus",
    "Minus",
    "Multiply",
    "Divide",
]
