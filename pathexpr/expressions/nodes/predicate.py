"""
Predicate node for the path expression language.

Comparison is the only boolean-valued node. Its operands are expressions;
predicates never nest inside expressions or other predicates.
"""

from __future__ import annotations

from dataclasses import dataclass

from .arithmetic import EXPRESSION_TYPES, Expression
from .base import NodeOps, Variable
from .constants import COMPARISON_NAMES, COMPARISON_OPERATORS


@dataclass(frozen=True)
class Comparison(NodeOps):
    """
    Compares two expressions.

    Attributes:
        op: Comparison operator (<, <=, ==, >=, >)
        left: Left-hand expression
        right: Right-hand expression

    Semantics:
        - Present only when both sides are present
        - == is exact float equality (no tolerance); nan == nan is False

    Examples:
        # 2 * "A.*.B" + "X.Y.*" / 4 >= "K.*.M"
        Comparison(
            ">=",
            BinaryExpr(
                "+",
                BinaryExpr("*", Constant(2.0), Variable("A.*.B")),
                BinaryExpr("/", Variable("X.Y.*"), Constant(4.0)),
            ),
            Variable("K.*.M"),
        )
    """
    op: str
    left: Expression
    right: Expression

    def __post_init__(self):
        if self.op not in COMPARISON_OPERATORS:
            raise ValueError(
                f"Comparison: unknown operator '{self.op}'. "
                f"Valid operators: {sorted(COMPARISON_OPERATORS)}"
            )
        for side in ("left", "right"):
            operand = getattr(self, side)
            if not isinstance(operand, EXPRESSION_TYPES):
                raise ValueError(
                    f"Comparison: {side} side must be an expression, "
                    f"got {type(operand).__name__}"
                )

    def collect_variables(self) -> tuple[Variable, ...]:
        return self.left.collect_variables() + self.right.collect_variables()

    def __repr__(self) -> str:
        return f"{COMPARISON_NAMES[self.op]}({self.left!r}, {self.right!r})"


# Boolean-valued node types
Predicate = Comparison


def LT(left: Expression, right: Expression) -> Comparison:
    return Comparison("<", left, right)


def LTE(left: Expression, right: Expression) -> Comparison:
    return Comparison("<=", left, right)


def EQ(left: Expression, right: Expression) -> Comparison:
    return Comparison("==", left, right)


def GTE(left: Expression, right: Expression) -> Comparison:
    return Comparison(">=", left, right)


def GT(left: Expression, right: Expression) -> Comparison:
    return Comparison(">", left, right)


__all__ = [
    "Comparison",
    "Predicate",
    "LT",
    "LTE",
    "EQ",
    "GTE",
    "GT",
]
