"""
Vectorised evaluation over a pandas DataFrame of metric samples.

Columns are metric paths, rows are samples (typically timestamps):

                  A.foo.B  X.Y.bar  X.Y.foo  K.foo.M
    2024-01-01       2.0     16.0     12.0      7.0
    2024-01-02       3.0     16.0      8.0      7.0

Resolution only looks at keys, so it runs once against the column labels.
Arithmetic then runs column-wise with the same semantics as the scalar
evaluator (IEEE-754 division, exact ==). NaN cells propagate as NaN in
expressions and compare False in predicates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pandas as pd

from .evaluation.ops import apply_arithmetic, apply_comparison
from .matcher import match_variables
from .nodes import BinaryExpr, Comparison, Constant, Variable
from .types import TieBreak

if TYPE_CHECKING:
    from .nodes import Node

logger = logging.getLogger(__name__)


class FrameError(Exception):
    """Raised when a resolved column cannot be evaluated."""

    def __init__(self, column: str, message: str):
        self.column = column
        super().__init__(f"Column '{column}': {message}")


def _numeric_column(frame: pd.DataFrame, label) -> pd.Series:
    try:
        return frame[label].astype("float64")
    except (ValueError, TypeError) as e:
        raise FrameError(str(label), f"values must be numeric ({e})") from e


def _evaluate_columns(node: "Node", columns: dict, frame: pd.DataFrame):
    if isinstance(node, Constant):
        return pd.Series(node.value, index=frame.index, dtype="float64")
    if isinstance(node, Variable):
        return _numeric_column(frame, columns[node])
    if isinstance(node, BinaryExpr):
        left = _evaluate_columns(node.left, columns, frame)
        right = _evaluate_columns(node.right, columns, frame)
        return apply_arithmetic(node.op, left, right)
    if isinstance(node, Comparison):
        left = _evaluate_columns(node.left, columns, frame)
        right = _evaluate_columns(node.right, columns, frame)
        return apply_comparison(node.op, left, right)
    raise ValueError(f"Unknown node type: {type(node).__name__}")


def evaluate_frame(
    node: "Node",
    frame: pd.DataFrame,
    tie_break: TieBreak | str | None = None,
) -> pd.Series | None:
    """
    Evaluate a node for every row of a frame.

    Args:
        node: Expression or predicate
        frame: Samples with metric paths as column labels
        tie_break: Policy when several capture groups qualify

    Returns:
        float64 Series for expressions, bool Series for predicates,
        named after the node's repr; None when the columns do not resolve.

    Raises:
        FrameError: A selected label is duplicated or its cells are not numeric.
    """
    labels = [str(c) for c in frame.columns]
    resolution = match_variables(node.collect_variables(), labels, tie_break)
    if not resolution.ok:
        logger.debug("Frame resolution failed: %s", resolution.reason.name)
        return None

    for key in dict.fromkeys(resolution.keys.values()):
        if labels.count(key) > 1:
            raise FrameError(key, "label is not unique")

    # Map back to the original labels in case they were not strings
    by_label = dict(zip(labels, frame.columns))
    columns = {var: by_label[key] for var, key in resolution.keys.items()}
    result = _evaluate_columns(node, columns, frame)
    return result.rename(repr(node))


__all__ = [
    "FrameError",
    "evaluate_frame",
]
