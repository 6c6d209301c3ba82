"""
Leaf node types for the path expression language.

This module defines:
- NodeOps: resolve/evaluate/value entry points shared by every node
- Constant: Literal numeric value (already scaled by its unit)
- Variable: Glob reference into the symbol table
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..glob import CompiledPattern, compile_pattern, strip_quotes

if TYPE_CHECKING:
    from ..types import Bindings, TieBreak


class NodeOps:
    """
    Evaluation entry points for AST nodes.

    Nodes are data; the work is done in ``pathexpr.expressions.evaluation``.
    Imports are deferred to avoid a circular import with that package.
    """

    def collect_variables(self) -> tuple["Variable", ...]:
        raise NotImplementedError

    def resolve(
        self,
        symbol_table: Mapping[str, float],
        tie_break: "TieBreak | None" = None,
    ) -> "Bindings | None":
        """Resolve every variable in this subtree against a symbol table."""
        from ..evaluation.resolve import resolve_node
        return resolve_node(self, symbol_table, tie_break)

    def evaluate(self, bindings: "Bindings | None") -> Any:
        """Evaluate with resolved bindings; None when any variable is unbound."""
        from ..evaluation.core import evaluate_node
        return evaluate_node(self, bindings)

    def value(
        self,
        symbol_table: Mapping[str, float],
        tie_break: "TieBreak | None" = None,
    ) -> Any:
        """Resolve and evaluate in one step."""
        return self.evaluate(self.resolve(symbol_table, tie_break))


# =============================================================================
# Leaf Nodes
# =============================================================================

@dataclass(frozen=True)
class Constant(NodeOps):
    """
    A literal number.

    Attributes:
        value: The finite numeric value, unit multiplier already applied

    Examples:
        Constant(2.0)         # 2
        Constant(0.1)         # 10 %
        Constant(10000000.0)  # 10 MB
    """
    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise ValueError(
                f"Constant: value must be a number, got {type(self.value).__name__}"
            )
        value = float(self.value)
        if not math.isfinite(value):
            raise ValueError(f"Constant: value must be finite, got {value!r}")
        object.__setattr__(self, "value", value)

    def collect_variables(self) -> tuple["Variable", ...]:
        return ()

    def __repr__(self) -> str:
        return f"Const({self.value!r})"


@dataclass(frozen=True)
class Variable(NodeOps):
    """
    A glob reference into the symbol table.

    Two variables built from the same glob text are equal and hash alike,
    with or without the surrounding quotes. Exactly one surrounding pair
    is stripped, so a glob that itself starts and ends with a quote must be
    passed quoted (the parser always quotes the literal body).

    Attributes:
        glob: Dotted glob text (quotes stripped), e.g. "X.Y.*"
        pattern: Compiled anchored matcher (derived, not compared)

    Examples:
        Variable("A.*.B")
        Variable('"cpu.*.idle"')   # quotes are stripped
    """
    glob: str
    pattern: CompiledPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.glob, str):
            raise ValueError(
                f"Variable: glob must be a string, got {type(self.glob).__name__}"
            )
        glob = strip_quotes(self.glob)
        if not glob:
            raise ValueError("Variable: glob must not be empty")
        object.__setattr__(self, "glob", glob)
        object.__setattr__(self, "pattern", compile_pattern(glob))

    @property
    def wildcards(self) -> int:
        """Number of ``*`` positions in the glob."""
        return self.pattern.wildcards

    def collect_variables(self) -> tuple["Variable", ...]:
        return (self,)

    def __repr__(self) -> str:
        return f"Var({self.glob!r})"


__all__ = [
    "NodeOps",
    "Constant",
    "Variable",
]
