"""
Variable resolution for expression trees.

Collects the variables of a tree and hands them to the matcher together with
the symbol table passed in by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..matcher import resolve_variables
from ..types import Resolution, TieBreak

if TYPE_CHECKING:
    from ..nodes import Node
    from ..types import Bindings


def explain_node(
    node: "Node",
    symbol_table: Mapping[str, float],
    tie_break: TieBreak | str | None = None,
) -> Resolution:
    """
    Resolve a tree and report why it did or did not bind.

    Returns:
        Resolution with reason, selected keys and shared captures.
    """
    return resolve_variables(node.collect_variables(), symbol_table, tie_break)


def resolve_node(
    node: "Node",
    symbol_table: Mapping[str, float],
    tie_break: TieBreak | str | None = None,
) -> "Bindings | None":
    """
    Resolve a tree to bindings.

    Returns:
        Variable -> value for every variable in the tree ({} for a tree
        without variables), or None when no consistent assignment exists.
    """
    return explain_node(node, symbol_table, tie_break).bindings


__all__ = [
    "explain_node",
    "resolve_node",
]
