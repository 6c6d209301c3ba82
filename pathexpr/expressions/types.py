"""
Resolution type definitions.

Enums and dataclasses shared by the matcher, the evaluator and the CLI.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import Variable

# Flat metric universe: dotted path -> value
SymbolTable = Mapping[str, float]

# Resolved values keyed by variable
Bindings = dict["Variable", float]


class TieBreak(str, Enum):
    """
    Which qualifying capture group wins when several satisfy every variable.

    Groups are ordered by the first appearance of their capture tuple while
    scanning the symbol table in iteration order.
    """

    FIRST = "first"  # earliest qualifying group
    LAST = "last"  # latest qualifying group (fold semantics, last write wins)

    @classmethod
    def parse(cls, value: "str | TieBreak") -> "TieBreak":
        """Accept an enum member or its case-insensitive name/value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown tie-break '{value}'. "
                f"Valid values: {[m.value for m in cls]}"
            ) from None


DEFAULT_TIE_BREAK = TieBreak.LAST


class ResolveReason(IntEnum):
    """
    Reason codes for a resolution outcome.

    Only OK produces bindings; the others mean the result is undefined.
    """

    OK = 0  # Every variable bound with identical captures
    UNMATCHED = auto()  # Some variable matched no key at all
    INCONSISTENT = auto()  # Every variable matched, but no capture tuple is shared


@dataclass(frozen=True)
class Match:
    """
    One key matched by one variable.

    Attributes:
        target: The matching variable (or glob for PathMatcher)
        key: Full symbol-table key
        groups: Captured wildcard substrings, in glob order
    """
    target: object
    key: str
    groups: tuple[str, ...]


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving a set of variables against a symbol table.

    Contains:
    - reason: Why resolution succeeded or failed
    - bindings: Variable -> value, None unless reason is OK
    - keys: Variable -> matched key, None unless reason is OK
    - captures: The shared capture tuple of the selected group
    - unmatched: Globs that matched nothing (for UNMATCHED)
    """

    reason: ResolveReason
    bindings: "Bindings | None" = None
    keys: "dict[Variable, str] | None" = None
    captures: tuple[str, ...] | None = None
    unmatched: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.reason == ResolveReason.OK

    @classmethod
    def success(
        cls,
        bindings: "Bindings",
        keys: "dict[Variable, str]",
        captures: tuple[str, ...],
    ) -> "Resolution":
        return cls(
            reason=ResolveReason.OK,
            bindings=bindings,
            keys=keys,
            captures=captures,
        )

    @classmethod
    def failure(
        cls,
        reason: ResolveReason,
        unmatched: tuple[str, ...] = (),
    ) -> "Resolution":
        return cls(reason=reason, unmatched=unmatched)

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "reason": self.reason.name,
            "captures": list(self.captures) if self.captures is not None else None,
            "keys": (
                {var.glob: key for var, key in self.keys.items()}
                if self.keys is not None else None
            ),
            "unmatched": list(self.unmatched),
        }


__all__ = [
    "SymbolTable",
    "Bindings",
    "TieBreak",
    "DEFAULT_TIE_BREAK",
    "ResolveReason",
    "Match",
    "Resolution",
]
