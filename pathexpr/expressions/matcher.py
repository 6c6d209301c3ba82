"""
Wildcard-consistent matching of variables against a metric universe.

Resolution is an equi-join on the tuple of wildcard captures:

1. Test every variable's pattern against every key.
2. Group the matches by their capture tuple.
3. Keep the groups in which every distinct variable has a match.
4. Pick one qualifying group (TieBreak) and bind each variable to its key.

Example:
    variables: "A.*.B", "X.Y.*"
    keys:      A.foo.B, X.Y.bar, X.Y.foo

    ("foo",) -> {A.*.B: A.foo.B, X.Y.*: X.Y.foo}   qualifies
    ("bar",) -> {X.Y.*: X.Y.bar}                   dropped

Variables without wildcards capture () and therefore only ever join the
() group, so mixing exact and wildcard variables never resolves.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import replace

from .glob import CompiledPattern, compile_glob
from .types import (
    DEFAULT_TIE_BREAK,
    Match,
    Resolution,
    ResolveReason,
    TieBreak,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Matching and Grouping
# =============================================================================

def find_matches(
    targets: Sequence[tuple[Hashable, CompiledPattern]],
    keys: Iterable[str],
) -> list[Match]:
    """
    Match every key against every target pattern.

    Keys are scanned in iteration order, targets in the given order.

    Args:
        targets: (target, pattern) pairs
        keys: Candidate full paths

    Returns:
        One Match per (target, key) pair that matches end to end.
    """
    matches: list[Match] = []
    for key in keys:
        for target, pattern in targets:
            groups = pattern.match(key)
            if groups is not None:
                matches.append(Match(target=target, key=key, groups=groups))
    return matches


def group_by_captures(matches: Iterable[Match]) -> dict[tuple[str, ...], dict]:
    """
    Group matches by capture tuple.

    Returns:
        capture tuple -> {target: Match}, groups in order of first appearance.
        A target matching twice within one group keeps its last match.
    """
    groups: dict[tuple[str, ...], dict] = {}
    for m in matches:
        groups.setdefault(m.groups, {})[m.target] = m
    return groups


def qualifying_groups(
    groups: Mapping[tuple[str, ...], dict],
    target_count: int,
) -> list[tuple[str, ...]]:
    """Capture tuples whose group holds a match for every distinct target."""
    return [captures for captures, members in groups.items() if len(members) == target_count]


# =============================================================================
# Variable Resolution
# =============================================================================

def match_variables(
    variables: Iterable,
    keys: Iterable[str],
    tie_break: TieBreak | str | None = None,
) -> Resolution:
    """
    Select one consistent key per variable.

    Bindings are left empty; use resolve_variables() to attach values.

    Args:
        variables: Variable nodes (duplicates collapse by equality)
        keys: Symbol-table keys
        tie_break: Policy when several capture groups qualify

    Returns:
        Resolution with reason OK and per-variable keys, or a failure.
    """
    distinct = list(dict.fromkeys(variables))
    if not distinct:
        return Resolution.success(bindings=None, keys={}, captures=())

    policy = TieBreak.parse(tie_break) if tie_break is not None else DEFAULT_TIE_BREAK
    matches = find_matches([(var, var.pattern) for var in distinct], keys)

    matched = {m.target for m in matches}
    unmatched = tuple(var.glob for var in distinct if var not in matched)
    if unmatched:
        logger.debug("Unmatched variables: %s", ", ".join(unmatched))
        return Resolution.failure(ResolveReason.UNMATCHED, unmatched=unmatched)

    groups = group_by_captures(matches)
    candidates = qualifying_groups(groups, len(distinct))
    if not candidates:
        logger.debug(
            "No shared wildcard values across %d variables (%d capture groups)",
            len(distinct), len(groups),
        )
        return Resolution.failure(ResolveReason.INCONSISTENT)

    captures = candidates[0] if policy == TieBreak.FIRST else candidates[-1]
    if len(candidates) > 1:
        logger.debug(
            "%d capture groups qualify; %s policy selects %r",
            len(candidates), policy.value, captures,
        )
    selected = groups[captures]
    return Resolution.success(
        bindings=None,
        keys={var: selected[var].key for var in distinct},
        captures=captures,
    )


def resolve_variables(
    variables: Iterable,
    symbol_table: Mapping[str, float],
    tie_break: TieBreak | str | None = None,
) -> Resolution:
    """
    Resolve variables to values from a symbol table.

    The table is read, never modified; callers must not mutate it while
    this runs.

    Returns:
        Resolution whose bindings map each variable to float(value),
        or a failure Resolution with bindings None.
    """
    resolution = match_variables(variables, symbol_table.keys(), tie_break)
    if not resolution.ok:
        return resolution
    bindings = {var: float(symbol_table[key]) for var, key in resolution.keys.items()}
    return replace(resolution, bindings=bindings)


# =============================================================================
# Standalone Path Matcher
# =============================================================================

class PathMatcher:
    """
    Matches metric paths against several globs with consistent wildcards.

    Works on raw glob strings, without building an expression.

    Example:
        matcher = PathMatcher("messaging.queues.*.spooled", "messaging.queues.*.quota")
        matcher.match("messaging.queues.orders.quota")
        # [Match(target='messaging.queues.*.quota', key=..., groups=('orders',))]

        matcher.match_all(paths)
        # matches for every queue that has both a spooled and a quota metric
    """

    def __init__(self, *globs: str):
        if not globs:
            raise ValueError("PathMatcher: at least one glob is required")
        compiled = [compile_glob(g) for g in globs]
        # Keyed by unquoted glob so duplicates collapse
        self._targets = list({p.glob: (p.glob, p) for p in compiled}.values())

    @property
    def globs(self) -> list[str]:
        return [glob for glob, _ in self._targets]

    def match(self, path: str) -> list[Match]:
        """Match one path against every glob."""
        return find_matches(self._targets, [path])

    def match_all(self, paths: Iterable[str]) -> list[Match]:
        """
        Matches from every capture group in which all globs have a match.

        Returns:
            Matches grouped by capture tuple (first-appearance order),
            globs in declaration order within a group. Empty when no
            capture tuple is shared by all globs.
        """
        groups = group_by_captures(find_matches(self._targets, paths))
        result: list[Match] = []
        for captures in qualifying_groups(groups, len(self._targets)):
            members = groups[captures]
            result.extend(members[glob] for glob in self.globs)
        return result

    def __repr__(self) -> str:
        return f"PathMatcher({', '.join(repr(g) for g in self.globs)})"


__all__ = [
    "find_matches",
    "group_by_captures",
    "qualifying_groups",
    "match_variables",
    "resolve_variables",
    "PathMatcher",
]
