"""
Glob compiler for metric path patterns.

Converts a dotted glob such as ``"A.*.B"`` into an anchored regular
expression with one capture group per wildcard:

    "A.*.B"  ->  ^A\\.(.*)\\.B$

Literal characters (dots included) match only themselves. ``*`` matches any
run of characters, including an empty run and further dots.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

WILDCARD = "*"
QUOTE = '"'


def strip_quotes(text: str) -> str:
    """Remove one pair of surrounding double quotes, if present."""
    if len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE:
        return text[1:-1]
    return text


def glob_to_regex(glob: str) -> str:
    """
    Translate a (possibly quoted) glob into anchored regex source.

    Examples:
        glob_to_regex('"A.*.B"')     -> r'^A\\.(.*)\\.B$'
        glob_to_regex("cpu.total")   -> r'^cpu\\.total$'
    """
    return _body_to_regex(strip_quotes(glob))


def _body_to_regex(body: str) -> str:
    literals = body.split(WILDCARD)
    return "^" + "(.*)".join(re.escape(part) for part in literals) + "$"


@dataclass(frozen=True)
class CompiledPattern:
    """
    An anchored matcher built from one glob.

    Attributes:
        glob: Glob text without quotes
        regex: Compiled, fully anchored pattern
        wildcards: Number of capture groups (one per ``*``)
    """
    glob: str
    regex: re.Pattern
    wildcards: int

    def match(self, key: str) -> tuple[str, ...] | None:
        """
        Match a full key.

        Returns:
            Tuple of captured wildcard substrings (empty for an exact glob),
            or None when the key does not match end to end.
        """
        m = self.regex.fullmatch(key)
        if m is None:
            return None
        return m.groups()

    def __repr__(self) -> str:
        return f"Pattern({self.glob!r})"


def compile_pattern(body: str) -> CompiledPattern:
    """
    Compile glob text that has already been unquoted.

    Every character other than ``*`` is literal, quote characters included.
    """
    return CompiledPattern(
        glob=body,
        regex=re.compile(_body_to_regex(body), re.DOTALL),
        wildcards=body.count(WILDCARD),
    )


def compile_glob(glob: str) -> CompiledPattern:
    """
    Compile a quoted or bare glob string.

    Args:
        glob: Glob text, e.g. '"X.Y.*"' or 'X.Y.*'

    Returns:
        CompiledPattern with its wildcard count.
    """
    return compile_pattern(strip_quotes(glob))


__all__ = [
    "WILDCARD",
    "CompiledPattern",
    "compile_glob",
    "compile_pattern",
    "glob_to_regex",
    "strip_quotes",
]
