"""
Parser: source text to AST for path expressions and predicates.

Grammar (lowest to highest precedence)::

    predicate     → expr comparison expr
    expr          → term (('+' | '-') term)*          left fold
    term          → factor (('*' | '/') factor)*      left fold
    factor        → glob | '(' expr ')' | number unit?
    glob          → '"' chars '"'
    number        → sign? (digits ('.' digits?)? | '.' digits) exponent?
    unit          → k | kb | m | mb | g | gb | %      (case-insensitive)
    comparison    → '<=' | '<' | '==' | '>=' | '>'

A sign belongs to a number only when it touches the digits; otherwise it
is an operator. The whole input must be consumed.

Usage:
    expr = parse_expression('2 * "A.*.B" / 1 + ("X.Y.*" / 4) - "K.*.M"')
    pred = parse_predicate('"disk.*.used" / "disk.*.size" > 90 %')
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum

from .glob import QUOTE
from .nodes import (
    BinaryExpr,
    Comparison,
    Constant,
    Variable,
    UNIT_MULTIPLIERS,
)
from .nodes.types import Expression, Node, Predicate

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================

class ExpressionSyntaxError(ValueError):
    """
    Raised when source text is malformed.

    Attributes:
        text: The full source text
        position: 0-based offset of the offending token
        expected: Description of what the grammar expected there
        found: The offending token text ("end of input" at EOF)
    """

    def __init__(
        self,
        message: str,
        text: str = "",
        position: int = -1,
        expected: str | None = None,
        found: str | None = None,
    ):
        self.text = text
        self.position = position
        self.expected = expected
        self.found = found
        self.reason = message
        if position >= 0:
            pointer = " " * position + "^"
            message = f"{message} at position {position}\n  {text}\n  {pointer}"
        super().__init__(message)


# =============================================================================
# Tokenizer
# =============================================================================

class TokType(Enum):
    """Lexical token types."""
    NUMBER = "NUMBER"
    GLOB = "GLOB"
    WORD = "WORD"
    PERCENT = "%"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    LTE = "<="
    LT = "<"
    EQ = "=="
    GTE = ">="
    GT = ">"
    EOF = "EOF"


@dataclass(frozen=True)
class Tok:
    """A lexical token; text is the raw source slice."""
    type: TokType
    text: str
    pos: int
    value: object = None

    def describe(self) -> str:
        if self.type == TokType.EOF:
            return "end of input"
        return repr(self.text)


_NUMBER_RE = re.compile(r"(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_WORD_RE = re.compile(r"[A-Za-z_]\w*")

# Two-character operators first
_OPERATORS = [
    ("<=", TokType.LTE),
    (">=", TokType.GTE),
    ("==", TokType.EQ),
    ("<", TokType.LT),
    (">", TokType.GT),
    ("+", TokType.PLUS),
    ("-", TokType.MINUS),
    ("*", TokType.STAR),
    ("/", TokType.SLASH),
    ("(", TokType.LPAREN),
    (")", TokType.RPAREN),
    ("%", TokType.PERCENT),
]

_COMPARISONS = {TokType.LT, TokType.LTE, TokType.EQ, TokType.GTE, TokType.GT}

EXPECTED_OPERAND = 'quoted glob, "(" or number'
EXPECTED_COMPARISON = "comparison operator (<, <=, ==, >=, >)"
EXPECTED_UNIT = "unit (k, kb, m, mb, g, gb, %)"


def tokenize(text: str) -> list[Tok]:
    """
    Split source text into tokens, ending with an EOF token.

    Glob literals are double quoted; a backslash escapes the next character.

    Raises:
        ExpressionSyntaxError: On unterminated globs or unknown characters.
    """
    tokens: list[Tok] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch == '"':
            start = i
            i += 1
            parts: list[str] = []
            while i < n and text[i] != '"':
                if text[i] == "\\" and i + 1 < n:
                    i += 1
                parts.append(text[i])
                i += 1
            if i >= n:
                raise ExpressionSyntaxError(
                    "Unterminated glob literal", text, start,
                    expected='closing "', found="end of input",
                )
            i += 1
            tokens.append(Tok(TokType.GLOB, text[start:i], start, "".join(parts)))
            continue

        m = _NUMBER_RE.match(text, i)
        if m:
            tokens.append(Tok(TokType.NUMBER, m.group(0), i, float(m.group(0))))
            i = m.end()
            continue

        m = _WORD_RE.match(text, i)
        if m:
            tokens.append(Tok(TokType.WORD, m.group(0), i))
            i = m.end()
            continue

        for symbol, tok_type in _OPERATORS:
            if text.startswith(symbol, i):
                tokens.append(Tok(tok_type, symbol, i))
                i += len(symbol)
                break
        else:
            raise ExpressionSyntaxError(
                f"Unexpected character {ch!r}", text, i,
                expected="operator, glob or number", found=repr(ch),
            )

    tokens.append(Tok(TokType.EOF, "", n))
    return tokens


# =============================================================================
# Recursive Descent Parser
# =============================================================================

class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Tok], text: str):
        self._tokens = tokens
        self._text = text
        self._pos = 0

    def _peek(self, ahead: int = 0) -> Tok:
        index = min(self._pos + ahead, len(self._tokens) - 1)
        return self._tokens[index]

    def _advance(self) -> Tok:
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def _at(self, *types: TokType) -> bool:
        return self._peek().type in types

    def _fail(self, message: str, expected: str, tok: Tok | None = None) -> ExpressionSyntaxError:
        tok = tok or self._peek()
        return ExpressionSyntaxError(
            message, self._text, tok.pos, expected=expected, found=tok.describe(),
        )

    def _expect(self, tok_type: TokType, expected: str) -> Tok:
        tok = self._peek()
        if tok.type != tok_type:
            raise self._fail(f"Expected {expected}, found {tok.describe()}", expected)
        return self._advance()

    def _expect_end(self, expected: str) -> None:
        tok = self._peek()
        if tok.type != TokType.EOF:
            raise self._fail(f"Unexpected {tok.describe()}", expected)

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def parse_expression(self) -> Expression:
        node = self._parse_expr()
        self._expect_end("'+', '-', '*', '/' or end of input")
        return node

    def parse_predicate(self) -> Predicate:
        left = self._parse_expr()
        if not self._at(*_COMPARISONS):
            tok = self._peek()
            raise self._fail(
                f"Expected {EXPECTED_COMPARISON}, found {tok.describe()}",
                EXPECTED_COMPARISON,
            )
        op = self._advance().text
        right = self._parse_expr()
        self._expect_end("'+', '-', '*', '/' or end of input")
        return Comparison(op, left, right)

    def parse_any(self) -> Node:
        left = self._parse_expr()
        if self._at(*_COMPARISONS):
            op = self._advance().text
            right = self._parse_expr()
            self._expect_end("'+', '-', '*', '/' or end of input")
            return Comparison(op, left, right)
        self._expect_end(f"operator, {EXPECTED_COMPARISON} or end of input")
        return left

    # -------------------------------------------------------------------------
    # Grammar rules
    # -------------------------------------------------------------------------

    def _parse_expr(self) -> Expression:
        """expr → term (('+' | '-') term)*"""
        node = self._parse_term()
        while self._at(TokType.PLUS, TokType.MINUS):
            op = self._advance().text
            node = BinaryExpr(op, node, self._parse_term())
        return node

    def _parse_term(self) -> Expression:
        """term → factor (('*' | '/') factor)*"""
        node = self._parse_factor()
        while self._at(TokType.STAR, TokType.SLASH):
            op = self._advance().text
            node = BinaryExpr(op, node, self._parse_factor())
        return node

    def _parse_factor(self) -> Expression:
        """factor → glob | '(' expr ')' | number unit?"""
        tok = self._peek()

        if tok.type == TokType.GLOB:
            self._advance()
            if not tok.value:
                raise self._fail("Empty glob literal", "non-empty glob", tok)
            return Variable(QUOTE + tok.value + QUOTE)

        if tok.type == TokType.LPAREN:
            self._advance()
            node = self._parse_expr()
            self._expect(TokType.RPAREN, "')'")
            return node

        if tok.type in (TokType.PLUS, TokType.MINUS):
            nxt = self._peek(1)
            if nxt.type == TokType.NUMBER and nxt.pos == tok.pos + 1:
                self._advance()
                sign = -1.0 if tok.type == TokType.MINUS else 1.0
                return self._parse_constant(sign)

        if tok.type == TokType.NUMBER:
            return self._parse_constant(1.0)

        raise self._fail(
            f"Expected {EXPECTED_OPERAND}, found {tok.describe()}",
            EXPECTED_OPERAND,
        )

    def _parse_constant(self, sign: float) -> Constant:
        """number unit?"""
        number = self._advance()
        value = sign * number.value
        tok = self._peek()
        if tok.type == TokType.PERCENT:
            self._advance()
            value *= UNIT_MULTIPLIERS["%"]
        elif tok.type == TokType.WORD:
            multiplier = UNIT_MULTIPLIERS.get(tok.text.lower())
            if multiplier is None:
                raise self._fail(f"Unknown unit {tok.describe()}", EXPECTED_UNIT)
            self._advance()
            value *= multiplier
        if not math.isfinite(value):
            raise self._fail("Number out of range", "finite number", number)
        return Constant(value)


# =============================================================================
# Public API
# =============================================================================

def _run(text: str, rule: str):
    if not isinstance(text, str):
        raise TypeError(f"Expected source text, got {type(text).__name__}")
    try:
        parser = _Parser(tokenize(text), text)
        return getattr(parser, rule)()
    except ExpressionSyntaxError as e:
        logger.debug("Parse failed (%s): %s at %d", rule, e.reason, e.position)
        raise


def parse_expression(text: str) -> Expression:
    """
    Parse a numeric expression.

    Raises:
        ExpressionSyntaxError: With position and expected-token description.
    """
    return _run(text, "parse_expression")


def parse_predicate(text: str) -> Predicate:
    """
    Parse a comparison predicate.

    Raises:
        ExpressionSyntaxError: With position and expected-token description.
    """
    return _run(text, "parse_predicate")


def parse_node(text: str) -> Node:
    """Parse either form: a predicate when a comparison operator is present."""
    return _run(text, "parse_any")


__all__ = [
    "ExpressionSyntaxError",
    "TokType",
    "Tok",
    "tokenize",
    "parse_expression",
    "parse_predicate",
    "parse_node",
]
