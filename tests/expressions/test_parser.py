"""
Tests for the tokenizer and recursive-descent parser.

Validates that:
1. Precedence and left associativity produce the expected trees
2. Unit suffixes scale constants case-insensitively
3. Malformed input raises ExpressionSyntaxError with a position
"""

import pytest

from pathexpr.expressions import (
    Constant,
    Divide,
    ExpressionSyntaxError,
    GTE,
    LT,
    Minus,
    Multiply,
    Plus,
    Variable,
    parse_expression,
    parse_node,
    parse_predicate,
)
from pathexpr.expressions.parser import TokType, tokenize


class TestTokenize:
    """Test lexical analysis."""

    def test_token_types(self):
        types = [t.type for t in tokenize('2 * "A.*" <= 10 kb')]
        assert types == [
            TokType.NUMBER, TokType.STAR, TokType.GLOB, TokType.LTE,
            TokType.NUMBER, TokType.WORD, TokType.EOF,
        ]

    def test_glob_value_is_unquoted(self):
        tok = tokenize('"X.Y.*"')[0]
        assert tok.text == '"X.Y.*"'
        assert tok.value == "X.Y.*"

    def test_glob_escapes(self):
        assert tokenize(r'"a\"b"')[0].value == 'a"b'

    def test_positions(self):
        assert [t.pos for t in tokenize('1 +  "a"')] == [0, 2, 5, 8]

    def test_unterminated_glob(self):
        with pytest.raises(ExpressionSyntaxError) as exc:
            tokenize('1 + "abc')
        assert exc.value.position == 4
        assert exc.value.expected == 'closing "'

    def test_unknown_character(self):
        with pytest.raises(ExpressionSyntaxError, match="Unexpected character") as exc:
            tokenize("1 & 2")
        assert exc.value.position == 2


class TestParseExpression:
    """Test expression trees."""

    def test_reference_expression(self):
        node = parse_expression('2 * "A.*.B" / 1 + ("X.Y.*" / 4) - "K.*.M"')
        assert node == Minus(
            Plus(
                Divide(Multiply(Constant(2.0), Variable("A.*.B")), Constant(1.0)),
                Divide(Variable("X.Y.*"), Constant(4.0)),
            ),
            Variable("K.*.M"),
        )

    def test_subtraction_is_left_associative(self):
        node = parse_expression('"a" - "b" - "c"')
        assert node == Minus(Minus(Variable("a"), Variable("b")), Variable("c"))

    def test_division_is_left_associative(self):
        node = parse_expression("8 / 4 / 2")
        assert node == Divide(Divide(Constant(8.0), Constant(4.0)), Constant(2.0))

    def test_multiplication_binds_tighter(self):
        node = parse_expression("1 + 2 * 3")
        assert node == Plus(Constant(1.0), Multiply(Constant(2.0), Constant(3.0)))

    def test_parentheses_override_precedence(self):
        node = parse_expression("(1 + 2) * 3")
        assert node == Multiply(Plus(Constant(1.0), Constant(2.0)), Constant(3.0))

    def test_whitespace_is_insignificant(self):
        assert parse_expression('2*"a"') == parse_expression('  2 *\t"a"  ')

    def test_single_glob(self):
        assert parse_expression('"cpu.total"') == Variable("cpu.total")

    def test_glob_with_escaped_surrounding_quotes(self):
        node = parse_expression(r'"\"x\""')
        assert node.glob == '"x"'
        assert node.pattern.glob == node.glob
        assert node.value({'"x"': 1.0, "x": 2.0}) == 1.0

    @pytest.mark.parametrize("text, expected", [
        ("1.5", 1.5),
        (".5", 0.5),
        ("2.", 2.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        ("-3", -3.0),
        ("+3", 3.0),
    ])
    def test_number_literals(self, text, expected):
        assert parse_expression(text) == Constant(expected)

    def test_sign_after_operator(self):
        assert parse_expression("2 * -1") == Multiply(Constant(2.0), Constant(-1.0))

    def test_minus_between_numbers_is_operator(self):
        assert parse_expression("2 -1") == Minus(Constant(2.0), Constant(1.0))


class TestUnits:
    """Test unit suffixes."""

    def test_percent(self):
        assert parse_expression("10 %").value == pytest.approx(0.10)

    def test_megabytes(self):
        assert parse_expression("10 MB") == Constant(10_000_000.0)

    @pytest.mark.parametrize("text, expected", [
        ("3k", 3e3), ("3K", 3e3), ("3kb", 3e3), ("3KB", 3e3), ("3kB", 3e3),
        ("3m", 3e6), ("3M", 3e6), ("3mb", 3e6), ("3MB", 3e6),
        ("3g", 3e9), ("3G", 3e9), ("3gb", 3e9), ("3GB", 3e9),
    ])
    def test_suffixes(self, text, expected):
        assert parse_expression(text) == Constant(expected)

    def test_negative_with_unit(self):
        assert parse_expression("-2k") == Constant(-2000.0)

    def test_unit_inside_expression(self):
        node = parse_predicate('"disk.*.used" > 90 % * "disk.*.size"')
        assert node.right.op == "*"
        assert node.right.left.value == pytest.approx(0.9)
        assert node.right.right == Variable("disk.*.size")

    def test_unknown_unit(self):
        with pytest.raises(ExpressionSyntaxError, match="Unknown unit") as exc:
            parse_expression("10 tb")
        assert exc.value.position == 3


class TestParsePredicate:
    """Test predicate parsing."""

    def test_reference_predicate(self):
        node = parse_predicate('2 * "A.*.B" + "X.Y.*" / 4 >= "K.*.M"')
        assert node == GTE(
            Plus(
                Multiply(Constant(2.0), Variable("A.*.B")),
                Divide(Variable("X.Y.*"), Constant(4.0)),
            ),
            Variable("K.*.M"),
        )

    @pytest.mark.parametrize("op", ["<", "<=", "==", ">=", ">"])
    def test_all_operators(self, op):
        assert parse_predicate(f'"a" {op} 1').op == op

    def test_missing_comparison(self):
        with pytest.raises(ExpressionSyntaxError) as exc:
            parse_predicate('"a" + 1')
        assert exc.value.position == 7
        assert "comparison" in exc.value.expected

    def test_chained_comparison_rejected(self):
        with pytest.raises(ExpressionSyntaxError):
            parse_predicate("1 < 2 < 3")

    def test_expression_rejects_comparison(self):
        with pytest.raises(ExpressionSyntaxError, match="Unexpected '<'"):
            parse_expression("1 < 2")


class TestParseNode:
    """Test the form-detecting entry point."""

    def test_detects_predicate(self):
        assert parse_node('"a" < 1') == LT(Variable("a"), Constant(1.0))

    def test_detects_expression(self):
        assert parse_node('"a" + 1') == Plus(Variable("a"), Constant(1.0))


class TestSyntaxErrors:
    """Test positioned failure reporting."""

    def test_dangling_operator_fails_at_end(self):
        text = '"A.*.B" + '
        with pytest.raises(ExpressionSyntaxError) as exc:
            parse_expression(text)
        assert exc.value.position == len(text)
        assert exc.value.found == "end of input"

    def test_error_message_has_caret(self):
        with pytest.raises(ExpressionSyntaxError) as exc:
            parse_expression("1 + )")
        message = str(exc.value)
        assert "at position 4" in message
        assert message.splitlines()[-1] == "      ^"

    def test_trailing_input_rejected(self):
        with pytest.raises(ExpressionSyntaxError, match="Unexpected") as exc:
            parse_expression('"a" "b"')
        assert exc.value.position == 4

    def test_unclosed_parenthesis(self):
        with pytest.raises(ExpressionSyntaxError, match=r"Expected '\)'"):
            parse_expression("(1 + 2")

    def test_empty_input(self):
        with pytest.raises(ExpressionSyntaxError) as exc:
            parse_expression("")
        assert exc.value.position == 0

    @pytest.mark.parametrize("text, position", [
        ("2 + 1e999", 4),
        ("2 + -1e999", 5),
        ("2 + 1e308 GB", 4),
    ])
    def test_number_out_of_range(self, text, position):
        with pytest.raises(ExpressionSyntaxError, match="Number out of range") as exc:
            parse_expression(text)
        assert exc.value.position == position

    def test_empty_glob(self):
        with pytest.raises(ExpressionSyntaxError, match="Empty glob"):
            parse_expression('""')

    def test_detached_sign_rejected(self):
        with pytest.raises(ExpressionSyntaxError):
            parse_expression("- 1")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_predicate("")

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            parse_expression(42)
