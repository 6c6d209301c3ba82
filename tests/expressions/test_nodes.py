"""
Tests for AST node construction, equality and introspection.
"""

import pytest

from pathexpr.expressions.nodes import (
    EXPRESSION_TYPES,
    BinaryExpr,
    Comparison,
    Constant,
    Divide,
    EQ,
    GT,
    GTE,
    LT,
    LTE,
    Minus,
    Multiply,
    Plus,
    Variable,
    get_referenced_globs,
    node_to_dict,
)


class TestConstant:
    """Test Constant validation."""

    def test_int_is_stored_as_float(self):
        c = Constant(2)
        assert c.value == 2.0
        assert isinstance(c.value, float)

    def test_rejects_bool(self):
        with pytest.raises(ValueError, match="must be a number"):
            Constant(True)

    def test_rejects_string(self):
        with pytest.raises(ValueError, match="must be a number"):
            Constant("2")

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_rejects_non_finite(self, value):
        with pytest.raises(ValueError, match="must be finite"):
            Constant(value)

    def test_is_immutable(self):
        c = Constant(1.0)
        with pytest.raises(AttributeError):
            c.value = 2.0


class TestVariable:
    """Test Variable equality and pattern ownership."""

    def test_same_glob_is_equal(self):
        assert Variable("A.*.B") == Variable("A.*.B")
        assert hash(Variable("A.*.B")) == hash(Variable("A.*.B"))

    def test_quotes_do_not_affect_equality(self):
        assert Variable('"A.*.B"') == Variable("A.*.B")

    def test_different_glob_not_equal(self):
        assert Variable("A.*.B") != Variable("A.*.C")

    def test_owns_compiled_pattern(self):
        var = Variable("X.Y.*")
        assert var.wildcards == 1
        assert var.pattern.match("X.Y.foo") == ("foo",)

    def test_single_quote_pair_stripped(self):
        var = Variable('""x""')
        assert var.glob == '"x"'
        assert var.pattern.glob == var.glob
        assert var.pattern.match('"x"') == ()
        assert var.pattern.match("x") is None

    def test_rejects_empty_glob(self):
        with pytest.raises(ValueError, match="must not be empty"):
            Variable('""')

    def test_rejects_non_string(self):
        with pytest.raises(ValueError, match="must be a string"):
            Variable(3)

    def test_usable_as_dict_key(self):
        bindings = {Variable("a"): 1.0}
        assert bindings[Variable('"a"')] == 1.0


class TestBinaryExpr:
    """Test arithmetic node construction."""

    def test_factories_set_operator(self):
        a, b = Variable("a"), Constant(1.0)
        assert Plus(a, b).op == "+"
        assert Minus(a, b).op == "-"
        assert Multiply(a, b).op == "*"
        assert Divide(a, b).op == "/"

    def test_unknown_operator_rejected(self):
        with pytest.raises(ValueError, match="unknown operator"):
            BinaryExpr("%", Constant(1.0), Constant(2.0))

    def test_predicate_operand_rejected(self):
        pred = LT(Constant(1.0), Constant(2.0))
        with pytest.raises(ValueError, match="must be an expression"):
            BinaryExpr("+", pred, Constant(1.0))

    def test_structural_equality(self):
        assert Plus(Variable("a"), Constant(1)) == Plus(Variable("a"), Constant(1.0))

    def test_repr(self):
        node = Minus(Variable("a"), Constant(1.0))
        assert repr(node) == "Minus(Var('a'), Const(1.0))"


class TestComparison:
    """Test predicate node construction."""

    def test_factories_set_operator(self):
        a, b = Variable("a"), Variable("b")
        assert [f(a, b).op for f in (LT, LTE, EQ, GTE, GT)] == ["<", "<=", "==", ">=", ">"]

    def test_unknown_operator_rejected(self):
        with pytest.raises(ValueError, match="unknown operator"):
            Comparison("!=", Constant(1.0), Constant(2.0))

    def test_nested_predicate_rejected(self):
        with pytest.raises(ValueError, match="must be an expression"):
            Comparison("<", LT(Constant(1.0), Constant(2.0)), Constant(1.0))

    def test_not_an_expression(self):
        assert not isinstance(GT(Constant(1.0), Constant(2.0)), EXPRESSION_TYPES)
        assert isinstance(Plus(Constant(1.0), Constant(2.0)), EXPRESSION_TYPES)

    def test_repr(self):
        assert repr(GTE(Variable("x"), Constant(0.5))) == "GTE(Var('x'), Const(0.5))"


class TestIntrospection:
    """Test variable collection and serialization."""

    def test_collect_variables_left_to_right(self):
        node = GT(Plus(Variable("a"), Variable("b")), Multiply(Variable("a"), Variable("c")))
        globs = [v.glob for v in node.collect_variables()]
        assert globs == ["a", "b", "a", "c"]

    def test_referenced_globs_are_distinct(self):
        node = GT(Plus(Variable("a"), Variable("b")), Multiply(Variable("a"), Variable("c")))
        assert get_referenced_globs(node) == ["a", "b", "c"]

    def test_constant_has_no_variables(self):
        assert Constant(1.0).collect_variables() == ()

    def test_node_to_dict(self):
        node = GTE(Multiply(Constant(2.0), Variable("A.*.B")), Variable("K.*.M"))
        assert node_to_dict(node) == {
            "type": "comparison",
            "op": ">=",
            "left": {
                "type": "binary",
                "op": "*",
                "left": {"type": "constant", "value": 2.0},
                "right": {"type": "variable", "glob": "A.*.B", "wildcards": 1},
            },
            "right": {"type": "variable", "glob": "K.*.M", "wildcards": 1},
        }
