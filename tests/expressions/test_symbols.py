"""
Tests for symbol table loading.
"""

import json

import pytest

from pathexpr.expressions import SymbolTableError, flatten_mapping, load_symbol_table


class TestFlattenMapping:
    """Test nested mapping flattening."""

    def test_nested(self):
        data = {"A": {"foo": {"B": 2}}, "X.Y": {"bar": 16}}
        assert flatten_mapping(data) == {"A.foo.B": 2.0, "X.Y.bar": 16.0}

    def test_already_flat(self):
        assert flatten_mapping({"K.foo.M": 7.5}) == {"K.foo.M": 7.5}

    def test_preserves_document_order(self):
        assert list(flatten_mapping({"b": 1, "a": {"z": 2, "y": 3}})) == ["b", "a.z", "a.y"]

    def test_non_numeric_leaf(self):
        with pytest.raises(SymbolTableError, match="value at 'a.b' must be a number"):
            flatten_mapping({"a": {"b": "high"}})

    def test_bool_leaf_rejected(self):
        with pytest.raises(SymbolTableError, match="got bool"):
            flatten_mapping({"enabled": True})

    def test_empty_key_rejected(self):
        with pytest.raises(SymbolTableError, match="empty key"):
            flatten_mapping({"a": {"": 1}})


class TestLoadSymbolTable:
    """Test file loading by suffix."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "metrics.yaml"
        path.write_text("A:\n  foo:\n    B: 2\nX.Y.foo: 12\n", encoding="utf-8")
        assert load_symbol_table(path) == {"A.foo.B": 2.0, "X.Y.foo": 12.0}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_symbol_table(path) == {}

    def test_json(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps({"K": {"foo": {"M": 7}}}), encoding="utf-8")
        assert load_symbol_table(str(path)) == {"K.foo.M": 7.0}

    def test_csv(self, tmp_path):
        path = tmp_path / "metrics.csv"
        path.write_text("path,value\nA.foo.B,2\nX.Y.bar,16.5\nK.foo.M,\n", encoding="utf-8")
        assert load_symbol_table(path) == {"A.foo.B": 2.0, "X.Y.bar": 16.5}

    def test_csv_missing_columns(self, tmp_path):
        path = tmp_path / "metrics.csv"
        path.write_text("name,amount\na,1\n", encoding="utf-8")
        with pytest.raises(SymbolTableError, match="missing columns"):
            load_symbol_table(path)

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "metrics.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(SymbolTableError, match="top level must be a mapping"):
            load_symbol_table(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "metrics.yaml"
        path.write_text("a: [1, 2\n", encoding="utf-8")
        with pytest.raises(SymbolTableError, match="YAML parse error"):
            load_symbol_table(path)

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "metrics.txt"
        path.write_text("a=1\n", encoding="utf-8")
        with pytest.raises(SymbolTableError, match="unsupported format"):
            load_symbol_table(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SymbolTableError, match="file not found"):
            load_symbol_table(tmp_path / "nope.yaml")
