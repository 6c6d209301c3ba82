"""
Symbol table loading.

Builds the flat ``{dotted.path: float}`` mapping consumed by the resolver
from nested mappings, YAML/JSON documents or CSV files.

Nested input:
    A:
      foo:
        B: 2
    X.Y:
      bar: 16

Flat result:
    {"A.foo.B": 2.0, "X.Y.bar": 16.0}
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml", ".json"}
CSV_SUFFIXES = {".csv"}


class SymbolTableError(Exception):
    """Raised when a symbol table source cannot be turned into numbers."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Invalid symbol table '{source}': {message}")


def _to_number(value: Any, path: str, source: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise SymbolTableError(
            source,
            f"value at '{path}' must be a number, got {type(value).__name__}",
        )
    return float(value)


def flatten_mapping(
    data: Mapping[str, Any],
    source: str = "<mapping>",
    prefix: str = "",
) -> dict[str, float]:
    """
    Flatten nested mappings into dotted keys.

    Args:
        data: Nested mapping with numeric leaves
        source: Name used in error messages
        prefix: Key prefix (used during recursion)

    Returns:
        Flat dict in document order.

    Raises:
        SymbolTableError: On non-numeric leaves or empty keys.
    """
    flat: dict[str, float] = {}
    for raw_key, value in data.items():
        key = str(raw_key)
        if not key:
            raise SymbolTableError(source, f"empty key under '{prefix or '<root>'}'")
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            flat.update(flatten_mapping(value, source, path))
        else:
            flat[path] = _to_number(value, path, source)
    return flat


def _load_yaml(path: Path) -> dict[str, float]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise SymbolTableError(str(path), "top level must be a mapping")
    return flatten_mapping(data, str(path))


def _load_csv(path: Path) -> dict[str, float]:
    df = pd.read_csv(path)
    missing = {"path", "value"} - set(df.columns)
    if missing:
        raise SymbolTableError(str(path), f"missing columns: {sorted(missing)}")
    table: dict[str, float] = {}
    for key, value in zip(df["path"].astype(str), df["value"]):
        number = _to_number(value, key, str(path))
        if math.isnan(number):
            # Blank cells read back as NaN; treat the metric as absent
            continue
        table[key] = number
    return table


def load_symbol_table(path: str | Path) -> dict[str, float]:
    """
    Load a flat symbol table from a file.

    Supported formats:
        .yaml/.yml/.json  Nested or flat mapping (PyYAML safe_load)
        .csv              Two columns: path,value

    Raises:
        SymbolTableError: Unknown format, unreadable file or bad values.
    """
    path = Path(path)
    if not path.exists():
        raise SymbolTableError(str(path), "file not found")

    suffix = path.suffix.lower()
    try:
        if suffix in YAML_SUFFIXES:
            table = _load_yaml(path)
        elif suffix in CSV_SUFFIXES:
            table = _load_csv(path)
        else:
            raise SymbolTableError(
                str(path),
                f"unsupported format '{suffix}'. "
                f"Supported: {sorted(YAML_SUFFIXES | CSV_SUFFIXES)}",
            )
    except yaml.YAMLError as e:
        raise SymbolTableError(str(path), f"YAML parse error: {e}") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise SymbolTableError(str(path), f"CSV parse error: {e}") from e

    logger.debug("Loaded %d symbols from %s", len(table), path)
    return table


__all__ = [
    "SymbolTableError",
    "flatten_mapping",
    "load_symbol_table",
]
