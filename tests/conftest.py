"""
Pytest configuration and shared fixtures.
"""

import pandas as pd
import pytest

from pathexpr.config import reset_config


@pytest.fixture
def symbol_table() -> dict[str, float]:
    """Reference metric universe: only "foo" has every metric."""
    return {
        "A.foo.B": 2.0,
        "X.Y.bar": 16.0,
        "X.Y.foo": 12.0,
        "K.foo.M": 7.0,
    }


@pytest.fixture
def queue_table() -> dict[str, float]:
    """Two queues with both metrics, one with spooled only."""
    return {
        "messaging.queues.orders.spooled": 40.0,
        "messaging.queues.orders.quota": 100.0,
        "messaging.queues.billing.spooled": 90.0,
        "messaging.queues.billing.quota": 100.0,
        "messaging.queues.audit.spooled": 5.0,
    }


@pytest.fixture
def metric_frame() -> pd.DataFrame:
    """Samples over time; columns are metric paths."""
    return pd.DataFrame(
        {
            "A.foo.B": [2.0, 3.0, 4.0],
            "X.Y.bar": [16.0, 16.0, 16.0],
            "X.Y.foo": [12.0, 8.0, 0.0],
            "K.foo.M": [7.0, 7.0, 7.0],
        },
        index=pd.Index(["t0", "t1", "t2"], name="time"),
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from PATHEXPR_* variables, .env files and the config singleton."""
    monkeypatch.chdir(tmp_path)
    for name in ("PATHEXPR_LOG_LEVEL", "PATHEXPR_LOG_DIR", "PATHEXPR_TIE_BREAK", "PATHEXPR_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
