"""
Tests for environment-driven configuration.
"""

import pytest

from pathexpr.config import (
    Config,
    DisplayConfig,
    LogConfig,
    ResolverConfig,
    get_config,
    reset_config,
)
from pathexpr.expressions import TieBreak


class TestDefaults:
    """Test values without any environment."""

    def test_defaults(self):
        config = get_config()
        assert config.log.level == "WARNING"
        assert config.log.log_dir == ""
        assert config.resolver.tie_break is TieBreak.LAST
        assert config.display.precision == 6

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset_reloads(self):
        first = get_config()
        reset_config()
        assert get_config() is not first


class TestEnvironment:
    """Test PATHEXPR_* overrides."""

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("PATHEXPR_LOG_LEVEL", "debug")
        monkeypatch.setenv("PATHEXPR_TIE_BREAK", "FIRST")
        monkeypatch.setenv("PATHEXPR_PRECISION", "3")
        config = get_config()
        assert config.log.level == "DEBUG"
        assert config.resolver.tie_break is TieBreak.FIRST
        assert config.display.precision == 3

    def test_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("PATHEXPR_PRECISION=2\n", encoding="utf-8")
        assert get_config().display.precision == 2

    def test_reload(self, monkeypatch):
        config = get_config()
        monkeypatch.setenv("PATHEXPR_TIE_BREAK", "first")
        assert config.reload().resolver.tie_break is TieBreak.FIRST

    def test_invalid_precision(self, monkeypatch):
        monkeypatch.setenv("PATHEXPR_PRECISION", "many")
        with pytest.raises(ValueError, match="must be an integer"):
            Config()


class TestValidation:
    """Test sub-config validation."""

    def test_log_level(self):
        with pytest.raises(ValueError, match="PATHEXPR_LOG_LEVEL"):
            LogConfig(level="LOUD")

    def test_tie_break(self):
        with pytest.raises(ValueError, match="PATHEXPR_TIE_BREAK"):
            ResolverConfig(tie_break="middle")

    def test_precision_range(self):
        with pytest.raises(ValueError, match="between 0 and 17"):
            DisplayConfig(precision=18)

    def test_summary(self):
        lines = get_config().summary()
        assert "tie-break: last" in lines
        assert "log dir: (console only)" in lines
