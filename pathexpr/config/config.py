"""
Configuration management for pathexpr.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from ..expressions.types import DEFAULT_TIE_BREAK, TieBreak


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class LogConfig:
    """
    Logging configuration.

    An empty log_dir means console output only.
    """
    level: str = "WARNING"
    log_dir: str = ""

    def __post_init__(self):
        self.level = self.level.upper().strip()
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"PATHEXPR_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got '{self.level}'"
            )


@dataclass
class ResolverConfig:
    """
    Resolver configuration.

    tie_break decides which capture group wins when more than one satisfies
    every variable ("last" keeps fold semantics, "first" the earliest group).
    """
    tie_break: TieBreak = DEFAULT_TIE_BREAK

    def __post_init__(self):
        try:
            self.tie_break = TieBreak.parse(self.tie_break)
        except ValueError:
            raise ValueError(
                f"PATHEXPR_TIE_BREAK must be one of {[m.value for m in TieBreak]}, "
                f"got '{self.tie_break}'"
            ) from None


@dataclass
class DisplayConfig:
    """CLI output configuration."""
    precision: int = 6

    def __post_init__(self):
        if self.precision < 0 or self.precision > 17:
            raise ValueError(
                f"PATHEXPR_PRECISION must be between 0 and 17, got {self.precision}"
            )


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Later files override earlier ones
        for env_name in [".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=True)

        self.log = self._load_log_config()
        self.resolver = self._load_resolver_config()
        self.display = self._load_display_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("PATHEXPR_LOG_LEVEL", "WARNING"),
            log_dir=os.getenv("PATHEXPR_LOG_DIR", ""),
        )

    def _load_resolver_config(self) -> ResolverConfig:
        """Load resolver configuration from environment."""
        return ResolverConfig(
            tie_break=os.getenv("PATHEXPR_TIE_BREAK", DEFAULT_TIE_BREAK.value),
        )

    def _load_display_config(self) -> DisplayConfig:
        """Load display configuration from environment."""
        raw = os.getenv("PATHEXPR_PRECISION", "6")
        try:
            precision = int(raw)
        except ValueError:
            raise ValueError(f"PATHEXPR_PRECISION must be an integer, got '{raw}'") from None
        return DisplayConfig(precision=precision)

    def reload(self, env_file: str = ".env") -> "Config":
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def summary(self) -> List[str]:
        """Human-readable settings, one per line."""
        return [
            f"log level: {self.log.level}",
            f"log dir: {self.log.log_dir or '(console only)'}",
            f"tie-break: {self.resolver.tie_break.value}",
            f"precision: {self.display.precision}",
        ]


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the global config instance (next get_config() reloads)."""
    Config._instance = None
