"""
Utility modules.
"""

from .logger import get_logger, setup_logger, ExprLogger, ColoredFormatter

__all__ = [
    "get_logger",
    "setup_logger",
    "ExprLogger",
    "ColoredFormatter",
]
