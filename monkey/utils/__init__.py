"""
Utility modules for monkey.

This package contains configuration helpers shared by the tokenizer and parser.
"""

from .settings import Settings, DEFAULT_SETTINGS, INT64_MAX

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "INT64_MAX",
]
