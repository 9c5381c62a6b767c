"""
Core module for monkey.

This module contains the Frontend facade that runs the tokenizer and parser
over a piece of source text.
"""

from .frontend import Frontend, ParseResult

__all__ = [
    "Frontend",
    "ParseResult",
]
