"""
monkey - front end for the Monkey scripting language

Turns source text into tokens and then into a syntax tree, reporting every
malformed statement instead of stopping at the first one.

Example:
    >>> from monkey import Frontend
    >>> result = Frontend().parse("let x = 5;")
    >>> if result.success:
    ...     print(result.program.statements[0].name)
    x

Version: 0.1.0
"""

__version__ = "0.1.0"

from .frontend import Tokenizer, Token, TokenType, Parser, ParserError
from .core import Frontend, ParseResult
from .utils import Settings

__all__ = [
    "__version__",
    "Tokenizer",
    "Token",
    "TokenType",
    "Parser",
    "ParserError",
    "Frontend",
    "ParseResult",
    "Settings",
]
