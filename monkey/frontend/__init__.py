"""
Frontend module for monkey.

This module provides the tokenizer and parser components of the monkey
interpreter front end.
"""

from .lexer import Tokenizer, Token, TokenType, KEYWORDS, lookup_ident, tokenize_source
from .parser import Parser, ParserError

__all__ = [
    # Tokenizer components
    "Tokenizer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_ident",
    "tokenize_source",
    # Parser components
    "Parser",
    "ParserError",
]
