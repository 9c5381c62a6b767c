"""
Syntax tree module for monkey.

This module defines the AST node types produced by the parser.
"""

from .nodes import (
    # Expressions
    Identifier,
    Expression,
    # Statements
    Let,
    Return,
    Statement,
    # Root
    Program,
    Node,
)

__all__ = [
    # Expressions
    "Identifier",
    "Expression",
    # Statements
    "Let",
    "Return",
    "Statement",
    # Root
    "Program",
    "Node",
]
