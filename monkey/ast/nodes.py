"""
AST node definitions for monkey.

This module contains the data classes that make up the syntax tree built by
the parser. Every node is immutable once constructed; a Program owns its
statements, and each statement owns its tokens and sub-expressions.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from ..frontend.lexer import Token


# ==================== Expressions ====================

@dataclass(frozen=True)
class Identifier:
    """Placeholder expression wrapping a single token.

    Stands in for every expression until a real expression grammar exists,
    so the wrapped token may be an identifier, a literal, or even an operator.

    Attributes:
        token: The wrapped token
    """
    token: Token

    def token_literal(self) -> str:
        return self.token.literal


# Type alias for all expression types
Expression = Identifier


# ==================== Statements ====================

@dataclass(frozen=True)
class Let:
    """Let statement (let <identifier> = <value>;).

    Attributes:
        token: The `let` keyword token
        identifier: The binding target
        value: The bound value
    """
    token: Token
    identifier: Expression
    value: Expression

    def token_literal(self) -> str:
        return self.token.literal

    @property
    def name(self) -> str:
        """Raw text of the binding target."""
        return self.identifier.token.raw


@dataclass(frozen=True)
class Return:
    """Return statement (return <value>;).

    Attributes:
        token: The `return` keyword token
        return_value: The returned value
    """
    token: Token
    return_value: Expression

    def token_literal(self) -> str:
        return self.token.literal


# Type alias for all statement types
Statement = Union[Let, Return]


# ==================== Program ====================

@dataclass(frozen=True)
class Program:
    """Root of the syntax tree.

    Attributes:
        statements: Statements in source order
    """
    statements: Tuple[Statement, ...] = ()

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""


# Any node of the tree
Node = Union[Program, Let, Return, Identifier]
