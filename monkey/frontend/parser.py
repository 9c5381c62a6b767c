"""
Parser module for monkey.

This module provides a statement-level parser driven by two token lookahead
slots (current and peek). It converts the tokenizer's stream into a Program,
collecting structural errors instead of stopping at the first one.
"""

import logging
from typing import List, Optional

from ..ast import Identifier, Let, Program, Return, Statement
from ..utils.settings import DEFAULT_SETTINGS, Settings
from .lexer import Token, Tokenizer, TokenType

logger = logging.getLogger(__name__)


class ParserError(Exception):
    """Exception raised for a malformed statement.

    The parser records these rather than letting them escape
    `parse_program()`.
    """

    def __init__(self, message: str, location: Optional[int] = None):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location is not None:
            return f"Offset {self.location}: {self.message}"
        return self.message

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParserError):
            return NotImplemented
        return (self.message, self.location) == (other.message, other.location)

    def __hash__(self) -> int:
        return hash((self.message, self.location))


class Parser:
    """Statement parser for monkey.

    Recognizes `let` and `return` statements. A malformed statement is
    dropped and reported through `errors()`; parsing then resumes one
    token at a time until the next statement start.

    Example:
        >>> parser = Parser(Tokenizer("let x = 5;"))
        >>> program = parser.parse_program()
        >>> len(program.statements)
        1
    """

    def __init__(self, tokenizer: Tokenizer, settings: Optional[Settings] = None):
        """Initialize the parser and prime both lookahead slots.

        Args:
            tokenizer: Token source, consumed exactly once
            settings: Optional settings (defaults to DEFAULT_SETTINGS)
        """
        self._tokenizer = tokenizer
        self._settings = settings or DEFAULT_SETTINGS
        self._errors: List[ParserError] = []
        self.current_token: Token = tokenizer.next_token()
        self.peek_token: Token = tokenizer.next_token()

    def advance(self) -> None:
        """Shift peek into current and refill peek from the tokenizer."""
        self.current_token = self.peek_token
        self.peek_token = self._tokenizer.next_token()

    def _current_is(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def _peek_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def _unexpected(self, token: Token, expected: str) -> ParserError:
        return ParserError(f"Unexpected token '{token.literal}'. Expected {expected}",
                           token.location)

    def errors(self) -> List[ParserError]:
        """Errors recorded so far, in detection order."""
        return list(self._errors)

    def parse_program(self) -> Program:
        """Parse the whole token stream.

        Returns:
            Program: Every statement that parsed cleanly, in source order
        """
        statements: List[Statement] = []

        while not self._current_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.advance()

        logger.debug("Parsed %d statements with %d errors", len(statements), len(self._errors))
        return Program(statements=tuple(statements))

    def parse_statement(self) -> Optional[Statement]:
        """Parse one statement starting at the current token.

        Returns:
            The statement, or None if nothing was recognized or the
            statement was malformed
        """
        try:
            if self._current_is(TokenType.LET):
                return self.parse_let_statement()
            elif self._current_is(TokenType.RETURN):
                return self.parse_return_statement()
            elif (self._settings.report_unrecognized_statements
                  and not self._current_is(TokenType.SEMICOLON)):
                raise self._unexpected(self.current_token, "statement")
        except ParserError as e:
            logger.debug("Parse error: %s", e)
            self._errors.append(e)
        return None

    def parse_let_statement(self) -> Let:
        """Parse `let <ident> = <value>;` with current on `let`."""
        let_token = self.current_token

        if not self._peek_is(TokenType.IDENT):
            raise self._unexpected(self.peek_token, "identifier")
        self.advance()
        identifier = Identifier(self.current_token)

        if not self._peek_is(TokenType.ASSIGN):
            raise self._unexpected(self.peek_token, "assignment operator")
        self.advance()

        # Placeholder until expressions are parsed: the token after `=`
        value = Identifier(self.peek_token)
        self.skip_to_semicolon()

        return Let(token=let_token, identifier=identifier, value=value)

    def parse_return_statement(self) -> Return:
        """Parse `return <value>;` with current on `return`."""
        return_token = self.current_token
        self.advance()

        # Placeholder until expressions are parsed: the token after `return`
        return_value = Identifier(self.current_token)
        self.skip_to_semicolon()

        return Return(token=return_token, return_value=return_value)

    def skip_to_semicolon(self) -> None:
        """Advance until current is the terminating semicolon.

        Stands in for expression parsing. Stops early at EOF.
        """
        while not self._current_is(TokenType.SEMICOLON):
            if self._current_is(TokenType.EOF):
                logger.debug("Statement not terminated before end of input")
                return
            self.advance()
