"""
Front end orchestration module for monkey.

This module provides the high-level Frontend class that runs the tokenizer
and parser over a source string and bundles the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..ast import Program
from ..frontend.lexer import Token, Tokenizer, tokenize_source
from ..frontend.parser import Parser, ParserError
from ..utils.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of a parse operation.

    Attributes:
        program: The parsed program (possibly partial)
        errors: Parser errors in detection order
    """
    program: Program
    errors: List[ParserError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether the source parsed without errors."""
        return not self.errors


class Frontend:
    """Runs the monkey front end over source text.

    Every call builds a fresh Tokenizer and Parser, so one Frontend can be
    reused for any number of inputs.

    Example:
        >>> frontend = Frontend()
        >>> result = frontend.parse("return 5;")
        >>> len(result.program.statements)
        1
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the front end.

        Args:
            settings: Optional settings shared by tokenizer and parser
        """
        self._settings = settings or DEFAULT_SETTINGS

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize source text.

        Args:
            source: Source text

        Returns:
            List of tokens ending with EOF
        """
        return tokenize_source(source, self._settings)

    def parse(self, source: str) -> ParseResult:
        """Parse source text into a Program.

        Args:
            source: Source text

        Returns:
            ParseResult: The program and any parser errors
        """
        parser = Parser(Tokenizer(source, self._settings), self._settings)
        program = parser.parse_program()
        errors = parser.errors()

        if errors:
            logger.info("Parsed %d statements, %d errors", len(program.statements), len(errors))

        return ParseResult(program=program, errors=errors)
