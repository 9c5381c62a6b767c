"""
Lexer module for monkey.

This module provides a hand-written, single-pass tokenizer for the monkey
language. It converts source text into a stream of tokens for the parser,
one token per call to `Tokenizer.next_token()`.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional

from ..utils.settings import DEFAULT_SETTINGS, INT64_MAX, Settings

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for the monkey language."""
    # Special
    ILLEGAL = auto()       # Unclassifiable character
    EOF = auto()           # End of input

    # Values
    IDENT = auto()         # Identifier
    INT = auto()           # Integer literal

    # Operators
    ASSIGN = auto()        # =
    PLUS = auto()          # +
    MINUS = auto()         # -
    MULTIPLY = auto()      # *
    DIVIDE = auto()        # /
    NEGATION = auto()      # !
    EQUALS = auto()        # ==
    NOT_EQUALS = auto()    # !=
    LESS_THAN = auto()     # <
    GREATER_THAN = auto()  # >

    # Syntax
    COMMA = auto()         # ,
    SEMICOLON = auto()     # ;
    LEFT_PAREN = auto()    # (
    RIGHT_PAREN = auto()   # )
    LEFT_BRACE = auto()    # {
    RIGHT_BRACE = auto()   # }

    # Keywords
    FUNCTION = auto()      # fn
    LET = auto()           # let
    TRUE = auto()          # true
    FALSE = auto()         # false
    IF = auto()            # if
    ELSE = auto()          # else
    RETURN = auto()        # return


# Reserved words, matched exactly (case-sensitive) after identifier scanning
KEYWORDS: Dict[str, TokenType] = {
    'fn': TokenType.FUNCTION,
    'let': TokenType.LET,
    'true': TokenType.TRUE,
    'false': TokenType.FALSE,
    'if': TokenType.IF,
    'else': TokenType.ELSE,
    'return': TokenType.RETURN,
}

# Fixed spelling of every token type that has one
_FIXED_LITERALS: Dict[TokenType, str] = {
    TokenType.ASSIGN: '=',
    TokenType.PLUS: '+',
    TokenType.MINUS: '-',
    TokenType.MULTIPLY: '*',
    TokenType.DIVIDE: '/',
    TokenType.NEGATION: '!',
    TokenType.EQUALS: '==',
    TokenType.NOT_EQUALS: '!=',
    TokenType.LESS_THAN: '<',
    TokenType.GREATER_THAN: '>',
    TokenType.COMMA: ',',
    TokenType.SEMICOLON: ';',
    TokenType.LEFT_PAREN: '(',
    TokenType.RIGHT_PAREN: ')',
    TokenType.LEFT_BRACE: '{',
    TokenType.RIGHT_BRACE: '}',
}
_FIXED_LITERALS.update({token_type: word for word, token_type in KEYWORDS.items()})


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        type: The token type
        location: UTF-8 byte offset of the token's first character (None for EOF)
        raw: The exact source text the token was scanned from
        value: The parsed value of an INT token
    """
    type: TokenType
    location: Optional[int] = None
    raw: str = ""
    value: Optional[int] = None

    @classmethod
    def eof(cls) -> "Token":
        """Build the end-of-input token."""
        return cls(TokenType.EOF)

    @property
    def literal(self) -> str:
        """Canonical text of the token."""
        if self.type == TokenType.EOF:
            return "END"
        if self.type == TokenType.INT:
            return str(self.value)
        return _FIXED_LITERALS.get(self.type, self.raw)

    @property
    def is_keyword(self) -> bool:
        return self.type in _KEYWORD_TYPES

    def __repr__(self) -> str:
        if self.type == TokenType.EOF:
            return "Token(EOF)"
        return f"Token({self.type.name}, {self.raw!r}, location={self.location})"


_KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Characters that map directly onto a token with no lookahead
_SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MULTIPLY,
    '/': TokenType.DIVIDE,
    '<': TokenType.LESS_THAN,
    '>': TokenType.GREATER_THAN,
    ',': TokenType.COMMA,
    ';': TokenType.SEMICOLON,
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
}

# `=` and `!` become a digraph when followed by `=`
_DIGRAPHS: Dict[str, tuple] = {
    '=': (TokenType.ASSIGN, TokenType.EQUALS),
    '!': (TokenType.NEGATION, TokenType.NOT_EQUALS),
}

_WHITESPACE = frozenset(" \t\n\r")
_DIGITS = frozenset("0123456789")
_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENT_PART = _IDENT_START | _DIGITS


def lookup_ident(token: Token) -> Optional[Token]:
    """Promote an identifier token to a keyword token.

    Args:
        token: Token to check

    Returns:
        The keyword token at the same location, or None if the token is
        not an identifier spelling a reserved word
    """
    if token.type != TokenType.IDENT:
        return None
    keyword_type = KEYWORDS.get(token.raw)
    if keyword_type is None:
        return None
    return Token(type=keyword_type, location=token.location, raw=token.raw)


class Tokenizer:
    """Tokenizer for monkey source code.

    Scans the source left to right without backtracking. Each call to
    `next_token()` returns exactly one token; once the input is exhausted
    every further call returns EOF.

    Example:
        >>> tokenizer = Tokenizer("let x = 5;")
        >>> tokenizer.next_token()
        Token(LET, 'let', location=0)
    """

    def __init__(self, source: str, settings: Optional[Settings] = None):
        """Initialize the tokenizer.

        Args:
            source: Source text to tokenize
            settings: Optional settings (defaults to DEFAULT_SETTINGS)
        """
        self._source = source
        self._pos: int = 0
        self._byte_pos: int = 0
        self._settings = settings or DEFAULT_SETTINGS

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, stopping before EOF."""
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def _current_char(self) -> Optional[str]:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return None

    def _peek_char(self) -> Optional[str]:
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return None

    def _skip_whitespace(self) -> None:
        # Whitespace is ASCII, one byte per character
        while self._pos < len(self._source) and self._source[self._pos] in _WHITESPACE:
            self._pos += 1
            self._byte_pos += 1

    def _read_run(self, allowed: frozenset) -> str:
        """Consume the maximal run of allowed characters at the cursor."""
        start = self._pos
        while self._pos < len(self._source) and self._source[self._pos] in allowed:
            self._pos += 1
        return self._source[start:self._pos]

    def next_token(self) -> Token:
        """Scan and return the next token.

        Token locations are UTF-8 byte offsets into the source.

        Returns:
            The next Token, or the EOF token once the input is exhausted
        """
        self._skip_whitespace()

        ch = self._current_char()
        if ch is None:
            return Token.eof()

        start = self._pos
        token = self._scan_token(ch, self._byte_pos)
        self._byte_pos += len(self._source[start:self._pos].encode("utf-8", "surrogatepass"))
        return token

    def _scan_token(self, ch: str, location: int) -> Token:
        if ch in _DIGRAPHS:
            single, double = _DIGRAPHS[ch]
            if self._peek_char() == '=':
                self._pos += 2
                return Token(type=double, location=location, raw=ch + '=')
            self._pos += 1
            return Token(type=single, location=location, raw=ch)

        if ch in _SINGLE_CHAR_TOKENS:
            self._pos += 1
            return Token(type=_SINGLE_CHAR_TOKENS[ch], location=location, raw=ch)

        if ch in _IDENT_START:
            return self._read_identifier(location)

        if ch in _DIGITS:
            return self._read_number(location)

        self._pos += 1
        return Token(type=TokenType.ILLEGAL, location=location, raw=ch)

    def _read_identifier(self, location: int) -> Token:
        ident = Token(type=TokenType.IDENT, location=location, raw=self._read_run(_IDENT_PART))
        return lookup_ident(ident) or ident

    def _read_number(self, location: int) -> Token:
        digits = self._read_run(_DIGITS)
        value = int(digits)
        if value <= INT64_MAX:
            return Token(type=TokenType.INT, location=location, raw=digits, value=value)

        policy = self._settings.integer_overflow
        logger.warning("Integer literal %s at offset %d overflows 64 bits (policy: %s)",
                       digits, location, policy)
        if policy == "saturate":
            return Token(type=TokenType.INT, location=location, raw=digits, value=INT64_MAX)
        return Token(type=TokenType.ILLEGAL, location=location, raw=digits)


def tokenize_source(source: str, settings: Optional[Settings] = None) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: Source text to tokenize
        settings: Optional settings

    Returns:
        List of Token objects, ending with the EOF token
    """
    tokenizer = Tokenizer(source, settings)
    tokens = list(tokenizer)
    tokens.append(Token.eof())
    return tokens
