"""
Lexer module for tokenizing arithmetic expressions.

Tokens are produced one at a time on demand. Numbers are captured as
raw text; converting them to floats is left to the parser.
"""

from dataclasses import dataclass
from enum import Enum, auto
from string import digits
from typing import Iterator

from rdcalc.errors import InvalidCharacter


class TokenType(Enum):
    """Token types for the expression lexer."""

    # Literals
    NUMBER = auto()  # digits and '.', verbatim

    # Arithmetic operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # Brackets
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Special
    EOF = auto()


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

DIGITS = frozenset(digits)
DECIMAL_POINT = "."


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: str
    position: int  # starting position in the source string

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


class ExpressionLexer:
    """
    Pull-based tokenizer for arithmetic expressions.

    Handles:
    - Numeric literals (runs of ASCII digits and decimal points)
    - The operators + - * /
    - Parentheses
    - Whitespace, which is skipped

    The cursor only moves forward. Once the input is exhausted every
    call to next_token() returns an EOF token.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.length = len(source)

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
        return char

    def _skip_whitespace(self) -> None:
        char = self._current_char()
        while char is not None and char.isspace():
            self._advance()
            char = self._current_char()

    @staticmethod
    def _is_number_char(char: str | None) -> bool:
        return char is not None and (char in DIGITS or char == DECIMAL_POINT)

    def _read_number(self) -> Token:
        """Read a numeric literal without validating it."""
        start_pos = self.pos
        chars: list[str] = []

        while self._is_number_char(self._current_char()):
            chars.append(self._advance())  # type: ignore

        return Token(TokenType.NUMBER, "".join(chars), start_pos)

    def next_token(self) -> Token:
        """Return the next token, consuming exactly its characters."""
        self._skip_whitespace()

        char = self._current_char()
        if char is None:
            return Token(TokenType.EOF, "", self.length)

        if self._is_number_char(char):
            return self._read_number()

        if char in SINGLE_CHAR_TOKENS:
            start_pos = self.pos
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[char], char, start_pos)

        raise InvalidCharacter(char, self.pos)

    def tokenize(self) -> list[Token]:
        """Tokenize the rest of the source string, EOF included."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return
