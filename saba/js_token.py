"""A lexer for the small JavaScript subset understood by the runtime."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Union

RESERVED_WORDS = ("var", "function", "return")
PUNCTUATORS = frozenset("+-;=(){},.")
_WHITESPACE = (" ", "\n")


class LexError(ValueError):
    """Raised when the lexer meets a character it does not support."""


class TokenKind(enum.Enum):
    PUNCTUATOR = "punctuator"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    STRING_LITERAL = "string_literal"


@dataclass(frozen=True)
class Token:
    """A lexical token: its kind and its value (a str, or an int for numbers)."""

    kind: TokenKind
    value: Union[str, int]


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


class JsLexer:
    """Iterator turning JavaScript source text into tokens."""

    def __init__(self, js: str) -> None:
        self._input = js
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        text = self._input
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(text):
            raise StopIteration

        for word in RESERVED_WORDS:
            if text.startswith(word, self._pos):
                self._pos += len(word)
                return Token(TokenKind.KEYWORD, word)

        c = text[self._pos]
        if c in PUNCTUATORS:
            self._pos += 1
            return Token(TokenKind.PUNCTUATOR, c)
        if "0" <= c <= "9":
            return Token(TokenKind.NUMBER, self._consume_number())
        if _is_ascii_alpha(c) or c in "_$":
            return Token(TokenKind.IDENTIFIER, self._consume_identifier())
        if c == '"':
            return Token(TokenKind.STRING_LITERAL, self._consume_string())
        raise LexError(f"char {c!r} is not supported yet")

    def _consume_number(self) -> int:
        start = self._pos
        while self._pos < len(self._input) and "0" <= self._input[self._pos] <= "9":
            self._pos += 1
        return int(self._input[start:self._pos])

    def _consume_identifier(self) -> str:
        start = self._pos
        while self._pos < len(self._input):
            c = self._input[self._pos]
            if not (_is_ascii_alpha(c) or c in "_$"):
                break
            self._pos += 1
        return self._input[start:self._pos]

    def _consume_string(self) -> str:
        self._pos += 1
        end = self._input.find('"', self._pos)
        if end < 0:
            result = self._input[self._pos:]
            self._pos = len(self._input)
            return result
        result = self._input[self._pos:end]
        self._pos = end + 1
        return result