"""Lexer for the small JavaScript subset the browser executes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from saba.errors import UnexpectedInputError

RESERVED_WORDS = ("var", "function", "return")
PUNCTUATORS = frozenset("+-;=(){},.")
_WHITESPACE = frozenset(" \n")
_DIGITS = frozenset("0123456789")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENT_START = _ASCII_LETTERS | frozenset("_$")
_IDENT_CHARS = _IDENT_START | _DIGITS


@dataclass(frozen=True)
class Punctuator:
    value: str


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Keyword:
    name: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


Token = Union[Punctuator, Number, Identifier, Keyword, StringLiteral]


class JsLexer:
    """Iterator producing tokens from JavaScript source text."""

    def __init__(self, js: str) -> None:
        self._input = js
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def _reserved_word(self) -> str | None:
        for word in RESERVED_WORDS:
            if self._input.startswith(word, self._pos):
                return word
        return None

    def _consume_while(self, allowed: frozenset) -> str:
        start = self._pos
        while self._pos < len(self._input) and self._input[self._pos] in allowed:
            self._pos += 1
        return self._input[start:self._pos]

    def _consume_string(self) -> str:
        start = self._pos + 1
        end = self._input.find('"', start)
        if end == -1:
            self._pos = len(self._input)
            return self._input[start:]
        self._pos = end + 1
        return self._input[start:end]

    def __next__(self) -> Token:
        text = self._input
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(text):
            raise StopIteration

        keyword = self._reserved_word()
        if keyword is not None:
            self._pos += len(keyword)
            return Keyword(keyword)

        c = text[self._pos]
        if c in PUNCTUATORS:
            self._pos += 1
            return Punctuator(c)
        if c in _DIGITS:
            return Number(int(self._consume_while(_DIGITS)))
        if c in _IDENT_START:
            return Identifier(self._consume_while(_IDENT_CHARS))
        if c == '"':
            return StringLiteral(self._consume_string())
        raise UnexpectedInputError(f"char {c!r} is not supported yet")