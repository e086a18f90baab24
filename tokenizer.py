"""Lexer that turns raw document text into normalized search tokens."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator


class TokenKind(Enum):
    WORD = "word"
    NUMBER = "number"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    """Single upper-cased token together with its lexical class."""

    text: str
    kind: TokenKind


# Latin-1 blanks plus Unicode separators; \x1c-\x1f are symbols, not whitespace
_LATIN1_SPACE = frozenset("\t\n\v\f\r \x85\xa0")


def _is_space(char: str) -> bool:
    return char in _LATIN1_SPACE or unicodedata.category(char).startswith("Z")


def _is_number(char: str) -> bool:
    return unicodedata.category(char).startswith("N")


def _is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")


def _is_alnum(char: str) -> bool:
    return _is_letter(char) or _is_number(char)


def _upper(chunk: str) -> str:
    # one character in, one character out: full case mapping may append
    # combining marks that would split the token on re-lexing
    chars: list[str] = []
    for char in chunk:
        upper = char.upper()
        chars.append(upper if len(upper) == 1 else char)
    return "".join(chars)


class Lexer:
    """Single-use iterator over the tokens of one piece of text.

    Markup tags (``<...>``) are consumed without producing a token, an
    unterminated tag swallows the rest of the input.
    """

    def __init__(self, content: str) -> None:
        self._content = content
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        while True:
            self._skip_whitespace()
            if self._pos >= len(self._content):
                raise StopIteration

            token = self._step()
            if token is not None:
                return token

    def _step(self) -> Token | None:
        """Consume one rule's worth of input; ``None`` means a tag was skipped."""
        first = self._content[self._pos]

        if first == "<":
            end = self._content.find(">", self._pos)
            self._pos = len(self._content) if end == -1 else end + 1
            return None

        if _is_number(first):
            return Token(_upper(self._chop_while(_is_number)), TokenKind.NUMBER)

        if _is_letter(first):
            return Token(_upper(self._chop_while(_is_alnum)), TokenKind.WORD)

        return Token(_upper(self._chop(1)), TokenKind.SYMBOL)

    def _skip_whitespace(self) -> None:
        content = self._content
        while self._pos < len(content) and _is_space(content[self._pos]):
            self._pos += 1

    def _chop(self, count: int) -> str:
        chunk = self._content[self._pos : self._pos + count]
        self._pos += count
        return chunk

    def _chop_while(self, predicate: Callable[[str], bool]) -> str:
        end = self._pos
        while end < len(self._content) and predicate(self._content[end]):
            end += 1
        return self._chop(end - self._pos)


def iter_tokens(text: str) -> Iterator[str]:
    """Lazily yield normalized token strings for ``text``."""
    for token in Lexer(text):
        yield token.text


def tokenize(text: str) -> list[str]:
    """Return all normalized tokens of ``text``, in order."""
    return list(iter_tokens(text))
