# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Character scanner and token classification for .netrc text.

The scanner works in one of two modes:
- WORDS: whitespace-delimited words, the normal .netrc grammar
- LINES: raw line capture, used only for the body of a ``macdef``

A ``Position`` (1-indexed row and column) is advanced for every character
consumed so that errors can point at the offending location.

Whitespace is the Unicode White_Space set. ``str.isspace()`` also accepts
the information separators U+001C to U+001F, so those are excluded and
stay part of words.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .errors import EndOfInputError

# Information separators: str.isspace() is true for them, White_Space is not
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """Return True if ``char`` separates words."""
    return char.isspace() and char not in _SEPARATORS


def _strip(line: str) -> str:
    start, end = 0, len(line)
    while start < end and is_whitespace(line[start]):
        start += 1
    while end > start and is_whitespace(line[end - 1]):
        end -= 1
    return line[start:end]


@dataclass(frozen=True)
class Position:
    """Row and column in the input, both starting at 1."""

    row: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.row}:{self.column}"

    def advance(self, char: str) -> Position:
        """Return the position after consuming ``char``."""
        if char == "\n":
            return Position(self.row + 1, 1)
        return replace(self, column=self.column + 1)


class ScanMode(Enum):
    """Scanning mode of the tokenizer."""

    WORDS = "words"
    LINES = "lines"


class Tokenizer:
    """
    Scanner over a borrowed string that tracks the current position.

    Args:
        text: The .netrc content to scan.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0
        self._position = Position()
        self.mode = ScanMode.WORDS

    @property
    def position(self) -> Position:
        return self._position

    def at_end(self) -> bool:
        return self._index >= len(self._text)

    def _consume(self) -> str:
        char = self._text[self._index]
        self._index += 1
        self._position = self._position.advance(char)
        return char

    def skip_whitespace(self) -> None:
        """Advance past any run of whitespace characters."""
        while not self.at_end() and is_whitespace(self._text[self._index]):
            self._consume()

    def next_word(self) -> Optional[str]:
        """
        Return the next whitespace-delimited word.

        Returns:
            The word, or None if only whitespace remains.

        Raises:
            RuntimeError: If the scanner is capturing lines.
        """
        if self.mode is not ScanMode.WORDS:
            msg = f"Cannot scan words in {self.mode.value} mode"
            raise RuntimeError(msg)

        self.skip_whitespace()
        if self.at_end():
            return None

        chars: list[str] = []
        while not self.at_end() and not is_whitespace(self._text[self._index]):
            chars.append(self._consume())
        return "".join(chars)

    def _next_line(self) -> str:
        """Consume one raw line and return it stripped."""
        end = self._text.find("\n", self._index)
        if end == -1:
            end = len(self._text)
        line = self._text[self._index : end]
        self._index = min(end + 1, len(self._text))
        return _strip(line)

    def next_commands(self) -> list[str]:
        """
        Capture the body of a macro definition.

        The scanner switches to LINES mode and collects stripped lines.
        A blank line or the end of input switches it back to WORDS mode;
        the blank line is consumed but not returned. Inside the body the
        position is only tracked per line: the row moves by the number of
        captured lines and the column resets to 1.

        Returns:
            The stripped command lines in order.
        """
        self.skip_whitespace()
        self.mode = ScanMode.LINES
        commands: list[str] = []
        while self.mode is ScanMode.LINES:
            line = "" if self.at_end() else self._next_line()
            if line:
                commands.append(line)
            else:
                self.mode = ScanMode.WORDS

        self._position = Position(self._position.row + len(commands), 1)
        return commands


class TokenKind(Enum):
    """Kinds of .netrc tokens: the keywords plus opaque strings."""

    MACHINE = "machine"
    DEFAULT = "default"
    LOGIN = "login"
    PASSWORD = "password"  # noqa: S105
    ACCOUNT = "account"
    MACDEF = "macdef"
    STRING = None


_KEYWORDS = {kind.value: kind for kind in TokenKind if kind is not TokenKind.STRING}


@dataclass(frozen=True)
class Token:
    """A classified word from the input."""

    kind: TokenKind
    text: str

    @classmethod
    def from_word(cls, word: str) -> Token:
        """Classify ``word``; keywords match exactly and case-sensitively."""
        return cls(_KEYWORDS.get(word, TokenKind.STRING), word)

    @property
    def is_keyword(self) -> bool:
        return self.kind is not TokenKind.STRING

    def __str__(self) -> str:
        return self.text


class Lexer:
    """
    Token source for the entry parser.

    Turns the tokenizer's "no more input" into ``EndOfInputError`` so the
    parser can tell a missing value from a clean end between entries.
    """

    def __init__(self, text: str) -> None:
        self.tokens = Tokenizer(text)

    @property
    def position(self) -> Position:
        return self.tokens.position

    def next_token(self) -> Token:
        """
        Return the next token.

        Raises:
            EndOfInputError: If the input is exhausted.
        """
        word = self.tokens.next_word()
        if word is None:
            raise EndOfInputError
        return Token.from_word(word)

    def next_commands(self) -> list[str]:
        return self.tokens.next_commands()


__all__ = [
    "Lexer",
    "Position",
    "ScanMode",
    "Token",
    "TokenKind",
    "Tokenizer",
]
