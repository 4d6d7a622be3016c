# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""Errors raised while parsing .netrc text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import Position


class NetrcParseError(Exception):
    """Raised when .netrc text cannot be parsed."""


class EndOfInputError(NetrcParseError):
    """Raised when the input ends where a value was required."""

    def __init__(self) -> None:
        super().__init__("End of data: EOF")


class IllegalFormatError(NetrcParseError):
    """
    Raised when a token is not allowed where it appears.

    Attributes:
        position: Row and column at which the problem was detected.
        message: Human-readable cause.
    """

    def __init__(self, position: Position, message: str) -> None:
        self.position = position
        self.message = message
        super().__init__(f"Illegal format in {position} {message}")


__all__ = [
    "EndOfInputError",
    "IllegalFormatError",
    "NetrcParseError",
]
