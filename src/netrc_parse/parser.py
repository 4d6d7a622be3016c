# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Entry parser for .netrc text.

Tokens are consumed one entry at a time. Credential keywords (login,
password, account) attach to the most recently opened machine or default
entry. Running counters make sure a credential keyword never appears
before any entry is open, nor more often than entries have been opened.

The first error ends the parse; no partial result is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .errors import EndOfInputError, IllegalFormatError
from .models import Machine, Netrc
from .tokenizer import Lexer, Token, TokenKind

log = logging.getLogger(__name__)

# Machine field set by each credential keyword
_CREDENTIAL_FIELDS = {
    TokenKind.LOGIN: "login",
    TokenKind.PASSWORD: "password",  # noqa: S105
    TokenKind.ACCOUNT: "account",
}


@dataclass
class MachineCount:
    """Running keyword counters for a single parse."""

    machine: int = 0
    login: int = 0
    password: int = 0
    account: int = 0


def _decode(text: Union[str, bytes, bytearray]) -> str:
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8")
    msg = f"Expected str or bytes, got {type(text).__name__}"
    raise TypeError(msg)


def _parse_credential(
    netrc: Netrc,
    lexer: Lexer,
    token: Token,
    count: MachineCount,
) -> None:
    """Attach a login, password or account value to the open entry."""
    field = _CREDENTIAL_FIELDS[token.kind]
    value = lexer.next_token().text

    seen = getattr(count, field) + 1
    setattr(count, field, seen)
    if seen > count.machine:
        raise IllegalFormatError(lexer.position, f"{field} must follow machine")

    setattr(netrc.machines[-1], field, value)


def _parse_entry(
    netrc: Netrc,
    lexer: Lexer,
    token: Token,
    count: MachineCount,
    tolerate_unknown: bool,
) -> None:
    """Apply one dispatched token to the accumulated result."""
    if not token.is_keyword:
        if not tolerate_unknown:
            raise IllegalFormatError(lexer.position, f"token: {token.text}")
        log.debug("Collected unknown entry %r at %s", token.text, lexer.position)
        netrc.unknown_entries.append(token.text)
    elif token.kind is TokenKind.MACHINE:
        host = lexer.next_token().text
        netrc.machines.append(Machine(name=host))
        count.machine += 1
    elif token.kind is TokenKind.DEFAULT:
        netrc.machines.append(Machine())
        count.machine += 1
    elif token.kind in _CREDENTIAL_FIELDS:
        _parse_credential(netrc, lexer, token, count)
    elif token.kind is TokenKind.MACDEF:
        name = lexer.next_token().text
        commands = lexer.next_commands()
        log.debug("Captured macro %s with %d command(s)", name, len(commands))
        netrc.macdefs.append((name, commands))


def parse(text: Union[str, bytes, bytearray], tolerate_unknown: bool = False) -> Netrc:
    """
    Parse .netrc text into a Netrc.

    Args:
        text: The .netrc content; bytes are decoded as UTF-8.
        tolerate_unknown: Collect unrecognized words in
            ``unknown_entries`` instead of failing on them.

    Returns:
        The parsed Netrc.

    Raises:
        EndOfInputError: If the input ends where a value is required.
        IllegalFormatError: If a token appears where it is not allowed.
        TypeError: If ``text`` is neither str nor bytes.
    """
    content = _decode(text)
    log.debug(
        "Parsing netrc content (%d characters, tolerate_unknown=%s)",
        len(content),
        tolerate_unknown,
    )

    netrc = Netrc()
    lexer = Lexer(content)
    count = MachineCount()
    while True:
        try:
            token = lexer.next_token()
        except EndOfInputError:
            break
        try:
            _parse_entry(netrc, lexer, token, count, tolerate_unknown)
        except (EndOfInputError, IllegalFormatError) as e:
            log.debug("Failed to parse netrc content: %s", e)
            raise

    log.debug(
        "Parsed %d machine(s), %d macro(s), %d unknown entry(ies)",
        len(netrc.machines),
        len(netrc.macdefs),
        len(netrc.unknown_entries),
    )
    return netrc


__all__ = [
    "MachineCount",
    "parse",
]
