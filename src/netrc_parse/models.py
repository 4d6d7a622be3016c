# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Pydantic models for parsed .netrc content.

This module defines:
- Machine: one credential record (a named machine or the default entry)
- Netrc: everything parsed from one input, in file order
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class Machine(BaseModel):
    """A single ``machine`` or ``default`` entry."""

    name: Optional[str] = Field(None, description="Remote machine name, None for the default entry")
    login: Optional[str] = Field(None, description="User on the remote machine")
    password: Optional[str] = Field(None, description="Password for the login")
    account: Optional[str] = Field(None, description="Additional account password")

    @property
    def is_default(self) -> bool:
        """Return True if this is the ``default`` entry."""
        return self.name is None

    def __str__(self) -> str:
        """Render the entry in the single-line form accepted by the parser."""
        parts = [f"machine {self.name}" if self.name is not None else "default"]
        if self.login is not None:
            parts.append(f"login {self.login}")
        if self.password is not None:
            parts.append(f"password {self.password}")
        if self.account is not None:
            parts.append(f"account {self.account}")
        return " ".join(parts)

    def __repr__(self) -> str:
        """Mask password in repr for security."""
        password = None if self.password is None else "****"
        return (
            f"Machine(name={self.name!r}, login={self.login!r}, "
            f"password={password!r}, account={self.account!r})"
        )


class Netrc(BaseModel):
    """Parsed .netrc content."""

    machines: list[Machine] = Field(default_factory=list, description="Machine entries in file order")
    macdefs: list[tuple[str, list[str]]] = Field(
        default_factory=list, description="Macro names paired with their command lines"
    )
    unknown_entries: list[str] = Field(
        default_factory=list, description="Unrecognized words, collected only when tolerated"
    )

    @classmethod
    def parse(cls, text: Union[str, bytes, bytearray], tolerate_unknown: bool = False) -> "Netrc":
        """
        Parse .netrc text.

        Args:
            text: The .netrc content.
            tolerate_unknown: Collect unrecognized words instead of failing.

        Returns:
            The parsed Netrc.

        Raises:
            EndOfInputError: If the input ends where a value is required.
            IllegalFormatError: If a token appears where it is not allowed.
        """
        from .parser import parse

        return parse(text, tolerate_unknown=tolerate_unknown)

    @property
    def has_default(self) -> bool:
        """Return True if a default entry exists."""
        return any(machine.is_default for machine in self.machines)

    @property
    def hosts(self) -> list[str]:
        """Return names of all named machines in file order."""
        return [machine.name for machine in self.machines if machine.name is not None]

    def macro(self, name: str) -> Optional[list[str]]:
        """Return the commands of the first macro called ``name``."""
        for macro_name, commands in self.macdefs:
            if macro_name == name:
                return commands
        return None


__all__ = [
    "Machine",
    "Netrc",
]
