# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Parser for the .netrc credentials format.

Typical usage:
    netrc = parse("machine example.com login foo password bar")
    for machine in netrc.machines:
        print(machine)
"""

from .errors import EndOfInputError, IllegalFormatError, NetrcParseError
from .models import Machine, Netrc
from .parser import parse
from .tokenizer import Position

__version__ = "0.1.0"

__all__ = [
    "EndOfInputError",
    "IllegalFormatError",
    "Machine",
    "Netrc",
    "NetrcParseError",
    "Position",
    "__version__",
    "parse",
]
