# rbdb/parser.py
#
# Command Parser: one line of text -> Command.
#
#   <verb> <key> [value] [ignored...]
#
# Pure functions, no Core dependency.

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from rbdb.model.errors import ParseError, ParseErrorKind
from rbdb.model.schema import Command
from rbdb.verbs import DEFAULT_VERBS, VerbTable

# ASCII whitespace only; any other character (NBSP, U+3000, \x0b) belongs to a token
_SEPARATORS = re.compile(r"[ \t\n\x0c\r]+")


def tokenize(line: str) -> List[str]:
    return [t for t in _SEPARATORS.split(line) if t]


def build_command(tokens: Sequence[str], verbs: Optional[VerbTable] = None) -> Command:
    """Build a Command from whitespace-split tokens.

    Raises ParseError when fewer than two tokens are given or when the first
    token names no known verb. Tokens after the value are dropped.
    """
    if len(tokens) < 2:
        raise ParseError(ParseErrorKind.NOT_ENOUGH_ARGUMENTS)

    kind = (verbs or DEFAULT_VERBS).resolve(tokens[0])
    if kind is None:
        raise ParseError(ParseErrorKind.INVALID_COMMAND_TYPE)

    key = tokens[1]
    value = tokens[2] if len(tokens) > 2 else None
    return Command(kind=kind, key=key, value=value)


def parse_line(line: str, verbs: Optional[VerbTable] = None) -> Command:
    return build_command(tokenize(line), verbs)
