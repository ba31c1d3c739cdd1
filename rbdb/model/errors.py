# rbdb/model/errors.py
#
# Two disjoint failure categories:
#   ParseError   raised by the parser, line never reaches the table
#   ExecWarning  returned by the executor, session always continues

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ParseErrorKind(Enum):
    NOT_ENOUGH_ARGUMENTS = "not enough arguments"
    INVALID_COMMAND_TYPE = "invalid command type"


class ParseError(ValueError):
    def __init__(self, kind: ParseErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)


class WarningKind(Enum):
    KEY_NOT_FOUND = "key_not_found"
    KEY_EXISTS = "key_exists"
    MISSING_VALUE = "missing_value"


@dataclass(frozen=True)
class ExecWarning:
    kind: WarningKind
    message: str

    def __str__(self) -> str:
        return self.message


def key_not_found(key: str) -> ExecWarning:
    return ExecWarning(WarningKind.KEY_NOT_FOUND, f"No entry found for key = {key}")


def key_exists(key: str) -> ExecWarning:
    return ExecWarning(
        WarningKind.KEY_EXISTS,
        f"Key {key} already exists. Use UPDATE query instead",
    )


def missing_value(verb: str) -> ExecWarning:
    return ExecWarning(
        WarningKind.MISSING_VALUE,
        f"{verb} requires a value, but none was provided",
    )
