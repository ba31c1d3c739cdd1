# rbdb/model/schema.py
#
# Value types passed between parser -> executor -> core.
#
# NOTE:
# A Command lives for exactly one input line. Only rbdb.parser builds them;
# handlers may assume key is non-empty but must check value themselves.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from rbdb.model.errors import ExecWarning


class CommandKind(Enum):
    INSERT = "INSERT"
    SELECT = "SELECT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    key: str
    value: Optional[str] = None


@dataclass
class QueryResult:
    """Outcome of one executed command.

    text is the success text (the stored value for SELECT) and stays empty
    when no effectful branch fired. warnings carries every diagnostic raised
    on the way, including the INSERT-over-existing-key case where text is
    still set.
    """

    text: str = ""
    warnings: List[ExecWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings

    def warn(self, w: ExecWarning) -> "QueryResult":
        self.warnings.append(w)
        return self
