# rbdb/verbs.py
#
# Verb table: token0 of a line -> CommandKind.
# Matching is case-insensitive (token is uppercased first); key/value tokens
# are never touched here.

from rbdb.model.schema import CommandKind

VERBS = {
    "INSERT": CommandKind.INSERT,
    "SELECT": CommandKind.SELECT,
    "UPDATE": CommandKind.UPDATE,
    "DELETE": CommandKind.DELETE,
}


class VerbTable:
    def __init__(self, verbs):
        self.verbs = {k.upper(): v for k, v in verbs.items()}

    def resolve(self, name: str):
        return self.verbs.get(name.upper())


DEFAULT_VERBS = VerbTable(VERBS)
