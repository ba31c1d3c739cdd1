# rbdb/topics/__init__.py
#
# Table Executor: routes a Command to its handler in ALL_COMMANDS.

from rbdb.model.schema import Command, QueryResult
from rbdb.topics.queries import COMMANDS as _QUERY_COMMANDS

ALL_COMMANDS = {}
ALL_COMMANDS.update(_QUERY_COMMANDS)


def execute(command: Command, table) -> QueryResult:
    handler = ALL_COMMANDS[command.kind]
    return handler(table, command)
