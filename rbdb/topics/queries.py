# rbdb/topics/queries.py
#
# One handler per CommandKind. Each handler is a single check-then-act step
# against the table and never raises for an inapplicable command: problems
# are attached to the QueryResult as warnings.
#
# INSERT over an existing key warns and still overwrites.

from rbdb.lib import table as tbl
from rbdb.model import errors
from rbdb.model.schema import CommandKind, QueryResult


def insert(table, cmd):
    res = QueryResult()
    if tbl.kv_has(table, cmd.key):
        res.warn(errors.key_exists(cmd.key))

    if cmd.value is None:
        return res.warn(errors.missing_value("INSERT"))

    tbl.kv_set(table, cmd.key, cmd.value)
    res.text = f"SUCCESS: Inserted {cmd.key}:{cmd.value} into database"
    return res


def select(table, cmd):
    value = tbl.kv_get(table, cmd.key)
    if value is None:
        return QueryResult().warn(errors.key_not_found(cmd.key))
    return QueryResult(text=value)


def update(table, cmd):
    if not tbl.kv_has(table, cmd.key):
        return QueryResult().warn(errors.key_not_found(cmd.key))
    if cmd.value is None:
        return QueryResult().warn(errors.missing_value("UPDATE"))

    tbl.kv_set(table, cmd.key, cmd.value)
    return QueryResult(text=f"SUCCESS: Updated {cmd.key} with {cmd.value}")


def delete(table, cmd):
    if tbl.kv_del(table, cmd.key) is None:
        return QueryResult().warn(errors.key_not_found(cmd.key))
    return QueryResult(text=f"SUCCESS: Deleted {cmd.key}")


COMMANDS = {
    CommandKind.INSERT: insert,
    CommandKind.SELECT: select,
    CommandKind.UPDATE: update,
    CommandKind.DELETE: delete,
}
