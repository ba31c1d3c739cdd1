from rbdb.model.errors import WarningKind
from rbdb.model.schema import Command, CommandKind
from rbdb.topics import ALL_COMMANDS, execute

INS, SEL, UPD, DEL = CommandKind.INSERT, CommandKind.SELECT, CommandKind.UPDATE, CommandKind.DELETE


def kinds(res):
    return [w.kind for w in res.warnings]

def test_registry_covers_every_kind():
    assert set(ALL_COMMANDS) == set(CommandKind)
    assert all(callable(h) for h in ALL_COMMANDS.values())

def test_insert_query(table):
    res = execute(Command(INS, 'some_key', 'some_value'), table)
    assert res.text == 'SUCCESS: Inserted some_key:some_value into database'
    assert res.ok
    assert table == {'some_key': 'some_value'}

def test_insert_existing_warns_and_overwrites(table):
    table['k'] = 'old'
    res = execute(Command(INS, 'k', 'new'), table)
    assert res.text == 'SUCCESS: Inserted k:new into database'
    assert kinds(res) == [WarningKind.KEY_EXISTS]
    assert res.warnings[0].message == 'Key k already exists. Use UPDATE query instead'
    assert table['k'] == 'new'

def test_insert_without_value(table):
    res = execute(Command(INS, 'k'), table)
    assert res.text == ''
    assert kinds(res) == [WarningKind.MISSING_VALUE]
    assert str(res.warnings[0]) == 'INSERT requires a value, but none was provided'
    assert table == {}

def test_insert_existing_without_value_keeps_old(table):
    table['k'] = 'old'
    res = execute(Command(INS, 'k'), table)
    assert kinds(res) == [WarningKind.KEY_EXISTS, WarningKind.MISSING_VALUE]
    assert res.text == ''
    assert table['k'] == 'old'

def test_select_query(table):
    table['some_key'] = 'some_value'
    res = execute(Command(SEL, 'some_key'), table)
    assert res.text == 'some_value'
    assert res.ok

def test_select_empty_table(table):
    res = execute(Command(SEL, 'anything'), table)
    assert res.text == ''
    assert kinds(res) == [WarningKind.KEY_NOT_FOUND]
    assert res.warnings[0].message == 'No entry found for key = anything'

def test_update_query(table):
    table['some_key'] = 'some_value'
    res = execute(Command(UPD, 'some_key', 'new_value'), table)
    assert res.text == 'SUCCESS: Updated some_key with new_value'
    assert table['some_key'] == 'new_value'

def test_update_missing_key(table):
    res = execute(Command(UPD, 'k', 'v'), table)
    assert kinds(res) == [WarningKind.KEY_NOT_FOUND]
    assert res.text == ''
    assert table == {}

def test_update_missing_key_and_value_reports_key_only(table):
    res = execute(Command(UPD, 'k'), table)
    assert kinds(res) == [WarningKind.KEY_NOT_FOUND]

def test_update_without_value(table):
    table['k'] = 'v'
    res = execute(Command(UPD, 'k'), table)
    assert kinds(res) == [WarningKind.MISSING_VALUE]
    assert res.warnings[0].message == 'UPDATE requires a value, but none was provided'
    assert table['k'] == 'v'

def test_delete_query(table):
    table['some_key'] = 'some_value'
    res = execute(Command(DEL, 'some_key'), table)
    assert res.text == 'SUCCESS: Deleted some_key'
    assert table == {}

def test_delete_twice(table):
    table['k'] = 'v'
    execute(Command(DEL, 'k'), table)
    res = execute(Command(DEL, 'k'), table)
    assert res.text == ''
    assert kinds(res) == [WarningKind.KEY_NOT_FOUND]

def test_delete_key_with_empty_value(table):
    table['k'] = ''
    res = execute(Command(DEL, 'k'), table)
    assert res.text == 'SUCCESS: Deleted k'

def test_insert_select_roundtrip(table):
    execute(Command(INS, 'a', '1'), table)
    assert execute(Command(SEL, 'a'), table).text == '1'

def test_update_changes_value(table):
    execute(Command(INS, 'a', '1'), table)
    execute(Command(UPD, 'a', '2'), table)
    assert execute(Command(SEL, 'a'), table).text == '2'

def test_delete_then_select(table):
    execute(Command(INS, 'a', '1'), table)
    execute(Command(DEL, 'a'), table)
    res = execute(Command(SEL, 'a'), table)
    assert res.text == ''
    assert kinds(res) == [WarningKind.KEY_NOT_FOUND]
