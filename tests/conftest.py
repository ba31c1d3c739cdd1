import logging
import pytest

from rbdb.core import Core
from rbdb.lib.table import new_table


@pytest.fixture(autouse=True)
def _reset_rbdb_logger(monkeypatch):
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    monkeypatch.delenv('RBDB_CONFIG', raising=False)
    yield
    lg = logging.getLogger('rbdb')
    for h in list(lg.handlers):
        lg.removeHandler(h)
    lg.setLevel(logging.NOTSET)

@pytest.fixture()
def table():
    return new_table()

@pytest.fixture()
def core():
    return Core()
