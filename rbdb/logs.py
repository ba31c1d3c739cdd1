# rbdb/logs.py
#
# Diagnostic stream for the shell. Everything the user should see besides
# query results (parse failures, warnings) goes through the "rbdb" logger
# to stderr with a bare message format.
#
# Only DEBUG/INFO chatter is configurable: the level never rises above
# WARNING, so parse failures and execution warnings always reach stderr.

import logging
import os
import sys

LOGGER_NAME = "rbdb"
DEFAULT_LEVEL = "INFO"

log = logging.getLogger(LOGGER_NAME)


def resolve_level(level=None) -> int:
    raw = os.environ.get("LOG_LEVEL") or level or DEFAULT_LEVEL
    lvl = logging.getLevelName(str(raw).upper())
    if not isinstance(lvl, int):
        return logging.INFO
    return min(lvl, logging.WARNING)


def setup_logging(level=None, stream=None) -> logging.Logger:
    """Attach one stderr handler to the rbdb logger, replacing any previous one."""
    for h in list(log.handlers):
        log.removeHandler(h)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(resolve_level(level))
    return log
