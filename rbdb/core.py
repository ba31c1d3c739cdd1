"""rbdb/core.py

Session runtime + init_core() wiring.

The Core owns the table for the whole session; nothing else holds it.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from rbdb.lib import table as tbl
from rbdb.model.errors import ParseError
from rbdb.parser import parse_line
from rbdb.topics import execute as execute_command
from rbdb.verbs import DEFAULT_VERBS

log = logging.getLogger("rbdb.core")

DEFAULT_CONFIG_PATH = "config/rbdb.json"

DEFAULT_CONFIG = {
    "prompt": "RBDB -> ",
    "banner": "Database has started...",
    "echo_args": True,
    "exit_words": ["quit", "exit"],
    "log_level": "INFO",
}


class Core:
    def __init__(self, config=None):
        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)

        self.table = tbl.new_table()
        self.verbs = DEFAULT_VERBS
        self.log = []   # journal: [{"in": ...}, {"out"|"err"|"warn": ...}]

    @property
    def exit_words(self):
        return tuple(self.config["exit_words"])

    def is_exit(self, raw: str) -> bool:
        return raw.strip() in self.exit_words

    def execute(self, raw):
        """Run one line against the table.

        Returns the text to print, or None when the line did not parse.
        """
        self.log.append({"in": raw})

        try:
            cmd = parse_line(raw, self.verbs)
        except ParseError as e:
            err = f"Query is malformed: {e}"
            log.error(err)
            self.log.append({"err": err})
            return None

        res = execute_command(cmd, self.table)
        for w in res.warnings:
            log.warning(w.message)
            self.log.append({"warn": w.message})

        self.log.append({"out": res.text})
        return res.text


# ---------- config ----------
def _check_types(cfg):
    out = {}
    for key, value in cfg.items():
        if key not in DEFAULT_CONFIG:
            log.debug("Ignoring unknown config key: %s", key)
            continue
        default = DEFAULT_CONFIG[key]
        if key == "exit_words":
            ok = isinstance(value, list) and all(isinstance(x, str) for x in value)
        else:
            ok = isinstance(value, type(default))
        if not ok:
            log.warning("Config key %s has wrong type, using default %r", key, default)
            continue
        out[key] = value
    return out


def load_config(path=None):
    p = Path(path or os.environ.get("RBDB_CONFIG") or DEFAULT_CONFIG_PATH)
    if not p.exists():
        return {}
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Could not read config %s: %s", p, e)
        return {}
    if not isinstance(raw, dict):
        log.warning("Config %s must be a JSON object", p)
        return {}
    return _check_types(raw)


def init_core(config_path=None):
    cfg = load_config(config_path)
    core = Core(cfg)
    log.debug("Session core ready (config=%s)", cfg or "defaults")
    return core
