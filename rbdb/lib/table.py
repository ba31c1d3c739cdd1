# rbdb/lib/table.py
# Store-based primitives (no Core dependency).
# store shape: store[key] = value   (both str)

from typing import Dict, Optional

Table = Dict[str, str]

def new_table() -> Table:
    return {}

def kv_has(store: Table, key: str) -> bool:
    return key in store

def kv_get(store: Table, key: str) -> Optional[str]:
    return store.get(key)

def kv_set(store: Table, key: str, value: str) -> None:
    store[key] = value

def kv_del(store: Table, key: str) -> Optional[str]:
    return store.pop(key, None)
