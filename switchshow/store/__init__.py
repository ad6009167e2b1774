"""Backing-store and host filesystem access."""

from switchshow.store.base import (
    APPL_DB,
    CONFIG_DB,
    COUNTERS_DB,
    STATE_DB,
    BaseHostFS,
    BaseStore,
    Selector,
)
from switchshow.store.hostfs import LocalHostFS
from switchshow.store.memory import MemoryStore

__all__ = [
    "APPL_DB",
    "CONFIG_DB",
    "COUNTERS_DB",
    "STATE_DB",
    "BaseHostFS",
    "BaseStore",
    "LocalHostFS",
    "MemoryStore",
    "Selector",
]
