"""Shared fixtures for the switchshow test suite."""

from __future__ import annotations

from fnmatch import fnmatchcase
from unittest.mock import MagicMock

import pytest

from switchshow.settings import ShowSettings
from switchshow.store.base import BaseHostFS, BaseStore
from switchshow.store.memory import MemoryStore


class FakeHostFS(BaseHostFS):
    """In-memory host filesystem keyed by absolute path."""

    def __init__(self, files: dict[str, str | bytes] | None = None) -> None:
        self.files = dict(files or {})
        self.reads: list[str] = []
        self.patterns: list[str] = []

    def read_file(self, path: str) -> bytes | None:
        self.reads.append(path)
        data = self.files.get(path)
        if data is None:
            return None
        return data.encode("utf-8") if isinstance(data, str) else data

    def list_files(self, pattern: str) -> list[str]:
        self.patterns.append(pattern)
        return sorted(p for p in self.files if fnmatchcase(p, pattern))


# ── store fixtures ────────────────────────────────────────────────────


@pytest.fixture()
def settings():
    """Settings with the stock host paths and a 60s period limit."""
    return ShowSettings(max_period=60, etc_dir="/etc/sonic", device_dir="/usr/share/sonic/device")


@pytest.fixture()
def make_store():
    """Factory fixture returning a MemoryStore from nested table data."""

    def _make(data=None, aliases=None) -> MemoryStore:
        return MemoryStore(data or {}, aliases=aliases)

    return _make


@pytest.fixture()
def mock_store():
    """MagicMock of BaseStore whose fetch() answers from a selector dict.

    Set ``mock_store.tables[(store, table, *keys)] = rows``; unknown
    selectors return an empty mapping.
    """
    store = MagicMock(spec=BaseStore)
    store.tables = {}
    store.fetch.side_effect = lambda *selector: dict(store.tables.get(tuple(selector), {}))
    store.alias_to_name.return_value = {}
    return store


@pytest.fixture()
def hostfs():
    """Empty FakeHostFS; tests add files via ``hostfs.files[path] = text``."""
    return FakeHostFS()


@pytest.fixture()
def base_ports():
    """CONFIG_DB PORT rows with inline aliases for three front-panel ports."""
    return {
        "Ethernet80": {"alias": "etp20", "speed": "100000", "admin_status": "up"},
        "Ethernet0": {"alias": "etp0", "speed": "100000", "admin_status": "up"},
        "Ethernet40": {"alias": "etp10", "speed": "100000", "admin_status": "up"},
    }


@pytest.fixture()
def counters_data():
    """Factory fixture returning store data for a two-port counters snapshot."""

    def _make(**overrides):
        counters = {
            "Ethernet0": {
                "SAI_PORT_STAT_IF_IN_UCAST_PKTS": "100",
                "SAI_PORT_STAT_IF_IN_NON_UCAST_PKTS": "20",
                "SAI_PORT_STAT_IF_IN_ERRORS": "1",
                "SAI_PORT_STAT_IF_IN_DISCARDS": "2",
                "SAI_PORT_STAT_ETHER_RX_OVERSIZE_PKTS": "3",
                "SAI_PORT_STAT_IF_OUT_UCAST_PKTS": "200",
                "SAI_PORT_STAT_IF_OUT_NON_UCAST_PKTS": "40",
                "SAI_PORT_STAT_IF_OUT_ERRORS": "4",
                "SAI_PORT_STAT_IF_OUT_DISCARDS": "5",
                "SAI_PORT_STAT_ETHER_TX_OVERSIZE_PKTS": "6",
            },
            "Ethernet4": {
                "SAI_PORT_STAT_IF_IN_UCAST_PKTS": "7",
                "SAI_PORT_STAT_IF_IN_NON_UCAST_PKTS": "0",
                "SAI_PORT_STAT_IF_OUT_UCAST_PKTS": "9",
                "SAI_PORT_STAT_IF_OUT_NON_UCAST_PKTS": "1",
            },
        }
        rates = {
            "Ethernet0": {"RX_BPS": "12500000", "TX_BPS": "5000"},
            "Ethernet4": {"RX_BPS": "20000", "TX_BPS": "garbage"},
        }
        port_table = {
            "Ethernet0": {"admin_status": "up", "oper_status": "up", "speed": "100000"},
            "Ethernet4": {"admin_status": "up", "oper_status": "down", "speed": "40000"},
        }
        data = {
            "COUNTERS_DB": {"COUNTERS": counters, "RATES": rates},
            "APPL_DB": {"PORT_TABLE": port_table},
        }
        for key, value in overrides.items():
            store, _, table = key.partition("__")
            data.setdefault(store, {})[table] = value
        return data

    return _make
