"""In-memory store backed by a nested ``{store: {table: {key: fields}}}`` dict."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any

from loguru import logger

from switchshow.exceptions import StoreFetchError
from switchshow.store.base import KNOWN_STORES, BaseStore, Selector

_WILDCARD_CHARS = frozenset("*?[")


class MemoryStore(BaseStore):
    """Serve selector reads from a static snapshot of the switch stores.

    Used by the CLI to answer show commands from a JSON dump, and by the
    test suite as a realistic stand-in for the live store layer.
    """

    def __init__(
        self,
        data: Mapping[str, Mapping[str, Mapping[str, Any]]] | None = None,
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self._data: dict[str, dict[str, dict[str, Any]]] = {
            store: {table: dict(rows) for table, rows in tables.items()} for store, tables in (data or {}).items()
        }
        self._aliases = dict(aliases or {})

    @classmethod
    def from_json_file(cls, path: str | Path, aliases: Mapping[str, str] | None = None) -> MemoryStore:
        """Load a dump file shaped ``{"CONFIG_DB": {"PORT": {"Ethernet0": {...}}}}``."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreFetchError(f"Unable to load store dump {path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreFetchError(f"Store dump {path} must contain a JSON object")
        logger.debug(f"Loaded store dump {path} ({', '.join(sorted(data))})")
        return cls(data, aliases=aliases)

    def alias_to_name(self) -> dict[str, str]:
        return dict(self._aliases)

    def fetch_fields(self, selectors: Sequence[Selector]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for selector in selectors:
            result.update(self._fetch_one(tuple(selector)))
        return result

    def _fetch_one(self, selector: Selector) -> dict[str, Any]:
        if len(selector) < 2:
            raise StoreFetchError(f"Selector {list(selector)} must name a store and a table", selector)

        store, table, *keys = selector
        if store not in KNOWN_STORES:
            raise StoreFetchError(f"Unknown store {store}", selector)

        rows = self._data.get(store, {}).get(table, {})
        if not keys:
            return {key: _copy_row(fields) for key, fields in rows.items()}

        key = keys[0]
        if _WILDCARD_CHARS.intersection(key):
            return {k: _copy_row(fields) for k, fields in rows.items() if fnmatchcase(k, key)}
        return _copy_row(rows.get(key, {}))


def _copy_row(fields: Any) -> Any:
    return dict(fields) if isinstance(fields, Mapping) else fields
