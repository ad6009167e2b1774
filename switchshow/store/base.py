"""Abstract seams to the backing stores and the host filesystem."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

# ── Store names ────────────────────────────────────────────────────────
CONFIG_DB = "CONFIG_DB"
STATE_DB = "STATE_DB"
APPL_DB = "APPL_DB"
COUNTERS_DB = "COUNTERS_DB"

KNOWN_STORES = frozenset({CONFIG_DB, STATE_DB, APPL_DB, COUNTERS_DB})

# (store, table, *keys); a trailing key may be a wildcard such as "Ethernet*"
Selector = tuple[str, ...]


class BaseStore(ABC):
    """Selector-based read access to the switch's key-value stores."""

    @abstractmethod
    def fetch_fields(self, selectors: Sequence[Selector]) -> dict[str, Any]:
        """Read every selector and merge the results into one mapping.

        A selector naming only store and table returns ``{key: fields}``
        for the whole table. A trailing concrete key returns that row's
        fields; a trailing wildcard key returns ``{matching_key: fields}``.

        Raises:
            StoreFetchError: If any selector cannot be read.
        """

    def fetch(self, *selector: str) -> dict[str, Any]:
        """Shorthand for reading a single selector."""
        return self.fetch_fields([tuple(selector)])

    def alias_to_name(self) -> dict[str, str]:
        """Alias-to-name map maintained by the store layer, if any.

        Deployments running in alias naming mode key some tables by alias;
        rows under those keys are remapped to canonical names with this map.
        """
        return {}


class BaseHostFS(ABC):
    """Read-only view of host configuration files."""

    @abstractmethod
    def read_file(self, path: str) -> bytes | None:
        """Return file contents, or None if the file is missing or unreadable."""

    @abstractmethod
    def list_files(self, pattern: str) -> list[str]:
        """Return the paths matching a glob pattern, in listing order."""
