"""Private helpers shared by the show handlers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

_NUMERIC_SUFFIX = re.compile(r"^(.*?)(\d+)$")

T = TypeVar("T")


def natsort_key(name: str) -> tuple[str, int, int, str]:
    """Sort key: non-numeric prefix, then numeric suffix compared as an integer.

    'Ethernet2' -> ('Ethernet', 1, 2, 'Ethernet2'). Names without a numeric
    suffix use the whole name as prefix and sort before suffixed siblings.
    """
    m = _NUMERIC_SUFFIX.match(name)
    if m is None:
        return (name, 0, 0, name)
    return (m.group(1), 1, int(m.group(2)), name)


def natsort_interfaces(names: Iterable[str]) -> list[str]:
    """Return interface names in natural order ('Ethernet2' before 'Ethernet40')."""
    return sorted(names, key=natsort_key)


def natsort_mapping(data: Mapping[str, T]) -> dict[str, T]:
    """Return a copy of ``data`` with keys in natural order."""
    return {key: data[key] for key in natsort_interfaces(data)}


def remap_alias_keys(table: Mapping[str, Any], alias_to_name: Mapping[str, str]) -> dict[str, Any]:
    """Re-key rows stored under an alias to their canonical interface name."""
    if not alias_to_name:
        return dict(table)
    return {alias_to_name.get(key, key): value for key, value in table.items()}
