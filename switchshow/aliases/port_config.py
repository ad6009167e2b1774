"""Parsers for port_config.ini / port_config.json name-alias data.

Both parsers are best-effort: malformed or empty input yields an empty
NameAliasMap, never an exception.

Tabular (``.ini``) files come in two flavours::

    # name      lanes       alias      index
    Ethernet0   0,1,2,3     etp0       0

where a header row names the columns, and the legacy headerless layout
where the name is column 0 and the alias column 2.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from switchshow.models.interface import NameAliasMap

# Column positions used when a file has no header row
LEGACY_NAME_COLUMN = 0
LEGACY_ALIAS_COLUMN = 2

# A header (or first data row) needs at least name, lanes and alias
_MIN_HEADER_COLUMNS = 3


def _data_lines(text: str) -> list[list[str]]:
    """Split text into whitespace-delimited rows, dropping blanks and comments."""
    rows: list[list[str]] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        rows.append(line.split())
    return rows


def _locate_columns(cols: list[str]) -> tuple[int, int] | None:
    """Return (name_idx, alias_idx) if ``cols`` is a header row."""
    name_idx = alias_idx = -1
    for idx, col in enumerate(cols):
        token = col.strip().lower()
        if token == "name":
            name_idx = idx
        elif token == "alias":
            alias_idx = idx
    if name_idx >= 0 and alias_idx >= 0:
        return name_idx, alias_idx
    return None


def parse_port_config_ini(data: bytes | str) -> NameAliasMap:
    """Parse the whitespace-delimited tabular port_config format."""
    result = NameAliasMap()
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    rows = _data_lines(text)

    # The first wide-enough row decides header vs legacy layout for the whole file
    start = None
    name_idx, alias_idx = LEGACY_NAME_COLUMN, LEGACY_ALIAS_COLUMN
    for i, cols in enumerate(rows):
        if len(cols) < _MIN_HEADER_COLUMNS:
            continue
        header = _locate_columns(cols)
        if header is not None:
            name_idx, alias_idx = header
            start = i + 1
        else:
            start = i
        break

    if start is None:
        return result

    for cols in rows[start:]:
        if len(cols) <= max(name_idx, alias_idx):
            continue
        name = cols[name_idx].strip()
        alias = cols[alias_idx].strip()
        if name and alias:
            result.add(name, alias)
    return result


def parse_port_config_json(data: bytes | str) -> NameAliasMap:
    """Parse the structured ``{"PORT": {name: {"alias": ...}}}`` format."""
    result = NameAliasMap()
    try:
        doc: Any = json.loads(data)
    except (ValueError, TypeError):
        return result

    ports = doc.get("PORT") if isinstance(doc, dict) else None
    if not isinstance(ports, dict):
        return result

    for name, attrs in ports.items():
        if not isinstance(attrs, dict) or attrs.get("alias") is None:
            continue
        alias = str(attrs["alias"])
        if name and alias:
            result.add(name, alias)
    return result


def parse_port_config(path: str, data: bytes | str) -> NameAliasMap:
    """Dispatch on file suffix: ``.json`` is structured, anything else tabular."""
    if path.lower().endswith(".json"):
        return parse_port_config_json(data)
    return parse_port_config_ini(data)


def merge_name_alias_maps(maps: Iterable[NameAliasMap]) -> NameAliasMap:
    """Merge maps in order; entries from later maps win on key collision."""
    merged = NameAliasMap()
    for m in maps:
        merged.name_to_alias.update(m.name_to_alias)
        merged.alias_to_name.update(m.alias_to_name)
    return merged
