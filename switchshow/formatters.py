"""JSON and terminal-table formatters for show command results."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from tabulate import tabulate

from switchshow._util import natsort_mapping


def to_payload(result: Any) -> Any:
    """Convert models to plain JSON-ready values; mappings are natural-sorted by key."""
    if isinstance(result, BaseModel):
        return result.model_dump(by_alias=True)
    if isinstance(result, Mapping):
        return {key: to_payload(value) for key, value in natsort_mapping(result).items()}
    if isinstance(result, (list, tuple)):
        return [to_payload(item) for item in result]
    return result


class JsonFormatter:
    """Serialize a result to the compact UTF-8 JSON response payload."""

    def __init__(self, result: Any) -> None:
        self.result = result

    def format(self) -> bytes:
        payload = to_payload(self.result)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class TableFormatter:
    """Render a result as a plain-text table for terminal output.

    Lists of records become one row per record. Mappings of records (the
    counters shape) get their key as a leading ``IFACE`` column.
    """

    def __init__(self, result: Any, tablefmt: str = "simple") -> None:
        self.result = result
        self.tablefmt = tablefmt

    def format(self) -> str:
        payload = to_payload(self.result)

        if isinstance(payload, dict):
            rows = [{"IFACE": key, **value} for key, value in payload.items() if isinstance(value, dict)]
        elif isinstance(payload, list):
            rows = [row for row in payload if isinstance(row, dict)]
        else:
            return str(payload)

        if not rows:
            return ""
        return tabulate(rows, headers="keys", tablefmt=self.tablefmt)
