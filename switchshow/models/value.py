"""Tolerant accessors for untyped backing-store values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class FieldValue:
    """Wrap a raw store value and read it without ever raising.

    Store rows come back as loosely typed mappings: a counter may be an int,
    a numeric string, bytes, or absent altogether. Each accessor returns the
    caller's default when the value cannot be interpreted.
    """

    __slots__ = ("raw",)

    def __init__(self, raw: Any = None) -> None:
        self.raw = raw

    def __repr__(self) -> str:
        return f"FieldValue({self.raw!r})"

    @property
    def present(self) -> bool:
        return self.raw is not None

    def as_str(self, default: str = "") -> str:
        if self.raw is None:
            return default
        if isinstance(self.raw, bytes):
            return self.raw.decode("utf-8", errors="replace")
        return str(self.raw)

    def _numeric_text(self) -> str:
        text = self.as_str().strip()
        # Digit separators such as "1_000" are not valid counter text
        if "_" in text:
            raise ValueError(text)
        return text

    def as_int(self, default: int | None = None) -> int | None:
        if self.raw is None or isinstance(self.raw, bool):
            return default
        if isinstance(self.raw, int):
            return self.raw
        try:
            return int(self._numeric_text())
        except ValueError:
            return default

    def as_float(self, default: float | None = None) -> float | None:
        if self.raw is None or isinstance(self.raw, bool):
            return default
        if isinstance(self.raw, (int, float)):
            return float(self.raw)
        try:
            return float(self._numeric_text())
        except ValueError:
            return default

    def as_str_list(self) -> list[str]:
        """Return a list of strings; comma-separated strings are split."""
        if self.raw is None:
            return []
        if isinstance(self.raw, (list, tuple)):
            return [FieldValue(v).as_str() for v in self.raw if v is not None]
        return [part.strip() for part in self.as_str().split(",") if part.strip()]


def get_field(table: Mapping[str, Any] | None, key: str, field: str) -> FieldValue:
    """Look up ``table[key][field]`` returning an empty FieldValue on any miss."""
    if not isinstance(table, Mapping):
        return FieldValue()
    entry = table.get(key)
    if not isinstance(entry, Mapping):
        return FieldValue()
    return FieldValue(entry.get(field))
