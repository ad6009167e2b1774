"""Data models for show command results."""

from switchshow.models.counters import (
    DIFF_FIELDS,
    MISSING_VALUE,
    FecStatusRecord,
    InterfaceCounters,
    PortErrorRecord,
)
from switchshow.models.interface import InterfaceAlias, NameAliasMap, PlatformIdentity
from switchshow.models.value import FieldValue, get_field

__all__ = [
    "DIFF_FIELDS",
    "MISSING_VALUE",
    "FecStatusRecord",
    "FieldValue",
    "InterfaceAlias",
    "InterfaceCounters",
    "NameAliasMap",
    "PlatformIdentity",
    "PortErrorRecord",
    "get_field",
]
