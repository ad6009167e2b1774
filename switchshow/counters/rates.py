"""Pure helpers turning raw counter fields into display strings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from switchshow.models.counters import MISSING_VALUE
from switchshow.models.value import FieldValue, get_field

KB_THRESHOLD = 10 * 1e3
MB_THRESHOLD = 10 * 1e6


def format_byte_rate(rate: str) -> str:
    """Scale a bytes-per-second value to B/s, KB/s or MB/s.

    >>> format_byte_rate("12345678")
    '12.35 MB/s'
    """
    value = FieldValue(rate).as_float() if rate != MISSING_VALUE else None
    if value is None:
        return MISSING_VALUE

    if value > MB_THRESHOLD:
        formatted = f"{value / 1e6:.2f} MB"
    elif value > KB_THRESHOLD:
        formatted = f"{value / 1e3:.2f} KB"
    else:
        formatted = f"{value:.2f} B"
    return formatted + "/s"


def format_utilization(rate: str, port_speed: str) -> str:
    """Percentage of line rate used; ``port_speed`` is in Mbps."""
    if rate == MISSING_VALUE or port_speed == MISSING_VALUE:
        return MISSING_VALUE

    byte_rate = FieldValue(rate).as_float()
    speed = FieldValue(port_speed).as_float()
    if byte_rate is None or not speed:
        return MISSING_VALUE

    util = byte_rate / (speed * 1e6 / 8.0) * 100.0
    return f"{util:.2f}%"


def compute_state(port_table: Mapping[str, Any], interface: str) -> str:
    """'U' up, 'D' admin-up but oper-down, 'X' disabled or unknown."""
    entry = port_table.get(interface)
    if not isinstance(entry, Mapping):
        return "X"

    admin = FieldValue(entry.get("admin_status")).as_str()
    oper = FieldValue(entry.get("oper_status")).as_str()
    if admin == "up" and oper == "up":
        return "U"
    if admin == "up" and oper == "down":
        return "D"
    return "X"


def field_string(table: Mapping[str, Any], interface: str, field: str) -> str:
    """Raw field as a string, or the missing-value placeholder."""
    value = get_field(table, interface, field)
    return value.as_str() if value.present else MISSING_VALUE


def counter_string(table: Mapping[str, Any], interface: str, field: str) -> str:
    """Integer counter as a string; absent or non-integer values yield the placeholder."""
    value = get_field(table, interface, field).as_int()
    return MISSING_VALUE if value is None else str(value)


def sum_fields(table: Mapping[str, Any], interface: str, *fields: str) -> str:
    """Sum integer fields; any absent or non-integer addend yields the placeholder."""
    total = 0
    for field in fields:
        value = get_field(table, interface, field).as_int()
        if value is None:
            return MISSING_VALUE
        total += value
    return str(total)


def diff_counter(old: str, new: str) -> str:
    """``new - old`` for integer counter strings; placeholder if either is unusable."""
    if old == MISSING_VALUE or new == MISSING_VALUE:
        return MISSING_VALUE
    old_value = FieldValue(old).as_int()
    new_value = FieldValue(new).as_int()
    if old_value is None or new_value is None:
        return MISSING_VALUE
    return str(new_value - old_value)
