"""Tests for the counter display helpers."""

from __future__ import annotations

import pytest

from switchshow.counters.rates import (
    compute_state,
    counter_string,
    diff_counter,
    field_string,
    format_byte_rate,
    format_utilization,
    sum_fields,
)
from switchshow.models.counters import MISSING_VALUE


class TestFormatByteRate:
    """Unit selection follows 10 KB and 10 MB thresholds."""

    @pytest.mark.parametrize(
        "rate, expected",
        [
            ("0", "0.00 B/s"),
            ("5000", "5000.00 B/s"),
            ("10000", "10000.00 B/s"),
            ("10001", "10.00 KB/s"),
            ("20000", "20.00 KB/s"),
            ("10000000", "10000.00 KB/s"),
            ("12345678", "12.35 MB/s"),
            ("1.5e8", "150.00 MB/s"),
        ],
    )
    def test_units(self, rate, expected):
        assert format_byte_rate(rate) == expected

    @pytest.mark.parametrize("rate", [MISSING_VALUE, "", "fast"])
    def test_unusable(self, rate):
        assert format_byte_rate(rate) == MISSING_VALUE


class TestFormatUtilization:
    """Utilization is the byte rate as a share of line rate (speed in Mbps)."""

    def test_percentage(self):
        # 100G port: 12.5e9 bytes/s line rate
        assert format_utilization("1250000000", "100000") == "10.00%"

    def test_small_share_rounds(self):
        assert format_utilization("5000", "100000") == "0.00%"

    @pytest.mark.parametrize(
        "rate, speed",
        [
            (MISSING_VALUE, "100000"),
            ("1000", MISSING_VALUE),
            ("1000", "0"),
            ("1000", "auto"),
            ("garbage", "100000"),
        ],
    )
    def test_unusable(self, rate, speed):
        assert format_utilization(rate, speed) == MISSING_VALUE


class TestComputeState:
    """Single-letter port state."""

    @pytest.mark.parametrize(
        "entry, expected",
        [
            ({"admin_status": "up", "oper_status": "up"}, "U"),
            ({"admin_status": "up", "oper_status": "down"}, "D"),
            ({"admin_status": "down", "oper_status": "down"}, "X"),
            ({"admin_status": "up"}, "X"),
            ({}, "X"),
        ],
    )
    def test_states(self, entry, expected):
        assert compute_state({"Ethernet0": entry}, "Ethernet0") == expected

    def test_unknown_interface(self):
        assert compute_state({}, "Ethernet0") == "X"


class TestFieldHelpers:
    """Raw field access, sums, and differences."""

    TABLE = {"Ethernet0": {"a": "3", "b": 4, "c": "x"}}

    def test_field_string(self):
        assert field_string(self.TABLE, "Ethernet0", "a") == "3"
        assert field_string(self.TABLE, "Ethernet0", "b") == "4"
        assert field_string(self.TABLE, "Ethernet0", "missing") == MISSING_VALUE
        assert field_string(self.TABLE, "Ethernet4", "a") == MISSING_VALUE

    def test_counter_string(self):
        assert counter_string(self.TABLE, "Ethernet0", "a") == "3"
        assert counter_string(self.TABLE, "Ethernet0", "b") == "4"
        assert counter_string(self.TABLE, "Ethernet0", "c") == MISSING_VALUE
        assert counter_string(self.TABLE, "Ethernet0", "missing") == MISSING_VALUE

    def test_sum_fields(self):
        assert sum_fields(self.TABLE, "Ethernet0", "a", "b") == "7"

    def test_sum_fields_any_unusable_addend(self):
        """A missing or non-numeric addend makes the whole sum unavailable."""
        assert sum_fields(self.TABLE, "Ethernet0", "a", "missing") == MISSING_VALUE
        assert sum_fields(self.TABLE, "Ethernet0", "a", "c") == MISSING_VALUE

    @pytest.mark.parametrize(
        "old, new, expected",
        [
            ("100", "150", "50"),
            ("0", "0", "0"),
            ("150", "100", "-50"),
            (MISSING_VALUE, "100", MISSING_VALUE),
            ("100", MISSING_VALUE, MISSING_VALUE),
            ("100", "abc", MISSING_VALUE),
        ],
    )
    def test_diff_counter(self, old, new, expected):
        assert diff_counter(old, new) == expected
