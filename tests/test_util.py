"""Tests for natural ordering and alias re-keying helpers."""

from __future__ import annotations

from switchshow._util import natsort_interfaces, natsort_key, natsort_mapping, remap_alias_keys


class TestNatsort:
    """Natural interface ordering."""

    def test_numeric_suffix(self):
        names = ["Ethernet80", "Ethernet8", "Ethernet0", "Ethernet100", "Ethernet40"]
        assert natsort_interfaces(names) == ["Ethernet0", "Ethernet8", "Ethernet40", "Ethernet80", "Ethernet100"]

    def test_prefix_groups(self):
        names = ["PortChannel2", "Ethernet4", "Ethernet-IB0", "Ethernet0"]
        assert natsort_interfaces(names) == ["Ethernet0", "Ethernet4", "Ethernet-IB0", "PortChannel2"]

    def test_name_without_suffix_sorts_first(self):
        assert natsort_interfaces(["eth1", "eth"]) == ["eth", "eth1"]

    def test_key_shape(self):
        assert natsort_key("Ethernet2") == ("Ethernet", 1, 2, "Ethernet2")
        assert natsort_key("mgmt") == ("mgmt", 0, 0, "mgmt")

    def test_leading_zeros_stable(self):
        """Equal numeric values are ordered by full name."""
        assert natsort_interfaces(["Ethernet01", "Ethernet1"]) == ["Ethernet01", "Ethernet1"]

    def test_mapping(self):
        data = {"Ethernet12": 1, "Ethernet2": 2}
        assert list(natsort_mapping(data)) == ["Ethernet2", "Ethernet12"]


class TestRemapAliasKeys:
    """Re-keying rows stored under aliases."""

    def test_remap(self):
        table = {"etp0": {"a": 1}, "Ethernet4": {"a": 2}}
        assert remap_alias_keys(table, {"etp0": "Ethernet0"}) == {"Ethernet0": {"a": 1}, "Ethernet4": {"a": 2}}

    def test_empty_map_copies(self):
        table = {"Ethernet0": {}}
        result = remap_alias_keys(table, {})
        assert result == table
        assert result is not table
