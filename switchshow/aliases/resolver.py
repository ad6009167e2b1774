"""Interface name/alias resolution across the config store and port_config files."""

from __future__ import annotations

import posixpath
from collections.abc import Mapping
from typing import Any

from loguru import logger

from switchshow._util import natsort_interfaces, remap_alias_keys
from switchshow.aliases.port_config import merge_name_alias_maps, parse_port_config
from switchshow.exceptions import InterfaceNotFoundError, StoreFetchError
from switchshow.models.interface import InterfaceAlias, NameAliasMap, PlatformIdentity
from switchshow.models.value import FieldValue
from switchshow.settings import ShowSettings, get_settings
from switchshow.store.base import CONFIG_DB, COUNTERS_DB, BaseHostFS, BaseStore


def _inline_alias(entry: Any) -> str | None:
    if isinstance(entry, Mapping) and entry.get("alias") is not None:
        return FieldValue(entry["alias"]).as_str()
    return None


class AliasResolver:
    """Build the canonical interface list and its display aliases.

    Precedence, highest first: an ``alias`` field on CONFIG_DB PORT entries
    (when any entry has one, files are not consulted at all), then
    ``/etc/sonic`` port_config files, then per-platform/hwsku files, then
    per-ASIC files found by globbing, which are merged last and so win ties.
    Nothing is cached; every call re-reads the store and the files.
    """

    def __init__(self, store: BaseStore, hostfs: BaseHostFS, settings: ShowSettings | None = None) -> None:
        self._store = store
        self._hostfs = hostfs
        self._settings = settings or get_settings()

    # ── store reads ────────────────────────────────────────────────────

    def read_port_table(self) -> dict[str, Any]:
        try:
            return self._store.fetch(CONFIG_DB, "PORT")
        except StoreFetchError as e:
            logger.error(f"Failed to get ports from CONFIG_DB: {e}")
            raise

    def read_platform_identity(self) -> PlatformIdentity:
        """Return (platform, hwsku); both empty if DEVICE_METADATA is unreadable."""
        try:
            metadata = self._store.fetch(CONFIG_DB, "DEVICE_METADATA", "localhost")
        except StoreFetchError as e:
            logger.debug(f"DEVICE_METADATA unavailable, skipping device port_config files: {e}")
            return PlatformIdentity()
        return PlatformIdentity(
            platform=FieldValue(metadata.get("platform")).as_str(),
            hwsku=FieldValue(metadata.get("hwsku")).as_str(),
        )

    def _warm_up(self) -> None:
        # Reading RATES primes the store layer's alias map; failure is harmless
        try:
            self._store.fetch(COUNTERS_DB, "RATES", "Ethernet*")
        except StoreFetchError as e:
            logger.debug(f"Alias map warm-up read failed: {e}")

    # ── port_config files ──────────────────────────────────────────────

    def port_config_paths(self, identity: PlatformIdentity) -> list[str]:
        """Candidate files in merge order (lowest precedence first)."""
        etc_dir = self._settings.etc_dir
        paths = [
            posixpath.join(etc_dir, "port_config.ini"),
            posixpath.join(etc_dir, "port_config.json"),
        ]
        if not identity.is_complete:
            return paths

        platform_dir = posixpath.join(self._settings.device_dir, identity.platform)
        sku_dir = posixpath.join(platform_dir, identity.hwsku)
        paths += [
            posixpath.join(sku_dir, "port_config.ini"),
            posixpath.join(sku_dir, "port_config.json"),
            posixpath.join(platform_dir, "port_config.ini"),
            posixpath.join(platform_dir, "port_config.json"),
        ]
        for pattern in (
            posixpath.join(sku_dir, "port_config*.ini"),
            posixpath.join(sku_dir, "port_config*.json"),
            posixpath.join(sku_dir, "*", "port_config*.ini"),
            posixpath.join(sku_dir, "*", "port_config*.json"),
        ):
            paths += self._hostfs.list_files(pattern)
        return paths

    def load_file_map(self) -> NameAliasMap:
        """Merge every readable port_config file into one NameAliasMap."""
        paths = self.port_config_paths(self.read_platform_identity())
        maps: list[NameAliasMap] = []
        for path in paths:
            data = self._hostfs.read_file(path)
            if not data:
                continue
            maps.append(parse_port_config(path, data))

        merged = merge_name_alias_maps(maps)
        logger.debug(f"port_config aliases loaded: {len(merged)} entries (files tried: {len(paths)}, loaded: {len(maps)})")
        return merged

    # ── resolution ─────────────────────────────────────────────────────

    def resolve(self, interface: str | None = None) -> list[InterfaceAlias]:
        """Return ``{Name, Alias}`` records, natural-sorted unless filtered.

        Args:
            interface: Optional interface name or alias to select.

        Raises:
            InterfaceNotFoundError: If ``interface`` matches nothing.
            StoreFetchError: If the PORT table cannot be read.
        """
        port_entries = self.read_port_table()
        self._warm_up()
        port_entries = remap_alias_keys(port_entries, self._store.alias_to_name())

        inline = NameAliasMap()
        for name, entry in port_entries.items():
            alias = _inline_alias(entry)
            if alias is not None:
                inline.add(name, alias)

        if inline:
            file_map = NameAliasMap()
            lookup = inline
        else:
            file_map = self.load_file_map()
            port_entries = remap_alias_keys(port_entries, file_map.alias_to_name)
            lookup = file_map

        if interface:
            names = [self._select(interface, port_entries, file_map, lookup)]
        else:
            names = natsort_interfaces(set(port_entries) | set(file_map.name_to_alias))

        return [InterfaceAlias(name=name, alias=self._alias_for(name, port_entries, file_map)) for name in names]

    @staticmethod
    def _select(
        interface: str,
        port_entries: Mapping[str, Any],
        file_map: NameAliasMap,
        lookup: NameAliasMap,
    ) -> str:
        if interface in port_entries:
            return interface

        name = lookup.alias_to_name.get(interface)
        if name is not None and (name in port_entries or name in file_map.name_to_alias):
            return name

        # Ports defined only in port_config (inband, recirculation)
        if interface in file_map.name_to_alias:
            return interface

        raise InterfaceNotFoundError(interface)

    @staticmethod
    def _alias_for(name: str, port_entries: Mapping[str, Any], file_map: NameAliasMap) -> str:
        alias = _inline_alias(port_entries.get(name))
        if alias is not None:
            return alias
        return file_map.name_to_alias.get(name) or name
