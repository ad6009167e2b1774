"""Interface alias resolution from the config store and port_config files."""

from switchshow.aliases.port_config import (
    merge_name_alias_maps,
    parse_port_config,
    parse_port_config_ini,
    parse_port_config_json,
)
from switchshow.aliases.resolver import AliasResolver

__all__ = [
    "AliasResolver",
    "merge_name_alias_maps",
    "parse_port_config",
    "parse_port_config_ini",
    "parse_port_config_json",
]
