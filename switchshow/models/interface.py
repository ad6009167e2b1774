"""Interface identity models: name/alias records and port-config maps."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class InterfaceAlias(BaseModel):
    """One ``{Name, Alias}`` record of ``show interface alias``."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    name: str
    alias: str


class NameAliasMap(BaseModel):
    """Bidirectional name/alias mapping derived from port-config files."""

    name_to_alias: dict[str, str] = Field(default_factory=dict)
    alias_to_name: dict[str, str] = Field(default_factory=dict)

    def add(self, name: str, alias: str) -> None:
        self.name_to_alias[name] = alias
        self.alias_to_name[alias] = name

    def __bool__(self) -> bool:
        return bool(self.name_to_alias or self.alias_to_name)

    def __len__(self) -> int:
        return len(self.name_to_alias)


class PlatformIdentity(BaseModel):
    """(platform, hwsku) pair read from DEVICE_METADATA."""

    platform: str = ""
    hwsku: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.platform and self.hwsku)
