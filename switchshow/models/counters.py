"""Per-interface counter and port health records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

# Placeholder for any field that cannot be read or computed
MISSING_VALUE = "N/A"

# Numeric fields that are differenced between two snapshots
DIFF_FIELDS = ("rx_ok", "rx_err", "rx_drp", "rx_ovr", "tx_ok", "tx_err", "tx_drp", "tx_ovr")


class InterfaceCounters(BaseModel):
    """One interface row of ``show interface counters``."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    state: str = "X"
    rx_ok: str = MISSING_VALUE
    rx_bps: str = MISSING_VALUE
    rx_util: str = MISSING_VALUE
    rx_err: str = MISSING_VALUE
    rx_drp: str = MISSING_VALUE
    rx_ovr: str = MISSING_VALUE
    tx_ok: str = MISSING_VALUE
    tx_bps: str = MISSING_VALUE
    tx_util: str = MISSING_VALUE
    tx_err: str = MISSING_VALUE
    tx_drp: str = MISSING_VALUE
    tx_ovr: str = MISSING_VALUE

    @classmethod
    def zero(cls) -> InterfaceCounters:
        """Baseline used when an interface first appears in a later snapshot."""
        return cls(**{name: "0" for name in DIFF_FIELDS})


class PortErrorRecord(BaseModel):
    """One row of ``show interface errors``."""

    model_config = ConfigDict(populate_by_name=True)

    port_error: str = Field(serialization_alias="Port Errors")
    count: str = Field(default="0", serialization_alias="Count")
    last_timestamp: str = Field(default="Never", serialization_alias="Last timestamp(UTC)")


class FecStatusRecord(BaseModel):
    """One row of ``show interface fec status``."""

    model_config = ConfigDict(populate_by_name=True)

    interface: str = Field(serialization_alias="Interface")
    fec_oper: str = Field(default=MISSING_VALUE, serialization_alias="FEC Oper")
    fec_admin: str = Field(default=MISSING_VALUE, serialization_alias="FEC Admin")
