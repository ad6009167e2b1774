"""Forward error correction status (``show interface fec status``)."""

from __future__ import annotations

from loguru import logger

from switchshow._util import natsort_interfaces, remap_alias_keys
from switchshow.exceptions import InterfaceNotFoundError, StoreFetchError
from switchshow.models.counters import MISSING_VALUE, FecStatusRecord
from switchshow.models.value import FieldValue
from switchshow.store.base import APPL_DB, CONFIG_DB, STATE_DB, BaseStore


def get_front_panel_ports(store: BaseStore, interface: str | None = None) -> list[str]:
    """Return CONFIG_DB PORT names, or just ``interface`` if it is one of them."""
    try:
        ports = remap_alias_keys(store.fetch(CONFIG_DB, "PORT"), store.alias_to_name())
    except StoreFetchError as e:
        logger.error(f"Failed to get front panel ports: {e}")
        raise

    if interface:
        if interface not in ports:
            raise InterfaceNotFoundError(interface)
        return [interface]
    return list(ports)


def get_fec_status(store: BaseStore, interface: str | None = None) -> list[FecStatusRecord]:
    """Admin FEC from APPL_DB and oper FEC from STATE_DB, per front-panel port.

    Oper FEC is only meaningful on a port that is operationally up; for any
    other port it is reported as N/A.
    """
    records: list[FecStatusRecord] = []
    for port in natsort_interfaces(get_front_panel_ports(store, interface)):
        try:
            appl = store.fetch(APPL_DB, "PORT_TABLE", port)
            state = store.fetch(STATE_DB, "PORT_TABLE", port)
        except StoreFetchError as e:
            logger.error(f"Failed to get FEC status for port {port}: {e}")
            raise

        oper_status = FieldValue(appl.get("oper_status")).as_str(MISSING_VALUE)
        fec_oper = FieldValue(state.get("fec")).as_str(MISSING_VALUE)
        records.append(
            FecStatusRecord(
                interface=port,
                fec_oper=fec_oper if oper_status == "up" else MISSING_VALUE,
                fec_admin=FieldValue(appl.get("fec")).as_str(MISSING_VALUE),
            )
        )
    return records
