"""Interface counter snapshots and period-based differencing."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from loguru import logger

from switchshow._util import natsort_interfaces, remap_alias_keys
from switchshow.counters.rates import (
    compute_state,
    counter_string,
    diff_counter,
    field_string,
    format_byte_rate,
    format_utilization,
    sum_fields,
)
from switchshow.exceptions import InvalidOptionError, StoreFetchError
from switchshow.models.counters import DIFF_FIELDS, InterfaceCounters
from switchshow.settings import ShowSettings, get_settings
from switchshow.store.base import APPL_DB, COUNTERS_DB, BaseStore, Selector

# ── SAI counter names ──────────────────────────────────────────────────
IN_UCAST_PKTS = "SAI_PORT_STAT_IF_IN_UCAST_PKTS"
IN_NON_UCAST_PKTS = "SAI_PORT_STAT_IF_IN_NON_UCAST_PKTS"
IN_ERRORS = "SAI_PORT_STAT_IF_IN_ERRORS"
IN_DISCARDS = "SAI_PORT_STAT_IF_IN_DISCARDS"
RX_OVERSIZE_PKTS = "SAI_PORT_STAT_ETHER_RX_OVERSIZE_PKTS"
OUT_UCAST_PKTS = "SAI_PORT_STAT_IF_OUT_UCAST_PKTS"
OUT_NON_UCAST_PKTS = "SAI_PORT_STAT_IF_OUT_NON_UCAST_PKTS"
OUT_ERRORS = "SAI_PORT_STAT_IF_OUT_ERRORS"
OUT_DISCARDS = "SAI_PORT_STAT_IF_OUT_DISCARDS"
TX_OVERSIZE_PKTS = "SAI_PORT_STAT_ETHER_TX_OVERSIZE_PKTS"

COUNTERS_SELECTOR: Selector = (COUNTERS_DB, "COUNTERS", "Ethernet*")
RATES_SELECTOR: Selector = (COUNTERS_DB, "RATES", "Ethernet*")
PORT_TABLE_SELECTOR: Selector = (APPL_DB, "PORT_TABLE")


def diff_snapshots(
    old: dict[str, InterfaceCounters],
    new: dict[str, InterfaceCounters],
) -> dict[str, InterfaceCounters]:
    """Subtract ``old`` from ``new`` counter by counter.

    State, rate and utilization fields are taken from ``new`` unchanged.
    Interfaces missing from ``old`` are diffed against an all-zero baseline.
    """
    result: dict[str, InterfaceCounters] = {}
    for iface, current in new.items():
        baseline = old.get(iface) or InterfaceCounters.zero()
        updates = {name: diff_counter(getattr(baseline, name), getattr(current, name)) for name in DIFF_FIELDS}
        result[iface] = current.model_copy(update=updates)
    return result


class CounterEngine:
    """Build ``show interface counters`` records from COUNTERS_DB and APPL_DB."""

    def __init__(self, store: BaseStore, settings: ShowSettings | None = None) -> None:
        self._store = store
        self._settings = settings or get_settings()

    def _fetch(self, selector: Selector) -> dict[str, Any]:
        try:
            rows = self._store.fetch(*selector)
        except StoreFetchError as e:
            logger.error(f"Unable to pull data for {list(selector)}: {e}")
            raise
        return remap_alias_keys(rows, self._store.alias_to_name())

    def validate_period(self, period: int | None) -> None:
        if period is None:
            return
        if period < 0:
            raise InvalidOptionError(f"period value must be >= 0, got {period}")
        if period > self._settings.max_period:
            raise InvalidOptionError(f"period value must be <= {self._settings.max_period}")

    def snapshot(self, interfaces: Sequence[str] | None = None) -> dict[str, InterfaceCounters]:
        """Read counters, rates and port state once and derive display fields."""
        counters = self._fetch(COUNTERS_SELECTOR)
        rates = self._fetch(RATES_SELECTOR)
        port_table = self._fetch(PORT_TABLE_SELECTOR)

        if interfaces:
            # Unknown names are dropped rather than reported
            selected = [iface for iface in dict.fromkeys(interfaces) if iface in counters]
        else:
            selected = list(counters)

        snapshot: dict[str, InterfaceCounters] = {}
        for iface in natsort_interfaces(selected):
            port_speed = field_string(port_table, iface, "speed")
            rx_bps = field_string(rates, iface, "RX_BPS")
            tx_bps = field_string(rates, iface, "TX_BPS")

            snapshot[iface] = InterfaceCounters(
                state=compute_state(port_table, iface),
                rx_ok=sum_fields(counters, iface, IN_UCAST_PKTS, IN_NON_UCAST_PKTS),
                rx_bps=format_byte_rate(rx_bps),
                rx_util=format_utilization(rx_bps, port_speed),
                rx_err=counter_string(counters, iface, IN_ERRORS),
                rx_drp=counter_string(counters, iface, IN_DISCARDS),
                rx_ovr=counter_string(counters, iface, RX_OVERSIZE_PKTS),
                tx_ok=sum_fields(counters, iface, OUT_UCAST_PKTS, OUT_NON_UCAST_PKTS),
                tx_bps=format_byte_rate(tx_bps),
                tx_util=format_utilization(tx_bps, port_speed),
                tx_err=counter_string(counters, iface, OUT_ERRORS),
                tx_drp=counter_string(counters, iface, OUT_DISCARDS),
                tx_ovr=counter_string(counters, iface, TX_OVERSIZE_PKTS),
            )
        return snapshot

    async def get_interface_counters(
        self,
        interfaces: Sequence[str] | None = None,
        period: int | None = None,
    ) -> dict[str, InterfaceCounters]:
        """Return one snapshot, or the difference over ``period`` seconds.

        Cancelling the awaiting task during the pause abandons the request
        before the second snapshot is taken.

        Raises:
            InvalidOptionError: If ``period`` is negative or above ``max_period``.
            StoreFetchError: If any of the three tables cannot be read.
        """
        self.validate_period(period)

        old = self.snapshot(interfaces)
        if period is None:
            return old

        logger.debug(f"Waiting {period}s before second counters snapshot")
        await asyncio.sleep(period)

        new = self.snapshot(interfaces)
        return diff_snapshots(old, new)
