"""Port operational error history (``show interface errors``)."""

from __future__ import annotations

from loguru import logger

from switchshow.exceptions import StoreFetchError
from switchshow.models.counters import PortErrorRecord
from switchshow.models.value import FieldValue
from switchshow.store.base import STATE_DB, BaseStore

# (count field, last-seen timestamp field) pairs of STATE_DB PORT_OPERR_TABLE
PORT_ERROR_FIELDS: tuple[tuple[str, str], ...] = (
    ("oper_error_status", "oper_error_status_time"),
    ("mac_local_fault_count", "mac_local_fault_time"),
    ("mac_remote_fault_count", "mac_remote_fault_time"),
    ("fec_sync_loss_count", "fec_sync_loss_time"),
    ("fec_alignment_loss_count", "fec_alignment_loss_time"),
    ("high_ser_error_count", "high_ser_error_time"),
    ("high_ber_error_count", "high_ber_error_time"),
    ("data_unit_crc_error_count", "data_unit_crc_error_time"),
    ("data_unit_misalignment_error_count", "data_unit_misalignment_error_time"),
    ("signal_local_error_count", "signal_local_error_time"),
    ("crc_rate_count", "crc_rate_time"),
    ("data_unit_size_count", "data_unit_size_time"),
    ("code_group_error_count", "code_group_error_time"),
    ("no_rx_reachability_count", "no_rx_reachability_time"),
)


def error_label(count_field: str) -> str:
    """'mac_local_fault_count' -> 'mac local fault'."""
    return count_field.replace("_", " ").replace(" count", "")


def get_port_errors(store: BaseStore, interface: str) -> list[PortErrorRecord]:
    """Return one record per known error type, in fixed order.

    The table read is best-effort: an unreadable or empty row reports every
    error type with count "0" and timestamp "Never".
    """
    try:
        row = store.fetch(STATE_DB, "PORT_OPERR_TABLE", interface)
    except StoreFetchError as e:
        logger.debug(f"PORT_OPERR_TABLE unavailable for {interface}: {e}")
        row = {}

    records: list[PortErrorRecord] = []
    for count_field, time_field in PORT_ERROR_FIELDS:
        records.append(
            PortErrorRecord(
                port_error=error_label(count_field),
                count=FieldValue(row.get(count_field)).as_str("0"),
                last_timestamp=FieldValue(row.get(time_field)).as_str("Never"),
            )
        )
    return records
