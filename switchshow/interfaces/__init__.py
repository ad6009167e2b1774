"""Per-port health views: operational errors and FEC status."""

from switchshow.interfaces.errors import PORT_ERROR_FIELDS, get_port_errors
from switchshow.interfaces.fec import get_fec_status, get_front_panel_ports

__all__ = [
    "PORT_ERROR_FIELDS",
    "get_fec_status",
    "get_front_panel_ports",
    "get_port_errors",
]
