"""Switch show-command backend.

Answers ``SHOW interface ...`` queries of a switch management endpoint from
the switch's key-value stores (CONFIG_DB, STATE_DB, APPL_DB, COUNTERS_DB) and
the host's port_config files.
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Drop log records bound with ``skiplog=True``."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink and enable this package's log records."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "INFO")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"skiplog": False})
    glogger.enable(__name__)


from switchshow.exceptions import (  # noqa: E402
    InterfaceNotFoundError,
    InvalidOptionError,
    RequestTimeoutError,
    ShowError,
    StoreFetchError,
    UnknownCommandError,
)
from switchshow.router import ShowRouter, list_show_commands, register_show_command  # noqa: E402
from switchshow.store import BaseHostFS, BaseStore, LocalHostFS, MemoryStore  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "ShowRouter",
    "list_show_commands",
    "register_show_command",
    "BaseStore",
    "BaseHostFS",
    "LocalHostFS",
    "MemoryStore",
    "ShowError",
    "StoreFetchError",
    "InterfaceNotFoundError",
    "InvalidOptionError",
    "UnknownCommandError",
    "RequestTimeoutError",
]
