"""CLI entry point: answer show paths from a store dump and host files.

Examples:
  switchshow --db-dump state.json interface alias

  switchshow --db-dump state.json --host-root /host \\
      interface alias -o interface=etp0

  switchshow --db-dump state.json --format table \\
      interface counters -o interfaces=Ethernet0,Ethernet4 -o period=5
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from loguru import logger
from tabulate import tabulate

from switchshow import __version__, configure_logging
from switchshow.exceptions import ShowError
from switchshow.formatters import JsonFormatter, TableFormatter
from switchshow.router import ShowRouter, list_show_commands
from switchshow.store.hostfs import LocalHostFS
from switchshow.store.memory import MemoryStore


def _print_startup_banner() -> None:
    startup_rows = [
        ["version", __version__],
        ["commands", ", ".join(list_show_commands())],
    ]
    for var in ("SWITCHSHOW_MAX_PERIOD", "SWITCHSHOW_ETC_DIR", "SWITCHSHOW_DEVICE_DIR"):
        val = os.environ.get(var)
        if val:
            startup_rows.append([var, val])

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    logger.opt(raw=True).info("\n{}\n", table_str)


def _parse_option(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    return key.strip(), value.strip()


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the show CLI."""
    parser = argparse.ArgumentParser(
        prog="switchshow",
        description="Answer switch show paths (interface alias, counters, errors, fec status)",
    )
    parser.add_argument(
        "path",
        nargs="+",
        help="Show path components, e.g. 'interface alias' or 'interface fec status'",
    )
    parser.add_argument(
        "--db-dump",
        required=True,
        help="JSON dump of the stores: {\"CONFIG_DB\": {\"PORT\": {...}}, ...}",
    )
    parser.add_argument(
        "--aliases",
        help="JSON file with the store layer's alias-to-name map",
    )
    parser.add_argument(
        "--host-root",
        help="Directory to treat as the host filesystem root for port_config files",
    )
    parser.add_argument(
        "-o",
        "--option",
        action="append",
        type=_parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Path option (interface, interfaces, period); repeatable",
    )
    parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request deadline in seconds",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> None:
    """Main entry point for the show CLI."""
    parsed = parse_args(args)

    if parsed.verbose:
        os.environ["LOGURU_LEVEL"] = "DEBUG"
    configure_logging()
    if parsed.verbose:
        _print_startup_banner()

    try:
        aliases = None
        if parsed.aliases:
            with open(parsed.aliases, encoding="utf-8") as f:
                aliases = json.load(f)
        store = MemoryStore.from_json_file(parsed.db_dump, aliases=aliases)
        router = ShowRouter(store, LocalHostFS(parsed.host_root))
        result = router.query(parsed.path, dict(parsed.option), timeout=parsed.timeout)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ShowError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)

    if parsed.format == "table":
        print(TableFormatter(result).format())
    else:
        print(JsonFormatter(result).format().decode("utf-8"))


if __name__ == "__main__":
    main()
