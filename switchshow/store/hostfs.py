"""Host filesystem access for port_config files."""

from __future__ import annotations

import glob
from pathlib import Path

from loguru import logger

from switchshow.store.base import BaseHostFS


class LocalHostFS(BaseHostFS):
    """Read host files directly, optionally below an alternate root.

    With ``root="/host"`` a request for ``/etc/sonic/port_config.ini`` reads
    ``/host/etc/sonic/port_config.ini``; listed paths are reported without the
    root prefix so callers always see host-absolute paths.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root) if root else None

    def _resolve(self, path: str) -> Path:
        if self.root is None:
            return Path(path)
        return self.root / path.lstrip("/")

    def read_file(self, path: str) -> bytes | None:
        try:
            data = self._resolve(path).read_bytes()
        except OSError as e:
            logger.debug(f"Host file {path} not readable: {e}")
            return None
        # An empty file carries no mapping and is treated like a missing one
        return data or None

    def list_files(self, pattern: str) -> list[str]:
        matches = sorted(glob.glob(str(self._resolve(pattern))))
        if self.root is None:
            return matches
        return ["/" + str(Path(m).relative_to(self.root)) for m in matches]
