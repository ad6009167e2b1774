"""Show command registry and request dispatch."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger

from switchshow.exceptions import InvalidOptionError, RequestTimeoutError, UnknownCommandError
from switchshow.formatters import JsonFormatter
from switchshow.models.value import FieldValue
from switchshow.settings import ShowSettings, get_settings
from switchshow.store.base import BaseHostFS, BaseStore
from switchshow.store.hostfs import LocalHostFS


class OptionBag:
    """Decoded path options (``interface``, ``interfaces``, ``period``, ...)."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._options = dict(options or {})

    def __contains__(self, name: str) -> bool:
        return name in self._options

    def string(self, name: str) -> str | None:
        value = FieldValue(self._options.get(name)).as_str()
        return value or None

    def strings(self, name: str) -> list[str]:
        return FieldValue(self._options.get(name)).as_str_list()

    def integer(self, name: str) -> int | None:
        """Integer option value; present but non-integer values are rejected."""
        if name not in self._options:
            return None
        value = FieldValue(self._options[name]).as_int()
        if value is None:
            raise InvalidOptionError(f"option {name} must be an integer, got {self._options[name]!r}")
        return value


@dataclass
class ShowContext:
    """Per-request collaborators handed to every show handler."""

    store: BaseStore
    hostfs: BaseHostFS
    settings: ShowSettings


ShowHandler = Callable[[ShowContext, OptionBag], Awaitable[Any]]

_COMMAND_REGISTRY: dict[tuple[str, ...], ShowHandler] = {}


def register_show_command(*path: str) -> Callable[[ShowHandler], ShowHandler]:
    """Decorator to register a handler for a show path.

    Usage::

        @register_show_command("interface", "alias")
        async def show_interface_alias(ctx, options):
            ...
    """

    def decorator(func: ShowHandler) -> ShowHandler:
        _COMMAND_REGISTRY[tuple(p.lower() for p in path)] = func
        return func

    return decorator


def list_show_commands() -> list[str]:
    """Return the registered show paths, slash-joined and sorted."""
    return sorted("/".join(path) for path in _COMMAND_REGISTRY)


def _normalize_path(path: str | Sequence[str]) -> tuple[str, ...]:
    parts = path.split("/") if isinstance(path, str) else path
    return tuple(p.strip().lower() for p in parts if p and p.strip())


class ShowRouter:
    """Dispatch decoded show paths to their handlers.

    Each request re-reads every store and file it needs; nothing is cached
    between requests.
    """

    def __init__(
        self,
        store: BaseStore,
        hostfs: BaseHostFS | None = None,
        settings: ShowSettings | None = None,
    ) -> None:
        self.context = ShowContext(
            store=store,
            hostfs=hostfs if hostfs is not None else LocalHostFS(),
            settings=settings or get_settings(),
        )

    async def aquery(
        self,
        path: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Run a show command and return its unserialized result.

        Args:
            path: Path components, e.g. ``["interface", "counters"]`` or ``"interface/counters"``.
            options: Option bag decoded from the path.
            timeout: Overall request deadline in seconds.

        Raises:
            UnknownCommandError: If no handler is registered for ``path``.
            RequestTimeoutError: If ``timeout`` expires first.
        """
        key = _normalize_path(path)
        handler = _COMMAND_REGISTRY.get(key)
        if handler is None:
            available = ", ".join(list_show_commands())
            raise UnknownCommandError(f"Unknown show path '{'/'.join(key)}'. Available: {available}")

        logger.debug(f"show {'/'.join(key)} options={dict(options or {})}")
        scope = asyncio.timeout(timeout)
        try:
            async with scope:
                return await handler(self.context, OptionBag(options))
        except TimeoutError as e:
            if not scope.expired():
                raise
            raise RequestTimeoutError(f"show {'/'.join(key)} exceeded the {timeout}s request deadline") from e

    async def aget(
        self,
        path: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        """Run a show command and return the serialized JSON payload."""
        result = await self.aquery(path, options, timeout=timeout)
        return JsonFormatter(result).format()

    def query(
        self,
        path: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Synchronous entry point for :meth:`aquery`."""
        return asyncio.run(self.aquery(path, options, timeout=timeout))

    def get(
        self,
        path: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        """Synchronous entry point for :meth:`aget`."""
        return asyncio.run(self.aget(path, options, timeout=timeout))


# Import handlers to trigger registration
import switchshow.commands  # noqa: F401, E402
