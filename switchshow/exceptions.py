"""Exception hierarchy for show command handling."""

from __future__ import annotations

from collections.abc import Sequence


class ShowError(Exception):
    """Base exception for all show command errors."""


class StoreFetchError(ShowError):
    """A backing-store read failed."""

    def __init__(self, message: str, selector: Sequence[str] | None = None):
        self.selector = tuple(selector) if selector is not None else None
        super().__init__(message)


class InterfaceNotFoundError(ShowError):
    """The requested interface name or alias is unknown."""

    def __init__(self, interface: str):
        self.interface = interface
        super().__init__(f"Invalid interface name {interface}")


class InvalidOptionError(ShowError):
    """A show option is missing, malformed, or out of range."""


class UnknownCommandError(ShowError):
    """No handler is registered for the requested show path."""


class RequestTimeoutError(ShowError):
    """The request deadline expired or the request was cancelled."""
