"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from switchshow.exceptions import (
    InterfaceNotFoundError,
    InvalidOptionError,
    RequestTimeoutError,
    ShowError,
    StoreFetchError,
    UnknownCommandError,
)


@pytest.mark.parametrize(
    "exc_class",
    [StoreFetchError, InterfaceNotFoundError, InvalidOptionError, UnknownCommandError, RequestTimeoutError],
)
def test_all_derive_from_show_error(exc_class):
    assert issubclass(exc_class, ShowError)


def test_interface_not_found_message():
    err = InterfaceNotFoundError("etp99")
    assert str(err) == "Invalid interface name etp99"
    assert err.interface == "etp99"


def test_store_fetch_error_selector():
    assert StoreFetchError("down", ["CONFIG_DB", "PORT"]).selector == ("CONFIG_DB", "PORT")
    assert StoreFetchError("down").selector is None
