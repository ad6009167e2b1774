"""Handlers for the ``SHOW interface ...`` paths."""

from __future__ import annotations

from switchshow.aliases.resolver import AliasResolver
from switchshow.counters.engine import CounterEngine
from switchshow.exceptions import InvalidOptionError
from switchshow.interfaces.errors import get_port_errors
from switchshow.interfaces.fec import get_fec_status
from switchshow.models.counters import FecStatusRecord, InterfaceCounters, PortErrorRecord
from switchshow.models.interface import InterfaceAlias
from switchshow.router import OptionBag, ShowContext, register_show_command


@register_show_command("interface", "alias")
async def show_interface_alias(ctx: ShowContext, options: OptionBag) -> list[InterfaceAlias]:
    resolver = AliasResolver(ctx.store, ctx.hostfs, ctx.settings)
    return resolver.resolve(options.string("interface"))


@register_show_command("interface", "counters")
async def show_interface_counters(ctx: ShowContext, options: OptionBag) -> dict[str, InterfaceCounters]:
    engine = CounterEngine(ctx.store, ctx.settings)
    return await engine.get_interface_counters(
        interfaces=options.strings("interfaces") or None,
        period=options.integer("period"),
    )


@register_show_command("interface", "errors")
async def show_interface_errors(ctx: ShowContext, options: OptionBag) -> list[PortErrorRecord]:
    interface = options.string("interface")
    if interface is None:
        raise InvalidOptionError("No interface name passed in as option")
    return get_port_errors(ctx.store, interface)


@register_show_command("interface", "fec", "status")
async def show_interface_fec_status(ctx: ShowContext, options: OptionBag) -> list[FecStatusRecord]:
    return get_fec_status(ctx.store, options.string("interface"))
