"""Interface counter snapshots, rate formatting and differencing."""

from switchshow.counters.engine import CounterEngine, diff_snapshots
from switchshow.counters.rates import (
    compute_state,
    counter_string,
    diff_counter,
    format_byte_rate,
    format_utilization,
)

__all__ = [
    "CounterEngine",
    "compute_state",
    "counter_string",
    "diff_counter",
    "diff_snapshots",
    "format_byte_rate",
    "format_utilization",
]
