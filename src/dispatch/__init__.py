"""Hourly merit-order dispatch of power sources to the electrolyzer."""

from src.dispatch.merit_order import (
    DispatchOutcome,
    MeritOrderDispatcher,
    available_power,
    merit_order,
    simulate_dispatch,
)

__all__ = [
    "DispatchOutcome",
    "MeritOrderDispatcher",
    "available_power",
    "merit_order",
    "simulate_dispatch",
]
