"""Metrics module for reducing dispatch results into report figures.

This module turns the hourly dispatch trace into monthly totals, the
energy mix by source kind and the electrolyzer energy balance.
"""

from src.metrics.report import (
    DispatchReport,
    assemble_report,
    day_profile,
    energy_mix,
    energy_stats,
    monthly_summaries,
)

__all__ = [
    "DispatchReport",
    "assemble_report",
    "day_profile",
    "energy_mix",
    "energy_stats",
    "monthly_summaries",
]
