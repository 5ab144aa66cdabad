"""Techno-economic calculations: LCOE per source, annual costs and LCOH."""

from src.economics.costs import CostSummary, aggregate_costs
from src.economics.lcoe import (
    annual_energy_kwh,
    annuity_factor,
    capital_recovery_factor,
    compute_lcoe,
    require_lcoe,
    resolve_lcoe,
    with_computed_lcoe,
)

__all__ = [
    "CostSummary",
    "aggregate_costs",
    "annual_energy_kwh",
    "annuity_factor",
    "capital_recovery_factor",
    "compute_lcoe",
    "require_lcoe",
    "resolve_lcoe",
    "with_computed_lcoe",
]
