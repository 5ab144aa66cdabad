"""Discounted Levelized Cost of Energy per power source.

LCOE = PV(capex + yearly opex) / PV(yearly energy), discounted at the
project return rate over the project lifetime. Energy output is constant
from year to year (no degradation model).

All monetary values are in USD ($); LCOE is in $/kWh.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from src.domain.errors import DivisionByZeroResultError, MissingLCOEError
from src.domain.models import (
    HOURS_PER_YEAR,
    FinancialParams,
    PowerSource,
    PowerSourceKind,
)

logger = logging.getLogger(__name__)


# ======================================================================
# Discounting helpers
# ======================================================================

def discount_factor(rate: float, year: int) -> float:
    """Return ``1 / (1 + rate) ** year``."""
    return 1.0 / (1.0 + rate) ** year


def annuity_factor(rate: float, years: int) -> float:
    """Present-value annuity factor: sum of discount factors for years 1..N."""
    if rate == 0:
        return float(years)
    return sum(discount_factor(rate, y) for y in range(1, years + 1))


def capital_recovery_factor(rate: float, years: int) -> float:
    """Capital recovery factor ``rate(1+rate)^N / ((1+rate)^N - 1)``.

    At a zero rate the factor reduces to straight-line ``1 / N``.
    """
    if years < 1:
        raise ValueError(f"years must be >= 1, got {years}")
    if rate == 0:
        return 1.0 / years
    growth = (1.0 + rate) ** years
    return rate * growth / (growth - 1.0)


# ======================================================================
# Energy yield
# ======================================================================

def annual_energy_kwh(
    source: PowerSource,
    time_series: Sequence[float] | None,
    financial: FinancialParams,
) -> float:
    """Annual energy output of a source in kWh.

    With a profile the hourly outputs ``capacity * cf[h]`` are summed;
    otherwise the default capacity factor is applied to every hour.
    """
    if time_series is not None and len(time_series) > 0:
        cf = np.asarray(time_series, dtype=np.float64)
        annual_mwh = float(np.sum(source.capacity_mw * cf))
        return annual_mwh * 1000.0
    return source.capacity_kw * financial.default_capacity_factor * HOURS_PER_YEAR


# ======================================================================
# LCOE
# ======================================================================

def compute_lcoe(
    source: PowerSource,
    time_series: Sequence[float] | None,
    financial: FinancialParams,
) -> float:
    """Compute the discounted LCOE of a power source.

    Args:
        source: Source supplying capacity, capex and opex.
        time_series: Hourly capacity factors, or None to use the default
            capacity factor.
        financial: Return rate, lifetime and default capacity factor.

    Returns:
        LCOE in $/kWh.

    Raises:
        DivisionByZeroResultError: If the source produces no energy over
            its lifetime.
    """
    rate = financial.discount_rate
    years = financial.lifetime_years
    capacity_kw = source.capacity_kw

    pv_cost = source.capex_per_kw * capacity_kw
    yearly_opex = source.opex_per_kw_year * capacity_kw
    for year in range(1, years + 1):
        pv_cost += yearly_opex * discount_factor(rate, year)

    energy = annual_energy_kwh(source, time_series, financial)
    pv_energy = 0.0
    for year in range(1, years + 1):
        pv_energy += energy * discount_factor(rate, year)

    if pv_energy == 0:
        raise DivisionByZeroResultError(
            "LCOE", f"{source.label} produces no energy over its lifetime"
        )
    return pv_cost / pv_energy


def resolve_lcoe(
    source: PowerSource,
    financial: FinancialParams,
) -> float | None:
    """Return the LCOE that applies to a source for this run.

    - Grid: the electricity price.
    - Profile attached: recomputed from the current inputs.
    - No profile but an explicit LCOE: that LCOE.
    - Otherwise: None (the source cannot be dispatched).

    Raises:
        DivisionByZeroResultError: If the attached profile yields no energy.
    """
    if source.kind == PowerSourceKind.GRID:
        return source.lcoe
    if source.time_series is not None:
        return compute_lcoe(source, source.time_series, financial)
    return source.lcoe


def require_lcoe(
    source: PowerSource,
    financial: FinancialParams,
    source_index: int = 0,
) -> float:
    """Like ``resolve_lcoe`` but raise when no LCOE can be determined.

    Raises:
        MissingLCOEError: If the source has neither profile nor LCOE.
    """
    lcoe = resolve_lcoe(source, financial)
    if lcoe is None:
        raise MissingLCOEError(source_index, source.kind.value)
    return lcoe


def with_computed_lcoe(
    source: PowerSource,
    financial: FinancialParams,
) -> PowerSource:
    """Return a copy of ``source`` with its LCOE explicitly computed.

    Sources without a profile are priced at the default capacity factor.
    Grid sources are returned unchanged.
    """
    if source.kind == PowerSourceKind.GRID:
        return source
    lcoe = compute_lcoe(source, source.time_series, financial)
    logger.debug("Computed LCOE for %s: %.5f $/kWh", source.label, lcoe)
    return source.model_copy(update={"lcoe": lcoe})
