"""End-to-end LCOH evaluation of one fixed configuration.

Pipeline:
1. Resolve the LCOE of every source for this run (derived copies only)
2. Merit-order dispatch over 8760 hours
3. Annual cost aggregation and LCOH
4. Monthly, energy-mix and energy-balance report

The run is a pure function of its inputs and either returns a complete
SimulationResult or raises.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from uuid import uuid4

from src.dispatch.merit_order import simulate_dispatch
from src.domain.errors import DivisionByZeroResultError
from src.domain.models import (
    ElectrolyzerConfig,
    ExcludedSource,
    FinancialParams,
    PowerSource,
    PowerSourceKind,
    SimulationResult,
)
from src.economics.costs import aggregate_costs
from src.economics.lcoe import resolve_lcoe
from src.metrics.report import assemble_report

logger = logging.getLogger(__name__)


def can_calculate(sources: Sequence[PowerSource]) -> bool:
    """Check that every renewable source has a profile or an LCOE."""
    return all(
        source.kind == PowerSourceKind.GRID
        or source.time_series is not None
        or source.lcoe is not None
        for source in sources
    )


def prepare_sources(
    sources: Sequence[PowerSource],
    financial: FinancialParams,
) -> tuple[list[PowerSource], list[ExcludedSource]]:
    """Derive the LCOE that applies to each source for this run.

    Inputs are never mutated; each renewable source is returned as a copy
    carrying its freshly resolved LCOE. A source whose profile yields no
    energy gets no LCOE and is reported as excluded.

    Returns:
        Tuple of (resolved sources in input order, excluded sources).
    """
    resolved: list[PowerSource] = []
    excluded: list[ExcludedSource] = []

    for index, source in enumerate(sources):
        try:
            lcoe = resolve_lcoe(source, financial)
        except DivisionByZeroResultError as e:
            logger.warning("Excluding source #%d (%s): %s", index, source.label, e)
            excluded.append(
                ExcludedSource(source_index=index, kind=source.kind, reason=str(e))
            )
            lcoe = None

        if source.kind == PowerSourceKind.GRID or lcoe == source.lcoe:
            resolved.append(source)
        else:
            resolved.append(source.model_copy(update={"lcoe": lcoe}))

    return resolved, excluded


def run_simulation(
    sources: Sequence[PowerSource],
    electrolyzer: ElectrolyzerConfig,
    financial: FinancialParams,
) -> SimulationResult:
    """Evaluate the LCOH of a source mix feeding an electrolyzer.

    Args:
        sources: Grid and renewable sources.
        electrolyzer: Electrolyzer configuration.
        financial: Return rate, lifetime and default capacity factor.

    Returns:
        SimulationResult with costs, energy statistics and hourly trace.

    Raises:
        DivisionByZeroResultError: If no hydrogen is produced.
    """
    run_id = str(uuid4())[:8]
    start = time.perf_counter()
    logger.info(
        "Starting LCOH run %s: %d sources, %.1f MW electrolyzer",
        run_id,
        len(sources),
        electrolyzer.capacity_mw,
        extra={"run_id": run_id},
    )

    resolved, excluded = prepare_sources(sources, financial)
    dispatch = simulate_dispatch(resolved, electrolyzer, financial)
    costs = aggregate_costs(resolved, electrolyzer, financial, dispatch)
    report = assemble_report(dispatch, electrolyzer)

    seen = {entry.source_index for entry in excluded}
    excluded.extend(e for e in dispatch.excluded if e.source_index not in seen)
    excluded.sort(key=lambda entry: entry.source_index)

    result = SimulationResult(
        lcoh=costs.lcoh,
        annual_h2_production_kg=costs.annual_h2_production_kg,
        total_annual_cost=costs.total_annual_cost,
        cost_breakdown=costs.cost_breakdown,
        energy_stats=report.energy_stats,
        energy_mix=report.energy_mix,
        monthly_data=report.monthly_data,
        hourly_dispatch=dispatch.hourly_dispatch,
        source_lcoe=tuple(source.lcoe for source in resolved),
        excluded_sources=tuple(excluded),
    )

    duration_ms = round((time.perf_counter() - start) * 1000, 1)
    logger.info(
        "Finished LCOH run %s: %.3f $/kg (%.1fms)",
        run_id,
        result.lcoh,
        duration_ms,
        extra={"run_id": run_id, "lcoh": result.lcoh, "duration_ms": duration_ms},
    )
    return result
