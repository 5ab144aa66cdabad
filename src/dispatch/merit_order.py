"""Merit-order dispatch of power sources against electrolyzer demand.

Each hour the electrolyzer draws up to its rated capacity:
1. Visit sources from cheapest to most expensive LCOE
2. Take as much power as each source has available, up to remaining demand
3. Record any available power beyond demand as curtailed
4. Stop once demand is met; later sources are neither used nor curtailed

The allocation is greedy and myopic: no storage, no ramp limits and no
look-ahead across hours.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

from src.domain.models import (
    HOURS_PER_YEAR,
    ElectrolyzerConfig,
    ExcludedSource,
    FinancialParams,
    HourlyDispatchRecord,
    PowerSource,
    PowerSourceKind,
    SourceDispatch,
)

logger = logging.getLogger(__name__)

MISSING_LCOE_REASON = "no generation profile and no LCOE"


class Dispatcher(Protocol):
    """Protocol for hourly dispatch strategies."""

    def dispatch_hour(self, hour: int) -> HourlyDispatchRecord:
        """Allocate power for a single hour."""
        ...

    def run_simulation(self) -> DispatchOutcome:
        """Allocate power for every hour of the year."""
        ...


@dataclass
class DispatchOutcome:
    """Totals and hourly trace from a full-year dispatch.

    Attributes:
        hourly_dispatch: One record per hour, in hour order.
        total_energy_used_mwh: Energy consumed by the electrolyzer.
        total_curtailed_mwh: Available energy left unused by visited sources.
        energy_by_kind: Energy consumed per source kind.
        energy_by_source: Energy consumed per source index.
        excluded: Sources skipped for lack of an LCOE.
    """

    hourly_dispatch: tuple[HourlyDispatchRecord, ...]
    total_energy_used_mwh: float = 0.0
    total_curtailed_mwh: float = 0.0
    energy_by_kind: dict[PowerSourceKind, float] = field(default_factory=dict)
    energy_by_source: dict[int, float] = field(default_factory=dict)
    excluded: list[ExcludedSource] = field(default_factory=list)


def merit_order(sources: Sequence[PowerSource]) -> list[tuple[int, PowerSource]]:
    """Order sources by ascending LCOE, keeping input order on ties.

    Sources without an LCOE sort last.

    Returns:
        List of ``(source_index, source)`` pairs.
    """
    return sorted(
        enumerate(sources),
        key=lambda pair: (pair[1].lcoe is None, pair[1].lcoe or 0.0),
    )


def available_power(
    source: PowerSource,
    financial: FinancialParams,
) -> np.ndarray:
    """Hourly available power (MW) of a source over the year.

    A profile gives ``capacity * cf[h]``; a grid connection is always fully
    available; any other source falls back to the default capacity factor.
    """
    if source.time_series is not None:
        return source.capacity_mw * np.asarray(source.time_series, dtype=np.float64)
    if source.kind == PowerSourceKind.GRID:
        return np.full(HOURS_PER_YEAR, source.capacity_mw * 1.0)
    return np.full(
        HOURS_PER_YEAR, source.capacity_mw * financial.default_capacity_factor
    )


class MeritOrderDispatcher:
    """Greedy merit-order dispatcher for a single fixed configuration.

    Sources must already carry the LCOE that applies to this run; sources
    without one are excluded from dispatch.
    """

    def __init__(
        self,
        sources: Sequence[PowerSource],
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            sources: Power sources, each with its resolved LCOE.
            electrolyzer: Electrolyzer configuration (demand per hour).
            financial: Financial parameters (default capacity factor).
        """
        self.sources = tuple(sources)
        self.electrolyzer = electrolyzer
        self.financial = financial

        self.excluded: list[ExcludedSource] = []
        self._order: list[tuple[int, PowerSource]] = []
        for index, source in merit_order(self.sources):
            if source.lcoe is None:
                logger.warning(
                    "Excluding source #%d (%s) from dispatch: %s",
                    index,
                    source.label,
                    MISSING_LCOE_REASON,
                )
                self.excluded.append(
                    ExcludedSource(
                        source_index=index,
                        kind=source.kind,
                        reason=MISSING_LCOE_REASON,
                    )
                )
                continue
            self._order.append((index, source))

        self._available: dict[int, list[float]] = {
            index: available_power(source, financial).tolist()
            for index, source in self._order
        }

    @property
    def dispatch_order(self) -> list[int]:
        """Indices of dispatchable sources in merit order."""
        return [index for index, _ in self._order]

    def dispatch_hour(self, hour: int) -> HourlyDispatchRecord:
        """Allocate electrolyzer demand across sources for one hour.

        Args:
            hour: Hour of the year (0-8759).

        Returns:
            HourlyDispatchRecord with per-source allocations.
        """
        if not 0 <= hour < HOURS_PER_YEAR:
            raise ValueError(f"hour must be 0-{HOURS_PER_YEAR - 1}, got {hour}")

        capacity = self.electrolyzer.capacity_mw
        remaining = capacity
        hourly_used = 0.0
        hourly_curtailed = 0.0
        allocations: list[SourceDispatch] = []

        for index, source in self._order:
            if remaining <= 0:
                break

            available = self._available[index][hour]
            used = min(available, remaining)
            curtailed = max(0.0, available - used)

            remaining -= used
            hourly_used += used
            hourly_curtailed += curtailed

            allocations.append(
                SourceDispatch(
                    source_index=index,
                    kind=source.kind,
                    power_available=available,
                    power_used=used,
                    power_curtailed=curtailed,
                )
            )

        return HourlyDispatchRecord(
            hour=hour,
            energy_used_mwh=hourly_used,
            curtailed_energy_mwh=hourly_curtailed,
            dispatch_fraction=hourly_used / capacity,
            per_source=tuple(allocations),
        )

    def run_simulation(self) -> DispatchOutcome:
        """Dispatch every hour of the year and accumulate totals.

        Returns:
            DispatchOutcome with the hourly trace and annual totals.
        """
        records: list[HourlyDispatchRecord] = []
        total_used = 0.0
        total_curtailed = 0.0
        by_kind: dict[PowerSourceKind, float] = {}
        by_source: dict[int, float] = {}

        for hour in range(HOURS_PER_YEAR):
            record = self.dispatch_hour(hour)
            records.append(record)

            total_used += record.energy_used_mwh
            total_curtailed += record.curtailed_energy_mwh
            for allocation in record.per_source:
                by_kind[allocation.kind] = (
                    by_kind.get(allocation.kind, 0.0) + allocation.power_used
                )
                by_source[allocation.source_index] = (
                    by_source.get(allocation.source_index, 0.0)
                    + allocation.power_used
                )

        logger.info(
            "Dispatched %.1f MWh across %d sources (%.1f MWh curtailed)",
            total_used,
            len(self._order),
            total_curtailed,
        )

        return DispatchOutcome(
            hourly_dispatch=tuple(records),
            total_energy_used_mwh=total_used,
            total_curtailed_mwh=total_curtailed,
            energy_by_kind=by_kind,
            energy_by_source=by_source,
            excluded=list(self.excluded),
        )


def simulate_dispatch(
    sources: Sequence[PowerSource],
    electrolyzer: ElectrolyzerConfig,
    financial: FinancialParams,
) -> DispatchOutcome:
    """Run a full-year merit-order dispatch.

    Args:
        sources: Power sources, each with its resolved LCOE.
        electrolyzer: Electrolyzer configuration.
        financial: Financial parameters.

    Returns:
        DispatchOutcome for the year.
    """
    return MeritOrderDispatcher(sources, electrolyzer, financial).run_simulation()
