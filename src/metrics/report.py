"""Reduction of the hourly dispatch trace into presentation metrics.

Key Metrics:
- Monthly energy consumed and curtailed (non-leap calendar)
- Energy mix by source kind
- Curtailment percentage and electrolyzer utilization
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from src.dispatch.merit_order import DispatchOutcome
from src.domain.models import (
    DAYS_IN_MONTH,
    HOURS_PER_DAY,
    HOURS_PER_YEAR,
    MONTH_LABELS,
    ElectrolyzerConfig,
    EnergyMixEntry,
    EnergyStats,
    HourlyDispatchRecord,
    MonthlySummary,
    PowerSourceKind,
)


def monthly_summaries(
    hourly_dispatch: Sequence[HourlyDispatchRecord],
) -> tuple[MonthlySummary, ...]:
    """Sum energy used and curtailed into 12 calendar months.

    Hours are consumed in order; a short trace leaves later months empty.
    """
    summaries: list[MonthlySummary] = []
    hour_index = 0

    for month, days in enumerate(DAYS_IN_MONTH):
        energy = 0.0
        curtailed = 0.0
        for _ in range(days * HOURS_PER_DAY):
            if hour_index >= len(hourly_dispatch):
                break
            record = hourly_dispatch[hour_index]
            energy += record.energy_used_mwh
            curtailed += record.curtailed_energy_mwh
            hour_index += 1

        summaries.append(
            MonthlySummary(
                month=month + 1,
                label=MONTH_LABELS[month],
                energy_mwh=energy,
                curtailed_mwh=curtailed,
            )
        )

    return tuple(summaries)


def energy_mix(
    energy_by_kind: dict[PowerSourceKind, float],
    total_energy_used_mwh: float,
) -> tuple[EnergyMixEntry, ...]:
    """Share of consumed energy per source kind (percent)."""
    entries: list[EnergyMixEntry] = []
    for kind, energy in energy_by_kind.items():
        pct = energy / total_energy_used_mwh * 100 if total_energy_used_mwh > 0 else 0.0
        entries.append(EnergyMixEntry(kind=kind, energy_mwh=energy, pct=pct))
    return tuple(entries)


def energy_stats(
    total_energy_used_mwh: float,
    total_curtailed_mwh: float,
    electrolyzer: ElectrolyzerConfig,
) -> EnergyStats:
    """Curtailment percentage and utilization of the electrolyzer."""
    offered = total_energy_used_mwh + total_curtailed_mwh
    curtailment_pct = total_curtailed_mwh / offered * 100 if offered > 0 else 0.0
    utilization = total_energy_used_mwh / (electrolyzer.capacity_mw * HOURS_PER_YEAR)

    return EnergyStats(
        total_energy_used_mwh=total_energy_used_mwh,
        total_curtailed_energy_mwh=total_curtailed_mwh,
        curtailment_pct=curtailment_pct,
        utilization_rate=utilization,
    )


def day_profile(
    time_series: Sequence[float] | None,
    month: int,
    day: int,
) -> list[float]:
    """Extract the 24 hourly values of one calendar day.

    Args:
        time_series: Hourly series starting January 1st, 00:00.
        month: Month (1-12).
        day: Day of month (1-based).

    Returns:
        24 values; hours outside the series are zero.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if not 1 <= day <= DAYS_IN_MONTH[month - 1]:
        raise ValueError(f"day must be 1-{DAYS_IN_MONTH[month - 1]}, got {day}")

    if time_series is None or len(time_series) == 0:
        return [0.0] * HOURS_PER_DAY

    day_of_year = sum(DAYS_IN_MONTH[: month - 1]) + day - 1
    start = day_of_year * HOURS_PER_DAY
    return [
        float(time_series[i]) if i < len(time_series) else 0.0
        for i in range(start, start + HOURS_PER_DAY)
    ]


@dataclass
class DispatchReport:
    """Presentation metrics derived from one dispatch run.

    Attributes:
        monthly_data: Twelve monthly energy summaries.
        energy_mix: Share of energy per source kind.
        energy_stats: Annual energy balance.
    """

    monthly_data: tuple[MonthlySummary, ...]
    energy_mix: tuple[EnergyMixEntry, ...]
    energy_stats: EnergyStats

    @classmethod
    def from_dispatch(
        cls,
        dispatch: DispatchOutcome,
        electrolyzer: ElectrolyzerConfig,
    ) -> DispatchReport:
        """Reduce a dispatch outcome into report metrics."""
        return cls(
            monthly_data=monthly_summaries(dispatch.hourly_dispatch),
            energy_mix=energy_mix(
                dispatch.energy_by_kind, dispatch.total_energy_used_mwh
            ),
            energy_stats=energy_stats(
                dispatch.total_energy_used_mwh,
                dispatch.total_curtailed_mwh,
                electrolyzer,
            ),
        )


def assemble_report(
    dispatch: DispatchOutcome,
    electrolyzer: ElectrolyzerConfig,
) -> DispatchReport:
    """Build the monthly, mix and energy-balance report for a dispatch run."""
    return DispatchReport.from_dispatch(dispatch, electrolyzer)
