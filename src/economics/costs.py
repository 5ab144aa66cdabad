"""Annual cost aggregation and Levelized Cost of Hydrogen.

Total annual cost = annualized capex + annual opex + energy cost, where:
- Capex of every source and the electrolyzer is annualized with the
  capital recovery factor
- Opex is the fixed $/kW/year charge on installed capacity
- Energy cost prices each dispatched MWh at its source's LCOE

LCOH = total annual cost / annual hydrogen production.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from src.dispatch.merit_order import DispatchOutcome
from src.domain.errors import DivisionByZeroResultError
from src.domain.models import (
    CostBreakdown,
    CostComponent,
    ElectrolyzerConfig,
    FinancialParams,
    PowerSource,
)
from src.economics.lcoe import capital_recovery_factor

logger = logging.getLogger(__name__)


@dataclass
class CostSummary:
    """Annual cost totals for one configuration.

    Attributes:
        crf: Capital recovery factor used for annualization.
        annualized_capex: Annualized capital cost ($/year).
        annual_opex: Fixed operating cost ($/year).
        energy_cost: Cost of dispatched energy ($/year).
        total_annual_cost: Sum of the three components ($/year).
        annual_h2_production_kg: Hydrogen produced (kg/year).
        lcoh: Levelized cost of hydrogen ($/kg).
    """

    crf: float
    annualized_capex: float
    annual_opex: float
    energy_cost: float
    total_annual_cost: float
    annual_h2_production_kg: float
    lcoh: float

    @property
    def cost_breakdown(self) -> CostBreakdown:
        """Cost components with their share of the total."""
        return CostBreakdown(
            capex=_component(self.annualized_capex, self.total_annual_cost),
            opex=_component(self.annual_opex, self.total_annual_cost),
            energy=_component(self.energy_cost, self.total_annual_cost),
        )


def _component(amount: float, total: float) -> CostComponent:
    percentage = amount / total * 100 if total != 0 else 0.0
    return CostComponent(amount=amount, percentage=percentage)


def annualized_capex(
    sources: Sequence[PowerSource],
    electrolyzer: ElectrolyzerConfig,
    crf: float,
) -> float:
    """Capital cost of all sources and the electrolyzer, annualized."""
    source_capex = sum(s.capacity_kw * s.capex_per_kw for s in sources)
    electrolyzer_capex = electrolyzer.capacity_kw * electrolyzer.capex_per_kw
    return crf * source_capex + crf * electrolyzer_capex


def annual_opex(
    sources: Sequence[PowerSource],
    electrolyzer: ElectrolyzerConfig,
) -> float:
    """Fixed O&M cost of all sources and the electrolyzer."""
    source_opex = sum(s.capacity_kw * s.opex_per_kw_year for s in sources)
    return source_opex + electrolyzer.capacity_kw * electrolyzer.opex_per_kw_year


def energy_cost(
    sources: Sequence[PowerSource],
    energy_by_source: dict[int, float],
) -> float:
    """Price dispatched energy (MWh) at each source's LCOE ($/kWh)."""
    total = 0.0
    for index, energy_mwh in energy_by_source.items():
        lcoe = sources[index].lcoe
        if lcoe is None:
            continue
        total += energy_mwh * 1000.0 * lcoe
    return total


def hydrogen_production_kg(
    total_energy_used_mwh: float,
    electrolyzer: ElectrolyzerConfig,
) -> float:
    """Annual hydrogen output for the energy consumed."""
    return total_energy_used_mwh * 1000.0 / electrolyzer.energy_per_kg_kwh


def aggregate_costs(
    sources: Sequence[PowerSource],
    electrolyzer: ElectrolyzerConfig,
    financial: FinancialParams,
    dispatch: DispatchOutcome,
) -> CostSummary:
    """Aggregate annual costs and compute the LCOH.

    Args:
        sources: All configured sources with their resolved LCOE. Capex and
            opex count even for sources excluded from dispatch.
        electrolyzer: Electrolyzer configuration.
        financial: Return rate and lifetime for annualization.
        dispatch: Outcome of the merit-order dispatch.

    Returns:
        CostSummary with all annual totals and the LCOH.

    Raises:
        DivisionByZeroResultError: If no hydrogen is produced.
    """
    crf = capital_recovery_factor(financial.discount_rate, financial.lifetime_years)
    capex = annualized_capex(sources, electrolyzer, crf)
    opex = annual_opex(sources, electrolyzer)
    energy = energy_cost(sources, dispatch.energy_by_source)
    total = capex + opex + energy

    production = hydrogen_production_kg(dispatch.total_energy_used_mwh, electrolyzer)
    if production == 0:
        raise DivisionByZeroResultError(
            "LCOH", "no hydrogen produced: no source dispatched any energy"
        )

    lcoh = total / production
    logger.info(
        "Annual cost $%.0f for %.0f kg H2 -> LCOH %.3f $/kg",
        total,
        production,
        lcoh,
    )

    return CostSummary(
        crf=crf,
        annualized_capex=capex,
        annual_opex=opex,
        energy_cost=energy,
        total_annual_cost=total,
        annual_h2_production_kg=production,
        lcoh=lcoh,
    )
