"""Demo module for showcasing the Hydrogen LCOH Engine.

This module provides ready-to-run demo scenarios built from the default
configuration of the engine: a grid connection, a solar plant and a wind
farm feeding a 100 MW electrolyzer. Renewable profiles are synthetic and
seeded, and are passed through the same UTC-to-local normalization a
provider download would go through.

Usage:
    python -m src.demo

Or in Python:
    from src.demo import run_default_demo
    results = run_default_demo()
    results.print_summary()
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.config import get_settings
from src.core.logging import setup_logging
from src.domain.models import (
    ElectrolyzerConfig,
    FinancialParams,
    Location,
    PowerSource,
    PowerSourceKind,
    SimulationResult,
)
from src.profiles.providers import attach_profile
from src.profiles.synthetic import SyntheticProfileGenerator, to_utc_samples
from src.simulation.pipeline import run_simulation
from src.validation.assumptions import ValidationReport, validate_inputs

SOLAR_SITE = Location(lat=38.9, lng=-77.0)
WIND_SITE = Location(lat=42.3, lng=-71.0)


@dataclass(frozen=True)
class DemoScenario:
    """A pre-configured source mix.

    Attributes:
        id: Stable identifier used by the API.
        name: Display name.
        description: One-paragraph description.
        sources: Power sources in input order.
        electrolyzer: Electrolyzer configuration.
    """

    id: str
    name: str
    description: str
    sources: tuple[PowerSource, ...]
    electrolyzer: ElectrolyzerConfig = field(default_factory=ElectrolyzerConfig)


@dataclass
class DemoResults:
    """Results from running a demo scenario."""

    scenario: DemoScenario
    financial: FinancialParams
    result: SimulationResult
    validation: ValidationReport

    def print_summary(self) -> None:
        """Print formatted summary of results."""
        result = self.result
        breakdown = result.cost_breakdown
        stats = result.energy_stats

        print("\n" + "=" * 60)
        print(f"Hydrogen LCOH Demo: {self.scenario.name}")
        print("=" * 60)

        print(f"\nLCOH: ${result.lcoh:.3f}/kg H2")
        print(f"   • Annual H2 production: {result.annual_h2_production_kg:,.0f} kg")
        print(f"   • Total annual cost: ${result.total_annual_cost:,.0f}")

        print("\nCost breakdown:")
        for label, component in (
            ("Capex", breakdown.capex),
            ("Opex", breakdown.opex),
            ("Energy", breakdown.energy),
        ):
            print(
                f"   • {label}: ${component.amount:,.0f} "
                f"({component.percentage:.1f}%)"
            )

        print("\nEnergy:")
        print(f"   • Used: {stats.total_energy_used_mwh:,.0f} MWh")
        print(
            f"   • Curtailed: {stats.total_curtailed_energy_mwh:,.0f} MWh "
            f"({stats.curtailment_pct:.1f}%)"
        )
        print(f"   • Electrolyzer utilization: {stats.utilization_rate:.1%}")
        for entry in result.energy_mix:
            print(f"   • {entry.kind.value}: {entry.pct:.1f}% of supply")

        print("\nSource LCOE ($/kWh):")
        for source, lcoe in zip(self.scenario.sources, result.source_lcoe, strict=True):
            value = "n/a" if lcoe is None else f"{lcoe:.4f}"
            print(f"   • {source.label}: {value}")

        for excluded in result.excluded_sources:
            print(f"   ! source #{excluded.source_index} excluded: {excluded.reason}")

        print(f"\n{self.validation.summary}")
        print("=" * 60 + "\n")


# =============================================================================
# Default Sources
# =============================================================================


def default_grid() -> PowerSource:
    """Grid connection at a flat $0.05/kWh tariff."""
    return PowerSource.grid(
        capacity_mw=100.0,
        electricity_price=0.05,
        opex_per_kw_year=80.0,
        name="Grid",
    )


def default_solar(seed: int | None = 42) -> PowerSource:
    """150 MW solar plant with a seeded synthetic profile."""
    source = PowerSource(
        kind=PowerSourceKind.SOLAR,
        capacity_mw=150.0,
        capex_per_kw=1000.0,
        opex_per_kw_year=20.0,
        location=SOLAR_SITE,
        name="Solar",
    )
    profile = SyntheticProfileGenerator(seed).solar_profile(latitude=SOLAR_SITE.lat)
    return attach_profile(source, to_utc_samples(profile, SOLAR_SITE.lng))


def default_wind(seed: int | None = 43) -> PowerSource:
    """100 MW wind farm with a seeded synthetic profile."""
    source = PowerSource(
        kind=PowerSourceKind.WIND,
        capacity_mw=100.0,
        capex_per_kw=1200.0,
        opex_per_kw_year=25.0,
        location=WIND_SITE,
        name="Wind",
    )
    profile = SyntheticProfileGenerator(seed).wind_profile()
    return attach_profile(source, to_utc_samples(profile, WIND_SITE.lng))


def build_demo_scenarios(seed: int = 42) -> dict[str, DemoScenario]:
    """Build the pre-configured demo scenarios keyed by id."""
    grid = default_grid()
    solar = default_solar(seed)
    wind = default_wind(seed + 1)

    scenarios = [
        DemoScenario(
            id="default_mix",
            name="Grid + Solar + Wind",
            description=(
                "Default configuration: 100 MW grid at $0.05/kWh backing a "
                "150 MW solar plant and a 100 MW wind farm. Renewables are "
                "dispatched first whenever they are cheaper than the grid."
            ),
            sources=(grid, solar, wind),
        ),
        DemoScenario(
            id="grid_only",
            name="Grid Only",
            description=(
                "Electrolyzer running flat out on grid electricity. Energy "
                "cost dominates the LCOH."
            ),
            sources=(grid,),
        ),
        DemoScenario(
            id="offgrid_solar_wind",
            name="Off-grid Solar + Wind",
            description=(
                "No grid connection. Production follows the renewable "
                "profiles and the electrolyzer sits idle on calm nights."
            ),
            sources=(solar, wind),
        ),
    ]
    return {scenario.id: scenario for scenario in scenarios}


def run_demo(
    scenario: DemoScenario,
    financial: FinancialParams | None = None,
) -> DemoResults:
    """Run one demo scenario.

    Args:
        scenario: Scenario to evaluate.
        financial: Financial parameters. Defaults to engine settings.

    Returns:
        DemoResults with the simulation result and validation report.
    """
    if financial is None:
        financial = get_settings().financial_defaults()
    validation = validate_inputs(scenario.sources, scenario.electrolyzer, financial)
    result = run_simulation(scenario.sources, scenario.electrolyzer, financial)
    return DemoResults(
        scenario=scenario,
        financial=financial,
        result=result,
        validation=validation,
    )


def run_default_demo(seed: int = 42) -> DemoResults:
    """Run the default grid + solar + wind configuration.

    Example:
        >>> results = run_default_demo()
        >>> results.print_summary()
    """
    return run_demo(build_demo_scenarios(seed)["default_mix"])


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    run_default_demo().print_summary()
