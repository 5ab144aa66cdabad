"""Core domain models for the Hydrogen LCOH Engine.

All models use Pydantic with strict validation. Units:
- Power: MW (megawatts), one hourly timestep so MW == MWh per step
- Energy: MWh for dispatch totals, kWh inside cost calculations
- Costs: $/kW (capex), $/kW/year (opex), $/kWh (LCOE), $/kg (LCOH)
- Time: 8760 hourly timesteps (non-leap year)
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# =============================================================================
# Calendar Constants
# =============================================================================

HOURS_PER_DAY = 24
DAYS_PER_YEAR = 365
HOURS_PER_YEAR = HOURS_PER_DAY * DAYS_PER_YEAR  # 8760, non-leap convention
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Thermodynamic floor for electrolysis (HHV of hydrogen)
MIN_BASE_CONSUMPTION_KWH_PER_KG = 33.0

# =============================================================================
# Type Aliases with Validation
# =============================================================================

PowerMW = Annotated[float, Field(ge=0, description="Power in megawatts (MW)")]
EnergyMWh = Annotated[float, Field(ge=0, description="Energy in megawatt-hours (MWh)")]
CapacityMW = Annotated[float, Field(gt=0, description="Installed capacity (MW)")]
CostPerKW = Annotated[float, Field(ge=0, description="Capital cost ($/kW)")]
CostPerKWYear = Annotated[float, Field(ge=0, description="Fixed O&M cost ($/kW/year)")]
Percentage = Annotated[float, Field(description="Percentage (0-100)")]


def fit_capacity_factors(values: object) -> tuple[float, ...]:
    """Clamp samples into [0, 1] and pad/truncate to a full year.

    Shorter series are zero-padded, longer ones truncated. NaN samples are
    treated as zero output.
    """
    arr = np.nan_to_num(np.asarray(values, dtype=np.float64).ravel(), nan=0.0)
    arr = np.clip(arr[:HOURS_PER_YEAR], 0.0, 1.0)
    if arr.size < HOURS_PER_YEAR:
        arr = np.concatenate([arr, np.zeros(HOURS_PER_YEAR - arr.size)])
    return tuple(float(v) for v in arr)


# =============================================================================
# Enums
# =============================================================================


class PowerSourceKind(str, Enum):
    """Kinds of power source feeding the electrolyzer."""

    GRID = "grid"
    SOLAR = "solar"
    WIND = "wind"


# =============================================================================
# Input Models
# =============================================================================


class Location(BaseModel):
    """Geographic site of a renewable source."""

    model_config = ConfigDict(frozen=True)

    lat: Annotated[float, Field(ge=-90, le=90, description="Latitude (deg)")]
    lng: Annotated[float, Field(ge=-180, le=180, description="Longitude (deg)")]


class PowerSource(BaseModel):
    """A grid connection or renewable plant supplying the electrolyzer.

    ``lcoe`` is the grid electricity price for grid sources. For solar and
    wind it is a derived value that must be recomputed whenever capex, opex,
    capacity, the generation profile or the financial parameters change.
    """

    model_config = ConfigDict(frozen=True)

    kind: PowerSourceKind
    capacity_mw: CapacityMW
    capex_per_kw: CostPerKW = 0.0
    opex_per_kw_year: CostPerKWYear = 0.0
    lcoe: Annotated[float | None, Field(ge=0, description="LCOE ($/kWh)")] = None
    time_series: tuple[float, ...] | None = None
    location: Location | None = None
    year: int | None = None
    name: str = ""

    @field_validator("time_series", mode="before")
    @classmethod
    def _coerce_time_series(cls, value: object) -> tuple[float, ...] | None:
        if value is None:
            return None
        return fit_capacity_factors(value)

    @model_validator(mode="after")
    def _check_grid_pricing(self) -> PowerSource:
        if self.kind == PowerSourceKind.GRID:
            if self.lcoe is None:
                raise ValueError("grid sources require an electricity price (lcoe)")
            if self.time_series is not None:
                raise ValueError("grid sources never carry a generation profile")
        return self

    @classmethod
    def grid(
        cls,
        capacity_mw: float,
        electricity_price: float,
        capex_per_kw: float = 0.0,
        opex_per_kw_year: float = 0.0,
        name: str = "",
    ) -> PowerSource:
        """Create a grid connection priced at a flat electricity tariff."""
        return cls(
            kind=PowerSourceKind.GRID,
            capacity_mw=capacity_mw,
            capex_per_kw=capex_per_kw,
            opex_per_kw_year=opex_per_kw_year,
            lcoe=electricity_price,
            name=name,
        )

    @property
    def label(self) -> str:
        """Display label, falling back to the source kind."""
        return self.name or self.kind.value

    @property
    def capacity_kw(self) -> float:
        """Installed capacity in kW."""
        return self.capacity_mw * 1000.0

    @property
    def has_profile(self) -> bool:
        """Whether an hourly generation profile is attached."""
        return self.time_series is not None


class ElectrolyzerConfig(BaseModel):
    """Electrolyzer plant configuration."""

    model_config = ConfigDict(frozen=True)

    capacity_mw: CapacityMW = 100.0
    capex_per_kw: CostPerKW = 800.0
    opex_per_kw_year: CostPerKWYear = 40.0
    efficiency_pct: Annotated[float, Field(gt=0, le=100)] = 70.0
    base_consumption_kwh_per_kg: Annotated[
        float,
        Field(
            ge=MIN_BASE_CONSUMPTION_KWH_PER_KG,
            description="Energy per kg H2 at 100% efficiency (kWh/kg)",
        ),
    ] = 50.0

    @property
    def capacity_kw(self) -> float:
        """Rated input power in kW."""
        return self.capacity_mw * 1000.0

    @property
    def energy_per_kg_kwh(self) -> float:
        """Effective energy consumption per kg H2 at the configured efficiency."""
        return self.base_consumption_kwh_per_kg / (self.efficiency_pct / 100.0)


class FinancialParams(BaseModel):
    """Discounting and default-yield parameters shared by all sources."""

    model_config = ConfigDict(frozen=True)

    return_rate_pct: Annotated[float, Field(ge=0)] = 8.0
    lifetime_years: Annotated[int, Field(ge=1)] = 20
    default_capacity_factor_pct: Annotated[float, Field(ge=0, le=100)] = 90.0

    @property
    def annual_hours(self) -> int:
        """Hours per simulated year (fixed, non-leap)."""
        return HOURS_PER_YEAR

    @property
    def discount_rate(self) -> float:
        """Return rate as a fraction."""
        return self.return_rate_pct / 100.0

    @property
    def default_capacity_factor(self) -> float:
        """Default capacity factor as a fraction."""
        return self.default_capacity_factor_pct / 100.0


# =============================================================================
# Dispatch Records
# =============================================================================


class SourceDispatch(BaseModel):
    """Allocation of one source during one hour."""

    model_config = ConfigDict(frozen=True)

    source_index: Annotated[int, Field(ge=0)]
    kind: PowerSourceKind
    power_available: PowerMW
    power_used: PowerMW
    power_curtailed: PowerMW

    def validate_energy_balance(self, tolerance: float = 1e-9) -> bool:
        """Check that used + curtailed equals available power."""
        total = self.power_used + self.power_curtailed
        return abs(self.power_available - total) <= tolerance


class HourlyDispatchRecord(BaseModel):
    """Dispatch outcome for a single hour of the year."""

    model_config = ConfigDict(frozen=True)

    hour: Annotated[int, Field(ge=0, lt=HOURS_PER_YEAR)]
    energy_used_mwh: EnergyMWh
    curtailed_energy_mwh: EnergyMWh
    dispatch_fraction: Annotated[float, Field(ge=0)]
    per_source: tuple[SourceDispatch, ...] = ()


# =============================================================================
# Result Models
# =============================================================================


class CostComponent(BaseModel):
    """Annual cost amount and its share of the total."""

    model_config = ConfigDict(frozen=True)

    amount: float
    percentage: Percentage


class CostBreakdown(BaseModel):
    """Annualized capex, annual opex and energy cost."""

    model_config = ConfigDict(frozen=True)

    capex: CostComponent
    opex: CostComponent
    energy: CostComponent


class EnergyStats(BaseModel):
    """Annual energy balance of the electrolyzer."""

    model_config = ConfigDict(frozen=True)

    total_energy_used_mwh: EnergyMWh
    total_curtailed_energy_mwh: EnergyMWh
    curtailment_pct: Percentage
    utilization_rate: Annotated[float, Field(ge=0)]


class EnergyMixEntry(BaseModel):
    """Share of consumed energy supplied by one source kind."""

    model_config = ConfigDict(frozen=True)

    kind: PowerSourceKind
    energy_mwh: EnergyMWh
    pct: Percentage


class MonthlySummary(BaseModel):
    """Energy consumed and curtailed in one calendar month."""

    model_config = ConfigDict(frozen=True)

    month: Annotated[int, Field(ge=1, le=12)]
    label: str
    energy_mwh: EnergyMWh
    curtailed_mwh: EnergyMWh


class ExcludedSource(BaseModel):
    """A source left out of dispatch and why."""

    model_config = ConfigDict(frozen=True)

    source_index: int
    kind: PowerSourceKind
    reason: str


class SimulationResult(BaseModel):
    """Complete outcome of one LCOH evaluation.

    Produced fresh on every run and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    lcoh: Annotated[float, Field(description="Levelized cost of hydrogen ($/kg)")]
    annual_h2_production_kg: Annotated[float, Field(gt=0)]
    total_annual_cost: float
    cost_breakdown: CostBreakdown
    energy_stats: EnergyStats
    energy_mix: tuple[EnergyMixEntry, ...]
    monthly_data: tuple[MonthlySummary, ...]
    hourly_dispatch: tuple[HourlyDispatchRecord, ...]
    source_lcoe: tuple[float | None, ...] = ()
    excluded_sources: tuple[ExcludedSource, ...] = ()

    @property
    def curtailment_rate(self) -> float:
        """Curtailed share of available energy (percent)."""
        return self.energy_stats.curtailment_pct

    @property
    def has_exclusions(self) -> bool:
        """Check if any source was left out of dispatch."""
        return len(self.excluded_sources) > 0
