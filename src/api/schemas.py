"""Pydantic schemas for API request/response models.

These schemas define the API contract between a result consumer (e.g. a
dashboard) and the engine, providing validation and serialization for all
endpoints.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.models import (
    CostBreakdown,
    EnergyMixEntry,
    EnergyStats,
    ExcludedSource,
    HourlyDispatchRecord,
    MonthlySummary,
    PowerSourceKind,
)
from src.validation.assumptions import ValidationSeverity

# =============================================================================
# Request Schemas
# =============================================================================


class LocationRequest(BaseModel):
    """Site location of a renewable source."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(ge=-90, le=90, description="Latitude (deg)")
    lng: float = Field(ge=-180, le=180, description="Longitude (deg)")


class PowerSourceRequest(BaseModel):
    """Power source configuration."""

    model_config = ConfigDict(extra="forbid")

    kind: PowerSourceKind = Field(description="Source kind")
    name: str = Field(default="", max_length=100, description="Display label")
    capacity_mw: float = Field(default=100.0, gt=0, le=100000, description="MW")
    capex_per_kw: float = Field(default=0.0, ge=0, description="Capital cost ($/kW)")
    opex_per_kw_year: float = Field(
        default=0.0, ge=0, description="Fixed O&M cost ($/kW/year)"
    )
    electricity_price: float | None = Field(
        default=None, ge=0, description="Grid electricity price ($/kWh)"
    )
    lcoe: float | None = Field(
        default=None, ge=0, description="Precomputed LCOE for sources without profile"
    )
    time_series: list[float] | None = Field(
        default=None, description="Hourly capacity factors (local time)"
    )
    raw_samples: list[float] | None = Field(
        default=None, description="Raw UTC-indexed hourly readings to normalize"
    )
    sample_scale: float = Field(
        default=1.0, gt=0, description="Rated output in units of raw_samples"
    )
    location: LocationRequest | None = None
    year: int | None = Field(default=None, ge=1980, le=2100)

    @model_validator(mode="after")
    def _check_profile_inputs(self) -> PowerSourceRequest:
        if self.time_series is not None and self.raw_samples is not None:
            raise ValueError("provide either time_series or raw_samples, not both")
        if self.kind == PowerSourceKind.GRID and self.electricity_price is None:
            raise ValueError("grid sources require electricity_price")
        if self.kind == PowerSourceKind.GRID and (
            self.time_series is not None or self.raw_samples is not None
        ):
            raise ValueError("grid sources cannot carry a generation profile")
        return self


class ElectrolyzerRequest(BaseModel):
    """Electrolyzer configuration."""

    model_config = ConfigDict(extra="forbid")

    capacity_mw: float = Field(default=100.0, gt=0, le=100000, description="MW")
    capex_per_kw: float = Field(default=800.0, ge=0, description="$/kW")
    opex_per_kw_year: float = Field(default=40.0, ge=0, description="$/kW/year")
    efficiency_pct: float = Field(default=70.0, gt=0, le=100, description="%")
    base_consumption_kwh_per_kg: float = Field(
        default=50.0, ge=33.0, description="kWh/kg H2 at 100% efficiency"
    )


class FinancialRequest(BaseModel):
    """Financial parameters. Unset fields fall back to engine settings."""

    model_config = ConfigDict(extra="forbid")

    return_rate_pct: float | None = Field(default=None, ge=0, le=100)
    lifetime_years: int | None = Field(default=None, ge=1, le=100)
    default_capacity_factor_pct: float | None = Field(default=None, ge=0, le=100)


class SimulationRequest(BaseModel):
    """Request to evaluate the LCOH of one configuration."""

    model_config = ConfigDict(extra="forbid")

    sources: list[PowerSourceRequest] = Field(min_length=1)
    electrolyzer: ElectrolyzerRequest = Field(default_factory=ElectrolyzerRequest)
    financial: FinancialRequest = Field(default_factory=FinancialRequest)
    include_hourly: bool = Field(
        default=False, description="Include the 8760-hour dispatch trace"
    )


class LCOERequest(BaseModel):
    """Request to compute the LCOE of a single source."""

    model_config = ConfigDict(extra="forbid")

    source: PowerSourceRequest
    financial: FinancialRequest = Field(default_factory=FinancialRequest)


# =============================================================================
# Response Schemas
# =============================================================================


class ValidationIssueResponse(BaseModel):
    """A configuration check that did not pass."""

    assumption_id: str
    severity: ValidationSeverity
    message: str


class SimulationResponse(BaseModel):
    """Complete LCOH evaluation result."""

    id: UUID
    created_at: datetime
    lcoh: float
    annual_h2_production_kg: float
    total_annual_cost: float
    cost_breakdown: CostBreakdown
    energy_stats: EnergyStats
    energy_mix: list[EnergyMixEntry]
    monthly_data: list[MonthlySummary]
    source_lcoe: list[float | None]
    excluded_sources: list[ExcludedSource] = Field(default_factory=list)
    validation_issues: list[ValidationIssueResponse] = Field(default_factory=list)
    hourly_dispatch: list[HourlyDispatchRecord] | None = None


class LCOEResponse(BaseModel):
    """LCOE of a single source."""

    kind: PowerSourceKind
    lcoe: float
    annual_energy_mwh: float
    capacity_factor_pct: float
    used_profile: bool


# =============================================================================
# Health & Info Schemas
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str
    timestamp: datetime


# =============================================================================
# Demo Data Schemas
# =============================================================================


class DemoScenarioResponse(BaseModel):
    """Pre-configured demo scenario."""

    id: str
    name: str
    description: str
    source_kinds: list[PowerSourceKind]
    electrolyzer_capacity_mw: float
