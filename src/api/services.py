"""Service layer for LCOH evaluations.

This module handles the business logic behind the API, converting between
request schemas and domain models and shaping simulation results into
responses.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import uuid4

from src.api.schemas import (
    DemoScenarioResponse,
    ElectrolyzerRequest,
    FinancialRequest,
    LCOERequest,
    LCOEResponse,
    PowerSourceRequest,
    SimulationRequest,
    SimulationResponse,
    ValidationIssueResponse,
)
from src.config import EngineSettings, get_settings
from src.demo import DemoScenario, build_demo_scenarios
from src.domain.models import (
    HOURS_PER_YEAR,
    ElectrolyzerConfig,
    FinancialParams,
    Location,
    PowerSource,
    PowerSourceKind,
    SimulationResult,
)
from src.economics.lcoe import annual_energy_kwh, compute_lcoe
from src.profiles.providers import attach_profile
from src.simulation.pipeline import run_simulation
from src.validation.assumptions import ValidationReport, validate_inputs

logger = logging.getLogger(__name__)


class SimulationService:
    """Service for running LCOH evaluations."""

    def __init__(self, settings: EngineSettings | None = None) -> None:
        """Initialize the simulation service.

        Args:
            settings: Engine settings supplying financial defaults.
        """
        self._settings = settings or get_settings()
        self._demo_scenarios: dict[str, DemoScenario] | None = None

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def _convert_source(self, request: PowerSourceRequest) -> PowerSource:
        """Convert an API source to a domain model."""
        if request.kind == PowerSourceKind.GRID:
            return PowerSource.grid(
                capacity_mw=request.capacity_mw,
                electricity_price=request.electricity_price,
                capex_per_kw=request.capex_per_kw,
                opex_per_kw_year=request.opex_per_kw_year,
                name=request.name,
            )

        location = None
        if request.location is not None:
            location = Location(lat=request.location.lat, lng=request.location.lng)

        source = PowerSource(
            kind=request.kind,
            capacity_mw=request.capacity_mw,
            capex_per_kw=request.capex_per_kw,
            opex_per_kw_year=request.opex_per_kw_year,
            lcoe=request.lcoe,
            time_series=request.time_series,
            location=location,
            year=request.year,
            name=request.name,
        )
        if request.raw_samples is not None:
            source = attach_profile(source, request.raw_samples, request.sample_scale)
        return source

    def _convert_electrolyzer(self, request: ElectrolyzerRequest) -> ElectrolyzerConfig:
        """Convert API electrolyzer config to domain model."""
        return ElectrolyzerConfig(
            capacity_mw=request.capacity_mw,
            capex_per_kw=request.capex_per_kw,
            opex_per_kw_year=request.opex_per_kw_year,
            efficiency_pct=request.efficiency_pct,
            base_consumption_kwh_per_kg=request.base_consumption_kwh_per_kg,
        )

    def _convert_financial(self, request: FinancialRequest) -> FinancialParams:
        """Merge requested financial parameters over the settings defaults."""
        defaults = self._settings.financial_defaults()
        overrides = request.model_dump(exclude_none=True)
        if not overrides:
            return defaults
        return FinancialParams(**{**defaults.model_dump(), **overrides})

    def _build_response(
        self,
        result: SimulationResult,
        validation: ValidationReport,
        include_hourly: bool,
    ) -> SimulationResponse:
        """Shape a simulation result into an API response."""
        issues = [
            ValidationIssueResponse(
                assumption_id=check.assumption_id,
                severity=check.severity,
                message=check.message,
            )
            for check in validation.results
            if not check.is_valid
        ]

        return SimulationResponse(
            id=uuid4(),
            created_at=datetime.now(),
            lcoh=result.lcoh,
            annual_h2_production_kg=result.annual_h2_production_kg,
            total_annual_cost=result.total_annual_cost,
            cost_breakdown=result.cost_breakdown,
            energy_stats=result.energy_stats,
            energy_mix=list(result.energy_mix),
            monthly_data=list(result.monthly_data),
            source_lcoe=list(result.source_lcoe),
            excluded_sources=list(result.excluded_sources),
            validation_issues=issues,
            hourly_dispatch=list(result.hourly_dispatch) if include_hourly else None,
        )

    def _evaluate(
        self,
        sources: list[PowerSource],
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
        include_hourly: bool,
    ) -> SimulationResponse:
        validation = validate_inputs(sources, electrolyzer, financial)
        logger.debug(validation.summary)
        result = run_simulation(sources, electrolyzer, financial)
        return self._build_response(result, validation, include_hourly)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def run_simulation(self, request: SimulationRequest) -> SimulationResponse:
        """Evaluate the LCOH of a requested configuration.

        Raises:
            LCOHEngineError: If the configuration cannot be evaluated.
        """
        sources = [self._convert_source(s) for s in request.sources]
        return self._evaluate(
            sources,
            self._convert_electrolyzer(request.electrolyzer),
            self._convert_financial(request.financial),
            request.include_hourly,
        )

    def compute_lcoe(self, request: LCOERequest) -> LCOEResponse:
        """Compute the LCOE of a single source.

        Renewable sources without a profile are priced at the default
        capacity factor. A grid source is priced at its tariff.

        Raises:
            DivisionByZeroResultError: If the source yields no energy.
        """
        source = self._convert_source(request.source)
        financial = self._convert_financial(request.financial)

        if source.kind == PowerSourceKind.GRID:
            lcoe = source.lcoe
            energy_kwh = source.capacity_kw * HOURS_PER_YEAR
        else:
            lcoe = compute_lcoe(source, source.time_series, financial)
            energy_kwh = annual_energy_kwh(source, source.time_series, financial)

        capacity_factor_pct = energy_kwh / (source.capacity_kw * HOURS_PER_YEAR) * 100
        return LCOEResponse(
            kind=source.kind,
            lcoe=lcoe,
            annual_energy_mwh=energy_kwh / 1000.0,
            capacity_factor_pct=capacity_factor_pct,
            used_profile=source.has_profile,
        )

    # -------------------------------------------------------------------------
    # Demo Scenarios
    # -------------------------------------------------------------------------

    def _scenarios(self) -> dict[str, DemoScenario]:
        if self._demo_scenarios is None:
            self._demo_scenarios = build_demo_scenarios()
        return self._demo_scenarios

    def list_demo_scenarios(self) -> list[DemoScenarioResponse]:
        """List pre-configured demo scenarios."""
        return [
            DemoScenarioResponse(
                id=scenario.id,
                name=scenario.name,
                description=scenario.description,
                source_kinds=[source.kind for source in scenario.sources],
                electrolyzer_capacity_mw=scenario.electrolyzer.capacity_mw,
            )
            for scenario in self._scenarios().values()
        ]

    def run_demo_scenario(
        self,
        scenario_id: str,
        include_hourly: bool = False,
    ) -> SimulationResponse | None:
        """Run a demo scenario by id, or return None if it does not exist."""
        scenario = self._scenarios().get(scenario_id)
        if scenario is None:
            return None
        return self._evaluate(
            list(scenario.sources),
            scenario.electrolyzer,
            self._settings.financial_defaults(),
            include_hourly,
        )


# Global service instance
simulation_service = SimulationService()
