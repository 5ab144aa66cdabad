"""End-to-end tests for the LCOH simulation pipeline."""

from __future__ import annotations

import pytest

from src.dispatch.merit_order import MISSING_LCOE_REASON
from src.domain.errors import DivisionByZeroResultError
from src.domain.models import (
    HOURS_PER_YEAR,
    ElectrolyzerConfig,
    FinancialParams,
    PowerSource,
    PowerSourceKind,
)
from src.economics import compute_lcoe
from src.simulation import can_calculate, prepare_sources, run_simulation


class TestCanCalculate:
    """Tests for the pre-run readiness check."""

    def test_ready(
        self, grid_source: PowerSource, synthetic_solar: PowerSource
    ) -> None:
        """Test that grid and profile-backed sources are ready."""
        assert can_calculate([grid_source, synthetic_solar])

    def test_not_ready(
        self, grid_source: PowerSource, unpriced_wind: PowerSource
    ) -> None:
        """Test that an unpriced renewable blocks calculation."""
        assert not can_calculate([grid_source, unpriced_wind])


class TestPrepareSources:
    """Tests for per-run LCOE resolution."""

    def test_inputs_not_mutated(
        self, synthetic_solar: PowerSource, financial: FinancialParams
    ) -> None:
        """Test that resolved LCOEs live on copies only."""
        resolved, excluded = prepare_sources([synthetic_solar], financial)

        assert excluded == []
        assert synthetic_solar.lcoe is None
        assert resolved[0].lcoe == pytest.approx(
            compute_lcoe(synthetic_solar, synthetic_solar.time_series, financial)
        )

    def test_recomputed_after_financial_change(
        self, synthetic_solar: PowerSource
    ) -> None:
        """Test that a new return rate gives a new LCOE."""
        low, _ = prepare_sources([synthetic_solar], FinancialParams(return_rate_pct=4))
        high, _ = prepare_sources(
            [synthetic_solar], FinancialParams(return_rate_pct=12)
        )

        assert high[0].lcoe > low[0].lcoe

    def test_dark_profile_excluded(
        self, grid_source: PowerSource, financial: FinancialParams
    ) -> None:
        """Test that a profile with no energy is excluded with a reason."""
        dark = PowerSource(
            kind=PowerSourceKind.SOLAR,
            capacity_mw=50.0,
            capex_per_kw=1000.0,
            time_series=[0.0] * HOURS_PER_YEAR,
        )
        resolved, excluded = prepare_sources([grid_source, dark], financial)

        assert resolved[1].lcoe is None
        assert len(excluded) == 1
        assert excluded[0].source_index == 1
        assert "LCOE" in excluded[0].reason


class TestRunSimulation:
    """Tests for complete LCOH runs."""

    def test_grid_only(
        self,
        grid_source: PowerSource,
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Test a grid-only run: no curtailment, full utilization."""
        result = run_simulation([grid_source], electrolyzer, financial)

        assert result.lcoh > 0
        assert result.energy_stats.total_curtailed_energy_mwh == 0.0
        assert result.energy_stats.utilization_rate == pytest.approx(1.0)
        assert result.source_lcoe == (0.05,)
        assert not result.has_exclusions
        assert len(result.hourly_dispatch) == HOURS_PER_YEAR

    def test_step_solar(
        self,
        step_solar: PowerSource,
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Test an off-grid plant that is dark until hour 5001."""
        result = run_simulation([step_solar], electrolyzer, financial)
        expected_mwh = 100.0 * (8759 - 5001 + 1)

        assert result.energy_stats.total_energy_used_mwh == expected_mwh
        assert result.energy_stats.total_curtailed_energy_mwh == 0.0
        assert result.annual_h2_production_kg == pytest.approx(
            expected_mwh * 1000.0 / electrolyzer.energy_per_kg_kwh
        )
        # Dark months produce nothing
        assert result.monthly_data[0].energy_mwh == 0.0
        assert result.monthly_data[11].energy_mwh > 0.0

    def test_unpriced_source_reported(
        self,
        grid_source: PowerSource,
        unpriced_wind: PowerSource,
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Test that a source without an LCOE is excluded, not fatal."""
        result = run_simulation([unpriced_wind, grid_source], electrolyzer, financial)

        assert result.has_exclusions
        assert result.excluded_sources[0].source_index == 0
        assert result.excluded_sources[0].reason == MISSING_LCOE_REASON
        assert result.source_lcoe == (None, 0.05)
        assert [e.kind for e in result.energy_mix] == [PowerSourceKind.GRID]

    def test_no_production_raises(
        self, electrolyzer: ElectrolyzerConfig, financial: FinancialParams
    ) -> None:
        """Test that a run producing no hydrogen is an error."""
        dark = PowerSource(
            kind=PowerSourceKind.SOLAR,
            capacity_mw=50.0,
            capex_per_kw=1000.0,
            time_series=[0.0] * HOURS_PER_YEAR,
        )

        with pytest.raises(DivisionByZeroResultError, match="LCOH"):
            run_simulation([dark], electrolyzer, financial)

    def test_free_energy_is_valid(self, financial: FinancialParams) -> None:
        """Test that a zero LCOE is dispatched like any other price."""
        electrolyzer = ElectrolyzerConfig(capex_per_kw=0.0, opex_per_kw_year=0.0)
        free_wind = PowerSource(kind=PowerSourceKind.WIND, capacity_mw=100.0, lcoe=0.0)

        result = run_simulation([free_wind], electrolyzer, financial)

        assert result.lcoh == 0.0
        assert result.annual_h2_production_kg > 0
        assert not result.has_exclusions

    def test_idempotent(
        self,
        grid_source: PowerSource,
        synthetic_solar: PowerSource,
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Test identical results for identical inputs."""
        sources = [grid_source, synthetic_solar]

        first = run_simulation(sources, electrolyzer, financial)
        second = run_simulation(sources, electrolyzer, financial)

        assert first == second
