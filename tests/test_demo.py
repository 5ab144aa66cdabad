"""Tests for the demo scenarios."""

import pytest

from src.demo import build_demo_scenarios, default_grid, run_default_demo, run_demo
from src.domain.models import PowerSourceKind


@pytest.fixture(scope="module")
def scenarios():
    """Demo scenarios built once for the module."""
    return build_demo_scenarios(seed=42)


class TestDemoScenarios:
    """Tests for pre-configured source mixes."""

    def test_scenario_ids(self, scenarios) -> None:
        """Test available scenarios."""
        assert list(scenarios) == ["default_mix", "grid_only", "offgrid_solar_wind"]

    def test_default_mix_sources(self, scenarios) -> None:
        """Test the default grid + solar + wind configuration."""
        grid, solar, wind = scenarios["default_mix"].sources

        assert grid == default_grid()
        assert solar.kind == PowerSourceKind.SOLAR
        assert solar.capacity_mw == 150.0
        assert solar.has_profile
        assert wind.kind == PowerSourceKind.WIND
        assert wind.has_profile

    def test_offgrid_has_no_grid(self, scenarios) -> None:
        """Test that the off-grid scenario only uses renewables."""
        kinds = {s.kind for s in scenarios["offgrid_solar_wind"].sources}
        assert PowerSourceKind.GRID not in kinds


class TestRunDemo:
    """Tests for running demos end to end."""

    def test_grid_only(self, scenarios) -> None:
        """Test the grid-only scenario runs at full utilization."""
        results = run_demo(scenarios["grid_only"])

        assert results.result.energy_stats.utilization_rate == pytest.approx(1.0)
        assert results.validation.is_valid

    def test_offgrid_partial_utilization(self, scenarios) -> None:
        """Test that the off-grid scenario runs below full utilization."""
        results = run_demo(scenarios["offgrid_solar_wind"])

        assert 0 < results.result.energy_stats.utilization_rate < 1.0

    def test_default_demo_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the printed summary of the default demo."""
        results = run_default_demo()
        results.print_summary()

        output = capsys.readouterr().out
        assert "Grid + Solar + Wind" in output
        assert "LCOH: $" in output
        assert results.result.lcoh > 0
