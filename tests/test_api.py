"""Tests for the FastAPI endpoints."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.api import app
from src.domain.models import HOURS_PER_YEAR

GRID = {"kind": "grid", "capacity_mw": 100.0, "electricity_price": 0.05}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


class TestInfoEndpoints:
    """Tests for root and health endpoints."""

    def test_root(self, client: TestClient) -> None:
        """Test API information."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Hydrogen LCOH Engine"

    def test_health(self, client: TestClient) -> None:
        """Test health check."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSimulationEndpoint:
    """Tests for POST /api/v1/simulations."""

    def test_grid_only(self, client: TestClient) -> None:
        """Test a grid-only configuration with default parameters."""
        response = client.post("/api/v1/simulations", json={"sources": [GRID]})
        body = response.json()

        assert response.status_code == 200
        assert body["lcoh"] > 0
        assert body["source_lcoe"] == [0.05]
        assert len(body["monthly_data"]) == 12
        assert body["hourly_dispatch"] is None
        assert body["validation_issues"] == []

    def test_include_hourly(self, client: TestClient) -> None:
        """Test that the hourly trace is returned on request."""
        response = client.post(
            "/api/v1/simulations",
            json={"sources": [GRID], "include_hourly": True},
        )

        assert response.status_code == 200
        assert len(response.json()["hourly_dispatch"]) == HOURS_PER_YEAR

    def test_financial_overrides(self, client: TestClient) -> None:
        """Test that a lower return rate lowers the LCOH."""
        default = client.post("/api/v1/simulations", json={"sources": [GRID]})
        cheap_capital = client.post(
            "/api/v1/simulations",
            json={"sources": [GRID], "financial": {"return_rate_pct": 0.0}},
        )

        assert cheap_capital.json()["lcoh"] < default.json()["lcoh"]

    def test_raw_samples_normalized(self, client: TestClient) -> None:
        """Test a solar source supplied as raw UTC watts."""
        solar = {
            "kind": "solar",
            "capacity_mw": 100.0,
            "capex_per_kw": 1000.0,
            "raw_samples": [600.0] * HOURS_PER_YEAR,
            "sample_scale": 1000.0,
            "location": {"lat": 38.9, "lng": -77.0},
        }
        response = client.post("/api/v1/simulations", json={"sources": [solar]})
        body = response.json()

        assert response.status_code == 200
        assert body["energy_stats"]["total_energy_used_mwh"] == pytest.approx(
            60.0 * HOURS_PER_YEAR
        )
        assert body["source_lcoe"][0] > 0

    def test_unpriced_source_excluded(self, client: TestClient) -> None:
        """Test that a source without profile or LCOE is reported, not fatal."""
        wind = {"kind": "wind", "capacity_mw": 50.0}
        response = client.post("/api/v1/simulations", json={"sources": [GRID, wind]})
        body = response.json()

        assert response.status_code == 200
        assert body["excluded_sources"][0]["source_index"] == 1
        assert body["source_lcoe"] == [0.05, None]
        assert "DISP-002" in [i["assumption_id"] for i in body["validation_issues"]]

    def test_grid_requires_price(self, client: TestClient) -> None:
        """Test request validation of grid sources."""
        response = client.post(
            "/api/v1/simulations",
            json={"sources": [{"kind": "grid", "capacity_mw": 100.0}]},
        )
        assert response.status_code == 422

    def test_grid_profile_rejected(self, client: TestClient) -> None:
        """Test that a grid source cannot be sent with a generation profile."""
        for profile in (
            {"time_series": [0.1] * HOURS_PER_YEAR},
            {"raw_samples": [100.0] * 24, "location": {"lat": 0.0, "lng": 0.0}},
        ):
            response = client.post(
                "/api/v1/simulations", json={"sources": [{**GRID, **profile}]}
            )
            assert response.status_code == 422

    def test_conflicting_profiles_rejected(self, client: TestClient) -> None:
        """Test that time_series and raw_samples are mutually exclusive."""
        solar = {
            "kind": "solar",
            "time_series": [0.5],
            "raw_samples": [500.0],
            "location": {"lat": 0.0, "lng": 0.0},
        }
        response = client.post("/api/v1/simulations", json={"sources": [solar]})
        assert response.status_code == 422

    def test_raw_samples_need_location(self, client: TestClient) -> None:
        """Test that normalization without coordinates is a bad request."""
        solar = {"kind": "solar", "raw_samples": [500.0] * 24}
        response = client.post("/api/v1/simulations", json={"sources": [solar]})

        assert response.status_code == 400

    def test_no_production(self, client: TestClient) -> None:
        """Test that a configuration producing no hydrogen is unprocessable."""
        dark = {"kind": "solar", "capex_per_kw": 1000.0, "time_series": [0.0]}
        response = client.post("/api/v1/simulations", json={"sources": [dark]})

        assert response.status_code == 422
        assert "LCOH" in response.json()["detail"]

    def test_empty_sources_rejected(self, client: TestClient) -> None:
        """Test that at least one source is required."""
        response = client.post("/api/v1/simulations", json={"sources": []})
        assert response.status_code == 422


class TestLCOEEndpoint:
    """Tests for POST /api/v1/lcoe."""

    def test_grid_price(self, client: TestClient) -> None:
        """Test that the grid LCOE is its tariff."""
        response = client.post("/api/v1/lcoe", json={"source": GRID})
        body = response.json()

        assert response.status_code == 200
        assert body["lcoe"] == 0.05
        assert body["capacity_factor_pct"] == pytest.approx(100.0)

    def test_default_capacity_factor(self, client: TestClient) -> None:
        """Test pricing a source without a profile."""
        wind = {"kind": "wind", "capacity_mw": 10.0, "capex_per_kw": 1200.0}
        response = client.post(
            "/api/v1/lcoe",
            json={"source": wind, "financial": {"default_capacity_factor_pct": 40.0}},
        )
        body = response.json()

        assert response.status_code == 200
        assert body["lcoe"] > 0
        assert body["used_profile"] is False
        assert body["capacity_factor_pct"] == pytest.approx(40.0)

    def test_dark_profile(self, client: TestClient) -> None:
        """Test that a profile with no energy has no LCOE."""
        dark = {"kind": "solar", "capex_per_kw": 1000.0, "time_series": [0.0]}
        response = client.post("/api/v1/lcoe", json={"source": dark})

        assert response.status_code == 422


class TestDemoEndpoints:
    """Tests for demo scenario endpoints."""

    def test_list_scenarios(self, client: TestClient) -> None:
        """Test listing pre-configured scenarios."""
        response = client.get("/api/v1/demos/scenarios")
        ids = [s["id"] for s in response.json()]

        assert response.status_code == 200
        assert ids == ["default_mix", "grid_only", "offgrid_solar_wind"]

    def test_run_scenario(self, client: TestClient) -> None:
        """Test running the default mix."""
        response = client.post("/api/v1/demos/run/default_mix")
        body = response.json()

        assert response.status_code == 200
        assert body["lcoh"] > 0
        assert len(body["source_lcoe"]) == 3

    def test_unknown_scenario(self, client: TestClient) -> None:
        """Test 404 for unknown scenarios."""
        response = client.post("/api/v1/demos/run/does_not_exist")
        assert response.status_code == 404
