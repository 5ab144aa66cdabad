"""Test fixtures for reproducible LCOH configurations.

Provides standard configurations:
- Grid-only supply (demand always met)
- Step solar profile (dark until hour 5001, then full output)
- Seeded synthetic solar profile
"""

import pytest

from src.domain.models import (
    HOURS_PER_YEAR,
    ElectrolyzerConfig,
    FinancialParams,
    Location,
    PowerSource,
    PowerSourceKind,
)
from src.profiles.synthetic import SyntheticProfileGenerator

# =============================================================================
# Parameter Fixtures
# =============================================================================


@pytest.fixture
def financial() -> FinancialParams:
    """8% return rate, 20-year lifetime, 90% default capacity factor."""
    return FinancialParams()


@pytest.fixture
def electrolyzer() -> ElectrolyzerConfig:
    """100 MW electrolyzer at 70% efficiency and 50 kWh/kg."""
    return ElectrolyzerConfig()


@pytest.fixture
def site() -> Location:
    """Site near Washington, DC (UTC-5 by longitude)."""
    return Location(lat=38.9, lng=-77.0)


# =============================================================================
# Source Fixtures
# =============================================================================


@pytest.fixture
def grid_source() -> PowerSource:
    """100 MW grid connection at $0.05/kWh."""
    return PowerSource.grid(capacity_mw=100.0, electricity_price=0.05)


@pytest.fixture
def step_profile() -> list[float]:
    """Zero output for hours 0-5000, full output for hours 5001-8759."""
    return [0.0] * 5001 + [1.0] * (HOURS_PER_YEAR - 5001)


@pytest.fixture
def step_solar(step_profile: list[float], site: Location) -> PowerSource:
    """100 MW solar plant following the step profile."""
    return PowerSource(
        kind=PowerSourceKind.SOLAR,
        capacity_mw=100.0,
        capex_per_kw=1000.0,
        opex_per_kw_year=20.0,
        time_series=step_profile,
        location=site,
    )


@pytest.fixture
def synthetic_solar_profile() -> tuple[float, ...]:
    """Seeded synthetic solar profile in local time."""
    return SyntheticProfileGenerator(seed=42).solar_profile(latitude=38.9)


@pytest.fixture
def synthetic_solar(
    synthetic_solar_profile: tuple[float, ...], site: Location
) -> PowerSource:
    """150 MW solar plant with the synthetic profile."""
    return PowerSource(
        kind=PowerSourceKind.SOLAR,
        capacity_mw=150.0,
        capex_per_kw=1000.0,
        opex_per_kw_year=20.0,
        time_series=synthetic_solar_profile,
        location=site,
    )


@pytest.fixture
def unpriced_wind() -> PowerSource:
    """Wind farm with neither a profile nor an LCOE."""
    return PowerSource(
        kind=PowerSourceKind.WIND,
        capacity_mw=100.0,
        capex_per_kw=1200.0,
        opex_per_kw_year=25.0,
    )
