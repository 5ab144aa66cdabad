"""Engine settings loaded from the environment (prefix ``LCOH_``)."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.models import FinancialParams


class EngineSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LCOH_", case_sensitive=False)

    # App
    app_name: str = "Hydrogen LCOH Engine"
    version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Financial defaults
    default_return_rate_pct: float = 8.0
    default_lifetime_years: int = 20
    default_capacity_factor_pct: float = 90.0

    # API
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    def financial_defaults(self) -> FinancialParams:
        """Financial parameters built from the configured defaults."""
        return FinancialParams(
            return_rate_pct=self.default_return_rate_pct,
            lifetime_years=self.default_lifetime_years,
            default_capacity_factor_pct=self.default_capacity_factor_pct,
        )


@lru_cache
def get_settings() -> EngineSettings:
    return EngineSettings()
