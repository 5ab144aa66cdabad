"""Domain models for the Hydrogen LCOH Engine."""

from src.domain.errors import (
    DivisionByZeroResultError,
    EmptyProfileError,
    InvalidLocationError,
    LCOHEngineError,
    MissingLCOEError,
    ProfilePayloadError,
)
from src.domain.models import (
    HOURS_PER_YEAR,
    CostBreakdown,
    CostComponent,
    ElectrolyzerConfig,
    EnergyMixEntry,
    EnergyStats,
    ExcludedSource,
    FinancialParams,
    HourlyDispatchRecord,
    Location,
    MonthlySummary,
    PowerSource,
    PowerSourceKind,
    SimulationResult,
    SourceDispatch,
)

__all__ = [
    "HOURS_PER_YEAR",
    "PowerSourceKind",
    "Location",
    "PowerSource",
    "ElectrolyzerConfig",
    "FinancialParams",
    "SourceDispatch",
    "HourlyDispatchRecord",
    "CostComponent",
    "CostBreakdown",
    "EnergyStats",
    "EnergyMixEntry",
    "MonthlySummary",
    "ExcludedSource",
    "SimulationResult",
    "LCOHEngineError",
    "InvalidLocationError",
    "EmptyProfileError",
    "ProfilePayloadError",
    "MissingLCOEError",
    "DivisionByZeroResultError",
]
