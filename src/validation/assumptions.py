"""Modeling assumption documentation and input validation.

This module provides a structured framework for documenting the
simplifications behind the LCOH model, along with their limitations, and
for checking a configuration against them before a run.

The goal is to make explicit what the model assumes (non-leap year,
constant yield, myopic merit-order dispatch) and where those assumptions
may break down.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain.models import (
    ElectrolyzerConfig,
    FinancialParams,
    PowerSource,
    PowerSourceKind,
)


class AssumptionCategory(str, Enum):
    """Categories of assumptions in the LCOH model."""

    CALENDAR = "calendar"
    PROFILE = "profile"
    ECONOMICS = "economics"
    DISPATCH = "dispatch"
    ELECTROLYZER = "electrolyzer"


class ValidationSeverity(str, Enum):
    """Severity levels for validation issues."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass
class Assumption:
    """A documented assumption in the LCOH model.

    Attributes:
        id: Unique identifier for the assumption.
        category: Category of the assumption.
        title: Short descriptive title.
        description: What is assumed.
        limitations: Known limitations or edge cases.
        default_value: Default value if applicable.
        valid_range: Plausible range of values if applicable.
        unit: Unit of measurement if applicable.
    """

    id: str
    category: AssumptionCategory
    title: str
    description: str
    limitations: list[str] = field(default_factory=list)
    default_value: Any = None
    valid_range: tuple[float, float] | None = None
    unit: str = ""


@dataclass
class ValidationResult:
    """Result of one validation check.

    Attributes:
        assumption_id: ID of the assumption the check relates to.
        is_valid: Whether the check passed.
        severity: Severity level if invalid.
        message: Detailed message about the result.
        actual_value: Observed value (if applicable).
        expected_range: Expected range (if applicable).
    """

    assumption_id: str
    is_valid: bool
    severity: ValidationSeverity
    message: str
    actual_value: Any = None
    expected_range: tuple[float, float] | None = None


@dataclass
class ValidationReport:
    """Validation report for one configuration.

    Attributes:
        results: List of validation results.
        total_checks: Number of checks performed.
        valid_count: Number of passed checks.
        warning_count: Number of warnings.
        error_count: Number of errors.
        critical_count: Number of critical issues.
    """

    results: list[ValidationResult] = field(default_factory=list)
    total_checks: int = 0
    valid_count: int = 0
    warning_count: int = 0
    error_count: int = 0
    critical_count: int = 0

    def add_result(self, result: ValidationResult) -> None:
        """Add a validation result to the report."""
        self.results.append(result)
        self.total_checks += 1

        if result.is_valid:
            self.valid_count += 1
        elif result.severity == ValidationSeverity.WARNING:
            self.warning_count += 1
        elif result.severity == ValidationSeverity.ERROR:
            self.error_count += 1
        elif result.severity == ValidationSeverity.CRITICAL:
            self.critical_count += 1

    @property
    def is_valid(self) -> bool:
        """Check that there are no errors or critical issues."""
        return self.error_count == 0 and self.critical_count == 0

    @property
    def summary(self) -> str:
        """Generate a summary of the validation report."""
        return (
            f"Validation Report: {self.valid_count}/{self.total_checks} valid, "
            f"{self.warning_count} warnings, {self.error_count} errors, "
            f"{self.critical_count} critical"
        )


class AssumptionRegistry:
    """Central registry of all documented assumptions."""

    def __init__(self) -> None:
        """Initialize the assumption registry."""
        self._assumptions: dict[str, Assumption] = {}
        self._register_all_assumptions()

    def _register_all_assumptions(self) -> None:
        """Register all documented assumptions."""
        self.register(
            Assumption(
                id="CAL-001",
                category=AssumptionCategory.CALENDAR,
                title="Non-Leap Simulation Year",
                description=(
                    "Every simulation covers 365 days of 24 hours (8760 hourly "
                    "steps). Monthly totals use the non-leap month lengths."
                ),
                limitations=["Leap-year provider data loses its final day"],
                default_value=8760,
                unit="hours",
            )
        )
        self.register(
            Assumption(
                id="PROF-001",
                category=AssumptionCategory.PROFILE,
                title="Longitude Timezone Approximation",
                description=(
                    "UTC-indexed provider data is shifted into local solar time "
                    "by round(longitude / 15) whole hours."
                ),
                limitations=[
                    "Ignores political timezones and daylight saving time",
                    "Half-hour offsets are rounded",
                ],
                unit="hours",
            )
        )
        self.register(
            Assumption(
                id="PROF-002",
                category=AssumptionCategory.PROFILE,
                title="Clamped Capacity Factors",
                description=(
                    "Hourly capacity factors are clamped to [0, 1]; missing hours "
                    "are treated as zero output."
                ),
                valid_range=(0.0, 1.0),
            )
        )
        self.register(
            Assumption(
                id="ECON-001",
                category=AssumptionCategory.ECONOMICS,
                title="Constant Annual Yield",
                description=(
                    "Each source produces the same energy every year of its "
                    "lifetime. No degradation model is applied."
                ),
                limitations=["Overstates late-life output of PV and wind"],
            )
        )
        self.register(
            Assumption(
                id="ECON-002",
                category=AssumptionCategory.ECONOMICS,
                title="Shared Discount Rate",
                description=(
                    "One return rate and one lifetime apply to every source and "
                    "to the electrolyzer."
                ),
                default_value=8.0,
                valid_range=(0.0, 20.0),
                unit="%",
            )
        )
        self.register(
            Assumption(
                id="ECON-003",
                category=AssumptionCategory.ECONOMICS,
                title="Default Capacity Factor",
                description=(
                    "Renewable sources without an hourly profile are assumed to "
                    "deliver the default capacity factor in every hour."
                ),
                limitations=["Flat output hides diurnal and seasonal variability"],
                default_value=90.0,
                valid_range=(0.0, 100.0),
                unit="%",
            )
        )
        self.register(
            Assumption(
                id="DISP-001",
                category=AssumptionCategory.DISPATCH,
                title="Myopic Merit-Order Dispatch",
                description=(
                    "Each hour, demand is met from the cheapest LCOE first. Hours "
                    "are independent: no storage, ramp limits or look-ahead."
                ),
                limitations=[
                    "Never curtails cheap energy now to avoid shortfalls later",
                    "Unmet demand is not reported as a separate metric",
                ],
            )
        )
        self.register(
            Assumption(
                id="DISP-002",
                category=AssumptionCategory.DISPATCH,
                title="Priced Sources Only",
                description=(
                    "Only sources with an LCOE take part in dispatch. Renewable "
                    "sources need a generation profile or a precomputed LCOE."
                ),
            )
        )
        self.register(
            Assumption(
                id="ELEC-001",
                category=AssumptionCategory.ELECTROLYZER,
                title="Constant Electrolyzer Efficiency",
                description=(
                    "Efficiency does not vary with load or stack age; energy per "
                    "kg equals base consumption divided by efficiency."
                ),
                default_value=70.0,
                valid_range=(40.0, 90.0),
                unit="%",
            )
        )
        self.register(
            Assumption(
                id="ELEC-002",
                category=AssumptionCategory.ELECTROLYZER,
                title="Base Specific Consumption",
                description=(
                    "Energy per kg H2 at 100% efficiency. Values below 33 kWh/kg "
                    "violate the thermodynamic limit and are rejected."
                ),
                default_value=50.0,
                valid_range=(33.0, 60.0),
                unit="kWh/kg",
            )
        )

    def register(self, assumption: Assumption) -> None:
        """Register an assumption in the registry."""
        self._assumptions[assumption.id] = assumption

    def get(self, assumption_id: str) -> Assumption | None:
        """Get an assumption by ID."""
        return self._assumptions.get(assumption_id)

    def get_by_category(self, category: AssumptionCategory) -> list[Assumption]:
        """Get all assumptions in a category."""
        return [a for a in self._assumptions.values() if a.category == category]

    def get_all(self) -> list[Assumption]:
        """Get all registered assumptions."""
        return list(self._assumptions.values())

    def to_markdown(self) -> str:
        """Export all assumptions as markdown documentation.

        Returns:
            Markdown-formatted documentation of all assumptions.
        """
        lines = ["# Model Assumptions\n\n"]

        for category in AssumptionCategory:
            assumptions = self.get_by_category(category)
            if not assumptions:
                continue

            lines.append(f"## {category.value.title()} Assumptions\n\n")

            for a in assumptions:
                lines.append(f"### {a.id}: {a.title}\n\n")
                lines.append(f"**Description:** {a.description}\n\n")

                if a.limitations:
                    lines.append("**Limitations:**\n")
                    for lim in a.limitations:
                        lines.append(f"- {lim}\n")
                    lines.append("\n")

                if a.default_value is not None:
                    unit = f" {a.unit}" if a.unit else ""
                    lines.append(f"**Default Value:** {a.default_value}{unit}\n\n")

                if a.valid_range:
                    unit = f" {a.unit}" if a.unit else ""
                    lines.append(
                        f"**Valid Range:** {a.valid_range[0]} - "
                        f"{a.valid_range[1]}{unit}\n\n"
                    )

                lines.append("---\n\n")

        return "".join(lines)


# Module-level registry singleton
_registry: AssumptionRegistry | None = None


def get_assumption_registry() -> AssumptionRegistry:
    """Get the global assumption registry."""
    global _registry
    if _registry is None:
        _registry = AssumptionRegistry()
    return _registry


def _check_range(
    report: ValidationReport,
    assumption_id: str,
    value: float,
    label: str,
    severity: ValidationSeverity = ValidationSeverity.WARNING,
) -> None:
    assumption = get_assumption_registry().get(assumption_id)
    if assumption is None or assumption.valid_range is None:
        return
    low, high = assumption.valid_range
    is_valid = low <= value <= high
    report.add_result(
        ValidationResult(
            assumption_id=assumption_id,
            is_valid=is_valid,
            severity=severity if not is_valid else ValidationSeverity.INFO,
            message=(
                f"{label} {value}{assumption.unit} is "
                f"{'within' if is_valid else 'outside'} the plausible range"
            ),
            actual_value=value,
            expected_range=assumption.valid_range,
        )
    )


def validate_inputs(
    sources: Sequence[PowerSource],
    electrolyzer: ElectrolyzerConfig,
    financial: FinancialParams,
) -> ValidationReport:
    """Check a configuration against the documented assumptions.

    Args:
        sources: Configured power sources.
        electrolyzer: Electrolyzer configuration.
        financial: Financial parameters.

    Returns:
        ValidationReport with one result per check.
    """
    report = ValidationReport()
    dispatchable_mw = 0.0

    for index, source in enumerate(sources):
        if source.kind == PowerSourceKind.GRID or source.time_series is not None:
            dispatchable_mw += source.capacity_mw
            continue

        if source.lcoe is None:
            report.add_result(
                ValidationResult(
                    assumption_id="DISP-002",
                    is_valid=False,
                    severity=ValidationSeverity.WARNING,
                    message=(
                        f"Source #{index} ({source.label}) has no profile and no "
                        "LCOE and will be excluded from dispatch"
                    ),
                )
            )
            continue

        dispatchable_mw += source.capacity_mw
        report.add_result(
            ValidationResult(
                assumption_id="ECON-003",
                is_valid=True,
                severity=ValidationSeverity.INFO,
                message=(
                    f"Source #{index} ({source.label}) uses the default capacity "
                    f"factor of {financial.default_capacity_factor_pct}%"
                ),
                actual_value=financial.default_capacity_factor_pct,
            )
        )

    if dispatchable_mw == 0:
        report.add_result(
            ValidationResult(
                assumption_id="DISP-002",
                is_valid=False,
                severity=ValidationSeverity.CRITICAL,
                message="No source can be dispatched; no hydrogen would be produced",
            )
        )
    elif dispatchable_mw < electrolyzer.capacity_mw:
        report.add_result(
            ValidationResult(
                assumption_id="DISP-001",
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=(
                    f"Dispatchable capacity {dispatchable_mw} MW is below the "
                    f"electrolyzer rating of {electrolyzer.capacity_mw} MW"
                ),
                actual_value=dispatchable_mw,
            )
        )

    _check_range(report, "ECON-002", financial.return_rate_pct, "Return rate")
    _check_range(report, "ELEC-001", electrolyzer.efficiency_pct, "Efficiency")
    _check_range(
        report,
        "ELEC-002",
        electrolyzer.base_consumption_kwh_per_kg,
        "Base consumption",
    )

    return report
