"""Tests for the validation module.

Tests cover:
- Assumption documentation
- AssumptionRegistry functionality
- Input validation report generation
"""

from __future__ import annotations

from src.domain.models import (
    ElectrolyzerConfig,
    FinancialParams,
    PowerSource,
    PowerSourceKind,
)
from src.validation import (
    Assumption,
    AssumptionCategory,
    AssumptionRegistry,
    ValidationReport,
    ValidationSeverity,
    get_assumption_registry,
    validate_inputs,
)
from src.validation.assumptions import ValidationResult

# --- Assumption Tests ---


class TestAssumptionRegistry:
    """Tests for the AssumptionRegistry."""

    def test_registry_covers_all_categories(self) -> None:
        """Test that every category documents at least one assumption."""
        registry = AssumptionRegistry()

        for category in AssumptionCategory:
            assert registry.get_by_category(category)

    def test_get_assumption(self) -> None:
        """Test retrieving the non-leap calendar assumption."""
        assumption = get_assumption_registry().get("CAL-001")

        assert assumption is not None
        assert assumption.category == AssumptionCategory.CALENDAR
        assert assumption.default_value == 8760

    def test_unknown_assumption(self) -> None:
        """Test that unknown IDs return None."""
        assert get_assumption_registry().get("NOPE-999") is None

    def test_register_custom(self) -> None:
        """Test registering a new assumption."""
        registry = AssumptionRegistry()
        registry.register(
            Assumption(
                id="TEST-001",
                category=AssumptionCategory.DISPATCH,
                title="Test Assumption",
                description="Registered in a test.",
            )
        )

        assert registry.get("TEST-001") is not None
        assert len(registry.get_all()) == len(AssumptionRegistry().get_all()) + 1

    def test_singleton(self) -> None:
        """Test that the global registry is shared."""
        assert get_assumption_registry() is get_assumption_registry()

    def test_to_markdown(self) -> None:
        """Test markdown export."""
        markdown = AssumptionRegistry().to_markdown()

        assert markdown.startswith("# Model Assumptions")
        assert "### ECON-002" in markdown
        assert "**Valid Range:**" in markdown


# --- Validation Report Tests ---


class TestValidationReport:
    """Tests for ValidationReport bookkeeping."""

    def test_counts(self) -> None:
        """Test counting results by severity."""
        report = ValidationReport()
        report.add_result(ValidationResult("A", True, ValidationSeverity.INFO, "ok"))
        report.add_result(
            ValidationResult("B", False, ValidationSeverity.WARNING, "warn")
        )

        assert report.total_checks == 2
        assert report.valid_count == 1
        assert report.warning_count == 1
        assert report.is_valid
        assert "1/2 valid" in report.summary

    def test_critical_invalidates(self) -> None:
        """Test that a critical issue makes the report invalid."""
        report = ValidationReport()
        report.add_result(
            ValidationResult("C", False, ValidationSeverity.CRITICAL, "stop")
        )

        assert not report.is_valid
        assert report.critical_count == 1


class TestValidateInputs:
    """Tests for configuration checks before a run."""

    def _failed(self, report: ValidationReport) -> dict[str, ValidationSeverity]:
        return {r.assumption_id: r.severity for r in report.results if not r.is_valid}

    def test_default_configuration_is_valid(
        self,
        grid_source: PowerSource,
        synthetic_solar: PowerSource,
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Test that the default configuration raises no issues."""
        sources = [grid_source, synthetic_solar]
        report = validate_inputs(sources, electrolyzer, financial)

        assert report.is_valid
        assert self._failed(report) == {}

    def test_unpriced_source_warning(
        self,
        grid_source: PowerSource,
        unpriced_wind: PowerSource,
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Test that a non-dispatchable source is flagged."""
        report = validate_inputs([grid_source, unpriced_wind], electrolyzer, financial)

        assert self._failed(report) == {"DISP-002": ValidationSeverity.WARNING}
        assert report.is_valid

    def test_nothing_dispatchable(
        self,
        unpriced_wind: PowerSource,
        electrolyzer: ElectrolyzerConfig,
        financial: FinancialParams,
    ) -> None:
        """Test that a configuration without dispatchable sources is critical."""
        report = validate_inputs([unpriced_wind], electrolyzer, financial)

        assert not report.is_valid
        assert report.critical_count == 1

    def test_default_capacity_factor_noted(
        self, electrolyzer: ElectrolyzerConfig, financial: FinancialParams
    ) -> None:
        """Test that using the default capacity factor is reported as info."""
        wind = PowerSource(kind=PowerSourceKind.WIND, capacity_mw=200.0, lcoe=0.03)
        report = validate_inputs([wind], electrolyzer, financial)

        infos = [r for r in report.results if r.assumption_id == "ECON-003"]
        assert len(infos) == 1
        assert infos[0].is_valid
        assert infos[0].severity == ValidationSeverity.INFO

    def test_undersized_supply(self, financial: FinancialParams) -> None:
        """Test that supply below the electrolyzer rating is flagged."""
        grid = PowerSource.grid(capacity_mw=20.0, electricity_price=0.05)
        report = validate_inputs([grid], ElectrolyzerConfig(), financial)

        assert self._failed(report) == {"DISP-001": ValidationSeverity.WARNING}

    def test_out_of_range_parameters(self, grid_source: PowerSource) -> None:
        """Test plausibility ranges on financial and electrolyzer inputs."""
        report = validate_inputs(
            [grid_source],
            ElectrolyzerConfig(efficiency_pct=95.0, base_consumption_kwh_per_kg=70.0),
            FinancialParams(return_rate_pct=35.0),
        )

        assert set(self._failed(report)) == {"ECON-002", "ELEC-001", "ELEC-002"}
