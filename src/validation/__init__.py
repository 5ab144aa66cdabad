"""Validation module for documenting modeling assumptions and checking inputs.

Exports:
    AssumptionCategory: Enum for categorizing assumptions.
    Assumption: Individual assumption with its limitations.
    AssumptionRegistry: Central registry of all documented assumptions.
    ValidationReport: Structured report of configuration checks.
    validate_inputs: Check a configuration before a run.
"""

from src.validation.assumptions import (
    Assumption,
    AssumptionCategory,
    AssumptionRegistry,
    ValidationReport,
    ValidationSeverity,
    get_assumption_registry,
    validate_inputs,
)

__all__ = [
    "Assumption",
    "AssumptionCategory",
    "AssumptionRegistry",
    "ValidationReport",
    "ValidationSeverity",
    "get_assumption_registry",
    "validate_inputs",
]
