"""End-to-end LCOH simulation pipeline."""

from src.simulation.pipeline import can_calculate, prepare_sources, run_simulation

__all__ = ["can_calculate", "prepare_sources", "run_simulation"]
