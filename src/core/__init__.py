"""Cross-cutting infrastructure (logging)."""

from src.core.logging import JSONFormatter, setup_logging

__all__ = ["JSONFormatter", "setup_logging"]
