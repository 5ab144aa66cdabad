"""FastAPI endpoints for the LCOH engine.

This module provides the REST API for the engine, allowing web
applications to evaluate configurations and read back results.
"""

from src.api.main import app, create_app
from src.api.schemas import (
    LCOERequest,
    LCOEResponse,
    PowerSourceRequest,
    SimulationRequest,
    SimulationResponse,
)

__all__ = [
    "app",
    "create_app",
    "LCOERequest",
    "LCOEResponse",
    "PowerSourceRequest",
    "SimulationRequest",
    "SimulationResponse",
]
