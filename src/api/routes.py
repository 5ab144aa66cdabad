"""FastAPI routers for LCOH evaluation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from src.api.schemas import (
    DemoScenarioResponse,
    LCOERequest,
    LCOEResponse,
    SimulationRequest,
    SimulationResponse,
)
from src.api.services import simulation_service
from src.domain.errors import DivisionByZeroResultError, LCOHEngineError

router = APIRouter(prefix="/api/v1", tags=["simulations"])


def _to_http_error(error: LCOHEngineError) -> HTTPException:
    """Map engine errors to HTTP status codes."""
    if isinstance(error, DivisionByZeroResultError):
        return HTTPException(status_code=422, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))


@router.post("/simulations", response_model=SimulationResponse)
def create_simulation(request: SimulationRequest) -> SimulationResponse:
    """Evaluate the LCOH of a source mix feeding an electrolyzer.

    Renewable sources may carry a capacity-factor ``time_series`` already
    in local time, or ``raw_samples`` that are normalized using the source
    longitude.
    """
    try:
        return simulation_service.run_simulation(request)
    except LCOHEngineError as e:
        raise _to_http_error(e) from e


@router.post("/lcoe", response_model=LCOEResponse)
def compute_lcoe(request: LCOERequest) -> LCOEResponse:
    """Compute the LCOE of a single source."""
    try:
        return simulation_service.compute_lcoe(request)
    except LCOHEngineError as e:
        raise _to_http_error(e) from e


# =============================================================================
# Demo Endpoints
# =============================================================================

demo_router = APIRouter(prefix="/api/v1/demos", tags=["demos"])


@demo_router.get("/scenarios", response_model=list[DemoScenarioResponse])
def list_demo_scenarios() -> list[DemoScenarioResponse]:
    """List pre-configured demo scenarios."""
    return simulation_service.list_demo_scenarios()


@demo_router.post("/run/{scenario_id}", response_model=SimulationResponse)
def run_demo_scenario(
    scenario_id: str,
    include_hourly: bool = Query(default=False, description="Include hourly trace"),
) -> SimulationResponse:
    """Run a pre-configured demo scenario."""
    try:
        result = simulation_service.run_demo_scenario(scenario_id, include_hourly)
    except LCOHEngineError as e:
        raise _to_http_error(e) from e

    if result is None:
        raise HTTPException(status_code=404, detail="Demo scenario not found")
    return result
