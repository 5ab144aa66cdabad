"""FastAPI application for the Hydrogen LCOH Engine.

This module provides the main FastAPI application with all routes,
middleware, and configuration.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import demo_router
from src.api.routes import router as simulation_router
from src.api.schemas import HealthResponse
from src.config import get_settings
from src.core.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    setup_logging(settings.log_level, json_format=settings.log_json)
    logger.info("Starting %s API v%s", settings.app_name, settings.version)
    yield
    logger.info("Shutting down API")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="""
Levelized cost of hydrogen for an electrolyzer fed by grid and renewables.

## Features

- **LCOE**: Discounted cost of each solar, wind or grid source
- **Merit-order Dispatch**: Cheapest sources first, hour by hour over 8760 hours
- **LCOH**: Annualized capex, opex and energy cost per kg of hydrogen
- **Profiles**: Raw hourly provider data normalized to local time

## Key Endpoints

- `POST /api/v1/simulations`: Evaluate the LCOH of a configuration
- `POST /api/v1/lcoe`: Compute the LCOE of one source
- `GET /api/v1/demos/scenarios`: List pre-configured demo scenarios
- `POST /api/v1/demos/run/{scenario_id}`: Run a demo scenario
    """,
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(simulation_router)
app.include_router(demo_router)


# =============================================================================
# Root & Health Endpoints
# =============================================================================


@app.get("/", response_class=JSONResponse)
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.version,
        timestamp=datetime.now(),
    )


# =============================================================================
# Main Entry Point
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
