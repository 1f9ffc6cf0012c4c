"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy PipelineCalculator raz, z ustawień (precyzja, etykiety błędów)
  - Kalkulator jest bezstanowy, więc jedna instancja obsługuje wszystkie żądania
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adapters.calculator.pipeline_calculator import PipelineCalculator
from api.routers import evaluate
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("decicalc.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.calculator = PipelineCalculator(settings=settings)

    logger.info(
        "DeciCalc API ready (precision=%d, display_digits=%d).",
        settings.precision,
        settings.display_digits,
    )
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            precision=settings.precision,
        )

    return app


app = create_app()
