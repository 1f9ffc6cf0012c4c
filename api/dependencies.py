"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.calculator.pipeline_calculator import PipelineCalculator


def get_calculator(request: Request) -> PipelineCalculator:
    return request.app.state.calculator
