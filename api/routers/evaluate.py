"""
Router: POST /evaluate/{preview,commit,trace}

Błędy obliczeń są wynikiem, nie awarią — zawsze HTTP 200.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.calculator.pipeline_calculator import PipelineCalculator
from api.dependencies import get_calculator
from api.schemas import CommitResponse, EvaluateRequest, PreviewResponse, TraceResponse

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("/preview", response_model=PreviewResponse)
async def preview(
    body: EvaluateRequest,
    calculator: PipelineCalculator = Depends(get_calculator),
) -> PreviewResponse:
    return PreviewResponse(
        expression=body.expression,
        display=calculator.preview(body.expression),
    )


@router.post("/commit", response_model=CommitResponse)
async def commit(
    body: EvaluateRequest,
    calculator: PipelineCalculator = Depends(get_calculator),
) -> CommitResponse:
    outcome = calculator.commit(body.expression)
    return CommitResponse(**outcome.model_dump())


@router.post("/trace", response_model=TraceResponse)
async def trace(
    body: EvaluateRequest,
    calculator: PipelineCalculator = Depends(get_calculator),
) -> TraceResponse:
    result = calculator.trace(body.expression)
    return TraceResponse(
        expression=result.expression,
        tokens=[t.value for t in result.tokens],
        postfix=[t.value for t in result.postfix],
        value=result.value,
        display=result.display,
        error_kind=result.error_kind,
        error_message=result.error_message,
    )
