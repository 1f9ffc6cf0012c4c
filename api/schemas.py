"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import ErrorKind


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., max_length=1000)


class PreviewResponse(BaseModel):
    expression: str
    display: str  # "" gdy wyrażenie jest niepełne lub błędne


class CommitResponse(BaseModel):
    expression: str
    display: str
    is_error: bool
    error_kind: Optional[ErrorKind] = None


class TraceResponse(BaseModel):
    expression: str
    tokens: list[str]
    postfix: list[str]
    value: Optional[str] = None
    display: str = ""
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
    precision: int
