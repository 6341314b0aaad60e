"""
API Schemas — Request and Response Models

Pydantic models for the PowerScore API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


# ============================================================
# VALIDATE
# ============================================================

class ValidateRequest(BaseModel):
    """POST /validate request body."""
    text: str = Field(..., max_length=20_000,
                      description="The power statement to score. Blank text scores 0.")
    strict: Optional[bool] = Field(None,
                                   description="Enforce the minimum content length. Defaults to server setting.")
    calibration: Optional[str] = Field(None,
                                       description="Calibration profile name (sales or resume).")
    detect_slop: Optional[bool] = Field(None,
                                        description="Apply the generic-AI-phrasing deduction.")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "Led a team of 8 engineers to cut deployment time 75% in Q1 2025, saving $500K annually.",
         "calibration": "resume"},
    ]}}


class ValidateBatchRequest(BaseModel):
    """POST /validate/batch request body."""
    items: list[ValidateRequest] = Field(..., min_length=1, max_length=100)


class DimensionScoreModel(BaseModel):
    score: int = Field(..., ge=0, le=25)
    max_score: int = 25
    issues: list[str]
    strengths: list[str]


class SlopDetectionModel(BaseModel):
    penalty: int = Field(..., ge=0, le=100)
    issues: list[str]
    deduction: int = Field(..., ge=0)


class ValidationResponse(BaseModel):
    """POST /validate response body."""
    total_score: int = Field(..., ge=0, le=100)
    clarity: DimensionScoreModel
    impact: DimensionScoreModel
    action: DimensionScoreModel
    specificity: DimensionScoreModel
    slop_detection: Optional[SlopDetectionModel] = None
    color: str
    label: str
    calibration: str


class ValidateBatchResponse(BaseModel):
    """POST /validate/batch response body."""
    results: list[ValidationResponse]
    total: int


# ============================================================
# PROMPTS
# ============================================================

class PriorDimension(BaseModel):
    score: int = Field(0, ge=0, le=25)
    issues: list[str] = Field(default_factory=list)


class PriorResult(BaseModel):
    """The parts of a /validate response the critique and rewrite prompts read."""
    total_score: int = Field(0, ge=0, le=100)
    clarity: Optional[PriorDimension] = None
    impact: Optional[PriorDimension] = None
    action: Optional[PriorDimension] = None
    specificity: Optional[PriorDimension] = None


class PromptRequest(BaseModel):
    """POST /prompts/{kind} request body."""
    text: str = Field(..., min_length=1, max_length=20_000)
    result: Optional[PriorResult] = Field(None,
                                          description="A prior /validate response. Scored on the fly when omitted.")
    calibration: Optional[str] = None


class PromptResponse(BaseModel):
    kind: str
    prompt: str


class CleanRequest(BaseModel):
    """POST /prompts/clean request body."""
    response: str = Field(..., max_length=100_000)


class CleanResponse(BaseModel):
    cleaned: str


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    ruleset_version: str
    calibration: str
    strict_mode: bool
    slop_detection: bool
