from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from .analysis import AnalysisResult, JobDescription, OptimizationSummary, ScoreBand, Suggestion

LocaleCode = Literal["en", "de", "es", "fr", "it"]
DocumentSource = Literal["pdf", "docx", "txt"]


class ParseJobRequest(BaseModel):
    job_description_text: str = Field(default="", max_length=50000)


class AnalyzeRequest(BaseModel):
    locale: LocaleCode = "en"
    resume_text: str = Field(min_length=1, max_length=50000)
    job_description_text: str = Field(default="", max_length=50000)


class AnalyzeResponse(BaseModel):
    job: JobDescription
    result: AnalysisResult
    score_band: ScoreBand
    enabled: dict[str, bool] = Field(default_factory=dict)
    generated_at: datetime


class ApplyRequest(BaseModel):
    locale: LocaleCode = "en"
    resume_text: str = Field(min_length=1, max_length=50000)
    suggestions: list[Suggestion] = Field(default_factory=list)
    enabled: dict[str, bool] = Field(default_factory=dict)
    match_score: int = Field(default=0, ge=0, le=100)


class ApplyResponse(BaseModel):
    optimized_text: str
    summary: OptimizationSummary


class ExtractTextResponse(BaseModel):
    filename: str
    source_type: DocumentSource
    text: str
    characters: int = Field(ge=0)
    details: dict[str, Any] = Field(default_factory=dict)
