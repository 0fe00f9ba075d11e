from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

SuggestionType = Literal["keyword", "formatting", "content", "ats"]
Priority = Literal["high", "medium", "low"]
ScoreBand = Literal["strong", "fair", "weak"]


class JobDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    company: str
    content: str
    keywords: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)


class Suggestion(BaseModel):
    """A single independently toggleable edit to the resume.

    ``original`` is a verbatim substring of the resume the suggestion was
    generated from; when set, ``improved`` carries its replacement.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    type: SuggestionType
    title: str
    description: str
    priority: Priority
    original: str | None = None
    improved: str | None = None
    section: str | None = None

    @model_validator(mode="after")
    def _original_requires_improved(self) -> "Suggestion":
        if self.original is not None and self.improved is None:
            raise ValueError("improved is required when original is set")
        return self


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    match_score: int = Field(ge=0, le=100, alias="matchScore")
    missing_keywords: list[str] = Field(default_factory=list, alias="missingKeywords")
    strength_keywords: list[str] = Field(default_factory=list, alias="strengthKeywords")
    suggestions: list[Suggestion] = Field(default_factory=list)


class OptimizationSummary(BaseModel):
    enabled_count: int = Field(ge=0)
    total_count: int = Field(ge=0)
    original_characters: int = Field(ge=0)
    optimized_characters: int = Field(ge=0)
    growth_percent: int
    projected_score: int = Field(ge=0, le=100)
