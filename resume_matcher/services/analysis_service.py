from __future__ import annotations

import logging
from typing import Sequence

from resume_matcher.features.scoring import score_keywords
from resume_matcher.features.suggestions import generate_suggestions
from resume_matcher.schemas.analysis import AnalysisResult, JobDescription, Suggestion
from resume_matcher.taxonomy import extract_keywords

logger = logging.getLogger(__name__)


def analyze_resume(resume_text: str, job: JobDescription) -> AnalysisResult:
    resume_keywords = extract_keywords(resume_text)
    match = score_keywords(resume_keywords, job.keywords)
    suggestions = generate_suggestions(resume_text, job, match.missing, match.matching)

    logger.info(
        "analysis_complete score=%d matching=%d missing=%d suggestions=%d",
        match.score,
        len(match.matching),
        len(match.missing),
        len(suggestions),
    )
    return AnalysisResult(
        match_score=match.score,
        missing_keywords=match.missing,
        strength_keywords=match.matching,
        suggestions=suggestions,
    )


def set_all(suggestions: Sequence[Suggestion], value: bool) -> dict[str, bool]:
    return {suggestion.id: value for suggestion in suggestions}


def default_enabled_map(suggestions: Sequence[Suggestion]) -> dict[str, bool]:
    """Every suggestion starts enabled."""
    return set_all(suggestions, True)
