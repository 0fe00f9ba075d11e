from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from resume_matcher.core.config.analysis import get_analysis_value, get_limit
from resume_matcher.schemas.analysis import ScoreBand


@dataclass(frozen=True)
class KeywordMatch:
    score: int
    matching: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def match_percentage(matching_count: int, total_count: int) -> int:
    if total_count <= 0:
        return 0
    percentage = round_half_up(100 * matching_count / total_count)
    return max(0, min(100, percentage))


def score_keywords(resume_keywords: Sequence[str], job_keywords: Sequence[str]) -> KeywordMatch:
    """Score keyword overlap between a resume and a job posting.

    ``matching`` keeps resume order, ``missing`` keeps job order and is
    capped; the score is the share of job keywords found in the resume.
    """
    job_lowered = {keyword.lower() for keyword in job_keywords}
    resume_lowered = {keyword.lower() for keyword in resume_keywords}

    matching = [keyword for keyword in resume_keywords if keyword.lower() in job_lowered]
    missing = [keyword for keyword in job_keywords if keyword.lower() not in resume_lowered]

    return KeywordMatch(
        score=match_percentage(len(matching), len(job_keywords)),
        matching=matching,
        missing=missing[: get_limit("max_missing_keywords", 8)],
    )


def score_band(score: int) -> ScoreBand:
    strong = get_analysis_value("score_bands.strong", 80)
    fair = get_analysis_value("score_bands.fair", 60)
    if score >= strong:
        return "strong"
    if score >= fair:
        return "fair"
    return "weak"
