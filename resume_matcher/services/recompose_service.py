"""Merge user-selected suggestions back into the resume text.

``apply_suggestions`` is a pure function of its inputs: the same text,
suggestions and enabled map always produce the same output. Feeding its
output back in with the same suggestions is not guaranteed to be stable,
because keyword appends and first-occurrence replacements can fire again.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence

from resume_matcher.features.scoring import round_half_up
from resume_matcher.schemas.analysis import OptimizationSummary, Suggestion

logger = logging.getLogger(__name__)

_QUOTED_KEYWORD_RE = re.compile(r'"([^"]+)"')
_SKILLS_LINE_RE = re.compile(r"(skills?:?\s*)([^\n]+)", re.IGNORECASE)

# Preview estimate: each enabled suggestion is credited a flat share of the score.
PROJECTED_POINTS_PER_SUGGESTION = 5


def keyword_from_title(title: str) -> str | None:
    match = _QUOTED_KEYWORD_RE.search(title)
    return match.group(1) if match else None


def _add_keyword(content: str, keyword: str) -> str:
    match = _SKILLS_LINE_RE.search(content)
    if match is None:
        return f"{content}\n\nSKILLS\n{keyword}"

    current_skills = match.group(2)
    if keyword.lower() in current_skills.lower():
        return content

    start, end = match.span()
    return f"{content[:start]}{match.group(1)}{current_skills}, {keyword}{content[end:]}"


def _apply_one(content: str, suggestion: Suggestion) -> str:
    if suggestion.type == "keyword":
        keyword = keyword_from_title(suggestion.title)
        if keyword is None:
            logger.debug("suggestion_skipped id=%s reason=no_quoted_keyword", suggestion.id)
            return content
        return _add_keyword(content, keyword)

    if suggestion.original and suggestion.improved:
        return content.replace(suggestion.original, suggestion.improved, 1)
    return content


def apply_suggestions(
    original_text: str,
    suggestions: Sequence[Suggestion],
    enabled: Mapping[str, bool],
) -> str:
    content = original_text
    for suggestion in suggestions:
        if enabled.get(suggestion.id):
            content = _apply_one(content, suggestion)
    return content


def summarize_optimization(
    original_text: str,
    optimized_text: str,
    suggestions: Sequence[Suggestion],
    enabled: Mapping[str, bool],
    match_score: int = 0,
) -> OptimizationSummary:
    original_characters = len(original_text)
    optimized_characters = len(optimized_text)
    growth_percent = 0
    if original_characters:
        growth_percent = round_half_up(
            (optimized_characters - original_characters) / original_characters * 100
        )

    enabled_count = sum(1 for suggestion in suggestions if enabled.get(suggestion.id))
    projected_score = max(0, min(match_score + enabled_count * PROJECTED_POINTS_PER_SUGGESTION, 100))

    return OptimizationSummary(
        enabled_count=enabled_count,
        total_count=len(suggestions),
        original_characters=original_characters,
        optimized_characters=optimized_characters,
        growth_percent=growth_percent,
        projected_score=projected_score,
    )
