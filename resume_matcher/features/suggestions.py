from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from resume_matcher.core.config.analysis import get_limit
from resume_matcher.normalize.sections import extract_experience
from resume_matcher.normalize.utils import has_bullet_marker, has_digit, strip_bullet_prefix
from resume_matcher.schemas.analysis import JobDescription, Suggestion

from .bullet_enhancer import enhance_bullet_point

logger = logging.getLogger(__name__)

STANDARD_EXPERIENCE_HEADERS = ("work experience", "professional experience")
STANDARD_SECTIONS = ("experience", "skills", "education")

_PHONE_RE = re.compile(r"\d{3}[-.]?\d{3}[-.]?\d{4}")


@dataclass(frozen=True)
class SuggestionContext:
    resume_text: str
    resume_lower: str
    job: JobDescription
    missing_keywords: Sequence[str]
    matching_keywords: Sequence[str]


SuggestionBuilder = Callable[[SuggestionContext], Iterable[Suggestion]]


def _missing_keyword_suggestions(ctx: SuggestionContext) -> Iterable[Suggestion]:
    limit = get_limit("keyword_suggestions", 4)
    for index, keyword in enumerate(ctx.missing_keywords[:limit]):
        yield Suggestion(
            id=f"missing-{index}",
            type="keyword",
            title=f'Add "{keyword}" to your mission profile',
            description=(
                "This skill appears in the mission briefing but not in your resume. "
                "Adding it will improve your match score."
            ),
            priority="high",
            section="skills",
        )


def _quantification_suggestions(ctx: SuggestionContext) -> Iterable[Suggestion]:
    window = get_limit("quantify_window", 3)
    min_chars = get_limit("min_bullet_chars", 30)
    for index, line in enumerate(extract_experience(ctx.resume_text)[:window]):
        if not has_bullet_marker(line):
            continue
        bullet_point = strip_bullet_prefix(line)
        if len(bullet_point) <= min_chars or has_digit(bullet_point):
            continue
        yield Suggestion(
            id=f"quantify-{index}",
            type="content",
            title="Quantify your mission achievements",
            description="Add specific numbers and metrics to demonstrate your impact and results.",
            priority="high",
            original=bullet_point,
            improved=enhance_bullet_point(bullet_point),
            section="experience",
        )


def _ats_header_suggestions(ctx: SuggestionContext) -> Iterable[Suggestion]:
    if any(header in ctx.resume_lower for header in STANDARD_EXPERIENCE_HEADERS):
        return
    yield Suggestion(
        id="ats-headers",
        type="ats",
        title="Use standard navigation headers",
        description=(
            'Replace custom section headers with ATS-friendly standard headers like "Work Experience".'
        ),
        priority="medium",
        section="formatting",
    )


def _structure_suggestions(ctx: SuggestionContext) -> Iterable[Suggestion]:
    missing_sections = [section for section in STANDARD_SECTIONS if section not in ctx.resume_lower]
    if not missing_sections:
        return
    yield Suggestion(
        id="formatting-structure",
        type="formatting",
        title="Improve resume structure",
        description=(
            f"Add missing standard sections: {', '.join(missing_sections)}. "
            "This improves readability and ATS parsing."
        ),
        priority="medium",
        section="structure",
    )


def _contact_suggestions(ctx: SuggestionContext) -> Iterable[Suggestion]:
    if "@" in ctx.resume_text and _PHONE_RE.search(ctx.resume_text):
        return
    yield Suggestion(
        id="contact-info",
        type="formatting",
        title="Enhance contact information",
        description="Ensure your email and phone number are clearly visible at the top of your resume.",
        priority="high",
        section="header",
    )


# Earlier builders keep their slots when the list is truncated.
SUGGESTION_BUILDERS: tuple[SuggestionBuilder, ...] = (
    _missing_keyword_suggestions,
    _quantification_suggestions,
    _ats_header_suggestions,
    _structure_suggestions,
    _contact_suggestions,
)


def generate_suggestions(
    resume_text: str,
    job: JobDescription,
    missing_keywords: Sequence[str],
    matching_keywords: Sequence[str],
) -> list[Suggestion]:
    ctx = SuggestionContext(
        resume_text=resume_text,
        resume_lower=resume_text.lower(),
        job=job,
        missing_keywords=list(missing_keywords),
        matching_keywords=list(matching_keywords),
    )

    suggestions: list[Suggestion] = []
    for builder in SUGGESTION_BUILDERS:
        suggestions.extend(builder(ctx))

    limit = get_limit("max_suggestions", 8)
    if len(suggestions) > limit:
        logger.debug("suggestions_truncated generated=%d limit=%d", len(suggestions), limit)
    return suggestions[:limit]
