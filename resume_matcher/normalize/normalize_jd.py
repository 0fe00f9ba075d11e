from __future__ import annotations

import logging
import re

from resume_matcher.core.config.analysis import get_limit
from resume_matcher.schemas.analysis import JobDescription
from resume_matcher.taxonomy import extract_keywords

from .utils import contains_any, non_empty_lines, starts_with_bullet

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Software Engineer"
DEFAULT_COMPANY = "Tech Company"

# "Senior Developer - Acme", "Senior Developer | Acme", "Senior Developer at Acme"
_TITLE_PATTERNS = (
    re.compile(r"^(.+?)\s*-\s*.+$"),
    re.compile(r"^(.+?)\s*\|\s*.+$"),
    re.compile(r"^(.+?)\s*at\s*.+$", re.IGNORECASE),
)
_COMPANY_PATTERNS = (
    re.compile(r"^.+?\s*-\s*(.+)$"),
    re.compile(r"^.+?\s*\|\s*(.+)$"),
    re.compile(r"^.+?\s*at\s*(.+)$", re.IGNORECASE),
)
_REQUIREMENT_HEADERS = ("requirement", "qualifications", "must have", "experience")


def _headline(content: str) -> str:
    lines = non_empty_lines(content)
    return lines[0].strip() if lines else ""


def _first_group(line: str, patterns: tuple[re.Pattern[str], ...]) -> str | None:
    for pattern in patterns:
        match = pattern.match(line)
        if match:
            return match.group(1).strip()
    return None


def extract_job_title(content: str) -> str:
    headline = _headline(content)
    if not headline:
        return DEFAULT_TITLE
    return _first_group(headline, _TITLE_PATTERNS) or headline


def extract_company(content: str) -> str:
    headline = _headline(content)
    if not headline:
        return DEFAULT_COMPANY
    return _first_group(headline, _COMPANY_PATTERNS) or DEFAULT_COMPANY


def extract_requirements(content: str) -> list[str]:
    requirements: list[str] = []
    in_requirements_section = False

    for raw_line in non_empty_lines(content):
        stripped = raw_line.strip()
        if contains_any(stripped, _REQUIREMENT_HEADERS):
            in_requirements_section = True
            continue
        if in_requirements_section and starts_with_bullet(stripped):
            requirements.append(stripped[1:].strip())

    return requirements[: get_limit("max_requirements", 8)]


def parse_job_description(content: str) -> JobDescription:
    content = content or ""
    job = JobDescription(
        title=extract_job_title(content),
        company=extract_company(content),
        content=content,
        keywords=extract_keywords(content),
        requirements=extract_requirements(content),
    )
    logger.debug(
        "job_description_parsed title=%r company=%r keywords=%d requirements=%d",
        job.title,
        job.company,
        len(job.keywords),
        len(job.requirements),
    )
    return job
