from __future__ import annotations

from .utils import contains_any, split_lines

EXPERIENCE_HEADERS = ("experience", "employment", "work history")
EXPERIENCE_TERMINATORS = ("education", "skills", "projects")


def extract_experience(resume_text: str) -> list[str]:
    """Return the trimmed, non-empty lines of the first experience block.

    The block starts after the first line mentioning an experience header
    and ends at the first line mentioning education, skills or projects.
    """
    lines: list[str] = []
    in_experience_section = False

    for raw_line in split_lines(resume_text):
        stripped = raw_line.strip()
        if contains_any(stripped, EXPERIENCE_HEADERS):
            in_experience_section = True
            continue

        if not in_experience_section:
            continue
        if contains_any(stripped, EXPERIENCE_TERMINATORS):
            break
        if stripped:
            lines.append(stripped)

    return lines
