from __future__ import annotations

import re

BULLET_MARKERS = ("•", "-")

_LEADING_BULLETS_RE = re.compile(r"^[•\-\s]+")
_DIGIT_RE = re.compile(r"\d")


def split_lines(text: str) -> list[str]:
    return (text or "").split("\n")


def non_empty_lines(text: str) -> list[str]:
    return [line for line in split_lines(text) if line.strip()]


def contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def starts_with_bullet(line: str) -> bool:
    return line.startswith(BULLET_MARKERS)


def has_bullet_marker(line: str) -> bool:
    return any(marker in line for marker in BULLET_MARKERS)


def strip_bullet_prefix(line: str) -> str:
    return _LEADING_BULLETS_RE.sub("", line).strip()


def has_digit(text: str) -> bool:
    return bool(_DIGIT_RE.search(text))
