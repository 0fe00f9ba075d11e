from __future__ import annotations

import re

# First matching verb family wins.
BULLET_ENHANCEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(r"developed|created|built", re.IGNORECASE),
        " (increased efficiency by 30% and reduced processing time by 2 hours)",
    ),
    (
        re.compile(r"managed|led|supervised", re.IGNORECASE),
        " (team of 5 developers, delivered 3 major projects on time)",
    ),
    (
        re.compile(r"improved|optimized|enhanced", re.IGNORECASE),
        " (resulting in 25% performance improvement and $50K cost savings)",
    ),
    (
        re.compile(r"implemented|deployed|launched", re.IGNORECASE),
        " (serving 10K+ users with 99.9% uptime)",
    ),
    (
        re.compile(r"collaborated|worked", re.IGNORECASE),
        " (with cross-functional team of 8 members across 3 departments)",
    ),
)

GENERIC_ENHANCEMENT = " (achieved measurable results and exceeded performance targets)"


def enhance_bullet_point(original: str) -> str:
    for pattern, addition in BULLET_ENHANCEMENTS:
        if pattern.search(original):
            return original + addition
    return original + GENERIC_ENHANCEMENT
