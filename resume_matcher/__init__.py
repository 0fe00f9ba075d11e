"""Deterministic resume to job-posting matching engine."""

__version__ = "0.1.0"

from resume_matcher.normalize.normalize_jd import parse_job_description  # noqa: E402
from resume_matcher.services.analysis_service import analyze_resume  # noqa: E402
from resume_matcher.services.recompose_service import apply_suggestions  # noqa: E402
from resume_matcher.taxonomy import extract_keywords  # noqa: E402

__all__ = [
    "__version__",
    "analyze_resume",
    "apply_suggestions",
    "extract_keywords",
    "parse_job_description",
]
