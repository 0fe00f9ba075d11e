from datetime import datetime, timezone

from fastapi import APIRouter, Header, HTTPException, Request, status

from resume_matcher.core.config import settings
from resume_matcher.core.rate_limit import rate_limit
from resume_matcher.core.security import check_api_key
from resume_matcher.features.scoring import score_band
from resume_matcher.normalize.normalize_jd import parse_job_description
from resume_matcher.parsing.errors import DocumentTooShortError
from resume_matcher.parsing.parse import ensure_analyzable
from resume_matcher.schemas.analysis import JobDescription
from resume_matcher.schemas.tools import (
    AnalyzeRequest,
    AnalyzeResponse,
    ApplyRequest,
    ApplyResponse,
    ParseJobRequest,
)
from resume_matcher.services.analysis_service import analyze_resume, default_enabled_map
from resume_matcher.services.recompose_service import apply_suggestions, summarize_optimization

router = APIRouter()


@router.post("/jobs/parse", response_model=JobDescription)
@rate_limit()
async def jobs_parse(request: Request, payload: ParseJobRequest):
    _ = request
    return parse_job_description(payload.job_description_text)


@router.post("/analysis", response_model=AnalyzeResponse)
@rate_limit()
async def analysis_run(
    request: Request,
    payload: AnalyzeRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key, payload.locale)
    try:
        ensure_analyzable(payload.resume_text, settings.min_resume_chars)
    except DocumentTooShortError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    job = parse_job_description(payload.job_description_text)
    result = analyze_resume(payload.resume_text, job)
    return AnalyzeResponse(
        job=job,
        result=result,
        score_band=score_band(result.match_score),
        enabled=default_enabled_map(result.suggestions),
        generated_at=datetime.now(timezone.utc),
    )


@router.post("/analysis/apply", response_model=ApplyResponse)
@rate_limit()
async def analysis_apply(
    request: Request,
    payload: ApplyRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key, payload.locale)
    optimized = apply_suggestions(payload.resume_text, payload.suggestions, payload.enabled)
    return ApplyResponse(
        optimized_text=optimized,
        summary=summarize_optimization(
            payload.resume_text,
            optimized,
            payload.suggestions,
            payload.enabled,
            match_score=payload.match_score,
        ),
    )
