from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from resume_matcher.core.config import settings
from resume_matcher.core.rate_limit import rate_limit
from resume_matcher.parsing.errors import DocumentError
from resume_matcher.parsing.parse import ensure_analyzable, extract_text
from resume_matcher.schemas.tools import ExtractTextResponse

router = APIRouter()

_READ_CHUNK_BYTES = 1024 * 64


@router.post("/documents/extract", response_model=ExtractTextResponse)
@rate_limit()
async def documents_extract(request: Request, file: UploadFile = File(...)):
    _ = request
    filename = file.filename or "uploaded-file"
    max_bytes = settings.max_upload_bytes

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    payload = b"".join(chunks)

    try:
        parsed = extract_text(payload, file.content_type, filename)
        ensure_analyzable(parsed.text, settings.min_resume_chars)
    except DocumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return ExtractTextResponse(
        filename=filename,
        source_type=parsed.source_type,
        text=parsed.text,
        characters=len(parsed.text),
        details={"doc_id": parsed.doc_id, **parsed.details, "warnings": parsed.parsing_warnings},
    )
