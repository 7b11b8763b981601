"""
Keyword frequency analysis endpoints.
"""
from fastapi import APIRouter, HTTPException, status
import structlog

from textfreq.config import get_settings
from textfreq.models import AnalyzeRequest, AnalyzeResponse, ModeListResponse
from textfreq.services.frequency import analyze_text
from textfreq.services.normalizer import NormalizationMode

logger = structlog.get_logger()

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Count keywords in text",
    description="Returns keywords ranked by frequency. Ties keep first-occurrence order.",
)
async def analyze_endpoint(request: AnalyzeRequest):
    """
    Analyze keyword frequencies.

    Processing:
    1. Split on whitespace and trim punctuation
    2. Normalize (Hangul only, or permissive ASCII + Hangul)
    3. Strip Korean particles
    4. Filter stopwords, predicates and function nouns
    """
    settings = get_settings()

    size = len(request.text.encode("utf-8", errors="surrogatepass"))
    if size > settings.max_text_bytes:
        logger.warning("Text too large", size=size, limit=settings.max_text_bytes)
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Text exceeds {settings.max_text_bytes} bytes",
        )

    top_n = request.top_n or settings.default_top_n
    report = analyze_text(request.text, mode=request.mode, top_n=top_n)

    return AnalyzeResponse.from_report(report)


@router.get(
    "/modes",
    response_model=ModeListResponse,
    summary="List normalization modes",
)
async def list_modes():
    """List supported normalization modes and the configured default."""
    settings = get_settings()
    return ModeListResponse(
        modes=list(NormalizationMode),
        default=settings.normalization_mode,
    )
