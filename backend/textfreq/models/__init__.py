"""Pydantic models and schemas."""
from textfreq.models.schemas import (
    FrequencyRecord,
    AnalysisReport,
    AnalyzeRequest,
    AnalyzeResponse,
    ModeListResponse,
)

__all__ = [
    "FrequencyRecord",
    "AnalysisReport",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ModeListResponse",
]
