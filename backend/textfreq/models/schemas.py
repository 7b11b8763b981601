"""
Pydantic v2 schemas for analysis results and API request/response models.
"""
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from textfreq.services.normalizer import NormalizationMode


# =====================================================
# Analysis Results
# =====================================================

class FrequencyRecord(BaseModel):
    """One keyword and how many times it was accepted."""
    word: str
    count: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class AnalysisReport(BaseModel):
    """Ranked records plus counters collected during one analysis."""
    mode: NormalizationMode
    records: list[FrequencyRecord] = Field(default_factory=list)
    token_count: int = 0
    keyword_token_count: int = 0
    unique_keywords: int = 0
    malformed_token_count: int = 0


# =====================================================
# Request Schemas
# =====================================================

class AnalyzeRequest(BaseModel):
    """Request schema for keyword frequency analysis."""
    text: str = Field(..., description="Text to analyze")
    mode: Optional[NormalizationMode] = Field(
        None, description="Normalization mode (server default when omitted)"
    )
    top_n: Optional[int] = Field(None, ge=1, description="Keep only the N most frequent keywords")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "나는 학교에 간다 학교",
                "mode": "hangul_only",
                "top_n": 10,
            }
        }
    )


# =====================================================
# Response Schemas
# =====================================================

class AnalyzeResponse(BaseModel):
    """Analysis result returned by the API."""
    mode: NormalizationMode
    records: list[FrequencyRecord]
    token_count: int
    keyword_token_count: int
    unique_keywords: int
    malformed_token_count: int

    @classmethod
    def from_report(cls, report: AnalysisReport) -> "AnalyzeResponse":
        return cls(
            mode=report.mode,
            records=report.records,
            token_count=report.token_count,
            keyword_token_count=report.keyword_token_count,
            unique_keywords=report.unique_keywords,
            malformed_token_count=report.malformed_token_count,
        )


class ModeListResponse(BaseModel):
    """Supported normalization modes."""
    modes: list[NormalizationMode]
    default: NormalizationMode
