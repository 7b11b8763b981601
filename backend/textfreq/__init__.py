"""Keyword frequency analysis for Korean and English text."""
from textfreq.models.schemas import AnalysisReport, FrequencyRecord
from textfreq.services.frequency import analyze, analyze_text
from textfreq.services.language import LanguageClass
from textfreq.services.normalizer import NormalizationMode

__all__ = [
    "analyze",
    "analyze_text",
    "AnalysisReport",
    "FrequencyRecord",
    "LanguageClass",
    "NormalizationMode",
]
