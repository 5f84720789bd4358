"""
Pydantic Schemas for the Sentiment HTTP API.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .display import chart_payload, format_confidence, result_headline
from .models import AnalysisResult, EmptyInput, HistoryEntry, LanguageProfile


MAX_TEXT_LENGTH = 10000


# =============================================================
# REQUEST SCHEMAS
# =============================================================

class AnalyzeRequest(BaseModel):
    """Text to analyze."""
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)
    language: Optional[str] = Field(None, max_length=16, description="Language id, e.g. en, ta, hi")


# =============================================================
# RESPONSE SCHEMAS
# =============================================================

class BucketsSchema(BaseModel):
    """Chart slice magnitudes (not probabilities)."""
    positive: float = Field(..., ge=0)
    negative: float = Field(..., ge=0)
    neutral: float = Field(..., ge=0)


class ChartSchema(BaseModel):
    type: str
    labels: List[str]
    data: List[float]
    colors: List[str]


class AnalysisResponse(BaseModel):
    """Result of an analysis, or the empty-input condition."""
    empty: bool
    language_id: str
    message: Optional[str] = None

    polarity: Optional[str] = None
    label: Optional[str] = None
    headline: Optional[str] = None
    confidence: Optional[float] = Field(None, ge=0, le=100)
    confidence_text: Optional[str] = None
    total_score: Optional[float] = None
    total_words: Optional[int] = None
    sentence_count: Optional[int] = None
    buckets: Optional[BucketsSchema] = None
    chart: Optional[ChartSchema] = None

    @classmethod
    def from_empty(cls, outcome: EmptyInput) -> "AnalysisResponse":
        return cls(empty=True, language_id=outcome.language_id, message=outcome.message)

    @classmethod
    def from_result(cls, result: AnalysisResult, profile: LanguageProfile) -> "AnalysisResponse":
        return cls(
            empty=False,
            language_id=result.language_id,
            polarity=result.polarity.value,
            label=result.label,
            headline=result_headline(result.polarity, result.label),
            confidence=result.confidence,
            confidence_text=result.confidence_text,
            total_score=result.total_score,
            total_words=result.total_words,
            sentence_count=result.sentence_count,
            buckets=BucketsSchema(**result.buckets.to_dict()),
            chart=ChartSchema(**chart_payload(result.buckets, profile.labels)),
        )


class LanguageSchema(BaseModel):
    language_id: str
    locale: str
    positive_label: str
    negative_label: str
    neutral_label: str
    placeholder: str

    @classmethod
    def from_profile(cls, profile: LanguageProfile) -> "LanguageSchema":
        return cls(
            language_id=profile.language_id,
            locale=profile.locale,
            positive_label=profile.labels.positive,
            negative_label=profile.labels.negative,
            neutral_label=profile.labels.neutral,
            placeholder=profile.messages.placeholder,
        )


class LanguagesResponse(BaseModel):
    default_language: str
    languages: List[LanguageSchema]


class HistoryEntrySchema(BaseModel):
    text: str
    label: str
    polarity: str
    confidence: float
    confidence_text: str
    language_id: str
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryEntrySchema":
        return cls(
            text=entry.text,
            label=entry.label,
            polarity=entry.polarity.value,
            confidence=entry.confidence,
            confidence_text=format_confidence(entry.confidence),
            language_id=entry.language_id,
            created_at=entry.created_at,
        )


class HistoryResponse(BaseModel):
    entries: List[HistoryEntrySchema]
    html: str


class SpeakResponse(BaseModel):
    language_id: str
    locale: str
    message: str
    has_result: bool
