from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ============================================================================
# Enums
# ============================================================================


class Verdict(str, Enum):
    """Outcome of classifying one span."""

    ENGLISH = "english"
    FRENCH = "french"
    INSUFFICIENT_DATA = "insufficient_data"

    @property
    def is_language(self) -> bool:
        return self is not Verdict.INSUFFICIENT_DATA


# ============================================================================
# Analysis Schemas
# ============================================================================


class ChiSquaredScores(BaseModel):
    """Chi-squared distances of one span to both reference profiles."""

    english_monograph: float
    french_monograph: float
    english_bigram: float
    french_bigram: float
    english_monograph_p_value: float = Field(ge=0.0, le=1.0)
    french_monograph_p_value: float = Field(ge=0.0, le=1.0)

    @computed_field
    @property
    def english_combined(self) -> float:
        return self.english_monograph + self.english_bigram

    @computed_field
    @property
    def french_combined(self) -> float:
        return self.french_monograph + self.french_bigram

    @property
    def verdict(self) -> Verdict:
        # Ties go to French
        if self.english_combined < self.french_combined:
            return Verdict.ENGLISH
        return Verdict.FRENCH


class WindowParameters(BaseModel):
    """Sliding window configuration used for a run."""

    window_size: int
    overlap_size: int
    step_size: int
    min_window_size: int


class Segment(BaseModel):
    """Verdict for one sliding window."""

    start: int
    end: int
    window_length: int
    attributed: int
    verdict: Verdict


class DocumentReport(BaseModel):
    """Document-level conclusion and segment-derived proportions."""

    length: int
    total_words: int
    total_letters: int
    scores: ChiSquaredScores | None = None
    dominant_language: Verdict
    english_chars: int
    french_chars: int
    english_proportion: float = Field(ge=0.0, le=100.0)
    french_proportion: float = Field(ge=0.0, le=100.0)
    windows: WindowParameters
    segments: list[Segment] = []


# ============================================================================
# Histogram Schemas
# ============================================================================


class HistogramEntry(BaseModel):
    """One bar of a histogram."""

    code_point: int
    label: str
    count: int
    bar: int


class Histogram(BaseModel):
    """Sorted counts handed to a histogram renderer."""

    title: str
    entries: list[HistogramEntry]
    max_count: int


# ============================================================================
# Request Schemas
# ============================================================================


class AnalyzeRequest(BaseModel):
    """Request schema for /analyze endpoint."""

    text: str = Field(min_length=1)
    include_segments: bool = True
    include_histograms: bool = False
    top_letters: int = Field(default=5, ge=1, le=40)


class HistogramRequest(BaseModel):
    """Request schema for /analyze/histogram endpoint."""

    text: str = Field(min_length=1)
    top_letters: int = Field(default=5, ge=1, le=40)


# ============================================================================
# Response Schemas
# ============================================================================


class HistogramResponse(BaseModel):
    """Letter and character histograms of a text."""

    letters: Histogram
    characters: Histogram


class AnalyzeResponse(BaseModel):
    """Response schema for /analyze endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    report: DocumentReport
    explanations: list[str]
    histograms: HistogramResponse | None = None


class AnalysisHistoryItem(BaseModel):
    """Single history item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text_hash: str
    text_preview: str
    dominant_language: str
    english_proportion: float
    french_proportion: float
    created_at: datetime


class HistoryResponse(BaseModel):
    """Response schema for /history endpoint."""

    items: list[AnalysisHistoryItem]
    total: int
    page: int
    page_size: int


class AnalysisDetailResponse(BaseModel):
    """Full analysis detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text_hash: str
    text: str
    dominant_language: str
    english_proportion: float
    french_proportion: float
    report: dict[str, Any]
    explanations: list[str]
    created_at: datetime
    updated_at: datetime


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
